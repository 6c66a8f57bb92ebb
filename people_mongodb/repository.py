"""Person repository: one pymongo call per operation.

Every function takes the database handle first and returns a
:class:`~people_mongodb.errors.Result`. Driver failures are logged and
reported through the result; they never propagate as exceptions. A record
that does not exist comes back as an ok result whose value is ``None``.
"""

import functools
import logging
from typing import Iterable, List, Mapping, Optional, Union

from bson.errors import InvalidId
from bson.objectid import ObjectId
from pydantic import ValidationError
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from .errors import Result, StoreError
from .models import DeleteSummary, Person, PersonIn, format_person
from .schema import PERSON_COLLECTION

logger = logging.getLogger(__name__)

SAMPLE_PERSON = {
    "name": "Miguel Grullon Reinoso",
    "age": 20,
    "favoriteFoods": ["pizza", "ice cream", "apple"],
}
FOOD_TO_ADD = "hamburger"
AGE_TO_SET = 20
NAME_TO_REMOVE = "Mary"
FOOD_TO_SEARCH = "burrito"
QUERY_LIMIT = 2


def get_person_collection(db):
    """The collection backing Person records."""
    return db[PERSON_COLLECTION]


def _store_operation(name):
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                value = func(*args, **kwargs)
            except StoreError as e:
                logger.error("%s failed: %s", name, e)
                return Result(error=e)
            except (PyMongoError, InvalidId, ValidationError) as e:
                logger.error("%s failed: %s", name, e)
                return Result(error=StoreError(name, e))
            logger.debug("%s -> %r", name, value)
            return Result(value)
        return wrapper
    return decorator


def _object_id(person_id) -> ObjectId:
    if isinstance(person_id, ObjectId):
        return person_id
    return ObjectId(str(person_id))


def _to_document(person: Union[PersonIn, Mapping]) -> dict:
    if isinstance(person, PersonIn):
        return person.to_document()
    # cast before any store call, so a bad record is never written
    return PersonIn.model_validate(dict(person)).to_document()


@_store_operation("createAndSavePerson")
def create_and_save_person(db, person: Union[PersonIn, Mapping, None] = None) -> Person:
    doc = _to_document(person if person is not None else SAMPLE_PERSON)
    res = get_person_collection(db).insert_one(doc)
    doc["_id"] = res.inserted_id
    return format_person(doc)


@_store_operation("createManyPeople")
def create_many_people(db, people: Iterable[Union[PersonIn, Mapping]]) -> List[Person]:
    docs = [_to_document(p) for p in people]
    # insert_many rejects an empty batch
    if not docs:
        return []
    res = get_person_collection(db).insert_many(docs)
    for doc, inserted_id in zip(docs, res.inserted_ids):
        doc["_id"] = inserted_id
    return [format_person(d) for d in docs]


@_store_operation("findPeopleByName")
def find_people_by_name(db, person_name: str) -> List[Person]:
    cursor = get_person_collection(db).find({"name": person_name})
    return [format_person(d) for d in cursor]


@_store_operation("findOneByFood")
def find_one_by_food(db, food: str) -> Optional[Person]:
    doc = get_person_collection(db).find_one({"favoriteFoods": food})
    return format_person(doc) if doc else None


@_store_operation("findPersonById")
def find_person_by_id(db, person_id) -> Optional[Person]:
    doc = get_person_collection(db).find_one({"_id": _object_id(person_id)})
    return format_person(doc) if doc else None


@_store_operation("findEditThenSave")
def find_edit_then_save(db, person_id, food_to_add: str = FOOD_TO_ADD) -> Optional[Person]:
    """Append ``food_to_add`` to a person's favorite foods and save the whole record.

    Read and write are two separate round trips with no version check: two
    concurrent edits of the same person can lose one of the appends.
    """
    oid = _object_id(person_id)
    people = get_person_collection(db)
    doc = people.find_one({"_id": oid})
    if not doc:
        return None
    doc["favoriteFoods"] = (doc.get("favoriteFoods") or []) + [food_to_add]
    res = people.replace_one({"_id": oid}, doc)
    if res.matched_count == 0:
        # deleted between the read and the write
        return None
    return format_person(doc)


@_store_operation("findAndUpdate")
def find_and_update(db, person_name: str, age_to_set=AGE_TO_SET) -> Optional[Person]:
    doc = get_person_collection(db).find_one_and_update(
        {"name": person_name},
        {"$set": {"age": age_to_set}},
        return_document=ReturnDocument.AFTER,
    )
    return format_person(doc) if doc else None


@_store_operation("removeById")
def remove_by_id(db, person_id) -> Optional[Person]:
    doc = get_person_collection(db).find_one_and_delete({"_id": _object_id(person_id)})
    return format_person(doc) if doc else None


@_store_operation("removeManyPeople")
def remove_many_people(db, name_to_remove: str = NAME_TO_REMOVE) -> DeleteSummary:
    res = get_person_collection(db).delete_many({"name": name_to_remove})
    return DeleteSummary(acknowledged=res.acknowledged, deleted_count=res.deleted_count)


@_store_operation("queryChain")
def query_chain(db, food_to_search: str = FOOD_TO_SEARCH, limit: int = QUERY_LIMIT) -> List[Person]:
    # pymongo treats a limit of 0 as no limit
    if limit < 1:
        raise StoreError("queryChain", message=f"limit must be at least 1, got {limit}")
    # the server sorts before applying the limit
    cursor = (
        get_person_collection(db)
        .find({"favoriteFoods": food_to_search}, {"age": 0})
        .sort("name", ASCENDING)
        .limit(limit)
    )
    return [format_person(d) for d in cursor]
