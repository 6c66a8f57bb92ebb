"""people_mongodb package

Basic document-database operations (create, read, update, delete, query
chaining) against a single MongoDB collection of Person records.
"""

from .connect_db import get_client, get_database, open_database
from .errors import Result, StoreError
from .models import DeleteSummary, Person, PersonIn
from .repository import (
    create_and_save_person,
    create_many_people,
    find_and_update,
    find_edit_then_save,
    find_one_by_food,
    find_people_by_name,
    find_person_by_id,
    get_person_collection,
    query_chain,
    remove_by_id,
    remove_many_people,
)

__all__ = [
    "DeleteSummary",
    "Person",
    "PersonIn",
    "Result",
    "StoreError",
    "create_and_save_person",
    "create_many_people",
    "find_and_update",
    "find_edit_then_save",
    "find_one_by_food",
    "find_people_by_name",
    "find_person_by_id",
    "get_client",
    "get_database",
    "get_person_collection",
    "open_database",
    "query_chain",
    "remove_by_id",
    "remove_many_people",
]
