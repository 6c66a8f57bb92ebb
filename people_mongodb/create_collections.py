import logging

from pymongo.errors import CollectionInvalid, PyMongoError

from .connect_db import open_database
from .logging_config import setup_logging
from .schema import PERSON_COLLECTION, person_schema

logger = logging.getLogger(__name__)


def create_collections(db):
    """Create the people collection and attach its validator.

    The validator only warns, so documents missing ``name`` are still stored.
    """
    try:
        db.create_collection(PERSON_COLLECTION)
    except CollectionInvalid:
        # already exists
        pass

    try:
        db.command(
            "collMod",
            PERSON_COLLECTION,
            validator={"$jsonSchema": person_schema},
            validationAction="warn",
        )
        print(f"✅ Created/updated collection '{PERSON_COLLECTION}' with validation.")
        return True
    except PyMongoError as e:
        logger.warning("Failed to apply validator to '%s': %s", PERSON_COLLECTION, e)
        print(f"⚠️ Failed to apply validator to '{PERSON_COLLECTION}': {e}")
        return False


def main():
    setup_logging()
    with open_database() as db:
        create_collections(db)


if __name__ == "__main__":
    main()
