# connect_db.py - MongoDB client for the people collection
import logging
import os
from contextlib import contextmanager

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .errors import StoreError

load_dotenv()
MONGO_URI = os.getenv("MONGO_URI")
# mongoose falls back to "test" when the URI names no database
DB_NAME = os.getenv("DB_NAME", "test")
MONGO_TIMEOUT_MS = os.getenv("MONGO_TIMEOUT_MS", "5000")
MONGO_TLS_ALLOW_INVALID = os.getenv("MONGO_TLS_ALLOW_INVALID", "false").lower() in ("1", "true", "yes")

logger = logging.getLogger(__name__)


def _timeout_ms():
    try:
        return int(MONGO_TIMEOUT_MS)
    except (TypeError, ValueError):
        raise StoreError("connect", message=f"MONGO_TIMEOUT_MS must be an integer, got {MONGO_TIMEOUT_MS!r}")


def get_client(uri=None, client_factory=MongoClient, ping=True):
    """Create a client for ``uri`` (default ``MONGO_URI``) and check it answers."""
    uri = uri or MONGO_URI
    if not uri:
        raise StoreError("connect", message="MONGO_URI is not set")

    options = {"serverSelectionTimeoutMS": _timeout_ms()}
    if MONGO_TLS_ALLOW_INVALID:
        options["tlsAllowInvalidCertificates"] = True

    try:
        client = client_factory(uri, **options)
    except PyMongoError as e:
        logger.error("Failed to create MongoDB client: %s", e)
        raise StoreError("connect", e) from e

    if ping:
        try:
            client.admin.command("ping")
        except PyMongoError as e:
            logger.error("Failed to connect to MongoDB: %s", e)
            client.close()
            raise StoreError("connect", e) from e
    return client


def _select_database(client, db_name=None):
    # an explicit name wins over the database in the URI
    if db_name:
        return client[db_name]
    return client.get_default_database(DB_NAME)


def get_database(uri=None, db_name=None, client_factory=MongoClient):
    """Return ``db_name``, else the database named by the URI, else ``DB_NAME``.

    The client stays open for the life of the process; prefer
    :func:`open_database` where the caller can scope the connection.
    """
    client = get_client(uri, client_factory=client_factory)
    db = _select_database(client, db_name)
    logger.info("Connected to MongoDB database: %s", db.name)
    return db


@contextmanager
def open_database(uri=None, db_name=None, client_factory=MongoClient):
    """Yield a connected database and close its client on exit."""
    client = get_client(uri, client_factory=client_factory)
    try:
        db = _select_database(client, db_name)
        logger.info("Connected to MongoDB database: %s", db.name)
        yield db
    finally:
        client.close()
        logger.info("MongoDB connection closed")


if __name__ == "__main__":
    with open_database() as db:
        print(f"✅ Connected to MongoDB database: {db.name}")
