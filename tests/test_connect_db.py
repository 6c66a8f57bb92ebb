from unittest.mock import MagicMock

import mongomock
import pytest
from pymongo.errors import ServerSelectionTimeoutError

from people_mongodb import connect_db
from people_mongodb.errors import StoreError

URI = "mongodb://localhost:27017"


def test_open_database_yields_named_database():
    with connect_db.open_database(URI, db_name="people_conn", client_factory=mongomock.MongoClient) as db:
        assert db.name == "people_conn"
        db["people"].insert_one({"name": "Mary"})
        assert db["people"].count_documents({"name": "Mary"}) == 1


def test_open_database_closes_client_on_exit():
    client = MagicMock()
    factory = MagicMock(return_value=client)

    with connect_db.open_database(URI, db_name="x", client_factory=factory):
        client.close.assert_not_called()

    client.close.assert_called_once()
    client.admin.command.assert_called_once_with("ping")


def test_open_database_closes_client_on_error():
    client = MagicMock()

    with pytest.raises(RuntimeError):
        with connect_db.open_database(URI, client_factory=MagicMock(return_value=client)):
            raise RuntimeError("boom")

    client.close.assert_called_once()


def test_get_database_falls_back_to_default_name(monkeypatch):
    client = MagicMock()
    monkeypatch.setattr(connect_db, "DB_NAME", "fallback")

    connect_db.get_database(URI, client_factory=MagicMock(return_value=client))
    client.get_default_database.assert_called_once_with("fallback")


def test_get_database_explicit_name_wins_over_uri():
    client = MagicMock()

    connect_db.get_database("mongodb://localhost/fromuri", db_name="explicit", client_factory=MagicMock(return_value=client))
    client.__getitem__.assert_called_once_with("explicit")
    client.get_default_database.assert_not_called()


def test_open_database_explicit_name_with_mongomock():
    with connect_db.open_database("mongodb://localhost/fromuri", db_name="explicit", client_factory=mongomock.MongoClient) as db:
        assert db.name == "explicit"


def test_get_client_passes_timeout(monkeypatch):
    monkeypatch.setattr(connect_db, "MONGO_TIMEOUT_MS", "2500")
    factory = MagicMock()
    connect_db.get_client(URI, client_factory=factory)
    _, kwargs = factory.call_args
    assert kwargs["serverSelectionTimeoutMS"] == 2500


def test_get_client_rejects_non_numeric_timeout(monkeypatch):
    monkeypatch.setattr(connect_db, "MONGO_TIMEOUT_MS", "soon")
    factory = MagicMock()

    with pytest.raises(StoreError, match="MONGO_TIMEOUT_MS must be an integer"):
        connect_db.get_client(URI, client_factory=factory)
    factory.assert_not_called()


def test_get_client_requires_uri(monkeypatch):
    monkeypatch.setattr(connect_db, "MONGO_URI", None)
    with pytest.raises(StoreError, match="MONGO_URI is not set"):
        connect_db.get_client()


def test_get_client_wraps_connection_failure():
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("timed out")

    with pytest.raises(StoreError) as excinfo:
        connect_db.get_client(URI, client_factory=MagicMock(return_value=client))
    assert excinfo.value.operation == "connect"
    assert isinstance(excinfo.value.cause, ServerSelectionTimeoutError)
    client.close.assert_called_once()
