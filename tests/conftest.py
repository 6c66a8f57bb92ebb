# tests/conftest.py
"""
Pytest fixtures: an in-process mongomock database per test.
"""

import uuid

import mongomock
import pytest


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def db(mongo_client):
    """A fresh, empty database; dropped once the test finishes."""
    name = f"people_test_{uuid.uuid4().hex[:8]}"
    database = mongo_client[name]
    yield database
    mongo_client.drop_database(name)


@pytest.fixture
def people(db):
    return db["people"]
