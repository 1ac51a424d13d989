"""
Test configuration and fixtures
"""

import os

# Settings are read at import time of the app; a URI must exist even though
# the connection itself is patched out below.
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/products_test")

import copy
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from product_api.api.deps import product_store
from product_api.main import app


class InMemoryProductStore:
    """DocumentStore fake keyed by hex ObjectId strings."""

    def __init__(self):
        self.records: dict[str, dict] = {}

    async def insert(self, record):
        record_id = str(ObjectId())
        stored = {**copy.deepcopy(record), "id": record_id}
        self.records[record_id] = stored
        return copy.deepcopy(stored)

    async def find_all(self):
        return [copy.deepcopy(r) for r in self.records.values()]

    async def find_by_id(self, record_id):
        record = self.records.get(record_id)
        return copy.deepcopy(record) if record else None

    async def update_by_id(self, record_id, partial):
        record = self.records.get(record_id)
        if record is None:
            return None
        record.update(copy.deepcopy(partial))
        return copy.deepcopy(record)

    async def delete_by_id(self, record_id):
        return self.records.pop(record_id, None) is not None


@pytest.fixture
def store():
    return InMemoryProductStore()


@pytest.fixture
def mongo_client():
    """Stand-in for the Motor client created by the lifespan."""
    client = MagicMock()
    client.get_default_database.return_value.command = AsyncMock(return_value={"ok": 1.0})
    return client


@pytest.fixture
def client(store, mongo_client):
    """Test client with the Mongo connection patched and the store overridden."""
    app.dependency_overrides[product_store] = lambda: store
    with patch("product_api.db.mongo.connect", AsyncMock(return_value=mongo_client)):
        with TestClient(app) as test_client:
            yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product():
    return {"name": "Desk Lamp", "price": 39.9, "description": "LED, warm white"}
