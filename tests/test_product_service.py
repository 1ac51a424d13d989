"""Tests for ProductService against a mocked DocumentStore."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from product_api.core.errors import NotFoundError, StoreUnavailableError
from product_api.domain.models.product import ProductCreate, ProductPatch
from product_api.domain.services.product_svc import ProductService

PID = "65a1f0c2e4b0a1b2c3d4e5f6"


@pytest.fixture
def mock_store():
    store = AsyncMock()
    store.insert = AsyncMock()
    store.find_all = AsyncMock()
    store.find_by_id = AsyncMock()
    store.update_by_id = AsyncMock()
    store.delete_by_id = AsyncMock()
    return store


@pytest.fixture
def service(mock_store):
    return ProductService(mock_store)


@pytest.fixture
def record():
    now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    return {"id": PID, "name": "Kettle", "price": 25.0, "description": None,
            "createdAt": now, "updatedAt": now}


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_stamps_timestamps(self, service, mock_store, record):
        mock_store.insert.return_value = record

        product = await service.create_product(ProductCreate(name="Kettle", price=25))

        sent = mock_store.insert.call_args.args[0]
        assert sent["name"] == "Kettle"
        assert sent["price"] == 25
        assert sent["createdAt"] == sent["updatedAt"]
        assert sent["createdAt"].tzinfo is not None
        assert "id" not in sent
        assert product.id == PID

    @pytest.mark.asyncio
    async def test_create_propagates_store_failure(self, service, mock_store):
        mock_store.insert.side_effect = StoreUnavailableError("insert")

        with pytest.raises(StoreUnavailableError):
            await service.create_product(ProductCreate(name="Kettle", price=25))

        mock_store.insert.assert_called_once()


class TestRead:
    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, service, mock_store):
        mock_store.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_product(PID)

        assert exc_info.value.details["id"] == PID

    @pytest.mark.asyncio
    async def test_list_maps_records(self, service, mock_store, record):
        mock_store.find_all.return_value = [record, {**record, "id": "x" * 24, "name": "Toaster"}]

        products = await service.list_products()

        assert [p.name for p in products] == ["Kettle", "Toaster"]


class TestUpdate:
    @pytest.mark.asyncio
    async def test_only_changed_fields_are_updated(self, service, mock_store, record):
        mock_store.find_by_id.return_value = record
        mock_store.update_by_id.return_value = {**record, "price": 50.0}

        product = await service.update_product(PID, ProductPatch(name="Kettle", price=50))

        record_id, changes = mock_store.update_by_id.call_args.args
        assert record_id == PID
        assert set(changes) == {"price", "updatedAt"}
        assert product.price == 50.0

    @pytest.mark.asyncio
    async def test_empty_patch_returns_current(self, service, mock_store, record):
        mock_store.find_by_id.return_value = record

        product = await service.update_product(PID, ProductPatch())

        mock_store.update_by_id.assert_not_called()
        assert product.updated_at == record["updatedAt"]

    @pytest.mark.asyncio
    async def test_repeated_update_is_a_no_op(self, service, mock_store, record):
        mock_store.find_by_id.return_value = record

        product = await service.update_product(PID, ProductPatch(price=25))

        mock_store.update_by_id.assert_not_called()
        assert product.model_dump(by_alias=True) == {**record, "price": 25.0}

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, service, mock_store):
        mock_store.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.update_product(PID, ProductPatch(name="New"))

        mock_store.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_deleted_between_read_and_write_raises_not_found(self, service, mock_store, record):
        mock_store.find_by_id.return_value = record
        mock_store.update_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.update_product(PID, ProductPatch(name="New"))


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_existing(self, service, mock_store):
        mock_store.delete_by_id.return_value = True

        assert await service.delete_product(PID) is None

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, service, mock_store):
        mock_store.delete_by_id.return_value = False

        with pytest.raises(NotFoundError):
            await service.delete_product(PID)
