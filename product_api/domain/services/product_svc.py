import logging
import time
from datetime import datetime, timezone
from typing import List

from product_api.core.errors import NotFoundError
from product_api.domain.models.product import Product, ProductCreate, ProductPatch
from product_api.domain.repositories.base import DocumentStore

logger = logging.getLogger(__name__)

RESOURCE = "Product"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ProductService:
    """
    CRUD operations on products. Validation already happened at the
    HTTP boundary (ProductCreate / ProductPatch); this layer stamps
    timestamps, talks to the store and turns absent records into
    NotFoundError. Store failures are not retried.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_products(self) -> List[Product]:
        t0 = time.perf_counter()
        records = await self.store.find_all()
        logger.info("products list items=%s time=%.3fs", len(records), time.perf_counter() - t0)
        return [Product.model_validate(r) for r in records]

    async def get_product(self, product_id: str) -> Product:
        record = await self.store.find_by_id(product_id)
        if record is None:
            raise NotFoundError(RESOURCE, product_id)
        return Product.model_validate(record)

    async def create_product(self, data: ProductCreate) -> Product:
        now = _now()
        record = {**data.model_dump(), "createdAt": now, "updatedAt": now}
        saved = await self.store.insert(record)
        logger.info("products create id=%s", saved.get("id"))
        return Product.model_validate(saved)

    async def update_product(self, product_id: str, patch: ProductPatch) -> Product:
        current = await self.store.find_by_id(product_id)
        if current is None:
            raise NotFoundError(RESOURCE, product_id)

        # values equal to what is stored are not changes; a repeated update is a no-op
        changes = {k: v for k, v in patch.changes().items() if current.get(k) != v}
        if not changes:
            return Product.model_validate(current)

        changes["updatedAt"] = _now()
        record = await self.store.update_by_id(product_id, changes)
        if record is None:
            raise NotFoundError(RESOURCE, product_id)
        logger.info("products update id=%s fields=%s", product_id, sorted(changes))
        return Product.model_validate(record)

    async def delete_product(self, product_id: str) -> None:
        deleted = await self.store.delete_by_id(product_id)
        if not deleted:
            raise NotFoundError(RESOURCE, product_id)
        logger.info("products delete id=%s", product_id)
