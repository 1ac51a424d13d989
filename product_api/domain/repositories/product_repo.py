# product_api/domain/repositories/product_repo.py

from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from product_api.core.errors import StoreUnavailableError
from product_api.domain.repositories.base import Record

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str):
    try:
        yield
    except PyMongoError as e:
        logger.error(f"[products] {operation} failed: {e}")
        raise StoreUnavailableError(operation, str(e)) from e


def _object_id(record_id: str) -> Optional[ObjectId]:
    # ObjectId.is_valid also accepts any 12-byte string; only hex ids are public
    if isinstance(record_id, str) and len(record_id) == 24 and ObjectId.is_valid(record_id):
        return ObjectId(record_id)
    return None


def _to_record(doc: dict) -> Record:
    out = {k: v for k, v in doc.items() if k != "_id"}
    out["id"] = str(doc["_id"])
    return out


class ProductRepo:
    """
    Document store backed by the 'products' collection.
    Public ids are the hex form of the Mongo ObjectId; an id that is not
    a valid ObjectId simply matches nothing.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    async def insert(self, record: Record) -> Record:
        doc = {k: v for k, v in record.items() if k not in ("id", "_id")}
        with _store_errors("insert"):
            res = await self.col.insert_one(doc)
        doc["_id"] = res.inserted_id
        return _to_record(doc)

    async def find_all(self) -> list[Record]:
        with _store_errors("find_all"):
            return [_to_record(doc) async for doc in self.col.find({})]

    async def find_by_id(self, record_id: str) -> Optional[Record]:
        oid = _object_id(record_id)
        if oid is None:
            return None
        with _store_errors("find_by_id"):
            doc = await self.col.find_one({"_id": oid})
        return _to_record(doc) if doc else None

    async def update_by_id(self, record_id: str, partial: Record) -> Optional[Record]:
        oid = _object_id(record_id)
        if oid is None:
            return None
        changes = {k: v for k, v in partial.items() if k not in ("id", "_id")}
        if not changes:
            return await self.find_by_id(record_id)
        with _store_errors("update_by_id"):
            doc = await self.col.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        return _to_record(doc) if doc else None

    async def delete_by_id(self, record_id: str) -> bool:
        oid = _object_id(record_id)
        if oid is None:
            return False
        with _store_errors("delete_by_id"):
            res = await self.col.delete_one({"_id": oid})
        return res.deleted_count == 1
