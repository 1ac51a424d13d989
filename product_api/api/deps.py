# product_api/api/deps.py
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from product_api.core.config import Settings, get_settings
from product_api.domain.repositories.base import DocumentStore
from product_api.domain.repositories.product_repo import ProductRepo
from product_api.domain.services.product_svc import ProductService


# The database handle is created once in the lifespan and lives on app.state
def mongo_db(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db


def product_store(
    db: AsyncIOMotorDatabase = Depends(mongo_db),
    settings: Settings = Depends(get_settings),
) -> DocumentStore:
    return ProductRepo(db, settings.MONGO_COLLECTION)


def product_service(store: DocumentStore = Depends(product_store)) -> ProductService:
    return ProductService(store)
