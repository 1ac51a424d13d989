# product_api/db/mongo.py
import logging

import certifi
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from product_api.core.config import Settings
from product_api.core.errors import StartupError

logger = logging.getLogger(__name__)


def _new_client(settings: Settings) -> AsyncIOMotorClient:
    options = {
        "uuidRepresentation": "standard",
        "tz_aware": True,
        "serverSelectionTimeoutMS": settings.MONGO_TIMEOUT_MS,
        "connectTimeoutMS": settings.MONGO_TIMEOUT_MS,
    }
    if settings.MONGO_TLS:
        options["tls"] = True
        options["tlsCAFile"] = certifi.where()  # containers often lack a system CA bundle
    return AsyncIOMotorClient(settings.MONGO_URI, **options)


async def connect(settings: Settings) -> AsyncIOMotorClient:
    """
    Create the Motor client and ping the server once.
    Fail fast: an unreachable server at startup raises StartupError so the
    process exits instead of serving requests without a database.
    """
    try:
        client = _new_client(settings)
    except PyMongoError as e:
        raise StartupError(f"Mongo client init failed: {e}") from e

    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StartupError(f"Mongo connection failed: {e}") from e

    logger.info("Mongo connected (ping ok)")
    return client


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    # Database named in the URI wins, MONGO_DB otherwise
    return client.get_default_database(default=settings.MONGO_DB)


def disconnect(client: AsyncIOMotorClient | None) -> None:
    if client is not None:
        client.close()
        logger.info("Mongo disconnected")
