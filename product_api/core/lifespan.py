# product_api/core/lifespan.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from product_api.core.config import get_settings
from product_api.db import mongo

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # Mongo is mandatory: StartupError propagates and the server exits non-zero
    try:
        client = await mongo.connect(settings)
    except Exception as e:
        logger.critical(f"Mongo connection failed: {e}")
        raise

    app.state.mongo_client = client
    app.state.db = mongo.get_database(client, settings)
    logger.info(f"{settings.APP_NAME} ready (env={settings.APP_ENV})")

    yield

    # --- Shutdown ---
    mongo.disconnect(client)
    app.state.mongo_client = None
    app.state.db = None
