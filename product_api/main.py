from fastapi import FastAPI
from product_api.core.config import get_settings
from product_api.core.errors import register_exception_handlers
from product_api.core.lifespan import lifespan
from product_api.core.logging import configure_logging
from product_api.api.v1.routers.health import router as health_router
from product_api.api.v1.routers.products import router as products_router

import logging
import uvicorn

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
register_exception_handlers(app)

# ------- Routes -------
app.include_router(health_router)            # "/" liveness, "/health"
app.include_router(products_router)          # /products CRUD


def run() -> None:
    """Console entry point: serve the app on HOST:PORT (PORT defaults to 3000)."""
    logging.getLogger(__name__).info(f"Server running on http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
