# product_api/api/v1/routers/health.py
import time
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from product_api.api.deps import mongo_db
from product_api.core.config import get_settings

router = APIRouter(tags=["health"])
START_TIME = time.time()

LIVENESS_MESSAGE = "API Server for Express JS is up and running...."


@router.get("/", response_class=PlainTextResponse)
async def liveness() -> str:
    # Never touches the database; answers as long as the process is up
    return LIVENESS_MESSAGE


@router.get("/health")
async def health(db=Depends(mongo_db)):
    """
    Tolerant health check:
    - ping Mongo through the shared Motor database handle
    - expose basic app info and an overall status
    """
    settings = get_settings()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": settings.GIT_SHA,
        "uptime_seconds": int(time.time() - START_TIME),
    }

    try:
        await db.command("ping")
        checks["mongodb"] = "ok"
    except Exception as e:
        checks["mongodb"] = f"error: {e}"

    status = "ok" if checks["mongodb"] == "ok" else "error"
    return {"status": status, "checks": checks, "timestamp": int(time.time())}
