"""
Error taxonomy for the product API.

Each exception carries the HTTP status it maps to. The handlers at the
bottom render every error as ``{"message": ..., "errors"?: [...]}`` so
clients always get JSON with a ``message`` field.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class ProductAPIError(Exception):
    """Base exception for all product API errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ProductAPIError):
    """Raised when a request body or field fails validation."""

    status_code = 400

    def __init__(self, message: str, errors: Optional[list[dict]] = None):
        super().__init__(message, details={"errors": errors or []})
        self.errors = errors or []


class NotFoundError(ProductAPIError):
    """Raised when no record exists for the given id."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} not found: {identifier}",
            details={"resource": resource, "id": identifier},
        )


class StoreUnavailableError(ProductAPIError):
    """Raised when the document store fails (connection lost, query error)."""

    status_code = 500

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Document store operation '{operation}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message, details={"operation": operation, "reason": reason})


class StartupError(ProductAPIError):
    """Raised when the database connection cannot be established at startup."""


def _error_list(exc: RequestValidationError) -> list[dict[str, Any]]:
    # ctx may hold exception instances; keep only serializable keys
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
        for e in exc.errors()
    ]


def _summary(errors: list[dict[str, Any]]) -> str:
    if any(e["type"] == "json_invalid" for e in errors):
        return "Malformed JSON body"
    if not errors:
        return "Invalid request"
    first = errors[0]
    # drop the leading "body" location segment
    loc = [str(p) for p in first["loc"] if p != "body"]
    return f"{'.'.join(loc)}: {first['msg']}" if loc else first["msg"]


async def product_api_error_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        # detail was logged where the store failed; never sent to the client
        return JSONResponse(status_code=exc.status_code, content={"message": GENERIC_ERROR_MESSAGE})

    content: dict[str, Any] = {"message": exc.message}
    if isinstance(exc, ValidationError) and exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _error_list(exc)
    error = ValidationError(_summary(errors), errors)
    logger.info(f"{request.method} {request.url.path} rejected: {error.message}")
    return await product_api_error_handler(request, error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductAPIError, product_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
