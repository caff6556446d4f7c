"""
Centralized error handlers for FastAPI.

Maps catalog domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse envelope:
``{"success": false, "error": {"code": ..., "message": ...}}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.catalog.entities import RepositoryErrorCode
from app.domain.catalog.errors import (
    CatalogDomainError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
    ProductPersistenceError,
    ProductValidationError,
)
from app.interfaces.catalog.schemas import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500
HTTP_503 = 503

INTERNAL_ERROR = "INTERNAL_ERROR"


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    """Build a consistent JSON error envelope."""
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ProductNotFoundError)
    async def handle_product_not_found(
        _request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        """Handle lookups of unknown product ids."""
        logger.warning("Product not found: %s", exc.message)
        return error_response(HTTP_404, exc.code.value, exc.message)

    @app.exception_handler(ProductAlreadyExistsError)
    async def handle_product_already_exists(
        _request: Request, exc: ProductAlreadyExistsError
    ) -> JSONResponse:
        """Handle duplicate product ids on create."""
        logger.warning("Duplicate product: %s", exc.message)
        return error_response(HTTP_409, exc.code.value, exc.message)

    @app.exception_handler(ProductValidationError)
    async def handle_product_validation(
        _request: Request, exc: ProductValidationError
    ) -> JSONResponse:
        """Handle products rejected by the store."""
        logger.warning("Product rejected by store: %s", exc.message)
        return error_response(HTTP_400, exc.code.value, exc.message)

    @app.exception_handler(ProductPersistenceError)
    async def handle_product_persistence(
        _request: Request, exc: ProductPersistenceError
    ) -> JSONResponse:
        """Handle storage outages. The backend message is not exposed."""
        logger.error("Product storage failure: %s", exc.message)
        return error_response(
            HTTP_503, exc.code.value, "The product store is currently unavailable"
        )

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR, "Internal server error")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies and parameters."""
        return error_response(
            HTTP_422,
            RepositoryErrorCode.VALIDATION_ERROR.value,
            _validation_message(exc),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(
            HTTP_500,
            INTERNAL_ERROR,
            "An unexpected error occurred while processing the request",
        )
