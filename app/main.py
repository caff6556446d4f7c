"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (catalog, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The product repository (Cosmos DB unless one is injected)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings as default_settings
from app.domain.catalog.ports import ProductRepository
from app.infrastructure.catalog.cosmos_product_repository import (
    CosmosProductRepository,
    CosmosProductRepositoryOptions,
)
from app.interfaces.catalog.router import router as catalog_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


def cosmos_options(settings: Settings) -> CosmosProductRepositoryOptions:
    """Build the product repository connection options from settings.

    An empty key counts as unset, so DefaultAzureCredential is used.
    """
    return CosmosProductRepositoryOptions(
        endpoint=settings.cosmos_endpoint,
        database_id=settings.cosmos_database,
        container_id=settings.cosmos_container,
        key=settings.cosmos_key or None,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: release the Cosmos client on shutdown."""
    yield

    repository = app.state.product_repository
    if app.state.owns_repository and isinstance(repository, CosmosProductRepository):
        await repository.close()
        logger.info("Cosmos client closed")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use. Defaults to the environment-loaded settings.
        repository: Product repository to serve. When omitted, a Cosmos DB
            repository is built from the settings and closed on shutdown.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Product Repository ---
    app.state.owns_repository = repository is None
    if repository is None:
        repository = CosmosProductRepository.from_options(cosmos_options(settings))
    app.state.product_repository = repository

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(catalog_router, prefix="/api/v1")

    return app
