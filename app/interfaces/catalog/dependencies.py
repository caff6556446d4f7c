"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire the product
repository into use cases via constructor injection. The repository
itself is built once by the composition root (app.main.create_app)
and stored on ``app.state``; tests substitute it there.
"""

from fastapi import Depends, Request

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.domain.catalog.ports import ProductRepository


def get_product_repository(request: Request) -> ProductRepository:
    """Return the repository owned by the running application."""
    return request.app.state.product_repository


def get_create_product_use_case(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> CreateProductUseCase:
    """Build CreateProductUseCase with its infrastructure dependencies."""
    return CreateProductUseCase(product_repo=product_repo)


def get_get_product_use_case(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> GetProductUseCase:
    """Build GetProductUseCase with its infrastructure dependencies."""
    return GetProductUseCase(product_repo=product_repo)


def get_list_products_use_case(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> ListProductsUseCase:
    """Build ListProductsUseCase with its infrastructure dependencies."""
    return ListProductsUseCase(product_repo=product_repo)
