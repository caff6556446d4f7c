"""
FastAPI router for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, status

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.dtos import (
    CreateProductCommand,
    GetProductQuery,
    ProductResult,
)
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.interfaces.catalog.dependencies import (
    get_create_product_use_case,
    get_get_product_use_case,
    get_list_products_use_case,
)
from app.interfaces.catalog.schemas import (
    CreateProductRequest,
    ErrorResponse,
    ListMetadata,
    ProductListResponse,
    ProductResponse,
    ProductSchema,
)

router = APIRouter(prefix="/products", tags=["products"])


def _to_schema(result: ProductResult) -> ProductSchema:
    return ProductSchema(
        id=result.id,
        name=result.name,
        price=result.price,
        category=result.category,
        description=result.description,
        in_stock=result.in_stock,
        created_at=result.created_at,
    )


def _iso_utc(moment: datetime) -> str:
    """Format an instant the way JavaScript's toISOString does."""
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


@router.get(
    "",
    response_model=ProductListResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="List products",
    description="Return every product in the catalog.",
)
async def list_products(
    response: Response,
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> ProductListResponse:
    """List all products with count and timestamp metadata."""
    result = await use_case.execute()
    response.headers["Cache-Control"] = "no-cache"
    return ProductListResponse(
        data=[_to_schema(p) for p in result.products],
        metadata=ListMetadata(
            count=result.count,
            timestamp=_iso_utc(result.retrieved_at),
        ),
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Get a product",
    description="Return a single product by its id.",
)
async def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(get_get_product_use_case),
) -> ProductResponse:
    """Get one product by id."""
    result = await use_case.execute(GetProductQuery(product_id=product_id))
    return ProductResponse(data=_to_schema(result))


@router.post(
    "",
    response_model=ProductResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Create a product",
    description="Add a product with a caller-assigned id.",
)
async def create_product(
    request: CreateProductRequest,
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
) -> ProductResponse:
    """Create a product; the id must not already exist."""
    command = CreateProductCommand(
        id=request.id,
        name=request.name,
        price=request.price,
        category=request.category,
        in_stock=request.in_stock,
        created_at=request.created_at or datetime.now(timezone.utc),
        description=request.description,
    )
    result = await use_case.execute(command)
    return ProductResponse(data=_to_schema(result))
