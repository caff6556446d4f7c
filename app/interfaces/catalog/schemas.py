"""
Pydantic schemas for catalog API request/response validation.

These schemas enforce input validation and define the API contract.
Field names are exposed in camelCase (``inStock``, ``createdAt``).
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Cosmos DB item ids may not contain these characters.
PRODUCT_ID_PATTERN = r"^[^/\\?#]+$"
PRODUCT_ID_MAX_LEN = 255


class CamelModel(BaseModel):
    """Base schema serializing field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductSchema(CamelModel):
    """A product as returned by the API."""

    id: str
    name: str
    price: float
    category: str
    description: str | None = None
    in_stock: bool
    created_at: datetime


class CreateProductRequest(CamelModel):
    """Request schema for the create product endpoint.

    Attributes:
        id: Caller-assigned product id (no ``/ \\ ? #``).
        name: Display name.
        price: Unit price, non-negative.
        category: Catalog category.
        description: Optional long description.
        in_stock: Availability flag.
        created_at: Creation instant. Defaults to the time of the request.
    """

    id: str = Field(
        ...,
        min_length=1,
        max_length=PRODUCT_ID_MAX_LEN,
        pattern=PRODUCT_ID_PATTERN,
        description="Caller-assigned product id",
    )
    name: str = Field(..., min_length=1, description="Product display name")
    price: float = Field(..., ge=0, description="Unit price")
    category: str = Field(..., min_length=1, description="Catalog category")
    description: str | None = Field(default=None, description="Long description")
    in_stock: bool = Field(default=True, description="Whether the product is available")
    created_at: datetime | None = Field(
        default=None, description="Creation timestamp (ISO-8601)"
    )


class ProductResponse(BaseModel):
    """Success envelope for a single product."""

    success: bool = True
    data: ProductSchema


class ListMetadata(BaseModel):
    """Metadata attached to the product listing."""

    count: int
    timestamp: str


class ProductListResponse(BaseModel):
    """Success envelope for the product listing."""

    success: bool = True
    data: list[ProductSchema]
    metadata: ListMetadata


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorDetail(BaseModel):
    """Machine-readable code plus a human-readable message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned by all error handlers."""

    success: bool = False
    error: ErrorDetail
