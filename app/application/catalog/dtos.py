"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime

from app.domain.catalog.entities import Product


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for adding a product to the catalog.

    Attributes:
        id: Caller-assigned product id, also the storage key.
        name: Display name.
        price: Unit price.
        category: Catalog category.
        in_stock: Whether the product is currently available.
        created_at: Creation instant.
        description: Optional long description.
    """

    id: str
    name: str
    price: float
    category: str
    in_stock: bool
    created_at: datetime
    description: str | None = None


@dataclass(frozen=True)
class GetProductQuery:
    """Input DTO for retrieving a single product."""

    product_id: str


@dataclass(frozen=True)
class ProductResult:
    """Output DTO for a single product."""

    id: str
    name: str
    price: float
    category: str
    in_stock: bool
    created_at: datetime
    description: str | None = None

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResult":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            category=product.category,
            in_stock=product.in_stock,
            created_at=product.created_at,
            description=product.description,
        )


@dataclass(frozen=True)
class ProductListResult:
    """Output DTO for the catalog listing.

    Attributes:
        products: Every product, ordered by id.
        retrieved_at: When the listing was read.
    """

    products: list[ProductResult]
    retrieved_at: datetime

    @property
    def count(self) -> int:
        return len(self.products)
