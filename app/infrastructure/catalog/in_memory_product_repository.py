"""
Adapter: In-memory product storage.

Implements the ProductRepository port with a plain dict.
Used as a test double for the Cosmos DB adapter.
"""

from app.domain.catalog.entities import Product, RepositoryErrorCode, RepositoryResult
from app.domain.catalog.ports import ProductRepository
from app.infrastructure.catalog.error_mapping import ALREADY_EXISTS_MESSAGE


class InMemoryProductRepository(ProductRepository):
    """Dict-backed repository with the same failure semantics as Cosmos DB."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: dict[str, Product] = {}
        for product in products or []:
            self._products[product.id] = product

    async def create(self, product: Product) -> RepositoryResult[Product]:
        if product.id in self._products:
            return RepositoryResult.failure(
                RepositoryErrorCode.ALREADY_EXISTS, ALREADY_EXISTS_MESSAGE
            )
        self._products[product.id] = product
        return RepositoryResult.ok(product)

    async def get(self, product_id: str) -> RepositoryResult[Product]:
        product = self._products.get(product_id)
        if product is None:
            return RepositoryResult.failure(
                RepositoryErrorCode.NOT_FOUND,
                f"Product with ID '{product_id}' not found",
            )
        return RepositoryResult.ok(product)

    async def list_all(self) -> RepositoryResult[list[Product]]:
        return RepositoryResult.ok(sorted(self._products.values(), key=lambda p: p.id))
