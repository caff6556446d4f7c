"""
Use case: List every product in the catalog.

Input: None
Output: ProductListResult
Side effects: None.
Failure cases: ProductPersistenceError.
"""

import logging
from datetime import datetime, timezone

from app.application.catalog.dtos import ProductListResult, ProductResult
from app.domain.catalog.errors import error_from_repository
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsUseCase:
    """Reads the full catalog and stamps the listing with the read time."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self) -> ProductListResult:
        """Run the listing use case.

        Returns:
            All products, ordered by id, with the retrieval timestamp.
        """
        result = await self._product_repo.list_all()
        if not result.success:
            raise error_from_repository(result.error)

        products = [ProductResult.from_entity(p) for p in result.data]
        logger.info("Listed %d products", len(products))
        return ProductListResult(
            products=products,
            retrieved_at=datetime.now(timezone.utc),
        )
