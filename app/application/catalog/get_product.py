"""
Use case: Retrieve a single product by id.

Input: GetProductQuery
Output: ProductResult
Side effects: None.
Failure cases: ProductNotFoundError, ProductPersistenceError.
"""

import logging

from app.application.catalog.dtos import GetProductQuery, ProductResult
from app.domain.catalog.errors import error_from_repository
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class GetProductUseCase:
    """Looks a product up through the ProductRepository port."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self, query: GetProductQuery) -> ProductResult:
        logger.info("Retrieving product id=%s", query.product_id)

        result = await self._product_repo.get(query.product_id)
        if not result.success:
            raise error_from_repository(result.error)

        return ProductResult.from_entity(result.data)
