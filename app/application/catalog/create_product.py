"""
Use case: Add a product to the catalog.

Input: CreateProductCommand
Output: ProductResult (the product as stored)
Side effects: One document written to the product repository.
Failure cases: ProductAlreadyExistsError, ProductValidationError,
    ProductPersistenceError.
"""

import logging

from app.application.catalog.dtos import CreateProductCommand, ProductResult
from app.domain.catalog.entities import Product
from app.domain.catalog.errors import error_from_repository
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Builds a Product from the command and persists it."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self, command: CreateProductCommand) -> ProductResult:
        """Run the create use case.

        Args:
            command: The product to create.

        Returns:
            The created product.
        """
        logger.info("Creating product id=%s", command.id)

        product = Product(
            id=command.id,
            name=command.name,
            price=command.price,
            category=command.category,
            in_stock=command.in_stock,
            created_at=command.created_at,
            description=command.description,
        )
        result = await self._product_repo.create(product)
        if not result.success:
            raise error_from_repository(result.error)

        return ProductResult.from_entity(result.data)
