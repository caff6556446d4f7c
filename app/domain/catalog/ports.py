"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.catalog.entities import Product, RepositoryResult


class ProductRepository(ABC):
    """Port for persisting and retrieving products.

    Implementations never raise: every failure is reported as a failed
    RepositoryResult carrying a RepositoryError.
    """

    @abstractmethod
    async def create(self, product: Product) -> RepositoryResult[Product]:
        """Persist a new product under its caller-assigned id.

        Returns:
            The product as stored, or ALREADY_EXISTS if the id is taken.
        """
        raise NotImplementedError

    @abstractmethod
    async def get(self, product_id: str) -> RepositoryResult[Product]:
        """Return the product with the given id, or NOT_FOUND."""
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> RepositoryResult[list[Product]]:
        """Return every product in the catalog, ordered by id."""
        raise NotImplementedError
