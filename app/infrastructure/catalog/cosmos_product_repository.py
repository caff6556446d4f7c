"""
Adapter: Product persistence in Azure Cosmos DB.

Implements the ProductRepository port against a single Cosmos DB
container whose partition key is the product id (``/id``).
Every failure is caught here and translated into a RepositoryError.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from azure.cosmos.aio import ContainerProxy, CosmosClient
from azure.identity.aio import DefaultAzureCredential

from app.domain.catalog.entities import (
    Product,
    RepositoryError,
    RepositoryErrorCode,
    RepositoryResult,
)
from app.domain.catalog.errors import DocumentMappingError
from app.domain.catalog.ports import ProductRepository
from app.infrastructure.catalog.error_mapping import translate_exception
from app.infrastructure.catalog.product_document import to_document, to_domain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CosmosProductRepositoryOptions:
    """Connection settings for the Cosmos DB product container.

    Attributes:
        endpoint: Account URI, e.g. ``https://<account>.documents.azure.com:443/``.
        database_id: Database holding the products container.
        container_id: Container storing product documents.
        key: Account key. When absent, DefaultAzureCredential is used.
    """

    endpoint: str
    database_id: str
    container_id: str
    key: Optional[str] = None


class CosmosProductRepository(ProductRepository):
    """Concrete adapter for product persistence in Cosmos DB.

    Bound to one database and container for its whole lifetime.
    The underlying client is safe for concurrent use.
    """

    def __init__(
        self,
        container: ContainerProxy,
        client: Optional[CosmosClient] = None,
        credential: Optional[DefaultAzureCredential] = None,
    ) -> None:
        self._container = container
        self._client = client
        self._credential = credential

    @classmethod
    def from_options(cls, options: CosmosProductRepositoryOptions) -> "CosmosProductRepository":
        """Open a Cosmos client and bind it to the configured container.

        Uses key-based authentication when a key is configured and the
        default Azure credential chain otherwise.
        """
        credential: Optional[DefaultAzureCredential] = None
        if options.key:
            client = CosmosClient(options.endpoint, credential=options.key)
        else:
            credential = DefaultAzureCredential()
            client = CosmosClient(options.endpoint, credential=credential)

        container = client.get_database_client(options.database_id).get_container_client(
            options.container_id
        )
        logger.info(
            "Cosmos product repository bound to %s/%s (auth=%s)",
            options.database_id,
            options.container_id,
            "key" if options.key else "default-credential",
        )
        return cls(container, client=client, credential=credential)

    async def close(self) -> None:
        """Release the Cosmos client and credential, if this adapter owns them."""
        if self._client is not None:
            await self._client.close()
        if self._credential is not None:
            await self._credential.close()

    async def create(self, product: Product) -> RepositoryResult[Product]:
        """Insert a product using its own id as the item id.

        Args:
            product: Product entity to persist.

        Returns:
            The product as stored by Cosmos DB, or a failed result.
        """
        try:
            resource = await self._container.create_item(
                body=to_document(product),
                enable_automatic_id_generation=False,
            )
            if resource:
                return RepositoryResult.ok(to_domain(resource))

            logger.error("Cosmos returned no resource after creating %s", product.id)
            return RepositoryResult.failure(
                RepositoryErrorCode.PERSISTENCE_ERROR,
                "Failed to create product - no resource returned",
            )
        except Exception as exc:
            return RepositoryResult.fail(self._translate("create", product.id, exc))

    async def get(self, product_id: str) -> RepositoryResult[Product]:
        """Read a product by id. The id is also the partition key.

        Args:
            product_id: Id of the product to read.

        Returns:
            The product, or a failed result (NOT_FOUND when absent).
        """
        try:
            resource = await self._container.read_item(
                item=product_id, partition_key=product_id
            )
            if resource:
                return RepositoryResult.ok(to_domain(resource))

            return RepositoryResult.failure(
                RepositoryErrorCode.NOT_FOUND,
                f"Product with ID '{product_id}' not found",
            )
        except Exception as exc:
            return RepositoryResult.fail(self._translate("get", product_id, exc))

    async def list_all(self) -> RepositoryResult[list[Product]]:
        """Read every product in the container, ordered by id."""
        try:
            products = [to_domain(item) async for item in self._container.read_all_items()]
            products.sort(key=lambda p: p.id)
            return RepositoryResult.ok(products)
        except Exception as exc:
            return RepositoryResult.fail(self._translate("list", "*", exc))

    @staticmethod
    def _translate(operation: str, product_id: str, exc: Exception) -> RepositoryError:
        if isinstance(exc, DocumentMappingError):
            logger.error("Stored product %s is unreadable: %s", product_id, exc.reason)
            return RepositoryError(RepositoryErrorCode.PERSISTENCE_ERROR, str(exc))

        error = translate_exception(exc)
        level = (
            logging.ERROR
            if error.code is RepositoryErrorCode.PERSISTENCE_ERROR
            else logging.WARNING
        )
        logger.log(
            level,
            "Cosmos %s failed for product %s: %s (%s)",
            operation,
            product_id,
            error.code.value,
            type(exc).__name__,
        )
        return error
