"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.catalog.entities import RepositoryError, RepositoryErrorCode


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    code: RepositoryErrorCode = RepositoryErrorCode.PERSISTENCE_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ProductNotFoundError(CatalogDomainError):
    """Raised when no product exists for the requested id."""

    code = RepositoryErrorCode.NOT_FOUND


class ProductAlreadyExistsError(CatalogDomainError):
    """Raised when creating a product whose id is already taken."""

    code = RepositoryErrorCode.ALREADY_EXISTS


class ProductValidationError(CatalogDomainError):
    """Raised when the store rejects a product as malformed."""

    code = RepositoryErrorCode.VALIDATION_ERROR


class ProductPersistenceError(CatalogDomainError):
    """Raised when the store cannot be reached or fails unexpectedly."""

    code = RepositoryErrorCode.PERSISTENCE_ERROR


class DocumentMappingError(Exception):
    """Raised when a stored document cannot be mapped to a Product."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid product document: {reason}")
        self.reason = reason


_ERRORS_BY_CODE: dict[RepositoryErrorCode, type[CatalogDomainError]] = {
    RepositoryErrorCode.NOT_FOUND: ProductNotFoundError,
    RepositoryErrorCode.ALREADY_EXISTS: ProductAlreadyExistsError,
    RepositoryErrorCode.VALIDATION_ERROR: ProductValidationError,
    RepositoryErrorCode.PERSISTENCE_ERROR: ProductPersistenceError,
}


def error_from_repository(error: RepositoryError) -> CatalogDomainError:
    """Build the domain error matching a repository failure."""
    return _ERRORS_BY_CODE[error.code](error.message)
