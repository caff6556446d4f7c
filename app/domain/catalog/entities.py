"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Product:
    """A product offered in the catalog.

    The id is assigned by the caller and doubles as the storage key.
    Price is expected to be non-negative; the domain does not enforce it.
    """

    id: str
    name: str
    price: float
    category: str
    in_stock: bool
    created_at: datetime
    description: Optional[str] = None


class RepositoryErrorCode(Enum):
    """Closed set of failure kinds a product repository can report."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


@dataclass(frozen=True)
class RepositoryError:
    """A repository failure. The message is for humans, not for parsing."""

    code: RepositoryErrorCode
    message: str


@dataclass(frozen=True)
class RepositoryResult(Generic[T]):
    """Outcome of a repository operation.

    Exactly one of ``data`` or ``error`` is meaningful: a successful result
    never carries an error and a failed one never carries data.
    Use :meth:`ok` and :meth:`fail` rather than the constructor.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[RepositoryError] = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if self.success and self.data is None:
            raise ValueError("A successful result must carry data")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("A failed result must carry an error and no data")

    @classmethod
    def ok(cls, data: T) -> "RepositoryResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: RepositoryError) -> "RepositoryResult[T]":
        return cls(success=False, error=error)

    @classmethod
    def failure(cls, code: RepositoryErrorCode, message: str) -> "RepositoryResult[T]":
        """Shortcut for ``fail(RepositoryError(code, message))``."""
        return cls.fail(RepositoryError(code=code, message=message))
