"""
Translation of Cosmos DB failures into repository errors.

Pure functions with no IO. The storage adapter is the only caller:
no raw backend failure crosses the repository boundary.
"""

from typing import Optional

from app.domain.catalog.entities import RepositoryError, RepositoryErrorCode

HTTP_NOT_FOUND = 404
HTTP_CONFLICT = 409

ALREADY_EXISTS_MESSAGE = "A product with this ID already exists"
NOT_FOUND_MESSAGE = "Product not found"
INVALID_REQUEST_MESSAGE = "Invalid request"
DATABASE_ERROR_MESSAGE = "An error occurred while accessing the database"


def translate_status(
    status_code: Optional[int], message: Optional[str] = None
) -> RepositoryError:
    """Map a backend status code to a repository error.

    The first matching rule wins:
        409        -> ALREADY_EXISTS (fixed message)
        404        -> NOT_FOUND (fixed message)
        other 4xx  -> VALIDATION_ERROR (backend message)
        anything   -> PERSISTENCE_ERROR (backend message)

    Args:
        status_code: Numeric status reported by the backend, or None for
            failures that never reached it (network errors).
        message: Backend-provided message, if any.

    Returns:
        The repository error for this failure.
    """
    if status_code == HTTP_CONFLICT:
        return RepositoryError(RepositoryErrorCode.ALREADY_EXISTS, ALREADY_EXISTS_MESSAGE)

    if status_code == HTTP_NOT_FOUND:
        return RepositoryError(RepositoryErrorCode.NOT_FOUND, NOT_FOUND_MESSAGE)

    if status_code is not None and 400 <= status_code < 500:
        return RepositoryError(
            RepositoryErrorCode.VALIDATION_ERROR, message or INVALID_REQUEST_MESSAGE
        )

    return RepositoryError(
        RepositoryErrorCode.PERSISTENCE_ERROR, message or DATABASE_ERROR_MESSAGE
    )


def _status_of(exc: BaseException) -> Optional[int]:
    status = getattr(exc, "status_code", None)
    if isinstance(status, bool) or not isinstance(status, int):
        return None
    return status


def _message_of(exc: BaseException) -> Optional[str]:
    # CosmosHttpResponseError keeps the raw service message apart from the
    # "Status code: ..." text it formats into str(exc).
    raw = getattr(exc, "http_error_message", None)
    if isinstance(raw, str) and raw:
        return raw
    return str(exc) or None


def translate_exception(exc: BaseException) -> RepositoryError:
    """Map any exception raised by the Cosmos client to a repository error."""
    return translate_status(_status_of(exc), _message_of(exc))
