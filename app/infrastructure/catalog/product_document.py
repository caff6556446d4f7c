"""
Document mapping between Product entities and Cosmos DB items.

The storage shape is separate from the domain model so that
storage-specific concerns (camelCase keys, ISO timestamps, system
metadata) never leak into the domain.
"""

import re
from datetime import datetime
from typing import Any, Mapping, Optional, TypedDict

from app.domain.catalog.entities import Product
from app.domain.catalog.errors import DocumentMappingError

SYSTEM_PROPERTIES = ("_rid", "_self", "_etag", "_attachments", "_ts")


class _RequiredProductFields(TypedDict):
    id: str
    name: str
    price: float
    category: str
    inStock: bool
    createdAt: str


class ProductDocument(_RequiredProductFields, total=False):
    """A product item as stored in the Cosmos DB container.

    The underscore-prefixed keys are Cosmos system properties,
    populated by the service on write.
    """

    description: str
    _rid: str
    _self: str
    _etag: str
    _attachments: str
    _ts: int


def to_document(product: Product) -> ProductDocument:
    """Convert a Product into the document written to Cosmos DB."""
    document: ProductDocument = {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "category": product.category,
        "inStock": product.in_stock,
        "createdAt": product.created_at.isoformat(),
    }
    if product.description is not None:
        document["description"] = product.description
    return document


# Python 3.10's fromisoformat accepts only 3 or 6 fractional digits; some
# writers emit 7 (100 ns ticks).
_FRACTION = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def _normalize_fraction(match: "re.Match[str]") -> str:
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp as written by this service or by JavaScript.

    Fractional seconds of any length are accepted and truncated to
    microseconds.

    Raises:
        DocumentMappingError: If the value is not a valid ISO-8601 string.
    """
    if not isinstance(value, str) or not value:
        raise DocumentMappingError(f"createdAt must be an ISO-8601 string, got {value!r}")
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    text = _FRACTION.sub(_normalize_fraction, text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise DocumentMappingError(f"malformed createdAt {value!r}") from exc


def _require(document: Mapping[str, Any], key: str, kind: type, label: str) -> Any:
    if key not in document:
        raise DocumentMappingError(f"missing field {key!r}")
    value = document[key]
    # bool is an int subclass; a stored true/false is never a price.
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise DocumentMappingError(f"{key} must be {label}, got {value!r}")
    return value


def to_domain(document: Mapping[str, Any]) -> Product:
    """Convert a stored document back into a Product.

    System properties are discarded. Field types are checked rather
    than coerced, so a stored ``"false"`` is never read as True.

    Raises:
        DocumentMappingError: If a required field is missing or null,
            has the wrong type, or ``createdAt`` cannot be parsed.
    """
    description: Optional[str] = document.get("description")
    if description is not None and not isinstance(description, str):
        raise DocumentMappingError(f"description must be a string, got {description!r}")

    return Product(
        id=_require(document, "id", str, "a string"),
        name=_require(document, "name", str, "a string"),
        price=float(_require(document, "price", (int, float), "a number")),
        category=_require(document, "category", str, "a string"),
        in_stock=_require(document, "inStock", bool, "a boolean"),
        created_at=parse_timestamp(document.get("createdAt")),
        description=description,
    )
