"""
Tests for the Product <-> Cosmos document mapping.

Pure functions; no database required.
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.catalog.entities import Product
from app.domain.catalog.errors import DocumentMappingError
from app.infrastructure.catalog.product_document import (
    SYSTEM_PROPERTIES,
    parse_timestamp,
    to_document,
    to_domain,
)


def _product(**overrides) -> Product:
    fields = dict(
        id="PROD-100",
        name="Noise Cancelling Headphones",
        price=199.5,
        category="Electronics",
        in_stock=True,
        created_at=datetime(2024, 3, 1, 8, 15, 30, 123000, tzinfo=timezone.utc),
        description="Over-ear, wireless",
    )
    fields.update(overrides)
    return Product(**fields)


def _stored(document: dict) -> dict:
    """Add the system properties Cosmos DB attaches on write."""
    return {
        **document,
        "_rid": "Sl8fALN4sw4CAAAAAAAAAA==",
        "_self": "dbs/Sl8fAA==/colls/Sl8fALN4sw4=/docs/Sl8fALN4sw4CAAAAAAAAAA==/",
        "_etag": '"0000d986-0000-0000-0000-65e19f6e0000"',
        "_attachments": "attachments/",
        "_ts": 1709280622,
    }


class TestToDocument:
    """Tests for to_document."""

    def test_fields_use_storage_names(self) -> None:
        document = to_document(_product())
        assert document == {
            "id": "PROD-100",
            "name": "Noise Cancelling Headphones",
            "price": 199.5,
            "category": "Electronics",
            "inStock": True,
            "createdAt": "2024-03-01T08:15:30.123000+00:00",
            "description": "Over-ear, wireless",
        }

    def test_no_system_properties(self) -> None:
        document = to_document(_product())
        assert not set(SYSTEM_PROPERTIES) & set(document)

    def test_missing_description_is_omitted(self) -> None:
        document = to_document(_product(description=None))
        assert "description" not in document


class TestToDomain:
    """Tests for to_domain."""

    def test_round_trip(self) -> None:
        product = _product()
        assert to_domain(to_document(product)) == product

    def test_round_trip_without_description(self) -> None:
        product = _product(description=None, in_stock=False)
        assert to_domain(to_document(product)) == product

    def test_round_trip_non_utc_offset(self) -> None:
        tz = timezone(timedelta(hours=2))
        product = _product(created_at=datetime(2024, 3, 1, 10, 15, tzinfo=tz))
        restored = to_domain(to_document(product))
        assert restored.created_at == product.created_at

    def test_system_properties_discarded(self) -> None:
        product = to_domain(_stored(to_document(_product())))
        assert product == _product()
        for name in SYSTEM_PROPERTIES:
            assert not hasattr(product, name)

    def test_javascript_timestamp_accepted(self) -> None:
        document = _stored(to_document(_product()))
        document["createdAt"] = "2024-03-01T08:15:30.123Z"
        product = to_domain(document)
        assert product.created_at == datetime(
            2024, 3, 1, 8, 15, 30, 123000, tzinfo=timezone.utc
        )

    def test_integer_price_becomes_float(self) -> None:
        document = to_document(_product())
        document["price"] = 200
        assert to_domain(document).price == 200.0

    def test_malformed_timestamp_raises(self) -> None:
        document = to_document(_product())
        document["createdAt"] = "not-a-date"
        with pytest.raises(DocumentMappingError):
            to_domain(document)

    def test_missing_field_raises(self) -> None:
        document = dict(to_document(_product()))
        del document["name"]
        with pytest.raises(DocumentMappingError, match="name"):
            to_domain(document)

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("id", 100),
            ("name", None),
            ("category", ["Electronics"]),
            ("price", "199.5"),
            ("price", True),
            ("inStock", "false"),
            ("inStock", 0),
            ("description", 42),
        ],
    )
    def test_wrong_field_type_raises(self, field, value) -> None:
        document = dict(to_document(_product()))
        document[field] = value
        with pytest.raises(DocumentMappingError, match=field):
            to_domain(document)

    def test_null_description_treated_as_absent(self) -> None:
        document = dict(to_document(_product()))
        document["description"] = None
        assert to_domain(document).description is None


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    @pytest.mark.parametrize("value", [None, "", 1709280622, "2024-13-45T99:00:00Z"])
    def test_invalid_values_rejected(self, value) -> None:
        with pytest.raises(DocumentMappingError):
            parse_timestamp(value)

    def test_zulu_suffix(self) -> None:
        parsed = parse_timestamp("2024-01-01T00:00:00Z")
        assert parsed == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_seven_digit_fraction_truncated_to_microseconds(self) -> None:
        parsed = parse_timestamp("2024-03-01T08:15:30.1234567Z")
        assert parsed == datetime(2024, 3, 1, 8, 15, 30, 123456, tzinfo=timezone.utc)

    def test_short_fraction_padded(self) -> None:
        parsed = parse_timestamp("2024-03-01T08:15:30.5+02:00")
        assert parsed.microsecond == 500000
        assert parsed.utcoffset() == timedelta(hours=2)
