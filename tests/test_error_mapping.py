"""
Tests for the Cosmos DB error translation.

The translator is pure, so every branch is exercised without a database.
"""

import pytest
from azure.core.exceptions import ServiceRequestError
from azure.cosmos.exceptions import CosmosHttpResponseError

from app.domain.catalog.entities import RepositoryErrorCode
from app.infrastructure.catalog.error_mapping import (
    ALREADY_EXISTS_MESSAGE,
    DATABASE_ERROR_MESSAGE,
    INVALID_REQUEST_MESSAGE,
    NOT_FOUND_MESSAGE,
    translate_exception,
    translate_status,
)


class TestTranslateStatus:
    """First matching rule wins."""

    def test_conflict_is_already_exists(self) -> None:
        error = translate_status(409, "Entity with the specified id already exists")
        assert error.code is RepositoryErrorCode.ALREADY_EXISTS
        assert error.message == ALREADY_EXISTS_MESSAGE

    def test_not_found(self) -> None:
        error = translate_status(404, "Entity with the specified id does not exist")
        assert error.code is RepositoryErrorCode.NOT_FOUND
        assert error.message == NOT_FOUND_MESSAGE

    @pytest.mark.parametrize("status", [400, 401, 403, 412, 413, 429, 499])
    def test_other_client_errors_are_validation(self, status) -> None:
        error = translate_status(status, "One of the specified inputs is invalid")
        assert error.code is RepositoryErrorCode.VALIDATION_ERROR
        assert error.message == "One of the specified inputs is invalid"

    def test_validation_default_message(self) -> None:
        error = translate_status(400, None)
        assert error.message == INVALID_REQUEST_MESSAGE

    @pytest.mark.parametrize("status", [None, 0, 200, 399, 500, 503, 599, -1])
    def test_everything_else_is_persistence(self, status) -> None:
        error = translate_status(status, "Service unavailable")
        assert error.code is RepositoryErrorCode.PERSISTENCE_ERROR
        assert error.message == "Service unavailable"

    def test_persistence_default_message(self) -> None:
        error = translate_status(None, "")
        assert error.message == DATABASE_ERROR_MESSAGE

    def test_every_status_maps_to_exactly_one_code(self) -> None:
        for status in range(0, 700):
            error = translate_status(status)
            assert error.code in RepositoryErrorCode


class TestTranslateException:
    """Extraction of status and message from client exceptions."""

    def test_cosmos_conflict(self) -> None:
        exc = CosmosHttpResponseError(status_code=409, message="Conflict")
        assert translate_exception(exc).code is RepositoryErrorCode.ALREADY_EXISTS

    def test_cosmos_not_found(self) -> None:
        exc = CosmosHttpResponseError(status_code=404, message="NotFound")
        assert translate_exception(exc).code is RepositoryErrorCode.NOT_FOUND

    def test_cosmos_bad_request_keeps_service_message(self) -> None:
        exc = CosmosHttpResponseError(status_code=400, message="Partition key mismatch")
        error = translate_exception(exc)
        assert error.code is RepositoryErrorCode.VALIDATION_ERROR
        assert "Partition key mismatch" in error.message

    def test_cosmos_server_error(self) -> None:
        exc = CosmosHttpResponseError(status_code=503, message="Service Unavailable")
        assert translate_exception(exc).code is RepositoryErrorCode.PERSISTENCE_ERROR

    def test_network_failure_without_status(self) -> None:
        error = translate_exception(ServiceRequestError("Connection refused"))
        assert error.code is RepositoryErrorCode.PERSISTENCE_ERROR
        assert error.message == "Connection refused"

    def test_plain_exception(self) -> None:
        error = translate_exception(RuntimeError())
        assert error.code is RepositoryErrorCode.PERSISTENCE_ERROR
        assert error.message == DATABASE_ERROR_MESSAGE

    def test_non_numeric_status_ignored(self) -> None:
        exc = RuntimeError("odd")
        exc.status_code = "409"  # type: ignore[attr-defined]
        assert translate_exception(exc).code is RepositoryErrorCode.PERSISTENCE_ERROR
