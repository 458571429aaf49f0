"""Tests for the service error to HTTP status mapping."""

import pytest
from fastapi import HTTPException

from quest_api.api.routers.error_handling import handle_service_errors
from quest_api.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateEntryError,
    ResourceNotFoundError,
    StorageError,
    ValidationError,
)


def _raising(error: Exception):
    @handle_service_errors
    async def endpoint():
        raise error

    return endpoint


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (ResourceNotFoundError("quest", "q1"), 404),
        (DuplicateEntryError("challenge"), 400),
        (ValidationError("bad"), 400),
        (AuthenticationError("no"), 401),
        (AuthorizationError("forbidden"), 403),
        (StorageError("down"), 500),
        (RuntimeError("boom"), 500),
    ],
)
async def test_status_mapping(error, status_code):
    with pytest.raises(HTTPException) as exc_info:
        await _raising(error)()

    assert exc_info.value.status_code == status_code


async def test_http_exception_passes_through():
    with pytest.raises(HTTPException) as exc_info:
        await _raising(HTTPException(status_code=418))()

    assert exc_info.value.status_code == 418


async def test_return_value_is_untouched():
    @handle_service_errors
    async def endpoint(value):
        return value * 2

    assert await endpoint(21) == 42
