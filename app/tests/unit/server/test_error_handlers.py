"""Unit tests for the server exception handlers."""

import asyncio
import json

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from infrastructure.errors import (
    ConflictError,
    MultilingualUnavailableError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from server.server import (
    request_validation_handler,
    service_error_handler,
    status_code_for,
)

pytestmark = pytest.mark.unit


def make_request(path="/api/v1/configs/1", method="GET"):
    return Request({"type": "http", "method": method, "path": path, "headers": []})


class TestStatusCodeFor:
    """Tests for status_code_for()."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (ValidationError("bad"), 400),
            (NotFoundError("missing"), 404),
            (ConflictError("taken"), 409),
            (MultilingualUnavailableError("off"), 503),
            (ServiceError("unmapped"), 500),
        ],
    )
    def test_maps_error_types(self, error, expected):
        assert status_code_for(error) == expected


class TestServiceErrorHandler:
    """Tests for service_error_handler()."""

    def test_renders_error_body(self):
        error = NotFoundError(
            "Configuration 1 not found",
            code="CONFIG_NOT_FOUND",
            details={"config_id": 1},
        )

        response = asyncio.run(service_error_handler(make_request(), error))

        assert response.status_code == 404
        assert json.loads(response.body) == {"error": error.to_dict()}


class TestRequestValidationHandler:
    """Tests for request_validation_handler()."""

    def test_reshapes_field_errors(self):
        exc = RequestValidationError(
            [{"loc": ("body", "title"), "msg": "Field required", "type": "missing"}]
        )

        response = asyncio.run(
            request_validation_handler(make_request(method="POST"), exc)
        )

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"]["errors"] == [
            {"field": "body.title", "message": "Field required"}
        ]
