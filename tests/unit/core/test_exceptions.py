"""Unit tests for the standardized exception handler."""

from __future__ import annotations

import pytest
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed, ParseError, ValidationError

from modules.core.exceptions import error_response, standardized_exception_handler

pytestmark = pytest.mark.unit


class TestErrorResponse:
    def test_client_error_by_default(self):
        response = error_response("not_found", "Missing.", status.HTTP_404_NOT_FOUND)
        assert response.status_code == 404
        assert response.data == {
            "type": "client_error",
            "errors": [{"code": "not_found", "detail": "Missing.", "attr": None}],
        }

    def test_server_error_for_5xx(self):
        response = error_response("boom", "Failed.", 503)
        assert response.data["type"] == "server_error"

    def test_explicit_type_and_attr(self):
        response = error_response(
            "invalid", "Required.", 400, attr="firstName", error_type="validation_error"
        )
        assert response.data["type"] == "validation_error"
        assert response.data["errors"][0]["attr"] == "firstName"


class TestStandardizedExceptionHandler:
    def test_parse_error_is_client_error(self):
        response = standardized_exception_handler(ParseError("Bad body."), {})
        assert response.status_code == 400
        assert response.data["type"] == "client_error"
        assert response.data["errors"] == [
            {"code": "parse_error", "detail": "Bad body.", "attr": None}
        ]

    def test_method_not_allowed(self):
        response = standardized_exception_handler(MethodNotAllowed("PATCH"), {})
        assert response.status_code == 405
        assert response.data["errors"][0]["code"] == "method_not_allowed"

    def test_validation_error_fields_are_flattened(self):
        exc = ValidationError({"firstName": ["This field is required."]})
        response = standardized_exception_handler(exc, {})
        assert response.data["type"] == "validation_error"
        assert response.data["errors"] == [
            {
                "code": "invalid",
                "detail": "This field is required.",
                "attr": "firstName",
            }
        ]

    def test_database_error_becomes_server_error(self):
        response = standardized_exception_handler(DatabaseError("down"), {"view": None})
        assert response.status_code == 500
        assert response.data["type"] == "server_error"
        assert response.data["errors"][0]["code"] == "store_unavailable"

    def test_unknown_exceptions_are_not_handled(self):
        assert standardized_exception_handler(RuntimeError("bug"), {}) is None
