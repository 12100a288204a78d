"""Unit tests for Customer DTOs.

Covers:
- CustomerPayloadDTO: camelCase/snake_case input, optional fields,
  validation failures, frozen immutability.
- to_entity: id handling.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.customers.dtos import CustomerPayloadDTO

pytestmark = pytest.mark.unit


class TestCustomerPayloadDTOValid:
    def test_accepts_camel_case(self):
        dto = CustomerPayloadDTO.model_validate(
            {"firstName": "Jane", "lastName": "Doe"}
        )
        assert dto.first_name == "Jane"
        assert dto.last_name == "Doe"

    def test_accepts_snake_case(self):
        dto = CustomerPayloadDTO.model_validate(
            {"first_name": "Jane", "last_name": "Doe"}
        )
        assert dto.first_name == "Jane"

    def test_optional_fields_default_empty(self):
        dto = CustomerPayloadDTO.model_validate(
            {"firstName": "Jane", "lastName": "Doe"}
        )
        assert dto.email is None
        assert dto.phone == ""
        assert dto.address == ""

    def test_null_optional_fields_become_blank(self):
        dto = CustomerPayloadDTO.model_validate(
            {"firstName": "Jane", "lastName": "Doe", "phone": None, "address": None}
        )
        assert dto.phone == ""
        assert dto.address == ""

    def test_blank_email_is_treated_as_missing(self):
        dto = CustomerPayloadDTO.model_validate(
            {"firstName": "Jane", "lastName": "Doe", "email": ""}
        )
        assert dto.email is None

    def test_strips_whitespace(self):
        dto = CustomerPayloadDTO.model_validate(
            {"firstName": "  Jane ", "lastName": "Doe  "}
        )
        assert dto.first_name == "Jane"
        assert dto.last_name == "Doe"


class TestCustomerPayloadDTOValidation:
    def test_missing_first_name_raises(self):
        with pytest.raises(ValidationError):
            CustomerPayloadDTO.model_validate({"lastName": "Doe"})

    def test_blank_last_name_raises(self):
        with pytest.raises(ValidationError):
            CustomerPayloadDTO.model_validate({"firstName": "Jane", "lastName": "  "})

    def test_non_string_name_raises(self):
        with pytest.raises(ValidationError):
            CustomerPayloadDTO.model_validate({"firstName": 42, "lastName": "Doe"})

    def test_invalid_email_raises(self):
        with pytest.raises(ValidationError):
            CustomerPayloadDTO.model_validate(
                {"firstName": "Jane", "lastName": "Doe", "email": "not-an-email"}
            )


class TestCustomerPayloadDTOFrozen:
    def test_is_immutable(self):
        dto = CustomerPayloadDTO.model_validate(
            {"firstName": "Jane", "lastName": "Doe"}
        )
        with pytest.raises(ValidationError):
            dto.first_name = "Changed"


class TestToEntity:
    def test_new_entity_has_no_id(self):
        dto = CustomerPayloadDTO.model_validate(
            {"id": 99, "firstName": "Jane", "lastName": "Doe"}
        )
        customer = dto.to_entity()
        assert customer.id is None
        assert customer.first_name == "Jane"

    def test_entity_keyed_by_given_id(self):
        dto = CustomerPayloadDTO.model_validate(
            {"id": 99, "firstName": "Jane", "lastName": "Doe"}
        )
        assert dto.to_entity(id=7).id == 7

    def test_copies_contact_fields(self):
        dto = CustomerPayloadDTO.model_validate(
            {
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane@example.com",
                "phone": "555-0100",
                "address": "1 Main St",
            }
        )
        customer = dto.to_entity()
        assert customer.email == "jane@example.com"
        assert customer.phone == "555-0100"
        assert customer.address == "1 Main St"
