"""Unit tests for CustomerJsonCodec.

Covers:
- Encoding of single customers and lists, including the self link.
- Decoding into new and id-keyed customers.
- Structural decode failures.
"""

from __future__ import annotations

import json

import pytest

from modules.customers.exceptions import InvalidCustomerPayload
from modules.customers.mappers import CustomerJsonCodec

pytestmark = pytest.mark.unit

SELF_URL = "http://testserver/customer/1"


@pytest.fixture()
def codec() -> CustomerJsonCodec:
    return CustomerJsonCodec()


class TestEncodeCustomer:
    def test_returns_json_string(self, codec, make_customer):
        customer = make_customer()
        body = codec.encode_customer(customer, SELF_URL)
        assert isinstance(body, str)
        data = json.loads(body)
        assert data["id"] == customer.id
        assert data["firstName"] == "Jane"
        assert data["lastName"] == "Doe"

    def test_uses_camel_case_names(self, codec, make_customer):
        data = json.loads(codec.encode_customer(make_customer(), SELF_URL))
        assert set(data) == {
            "id",
            "firstName",
            "lastName",
            "email",
            "phone",
            "address",
            "createdAt",
            "updatedAt",
            "links",
        }

    def test_attaches_self_link(self, codec, make_customer):
        data = json.loads(codec.encode_customer(make_customer(), SELF_URL))
        assert data["links"] == [{"rel": "self", "href": SELF_URL}]


class TestEncodeCustomers:
    def test_encodes_list(self, codec, make_customer):
        first = make_customer(first_name="Ada")
        second = make_customer(first_name="Alan")
        data = json.loads(
            codec.encode_customers([first, second], "http://testserver/customers")
        )
        assert [c["firstName"] for c in data["customers"]] == ["Ada", "Alan"]
        assert data["links"] == [
            {"rel": "self", "href": "http://testserver/customers"}
        ]

    def test_encodes_empty_list(self, codec):
        data = json.loads(codec.encode_customers([], "http://testserver/customers"))
        assert data["customers"] == []


class TestDecode:
    def test_decode_builds_unsaved_customer(self, codec):
        customer = codec.decode(b'{"firstName": "Jane", "lastName": "Doe"}')
        assert customer.id is None
        assert customer.first_name == "Jane"
        assert customer.last_name == "Doe"

    def test_decode_ignores_body_id(self, codec):
        customer = codec.decode('{"id": 12, "firstName": "Jane", "lastName": "Doe"}')
        assert customer.id is None

    def test_decode_with_id_uses_given_id(self, codec):
        customer = codec.decode_with_id(
            5, '{"id": 12, "firstName": "Jane", "lastName": "Doe"}'
        )
        assert customer.id == 5

    def test_missing_field_reports_attr(self, codec):
        with pytest.raises(InvalidCustomerPayload) as excinfo:
            codec.decode('{"lastName": "Doe"}')
        assert excinfo.value.attr == "firstName"
        assert excinfo.value.code == "invalid"

    def test_invalid_email_rejected(self, codec):
        with pytest.raises(InvalidCustomerPayload) as excinfo:
            codec.decode('{"firstName": "Jane", "lastName": "Doe", "email": "nope"}')
        assert excinfo.value.attr == "email"
