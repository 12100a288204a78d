"""Customer ⇄ JSON translation.

Encoding renders ``CustomerSerializer`` output with DRF's
``JSONRenderer`` and attaches a ``self`` link so clients can discover
the resource URL.  Decoding goes through ``CustomerPayloadDTO``; any
structural problem is reported as ``InvalidCustomerPayload``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from pydantic import ValidationError as PydanticValidationError
from rest_framework.renderers import JSONRenderer

from modules.customers.dtos import CustomerPayloadDTO
from modules.customers.exceptions import InvalidCustomerPayload
from modules.customers.models import Customer
from modules.customers.serializers import CustomerSerializer


def self_link(href: str) -> List[Dict[str, str]]:
    return [{"rel": "self", "href": href}]


class CustomerJsonCodec:
    """Encodes customers to JSON strings and decodes request bodies."""

    def __init__(self) -> None:
        self._renderer = JSONRenderer()

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode_customer(self, customer: Customer, self_url: str) -> str:
        data = dict(CustomerSerializer(customer).data)
        data["links"] = self_link(self_url)
        return self._render(data)

    def encode_customers(self, customers: Iterable[Customer], self_url: str) -> str:
        data = {
            "customers": CustomerSerializer(list(customers), many=True).data,
            "links": self_link(self_url),
        }
        return self._render(data)

    def _render(self, data: Any) -> str:
        return self._renderer.render(data).decode("utf-8")

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode(self, body: str | bytes) -> Customer:
        """Decode a body into a new, unsaved customer (no id)."""
        return self._parse(body).to_entity()

    def decode_with_id(self, id: int, body: str | bytes) -> Customer:
        """Decode a body into a customer keyed by ``id``.

        Any ``id`` inside the body is ignored.
        """
        return self._parse(body).to_entity(id=id)

    @staticmethod
    def _parse(body: str | bytes) -> CustomerPayloadDTO:
        try:
            return CustomerPayloadDTO.model_validate_json(body)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            attr = ".".join(str(part) for part in first["loc"]) or None
            raise InvalidCustomerPayload(first["msg"], attr=attr) from exc
