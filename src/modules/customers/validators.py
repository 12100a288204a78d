"""Syntactic validation of inbound customer payloads.

The check runs on the raw request body before any decoding or store
access.  It only asks whether the body is a well-formed JSON object;
field-level rules belong to ``CustomerPayloadDTO``.
"""

from __future__ import annotations

import json

import structlog

from modules.customers.exceptions import InvalidCustomerPayload

logger = structlog.get_logger(__name__)


class RequestValidator:
    """Rejects request bodies that are not a well-formed JSON object."""

    def validate_json(self, raw: str | bytes) -> None:
        """Raise ``InvalidCustomerPayload`` unless ``raw`` is a JSON object."""
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.warning("request.invalid_encoding")
                raise InvalidCustomerPayload(
                    "Request body must be UTF-8 encoded.", code="parse_error"
                ) from exc

        if not raw or not raw.strip():
            logger.warning("request.empty_body")
            raise InvalidCustomerPayload("Request body is empty.", code="parse_error")

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("request.malformed_json", error=exc.msg, pos=exc.pos)
            raise InvalidCustomerPayload(
                f"Malformed JSON: {exc.msg}.", code="parse_error"
            ) from exc

        if not isinstance(parsed, dict):
            logger.warning("request.not_an_object", kind=type(parsed).__name__)
            raise InvalidCustomerPayload(
                "Request body must be a JSON object.", code="parse_error"
            )
