"""Customer domain exceptions.

Raised by the request validator and the JSON codec when an inbound
payload cannot be accepted.  The API layer (Views) catches these and
translates them into a 400 response before the store is touched.
"""

from __future__ import annotations


class InvalidCustomerPayload(Exception):
    """The request body is malformed or does not describe a customer.

    ``code`` is ``parse_error`` for syntax problems and ``invalid`` for
    structural ones; ``attr`` names the offending field when known.
    """

    def __init__(
        self, message: str, attr: str | None = None, code: str = "invalid"
    ) -> None:
        super().__init__(message)
        self.attr = attr
        self.code = code
