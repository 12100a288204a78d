"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the JSON codec and the domain model.
DTOs are immutable (``frozen=True``).

- ``CustomerPayloadDTO``: inbound customer body (create and update).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from modules.customers.models import Customer


class CustomerPayloadDTO(BaseModel):
    """Immutable DTO for customer request bodies.

    Wire names are camelCase (``firstName``); snake_case is accepted too.
    Unknown keys, including a body-level ``id``, are ignored: the id
    always comes from the store or from the request path.

    Validates:
    - ``firstName`` and ``lastName`` are present, non-blank strings.
    - ``email`` is a well-formed address when supplied (Pydantic ``EmailStr``).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    first_name: str = Field(alias="firstName", min_length=1, max_length=100)
    last_name: str = Field(alias="lastName", min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str = Field(default="", max_length=20)
    address: str = ""

    @field_validator("phone", "address", mode="before")
    @classmethod
    def none_as_blank(cls, v: object) -> object:
        """Treat an explicit ``null`` like an omitted optional field."""
        return "" if v is None else v

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_as_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_entity(self, id: int | None = None) -> Customer:
        """Build an unsaved ``Customer``; ``id`` is set only for updates."""
        return Customer(
            id=id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email or "",
            phone=self.phone,
            address=self.address,
        )
