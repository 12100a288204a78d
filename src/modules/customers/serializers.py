"""Customer DRF serializers for API output.

The serializer operates at the Interface layer.  It maps the model's
snake_case columns onto the camelCase wire names and is used by the
JSON codec for encoding only; inbound bodies are decoded into the
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Customer
        fields = [
            "id",
            "firstName",
            "lastName",
            "email",
            "phone",
            "address",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]
