"""Customer API views.

Exposes the customer store over HTTP using a DRF ViewSet.  The view is
a thin translation layer: it validates raw bodies, calls the store and
hands results to the JSON codec.  Invalid payloads are caught and
translated into 400 responses; store failures propagate to the
project's exception handler.
"""

from __future__ import annotations

from typing import Dict, Optional

import structlog
from django.http import HttpResponse
from django.urls import reverse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import VALIDATION_ERROR, error_response
from modules.core.models import MAX_ID
from modules.customers.exceptions import InvalidCustomerPayload
from modules.customers.mappers import CustomerJsonCodec
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.customers.validators import RequestValidator

logger = structlog.get_logger(__name__)

JSON_MIME_TYPE = "application/json"


class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    Collaborators are injected through ``as_view(..., service=...,
    codec=..., validator=...)``; omitted ones default to the Django ORM
    backed service, ``CustomerJsonCodec`` and ``RequestValidator``.
    """

    service: Optional[CustomerService] = None
    codec: Optional[CustomerJsonCodec] = None
    validator: Optional[RequestValidator] = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = CustomerService(repository=CustomerDjangoRepository())
        if self.codec is None:
            self.codec = CustomerJsonCodec()
        if self.validator is None:
            self.validator = RequestValidator()

    def initial(self, request: Request, *args, **kwargs) -> None:
        super().initial(request, *args, **kwargs)
        logger.info(
            "api.call",
            method=request.method,
            path=request.get_full_path(),
            operation=self.action,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _customer_url(self, request: Request, customer: Customer) -> str:
        return request.build_absolute_uri(
            reverse("customer-detail", kwargs={"pk": customer.id})
        )

    @staticmethod
    def _json(
        body: str, status_code: int, headers: Optional[Dict[str, str]] = None
    ) -> HttpResponse:
        return HttpResponse(
            body, status=status_code, content_type=JSON_MIME_TYPE, headers=headers
        )

    @staticmethod
    def _no_content() -> HttpResponse:
        return HttpResponse(
            status=status.HTTP_204_NO_CONTENT, content_type=JSON_MIME_TYPE
        )

    def _encoded_list(self, request: Request, customers) -> HttpResponse:
        body = self.codec.encode_customers(customers, request.build_absolute_uri())
        return self._json(body, status.HTTP_200_OK)

    @staticmethod
    def _invalid(exc: InvalidCustomerPayload) -> Response:
        return error_response(
            exc.code,
            str(exc),
            status.HTTP_400_BAD_REQUEST,
            attr=exc.attr,
            error_type=VALIDATION_ERROR,
        )

    # ------------------------------------------------------------------
    # Retrieve / Lists
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: int) -> HttpResponse:
        """GET /customer/{pk}"""
        customer = self.service.find_by_id(pk)
        if customer is None:
            return self._no_content()
        url = self._customer_url(request, customer)
        body = self.codec.encode_customer(customer, url)
        return self._json(body, status.HTTP_200_OK)

    def by_first_name(self, request: Request, first_name: str) -> HttpResponse:
        """GET /customers/firstName/{first_name}"""
        customers = self.service.find_by_first_name(first_name)
        return self._encoded_list(request, customers)

    def by_last_name(self, request: Request, last_name: str) -> HttpResponse:
        """GET /customers/lastName/{last_name}"""
        customers = self.service.find_by_last_name(last_name)
        return self._encoded_list(request, customers)

    def by_full_name(
        self, request: Request, first_name: str, last_name: str
    ) -> HttpResponse:
        """GET /customers/firstName/{first_name}/lastName/{last_name}"""
        customers = self.service.find_by_first_name_and_last_name(
            first_name, last_name
        )
        return self._encoded_list(request, customers)

    def list(self, request: Request) -> HttpResponse:
        """GET /customers"""
        return self._encoded_list(request, self.service.find_all())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> HttpResponse:
        """POST /customer"""
        raw = request.body
        try:
            self.validator.validate_json(raw)
            customer = self.codec.decode(raw)
        except InvalidCustomerPayload as exc:
            return self._invalid(exc)

        customer = self.service.save(customer)

        location = self._customer_url(request, customer)
        body = self.codec.encode_customer(customer, location)
        return self._json(
            body, status.HTTP_201_CREATED, headers={"Location": location}
        )

    def update(self, request: Request, pk: int) -> HttpResponse:
        """PUT /customer/{pk}

        The existing record is looked up but not required: a missing id is
        written as a new record under that id.
        """
        if pk > MAX_ID:
            return error_response(
                "out_of_range",
                f"Customer id must not exceed {MAX_ID}.",
                status.HTTP_400_BAD_REQUEST,
                attr="id",
                error_type=VALIDATION_ERROR,
            )

        raw = request.body
        try:
            self.validator.validate_json(raw)
        except InvalidCustomerPayload as exc:
            return self._invalid(exc)

        if self.service.find_by_id(pk) is None:
            logger.info("customer.update_creates_record", customer_id=pk)

        try:
            customer = self.codec.decode_with_id(pk, raw)
        except InvalidCustomerPayload as exc:
            return self._invalid(exc)

        customer = self.service.save(customer)
        url = self._customer_url(request, customer)
        body = self.codec.encode_customer(customer, url)
        return self._json(body, status.HTTP_200_OK)

    def destroy(self, request: Request, pk: int) -> HttpResponse:
        """DELETE /customer/{pk}"""
        customer = self.service.find_by_id(pk)
        if customer is not None:
            logger.info("customer.delete_requested", customer_id=pk)
        self.service.delete(pk)
        return self._no_content()
