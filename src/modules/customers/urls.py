"""Customer URL configuration.

Routes are declared explicitly: the singular ``customer`` prefix
addresses one record and the plural ``customers`` prefix returns lists.
"""

from __future__ import annotations

from django.urls import path

from modules.customers.views import CustomerViewSet

customer_create = CustomerViewSet.as_view({"post": "create"})
customer_detail = CustomerViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"}
)
customer_list = CustomerViewSet.as_view({"get": "list"})
customers_by_first_name = CustomerViewSet.as_view({"get": "by_first_name"})
customers_by_last_name = CustomerViewSet.as_view({"get": "by_last_name"})
customers_by_full_name = CustomerViewSet.as_view({"get": "by_full_name"})

urlpatterns = [
    path("customer", customer_create, name="customer-create"),
    path("customer/<int:pk>", customer_detail, name="customer-detail"),
    path("customers", customer_list, name="customer-list"),
    path(
        "customers/firstName/<str:first_name>",
        customers_by_first_name,
        name="customer-by-first-name",
    ),
    path(
        "customers/lastName/<str:last_name>",
        customers_by_last_name,
        name="customer-by-last-name",
    ),
    path(
        "customers/firstName/<str:first_name>/lastName/<str:last_name>",
        customers_by_full_name,
        name="customer-by-full-name",
    ),
]
