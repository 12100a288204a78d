import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_customer():
    """Factory persisting a Customer with sane defaults."""

    def _make(**overrides) -> Customer:
        defaults = {"first_name": "Jane", "last_name": "Doe"}
        defaults.update(overrides)
        customer = Customer(**defaults)
        customer.save()
        return customer

    return _make
