from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.constants import ProductCategory
from modules.products.models import Product


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
def make_product():
    """Factory persisting a Product with sensible defaults."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Widget",
            "description": "A fine widget",
            "price": Decimal("19.99"),
            "in_stock": True,
            "category": ProductCategory.ELECTRONICS,
        }
        defaults.update(overrides)
        product = Product(**defaults)
        product.save()
        return product

    return _make
