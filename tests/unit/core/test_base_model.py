"""Unit tests for BaseModel.

``Product`` is used as the concrete subclass so the abstract base is
exercised against its real table.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from modules.core.models import BaseModel
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestBaseModel:
    def test_is_abstract(self):
        assert BaseModel._meta.abstract is True

    def test_primary_key_is_uuid7(self, make_product):
        product = make_product()
        assert isinstance(product.id, uuid.UUID)
        assert product.id.version == 7

    def test_primary_keys_are_time_ordered(self, make_product):
        first = make_product(name="First")
        second = make_product(name="Second")
        assert first.id < second.id

    def test_created_at_set_once(self, make_product):
        with freeze_time("2026-01-01 12:00:00"):
            product = make_product()
        with freeze_time("2026-01-02 12:00:00"):
            product.name = "Renamed"
            product.save()
        product.refresh_from_db()
        assert product.created_at == datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_updated_at_advances_on_save(self, make_product):
        with freeze_time("2026-01-01 12:00:00"):
            product = make_product()
        original = product.updated_at
        with freeze_time("2026-01-01 13:00:00"):
            product.save()
        assert product.updated_at - original == timedelta(hours=1)

    def test_update_fields_still_refreshes_updated_at(self, make_product):
        with freeze_time("2026-01-01 12:00:00"):
            product = make_product()
        with freeze_time("2026-01-01 12:30:00"):
            product.price = product.price + 1
            product.save(update_fields=["price"])
        product.refresh_from_db()
        assert product.updated_at - product.created_at == timedelta(minutes=30)

    def test_ordering_by_name(self):
        assert Product._meta.ordering == ["name"]
