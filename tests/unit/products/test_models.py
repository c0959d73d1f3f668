"""Unit tests for the Product model.

Covers:
- Valid creation with all fields and defaults.
- UUIDv7 id and creation timestamp.
- Case-insensitive name uniqueness (database constraint).
- Non-negative price validation (application + DB constraint).
- In-place, compounding discount.
- __str__ representation; model saves do not log.
"""

from __future__ import annotations

import logging
import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from modules.products.constants import ProductCategory
from modules.products.exceptions import InvalidDiscount
from modules.products.models import Product

pytestmark = pytest.mark.unit


def _make_product(**overrides) -> Product:
    """Build and full_clean a Product, returning the unsaved instance."""
    defaults = {
        "name": f"Test Product {uuid.uuid4().hex[:6]}",
        "price": Decimal("29.90"),
        "in_stock": True,
        "category": ProductCategory.HOME,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.full_clean()
    return product


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(
            name="Smartphone",
            description="A brand new smartphone",
            price=Decimal("699.99"),
            in_stock=True,
            category=ProductCategory.ELECTRONICS,
        )
        p.refresh_from_db()
        assert p.name == "Smartphone"
        assert p.price == Decimal("699.99")
        assert p.in_stock is True
        assert p.category == ProductCategory.ELECTRONICS

    def test_id_is_uuid7(self):
        p = Product.objects.create(name="UUID Product", price=Decimal("10.00"))
        assert isinstance(p.id, uuid.UUID)
        assert p.id.version == 7

    def test_created_at_set_to_now(self):
        p = Product.objects.create(name="Timestamp Product", price=Decimal("5.00"))
        assert p.created_at is not None
        assert abs(timezone.now() - p.created_at) < timedelta(seconds=5)

    def test_created_at_unchanged_by_later_saves(self):
        p = Product.objects.create(name="Stable Timestamp", price=Decimal("5.00"))
        created = p.created_at
        p.price = Decimal("6.00")
        p.save()
        p.refresh_from_db()
        assert p.created_at == created

    def test_defaults(self):
        p = Product.objects.create(name="Defaults", price=Decimal("1.00"))
        assert p.description is None
        assert p.in_stock is False
        assert p.category is None

    def test_transient_field_is_not_a_column(self):
        field_names = {f.name for f in Product._meta.get_fields()}
        assert "transient_field" not in field_names
        assert Product(name="x", price=Decimal("1")).transient_field is None

    def test_name_is_stripped_on_save(self):
        p = Product.objects.create(name="  Padded  ", price=Decimal("1.00"))
        p.refresh_from_db()
        assert p.name == "Padded"


# ---------------------------------------------------------------------------
# Name uniqueness
# ---------------------------------------------------------------------------


class TestNameUniqueness:
    def test_same_name_different_case_rejected_by_database(self):
        Product.objects.create(name="Widget", price=Decimal("10.00"))
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Product.objects.create(name="WIDGET", price=Decimal("20.00"))

    def test_distinct_names_accepted(self):
        Product.objects.create(name="Widget", price=Decimal("10.00"))
        Product.objects.create(name="Widget Pro", price=Decimal("20.00"))
        assert Product.objects.count() == 2


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_negative_price_raises_validation_error(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            _make_product(price=Decimal("-5.00"))

    def test_zero_price_is_valid(self):
        p = _make_product(price=Decimal("0.00"))
        assert p.price == Decimal("0.00")

    def test_blank_name_raises_validation_error(self):
        with pytest.raises(ValidationError):
            _make_product(name="   ")

    def test_name_over_100_characters_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(name="x" * 101)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(category="BOGUS")

    def test_negative_price_rejected_by_database(self):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Product.objects.create(name="Negative", price=Decimal("-1.00"))


# ---------------------------------------------------------------------------
# Discount
# ---------------------------------------------------------------------------


class TestApplyDiscount:
    def test_discount_replaces_price(self):
        p = _make_product(price=Decimal("100.00"))
        result = p.apply_discount(Decimal("0.10"))
        assert result == Decimal("90.00")
        assert p.price == Decimal("90.00")

    def test_repeated_discount_compounds(self):
        p = _make_product(price=Decimal("100.00"))
        p.apply_discount(Decimal("0.10"))
        p.apply_discount(Decimal("0.10"))
        assert p.price == Decimal("81.00")

    def test_invalid_fraction_leaves_price_unchanged(self):
        p = _make_product(price=Decimal("100.00"))
        with pytest.raises(InvalidDiscount):
            p.apply_discount(Decimal("1.5"))
        assert p.price == Decimal("100.00")


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


class TestProductDisplay:
    def test_str_representation(self):
        p = _make_product(name="Display Product", price=Decimal("9.99"))
        assert str(p) == "Display Product (9.99)"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestProductLogging:
    """Persistence logging lives in the repository, not the model."""

    def test_model_save_emits_no_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="modules.products.models"):
            Product.objects.create(name="Quiet Product", price=Decimal("10.00"))
        records = [r for r in caplog.records if r.name == "modules.products.models"]
        assert records == []
