"""Unit tests for the seed_products management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.management.commands.seed_products import SEED_PRODUCTS
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestSeedProducts:
    def test_seeds_catalog(self):
        out = StringIO()
        call_command("seed_products", stdout=out)
        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert "Seed completed" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_products", stdout=StringIO())
        out = StringIO()
        call_command("seed_products", stdout=out)
        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert "products=0 created" in out.getvalue()

    def test_existing_name_is_not_duplicated(self, make_product):
        name = SEED_PRODUCTS[0][0]
        make_product(name=name.upper())
        call_command("seed_products", stdout=StringIO())
        assert Product.objects.filter(name__iexact=name).count() == 1
