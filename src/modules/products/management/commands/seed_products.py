from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.constants import ProductCategory
from modules.products.models import Product

SEED_PRODUCTS: list[tuple[str, str, Decimal, bool, ProductCategory]] = [
    ("Smartphone", "A brand new smartphone", Decimal("699.99"), True, ProductCategory.ELECTRONICS),
    ("Noise Cancelling Headphones", "Over-ear, wireless", Decimal("249.00"), True, ProductCategory.ELECTRONICS),
    ("USB-C Charger", "65W fast charger", Decimal("39.90"), False, ProductCategory.ELECTRONICS),
    ("Denim Jacket", "Classic blue denim", Decimal("89.50"), True, ProductCategory.CLOTHING),
    ("Running Socks", "Pack of three", Decimal("12.00"), True, ProductCategory.CLOTHING),
    ("Python Cookbook", "Recipes for mastering Python", Decimal("44.99"), True, ProductCategory.BOOKS),
    ("Desk Lamp", "LED, dimmable", Decimal("29.99"), False, ProductCategory.HOME),
    ("Building Blocks Set", "500 pieces", Decimal("59.00"), True, ProductCategory.TOYS),
    ("Yoga Mat", "6 mm, non-slip", Decimal("25.00"), True, ProductCategory.SPORTS),
    ("Arabica Coffee Beans", "1 kg bag", Decimal("18.75"), True, ProductCategory.GROCERY),
    ("Face Moisturiser", "50 ml", Decimal("15.40"), False, ProductCategory.BEAUTY),
]


class Command(BaseCommand):
    help = "Seed the catalog with sample products (safe to run repeatedly)."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")

        created = 0
        for name, description, price, in_stock, category in SEED_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name__iexact=name,
                defaults={
                    "name": name,
                    "description": description,
                    "price": price,
                    "in_stock": in_stock,
                    "category": category,
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created} created, "
                f"{len(SEED_PRODUCTS) - created} already present"
            )
        )
