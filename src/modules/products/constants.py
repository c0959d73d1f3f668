"""Product domain constants.

``ProductCategory`` is the closed set of catalog categories.  Every
incoming category string (creation payloads, update payloads, the
in-stock category filter) is resolved through ``ProductCategory.parse``.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

from modules.products.exceptions import InvalidCategory


class ProductCategory(models.TextChoices):
    ELECTRONICS = "ELECTRONICS", "Electronics"
    CLOTHING = "CLOTHING", "Clothing"
    BOOKS = "BOOKS", "Books"
    HOME = "HOME", "Home"
    TOYS = "TOYS", "Toys"
    SPORTS = "SPORTS", "Sports"
    GROCERY = "GROCERY", "Grocery"
    BEAUTY = "BEAUTY", "Beauty"

    @classmethod
    def parse(cls, value: str) -> ProductCategory:
        """Resolve ``value`` case-insensitively to a category.

        Raises:
            InvalidCategory: if ``value`` is not a string naming a category.
        """
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidCategory(
            f"Unknown product category '{value}'. "
            f"Expected one of: {', '.join(cls.values)}."
        )


NAME_MAX_LENGTH = 100

PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2
PRICE_QUANTUM = Decimal("0.01")
