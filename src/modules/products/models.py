"""Product model with case-insensitive name uniqueness and decimal pricing.

Business rules implemented:
- Name is non-blank, at most 100 characters and unique ignoring case
  (functional unique constraint on ``LOWER(name)``).
- Price is a non-negative decimal with two places (check constraint).
- ``created_at`` is set once on insert (inherited from BaseModel).
- Delete is a hard delete.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models.functions import Lower

from modules.core.models import BaseModel
from modules.products.constants import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    ProductCategory,
)
from modules.products.discounts import apply_discount


class Product(BaseModel):
    """Catalog product.

    ``transient_field`` is a plain attribute, not a column: it only carries
    an update-time directive and is never written to the database.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0"))],
    )
    in_stock = models.BooleanField(default=False)
    category = models.CharField(  # noqa: DJ01
        max_length=32,
        choices=ProductCategory.choices,
        null=True,
        blank=True,
        default=None,
    )

    transient_field: Optional[str] = None

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(
                fields=["category", "in_stock"],
                name="products_category_stock_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
            models.UniqueConstraint(
                Lower("name"),
                name="products_name_ci_unique",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name is not None:
            self.name = self.name.strip()
        if not self.name:
            raise ValidationError({"name": "Name must not be blank."})
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def apply_discount(self, fraction: Decimal) -> Decimal:
        """Discount the current price in place and return the new price.

        Each call discounts the already-discounted price, so repeated calls
        compound.

        Raises:
            InvalidDiscount: if ``fraction`` is outside ``[0, 1]``; the price
                is left untouched.
        """
        self.price = apply_discount(self.price, fraction)
        return self.price

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
