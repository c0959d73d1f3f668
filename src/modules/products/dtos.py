"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``MaxPriceQueryDTO``: input for the price-ceiling query.

Responses are rendered by ``ProductSerializer``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.products.constants import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    ProductCategory,
)


def _check_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Name must not be blank.")
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters.")
    return v


def _check_price(v: Decimal) -> Decimal:
    if v < 0:
        raise ValueError("Price cannot be negative.")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is non-blank and at most 100 characters (whitespace trimmed).
    - ``price`` is a non-negative Decimal with at most two decimal places.
    - ``category`` names a ``ProductCategory`` (case-insensitive) when given.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal = Field(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    description: Optional[str] = None
    in_stock: bool = False
    category: Optional[ProductCategory] = None

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        return _check_price(v)

    @field_validator("category", mode="before")
    @classmethod
    def category_must_be_known(cls, v: object) -> Optional[ProductCategory]:
        if v is None:
            return None
        return ProductCategory.parse(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    ``name``, ``description``, ``price`` and ``category`` are optional and
    only replace the stored value when supplied.  ``in_stock`` is always
    applied; an omitted flag reads as ``False``.  ``transient_field`` may
    carry a discount directive.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(
        default=None, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    in_stock: bool = False
    category: Optional[ProductCategory] = None
    transient_field: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return _check_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is None:
            return None
        return _check_price(v)

    @field_validator("category", mode="before")
    @classmethod
    def category_must_be_known(cls, v: object) -> Optional[ProductCategory]:
        if v is None:
            return None
        return ProductCategory.parse(v)


class MaxPriceQueryDTO(BaseModel):
    """Immutable DTO for the ``price <= max_price`` query."""

    model_config = ConfigDict(frozen=True)

    max_price: Decimal

    @field_validator("max_price")
    @classmethod
    def max_price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("Maximum price must be a finite number.")
        if v < 0:
            raise ValueError("Maximum price cannot be negative.")
        return v

