"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductAlreadyExists(Exception):
    """A product with the same name (case-insensitive) already exists."""


class ProductNotFound(Exception):
    """The requested product does not exist."""


class InvalidProductArgument(ValueError):
    """An argument or field value was rejected by a catalog rule.

    Subclasses ``ValueError`` so pydantic validators can raise it and have it
    reported as an ordinary field validation error.
    """


class InvalidCategory(InvalidProductArgument):
    """The category string matches no ``ProductCategory`` value."""


class InvalidDiscount(InvalidProductArgument):
    """The discount fraction is outside the closed interval [0, 1]."""
