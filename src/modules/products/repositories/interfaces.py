"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups behind the name
uniqueness rule and the two catalog queries (price ceiling, in-stock
products of a category).
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.constants import ProductCategory
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by name, ignoring case."""

    @abstractmethod
    def list_by_max_price(self, max_price: Decimal) -> List[Product]:
        """List products whose price is less than or equal to ``max_price``."""

    @abstractmethod
    def list_in_stock_by_category(self, category: ProductCategory) -> List[Product]:
        """List in-stock products of the given category."""
