"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
or ``False`` for missing or malformed IDs instead of raising; the Service
Layer decides how to translate a missing entity into an API response.

Name uniqueness is ultimately enforced by the ``products_name_ci_unique``
constraint; ``save`` turns a violation of it into ``ProductAlreadyExists``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.constants import ProductCategory
from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def exists(self, id: str) -> bool:
        try:
            return Product.objects.filter(id=id).exists()
        except (ValueError, ValidationError):
            return False

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def list_by_max_price(self, max_price: Decimal) -> List[Product]:
        return list(Product.objects.filter(price__lte=max_price))

    def list_in_stock_by_category(self, category: ProductCategory) -> List[Product]:
        return list(Product.objects.filter(category=category, in_stock=True))

    def get_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by name, ignoring case and outer whitespace."""
        return Product.objects.filter(name__iexact=name.strip()).first()

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        Raises:
            ProductAlreadyExists: if another product already uses the name.
        """
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError as exc:
            owner = self._name_owner(entity)
            if owner is None:
                raise
            logger.warning(
                "product.name_conflict",
                product_id=str(entity.id),
                name=entity.name,
                owner_id=str(owner.id),
            )
            raise ProductAlreadyExists(
                f"Product with name '{owner.name}' already exists."
            ) from exc
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            name=entity.name,
        )
        return entity

    def delete(self, id: str) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        if deleted:
            logger.info("product.deleted", product_id=str(id))
        return bool(deleted)

    @staticmethod
    def _name_owner(entity: Product) -> Optional[Product]:
        """Return the other product already holding ``entity``'s name, if any."""
        return (
            Product.objects.filter(name__iexact=entity.name)
            .exclude(pk=entity.pk)
            .first()
        )
