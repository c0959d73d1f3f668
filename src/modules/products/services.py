"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Product names are unique ignoring case (pre-check on create; the
  repository maps constraint violations on any save).
- Updates merge only the supplied fields, except ``in_stock`` which is
  always taken from the update.
- A ``DISCOUNT:<fraction>`` directive in ``transient_field`` discounts the
  merged price; malformed directives are ignored.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.constants import ProductCategory
from modules.products.discounts import parse_discount_directive
from modules.products.exceptions import (
    InvalidProductArgument,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

MERGEABLE_FIELDS = ("name", "description", "price", "category")


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: Optional[CreateProductDTO]) -> Product:
        """Create a new product after enforcing the unique-name rule.

        Raises:
            InvalidProductArgument: if ``dto`` is missing.
            ProductAlreadyExists: if the name is already taken (any case).
        """
        if dto is None:
            raise InvalidProductArgument("Product must not be None.")

        log = logger.bind(name=dto.name)

        existing = self._repo.get_by_name(dto.name)
        if existing:
            log.warning("product.duplicate_name", owner_id=str(existing.id))
            raise ProductAlreadyExists(
                f"Product with name '{existing.name}' already exists."
            )

        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            in_stock=dto.in_stock,
            category=dto.category,
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Merge the supplied fields into an existing product and save it.

        Raises:
            ProductNotFound: if the product does not exist.
            InvalidDiscount: if the discount fraction is outside ``[0, 1]``;
                nothing is saved.
            ProductAlreadyExists: if the new name belongs to another product.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        log = logger.bind(product_id=str(id))

        for field in MERGEABLE_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)

        product.in_stock = dto.in_stock

        fraction = parse_discount_directive(dto.transient_field)
        if fraction is not None:
            product.apply_discount(fraction)
            log.debug(
                "product.discount_applied",
                fraction=str(fraction),
                price=str(product.price),
            )
        elif dto.transient_field:
            log.debug("product.directive_ignored", directive=dto.transient_field)

        product = self._repo.save(product)
        log.info("product.updated")
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Hard-delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.exists(id):
            logger.error("product.delete_missing", product_id=str(id))
            raise ProductNotFound(f"Product {id} not found.")
        self._repo.delete(id)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every stored product, ordered by name."""
        products = self._repo.list()
        logger.debug("product.listed", count=len(products))
        return products

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            logger.warning("product.not_found", product_id=str(id))
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=str(id))
        return product

    def list_products_by_max_price(self, max_price: Decimal) -> List[Product]:
        """Return products priced at or below ``max_price``.

        Raises:
            InvalidProductArgument: if ``max_price`` is missing or negative.
        """
        if max_price is None or max_price < 0:
            raise InvalidProductArgument("Maximum price must be a non-negative number.")
        logger.info("product.listed_by_max_price", max_price=str(max_price))
        return self._repo.list_by_max_price(max_price)

    def list_in_stock_products_by_category(self, category: str) -> List[Product]:
        """Return in-stock products of ``category`` (matched ignoring case).

        Raises:
            InvalidCategory: if ``category`` names no known category.
        """
        category_enum = ProductCategory.parse(category)
        logger.info("product.listed_by_category", category=category_enum.value)
        return self._repo.list_in_stock_by_category(category_enum)
