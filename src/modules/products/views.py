"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes. Anything else propagates.

- ``ProductNotFound`` -> 404
- ``InvalidProductArgument`` / DTO validation errors -> 400
- ``ProductAlreadyExists`` -> 409
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import CreateProductDTO, MaxPriceQueryDTO, UpdateProductDTO
from modules.products.exceptions import (
    InvalidProductArgument,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


def _detail(message: str, status_code: int) -> Response:
    return Response({"detail": message}, status=status_code)


def _not_found() -> Response:
    return _detail("Product not found.", status.HTTP_404_NOT_FOUND)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations and catalog queries.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        if pk is None:
            return _not_found()
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return _not_found()
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        data = request.data
        if not isinstance(data, Mapping):
            return _detail(
                "Product payload must be a JSON object.",
                status.HTTP_400_BAD_REQUEST,
            )

        try:
            dto = CreateProductDTO(
                name=data.get("name"),
                description=data.get("description"),
                price=data.get("price"),
                in_stock=data.get("inStock") or False,
                category=data.get("category"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return _detail(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists as exc:
            return _detail(str(exc), status.HTTP_409_CONFLICT)

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}

        Fields left out (or sent as ``null``) keep their stored value,
        except ``inStock`` which is always applied and defaults to false.
        """
        data = request.data
        if not isinstance(data, Mapping):
            return _detail(
                "Product payload must be a JSON object.",
                status.HTTP_400_BAD_REQUEST,
            )

        try:
            dto = UpdateProductDTO(
                name=data.get("name"),
                description=data.get("description"),
                price=data.get("price"),
                in_stock=data.get("inStock") or False,
                category=data.get("category"),
                transient_field=data.get("transientField"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return _detail(str(exc), status.HTTP_400_BAD_REQUEST)

        if pk is None:
            return _not_found()
        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound:
            return _not_found()
        except InvalidProductArgument as exc:
            return _detail(str(exc), status.HTTP_400_BAD_REQUEST)
        except ProductAlreadyExists as exc:
            return _detail(str(exc), status.HTTP_409_CONFLICT)

        out = ProductSerializer(product)
        return Response(out.data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}"""
        if pk is None:
            return _not_found()
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Catalog queries
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"], url_path="price")
    def by_max_price(self, request: Request) -> Response:
        """GET /api/v1/products/price?max=<decimal>"""
        try:
            query = MaxPriceQueryDTO(max_price=request.query_params.get("max"))
        except (PydanticValidationError, ValueError) as exc:
            return _detail(str(exc), status.HTTP_400_BAD_REQUEST)

        try:
            products = self._service.list_products_by_max_price(query.max_price)
        except InvalidProductArgument as exc:
            return _detail(str(exc), status.HTTP_400_BAD_REQUEST)
        return Response(ProductSerializer(products, many=True).data)

    @action(
        detail=False,
        methods=["get"],
        url_path=r"category/(?P<category>[^/.]+)",
    )
    def in_stock_by_category(
        self, request: Request, category: str | None = None
    ) -> Response:
        """GET /api/v1/products/category/{category}"""
        try:
            products = self._service.list_in_stock_products_by_category(category)
        except InvalidProductArgument as exc:
            return _detail(str(exc), status.HTTP_400_BAD_REQUEST)
        return Response(ProductSerializer(products, many=True).data)
