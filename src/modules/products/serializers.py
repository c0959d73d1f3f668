"""Product DRF serializer for API output.

The serializer operates at the Interface layer (API Views) and renders the
camelCase JSON shape of a product.  Input is validated by the Pydantic
DTOs from ``dtos.py`` before it reaches the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    inStock = serializers.BooleanField(source="in_stock")
    createdDate = serializers.DateTimeField(source="created_at", read_only=True)
    updatedDate = serializers.DateTimeField(source="updated_at", read_only=True)
    transientField = serializers.CharField(
        source="transient_field",
        read_only=True,
        allow_null=True,
    )

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "inStock",
            "createdDate",
            "updatedDate",
            "category",
            "transientField",
        ]
        read_only_fields = ["id"]
