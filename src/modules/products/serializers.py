"""Product DRF serializers for API input/output.

The serializers operate at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Category, Product


class ProductSerializer(serializers.ModelSerializer):
    """Output serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "category", "created_at", "updated_at"]
        read_only_fields = fields


class ProductQuerySerializer(serializers.Serializer):
    """Validates the listing query string (``?category=FS``)."""

    category = serializers.ChoiceField(choices=Category.choices, required=False)


class WarehouseStockSerializer(serializers.Serializer):
    warehouse_id = serializers.IntegerField()
    total_quantity = serializers.IntegerField()


class ProductInWarehousesSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    warehouses = WarehouseStockSerializer(many=True)
