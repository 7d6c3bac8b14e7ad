"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: validation, name trimming, category coercion, immutability.
- UpdateProductDTO: optional fields.
- ProductInWarehouses: read model shape.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.products.dtos import (
    CreateProductDTO,
    ProductInWarehouses,
    UpdateProductDTO,
    WarehouseStock,
)
from modules.products.models import Category

pytestmark = pytest.mark.unit


class TestCreateProductDTO:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(name="Alface", category=Category.FRESH)
        assert dto.name == "Alface"
        assert dto.category == Category.FRESH

    def test_category_code_is_coerced(self):
        dto = CreateProductDTO(name="Sorvete", category="FF")
        assert dto.category is Category.FROZEN

    def test_name_is_trimmed(self):
        dto = CreateProductDTO(name="  Queijo  ", category="RF")
        assert dto.name == "Queijo"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateProductDTO(name="   ", category="FS")

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Alface", category="XX")

    def test_missing_category_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Alface")

    def test_is_frozen(self):
        dto = CreateProductDTO(name="Alface", category="FS")
        with pytest.raises(ValidationError):
            dto.name = "Rúcula"


class TestUpdateProductDTO:
    def test_all_fields_optional(self):
        dto = UpdateProductDTO()
        assert dto.name is None
        assert dto.category is None

    def test_partial_payload(self):
        dto = UpdateProductDTO(category="RF")
        assert dto.name is None
        assert dto.category is Category.REFRIGERATED

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="")


class TestProductInWarehouses:
    def test_dump(self):
        located = ProductInWarehouses(
            product_id=1,
            warehouses=[WarehouseStock(warehouse_id=3, total_quantity=40)],
        )
        assert located.model_dump() == {
            "product_id": 1,
            "warehouses": [{"warehouse_id": 3, "total_quantity": 40}],
        }
