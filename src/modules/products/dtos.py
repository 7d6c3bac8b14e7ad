"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for product updates (name / category).
- ``ProductInWarehouses``: read model locating a product's stock.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.models import Category


def _normalise_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Name must not be empty.")
    return v.strip()


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: Category

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _normalise_name(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Fields left as ``None`` keep their current value.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    category: Category | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _normalise_name(v)


# ---------------------------------------------------------------------------
# Read models
# ---------------------------------------------------------------------------


class WarehouseStock(BaseModel):
    """Total quantity of one product held in one warehouse."""

    model_config = ConfigDict(frozen=True)

    warehouse_id: int
    total_quantity: int


class ProductInWarehouses(BaseModel):
    """A product and every warehouse that holds batches of it."""

    model_config = ConfigDict(frozen=True)

    product_id: int
    warehouses: List[WarehouseStock]
