"""Warehouses and the category-specific sections batches are stored in."""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.products.models import Category


class Warehouse(BaseModel):
    name = models.CharField(max_length=255, unique=True)
    location = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "warehouses"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Section(BaseModel):
    """A storage area of a warehouse dedicated to one product category."""

    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.CASCADE,
        related_name="sections",
    )
    category = models.CharField(max_length=2, choices=Category.choices)
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        db_table = "sections"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.warehouse_id}/{self.category}"
