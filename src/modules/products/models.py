"""Product model and the storage-category enumeration.

``name`` is the natural key: ``unique=True`` makes the database report a
duplicate as ``IntegrityError``, which the service layer translates into
``ProductAlreadyExists``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Category(models.TextChoices):
    """Storage class shared by products and warehouse sections."""

    FRESH = "FS", "Fresco"
    REFRIGERATED = "RF", "Refrigerado"
    FROZEN = "FF", "Congelado"


class Product(BaseModel):
    """Product catalogue entry."""

    name = models.CharField(max_length=255, unique=True)
    category = models.CharField(max_length=2, choices=Category.choices)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
