"""Batch model: a quantity of one product stored in one section.

Business rules implemented:
- A batch may only be stored in a section of the product's category.
- Quantity cannot be negative; price must be greater than zero.
- Due date cannot precede the manufacturing date.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.products.models import Product
from modules.warehouses.models import Section


class Batch(BaseModel):
    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="batches",
    )
    section = models.ForeignKey(
        Section,
        on_delete=models.PROTECT,
        related_name="batches",
    )
    product_quantity = models.PositiveIntegerField(default=0)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    manufacturing_datetime = models.DateTimeField()
    due_date = models.DateField()

    class Meta:
        db_table = "batches"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["product", "section"], name="batches_product_section_idx"),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        errors = {}
        if (
            self.product_id is not None
            and self.section_id is not None
            and self.product.category != self.section.category
        ):
            errors["section"] = "Section category does not match the product category."
        if (
            self.due_date is not None
            and self.manufacturing_datetime is not None
            and self.due_date < self.manufacturing_datetime.date()
        ):
            errors["due_date"] = "Due date cannot precede the manufacturing date."
        if errors:
            raise ValidationError(errors)

    @property
    def warehouse_id(self) -> int:
        return self.section.warehouse_id

    def __str__(self) -> str:
        return f"Batch {self.id} - product {self.product_id} x{self.product_quantity}"
