"""Django ORM implementation of the Product repository.

Look-ups follow the Null Object pattern: a missing row yields ``None``
and the Service Layer decides how to report it.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError):
            return None

    def find_all(self) -> List[Product]:
        return list(Product.objects.all())

    def find_all_by_category(self, category: str) -> List[Product]:
        return list(Product.objects.filter(category=category))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id, name=entity.name)
        return entity

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        product_id = entity.id
        entity.delete()
        logger.info("product.removed", product_id=product_id)
