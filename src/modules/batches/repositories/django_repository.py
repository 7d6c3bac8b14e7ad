"""Django ORM implementation of the Batch repository."""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.batches.models import Batch
from modules.batches.repositories.interfaces import IBatchRepository

logger = structlog.get_logger(__name__)


class BatchDjangoRepository(IBatchRepository):
    """Concrete Batch repository backed by Django ORM.

    Sections are joined eagerly so callers can read
    ``batch.section.warehouse_id`` without one query per batch.
    """

    def _queryset(self):
        return Batch.objects.select_related("section")

    def find_by_id(self, id: int) -> Optional[Batch]:
        try:
            return self._queryset().filter(id=id).first()
        except (ValueError, TypeError):
            return None

    def find_all_by_product_id(self, product_id: int) -> List[Batch]:
        try:
            return list(self._queryset().filter(product_id=product_id))
        except (ValueError, TypeError):
            return []

    @transaction.atomic
    def save(self, entity: Batch) -> Batch:
        """Validate and persist a batch."""
        entity.full_clean()
        entity.save()
        logger.info(
            "batch.saved",
            batch_id=entity.id,
            product_id=entity.product_id,
            section_id=entity.section_id,
        )
        return entity

    @transaction.atomic
    def delete(self, entity: Batch) -> None:
        batch_id = entity.id
        entity.delete()
        logger.info("batch.removed", batch_id=batch_id)
