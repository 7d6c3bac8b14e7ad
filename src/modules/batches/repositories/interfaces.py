"""Batch repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.batches.models import Batch


class IBatchRepository(IRepository["Batch"]):
    """Repository contract for stored batches."""

    @abstractmethod
    def find_all_by_product_id(self, product_id: int) -> List[Batch]:
        """Return every batch of the product (empty list, never an error)."""
