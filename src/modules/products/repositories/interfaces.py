"""Product repository interface.

Extends ``IRepository[Product]`` with the category look-up used by the
catalogue listing.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    ``save`` lets the backend's uniqueness error (``IntegrityError``)
    propagate on a duplicate name.
    """

    @abstractmethod
    def find_all(self) -> List[Product]:
        """Return every product."""

    @abstractmethod
    def find_all_by_category(self, category: str) -> List[Product]:
        """Return every product of ``category`` (empty list when none)."""
