"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository`` and
``IBatchRepository``.

Business rules enforced here:
- Product names are unique; the store reports duplicates.
- Update and delete require the product to exist; nothing is written
  otherwise.
- Locating a product with no stored batches is a not-found error, not
  an empty result.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Dict, List

import structlog
from django.db import IntegrityError

from modules.products.dtos import ProductInWarehouses, WarehouseStock
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.batches.repositories.interfaces import IBatchRepository
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives both repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        batch_repository: IBatchRepository,
    ) -> None:
        self._repo = repository
        self._batch_repo = batch_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Persist a new product.

        Raises:
            ProductAlreadyExists: if the store rejects the name as duplicate.
        """
        log = logger.bind(name=dto.name)
        product = Product(name=dto.name, category=dto.category)
        try:
            product = self._repo.save(product)
        except IntegrityError:
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists(dto.name) from None
        log.info("product.created", product_id=product.id)
        return product

    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Apply the supplied name / category onto an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductAlreadyExists: if the new name belongs to another product.
        """
        product = self.find_by_id(id)
        log = logger.bind(product_id=product.id)

        for field in ("name", "category"):
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)

        try:
            product = self._repo.save(product)
        except IntegrityError:
            log.warning("product.duplicate_name", name=product.name)
            raise ProductAlreadyExists(product.name) from None
        log.info("product.updated")
        return product

    def delete(self, id: int) -> None:
        """Remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.find_by_id(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.find_by_id(id)
        if product is None:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product

    def list_products(self) -> List[Product]:
        """Return every product, ordered by id."""
        return self._repo.find_all()

    def find_all_by_category(self, category: str) -> List[Product]:
        """Return the products of ``category``; may be empty."""
        return self._repo.find_all_by_category(category)

    def find_product_in_warehouse(self, product_id: int) -> ProductInWarehouses:
        """Sum the product's batch quantities per warehouse.

        Raises:
            ProductNotFound: if no batch of the product is stored anywhere.
        """
        batches = self._batch_repo.find_all_by_product_id(product_id)
        if not batches:
            logger.info("product.not_found", product_id=product_id)
            raise ProductNotFound(product_id)

        totals: Dict[int, int] = defaultdict(int)
        for batch in batches:
            totals[batch.warehouse_id] += batch.product_quantity

        logger.info(
            "product.located",
            product_id=product_id,
            warehouses=len(totals),
        )
        return ProductInWarehouses(
            product_id=product_id,
            warehouses=[
                WarehouseStock(warehouse_id=warehouse_id, total_quantity=quantity)
                for warehouse_id, quantity in sorted(totals.items())
            ],
        )
