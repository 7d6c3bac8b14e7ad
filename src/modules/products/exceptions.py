"""Product domain exceptions.

Raised by the Service Layer; the project-wide DRF exception handler
turns them into 404 / 409 responses.
"""

from __future__ import annotations

from modules.core.exceptions import AlreadyExistsException, NotFoundException


class ProductNotFound(NotFoundException):
    """No product (or no stock of it) matches the given id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Produto {product_id} não encontrado.")
        self.product_id = product_id


class ProductAlreadyExists(AlreadyExistsException):
    """A product with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Produto '{name}' já cadastrado.")
        self.name = name
