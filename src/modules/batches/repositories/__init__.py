"""Batch repositories package."""

from modules.batches.repositories.django_repository import BatchDjangoRepository
from modules.batches.repositories.interfaces import IBatchRepository

__all__ = ["BatchDjangoRepository", "IBatchRepository"]
