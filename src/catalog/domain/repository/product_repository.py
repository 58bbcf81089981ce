"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Iterable

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product (with its discounts) by ID, or None if not found."""

    @abstractmethod
    def get_by_ids(self, product_ids: Iterable[int]) -> list[Product]:
        """Return the products among ``product_ids`` that exist."""

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """Return True if any product has exactly this name."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, with discounts."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a new product, assigning its ID.

        Raises ProductNameConflictError if the name is already taken.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist changes to an existing product.

        Raises ProductNameConflictError if the name now collides with a
        different product.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product together with its discounts."""

    @abstractmethod
    def locked(self, product_id: int) -> AbstractContextManager[None]:
        """Hold the per-product lock for a read-check-write sequence.

        While held, no other ``locked`` block for the same product ID can
        run. Blocks for different products never wait on each other.
        """
