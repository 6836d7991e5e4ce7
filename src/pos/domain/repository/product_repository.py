"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Repositories only stage changes: ``add`` and
``update`` hand the aggregate to the unit of work, which writes
everything in one transaction on commit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from pos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return the product with this exact (case-sensitive) SKU, or None."""

    @abstractmethod
    def get_by_category_id(self, category_id: UUID) -> list[Product]:
        """Return every product in a category, ordered by name."""

    @abstractmethod
    def get_all_active(self) -> list[Product]:
        """Return active products, ordered by name."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Stage a new product for insertion."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Stage changes to an existing product."""
