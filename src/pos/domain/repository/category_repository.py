"""Abstract repository for the Category aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from pos.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: UUID) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Category | None:
        """Return the category with this exact name, or None."""

    @abstractmethod
    def get_all(self) -> list[Category]:
        """Return every category, ordered by name."""

    @abstractmethod
    def get_all_active(self) -> list[Category]:
        """Return active categories, ordered by name."""

    @abstractmethod
    def add(self, category: Category) -> None:
        """Stage a new category for insertion."""

    @abstractmethod
    def update(self, category: Category) -> None:
        """Stage changes to an existing category."""
