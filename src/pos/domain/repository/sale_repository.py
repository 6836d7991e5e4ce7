"""Abstract repository for the Sale aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from pos.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def get_by_id(self, sale_id: UUID) -> Sale | None:
        """Return a sale with its items, or None if not found."""

    @abstractmethod
    def get_by_customer_id(self, customer_id: UUID) -> list[Sale]:
        """Return a customer's sales, oldest first."""

    @abstractmethod
    def get_by_date_range(self, start: datetime, end: datetime) -> list[Sale]:
        """Return sales created within [start, end], oldest first."""

    @abstractmethod
    def add(self, sale: Sale) -> None:
        """Stage a new sale for insertion."""

    @abstractmethod
    def update(self, sale: Sale) -> None:
        """Stage changes to an existing sale."""
