"""Abstract repository for the Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from pos.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: UUID) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> Customer | None:
        """Return the customer registered with this email, or None."""

    @abstractmethod
    def get_all_active(self) -> list[Customer]:
        """Return active customers, ordered by name."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Stage a new customer for insertion."""

    @abstractmethod
    def update(self, customer: Customer) -> None:
        """Stage changes to an existing customer."""
