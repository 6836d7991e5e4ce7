"""Domain events.

Events are immutable facts named in the past tense.  Each one carries
only the identifier of the aggregate that raised it; subscribers load
whatever else they need.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


class DomainEvent:
    """Base class for every domain event."""


@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    product_id: UUID


@dataclass(frozen=True)
class SaleCreated(DomainEvent):
    sale_id: UUID


@dataclass(frozen=True)
class SaleCompleted(DomainEvent):
    sale_id: UUID


@dataclass(frozen=True)
class SaleCancelled(DomainEvent):
    sale_id: UUID
