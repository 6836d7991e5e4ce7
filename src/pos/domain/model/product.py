"""Product aggregate.

Products live independently of sales.  A sale only keeps a name and
price snapshot, so catalog edits never rewrite sales history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from pos.domain.errors import ProductErrors
from pos.domain.events import ProductCreated
from pos.domain.model.event_source import EventSource
from pos.domain.result import Result


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A catalog item with a guarded stock counter.

    Invariant: ``stock_quantity >= 0``.  The counter must only be
    changed through ``adjust_stock()``; the plain ``__init__`` exists so
    repositories can reconstitute persisted products.
    """

    id: UUID
    name: str
    sku: str
    description: str | None
    price: Decimal
    cost: Decimal
    stock_quantity: int
    category_id: UUID
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    events: EventSource = field(default_factory=EventSource, repr=False, compare=False)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        sku: str,
        description: str | None,
        price: Decimal,
        cost: Decimal,
        stock_quantity: int,
        category_id: UUID,
    ) -> Product:
        """Create a new, active product.

        SKU uniqueness is checked by the application layer before this
        is called; the aggregate never queries the store.
        """
        now = _utcnow()
        product = Product(
            id=uuid4(),
            name=name,
            sku=sku,
            description=description,
            price=price,
            cost=cost,
            stock_quantity=stock_quantity,
            category_id=category_id,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        product.events.raise_event(ProductCreated(product.id))
        return product

    # --- Behaviour ------------------------------------------------------------

    def adjust_stock(self, delta: int) -> Result[None]:
        """Restock (positive delta) or consume (negative delta).

        A change that would take the counter below zero is rejected and
        leaves the product untouched.
        """
        new_quantity = self.stock_quantity + delta
        if new_quantity < 0:
            return Result.failure(ProductErrors.INSUFFICIENT_STOCK)

        self.stock_quantity = new_quantity
        self.updated_at = _utcnow()
        return Result.success()

    def update(
        self,
        name: str,
        description: str | None,
        price: Decimal,
        cost: Decimal,
        category_id: UUID,
    ) -> None:
        self.name = name
        self.description = description
        self.price = price
        self.cost = cost
        self.category_id = category_id
        self.updated_at = _utcnow()

    def activate(self) -> None:
        self.is_active = True
        self.updated_at = _utcnow()

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = _utcnow()
