"""Sale aggregate, the core of the domain.

The Sale is an aggregate root that owns its line items.  Totals are
derived from the items and the discount on every read, so they can
never drift from the lines they summarise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from pos.domain.errors import SaleErrors
from pos.domain.events import SaleCancelled, SaleCompleted, SaleCreated
from pos.domain.model.event_source import EventSource
from pos.domain.result import Result

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
TAX_RATE = Decimal("0.10")
ZERO = Decimal("0")


class SaleStatus(Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


@dataclass
class SaleItem:
    """One line of a sale.

    ``product_name`` and ``unit_price`` are snapshots taken when the
    product was added; later catalog edits do not touch them.
    """

    id: UUID
    sale_id: UUID
    product_id: UUID
    product_name: str
    unit_price: Decimal  # locked at add time
    quantity: int

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity

    def increase_quantity(self, quantity: int) -> None:
        self.quantity += quantity


@dataclass
class Sale:
    """Aggregate root for point-of-sale transactions.

    Use ``Sale.create()`` for new sales.  The ``__init__`` is kept
    simple so the repository can reconstitute persisted sales.

    State machine::

        PENDING -> COMPLETED
                -> CANCELLED

    Both target states are terminal: once there, items, discount and
    status are frozen.
    """

    id: UUID
    customer_id: UUID | None
    payment_method: str
    items: list[SaleItem] = field(default_factory=list)
    discount_amount: Decimal = ZERO
    status: SaleStatus = SaleStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None
    events: EventSource = field(default_factory=EventSource, repr=False, compare=False)

    # --- Factory (used for NEW sales only) ------------------------------------

    @staticmethod
    def create(customer_id: UUID | None, payment_method: str) -> Sale:
        sale = Sale(id=uuid4(), customer_id=customer_id, payment_method=payment_method)
        sale.events.raise_event(SaleCreated(sale.id))
        return sale

    # --- Item mutations -------------------------------------------------------

    def add_item(
        self,
        product_id: UUID,
        product_name: str,
        unit_price: Decimal,
        quantity: int,
    ) -> Result[None]:
        """Add *quantity* units of a product.

        Adding a product that already has a line merges into that line
        instead of creating a duplicate.
        """
        if self.status != SaleStatus.PENDING:
            return Result.failure(SaleErrors.NOT_PENDING)
        if quantity <= 0:
            return Result.failure(SaleErrors.INVALID_QUANTITY)

        existing = self._find_item(product_id)
        if existing is not None:
            existing.increase_quantity(quantity)
        else:
            self.items.append(
                SaleItem(
                    id=uuid4(),
                    sale_id=self.id,
                    product_id=product_id,
                    product_name=product_name,
                    unit_price=unit_price,
                    quantity=quantity,
                )
            )
        return Result.success()

    def remove_item(self, product_id: UUID) -> Result[None]:
        if self.status != SaleStatus.PENDING:
            return Result.failure(SaleErrors.NOT_PENDING)

        item = self._find_item(product_id)
        if item is None:
            return Result.failure(SaleErrors.ITEM_NOT_FOUND)

        self.items.remove(item)
        return Result.success()

    def apply_discount(self, amount: Decimal) -> Result[None]:
        """Set the discount.  It must be non-negative and not exceed the current subtotal."""
        if self.status != SaleStatus.PENDING:
            return Result.failure(SaleErrors.NOT_PENDING)
        if amount < ZERO or amount > self.subtotal:
            return Result.failure(SaleErrors.INVALID_DISCOUNT)

        self.discount_amount = amount
        return Result.success()

    # --- State transitions ----------------------------------------------------

    def complete(self) -> Result[None]:
        """Transition PENDING -> COMPLETED.

        Stock consumption is coordinated by the application handler
        before calling this.
        """
        if self.status != SaleStatus.PENDING:
            return Result.failure(SaleErrors.CANNOT_COMPLETE)
        if not self.items:
            return Result.failure(SaleErrors.NO_ITEMS)

        self.status = SaleStatus.COMPLETED
        self.completed_at = datetime.now(timezone.utc)
        self.events.raise_event(SaleCompleted(self.id))
        return Result.success()

    def cancel(self) -> Result[None]:
        """Transition PENDING -> CANCELLED."""
        if self.status != SaleStatus.PENDING:
            return Result.failure(SaleErrors.CANNOT_CANCEL)

        self.status = SaleStatus.CANCELLED
        self.events.raise_event(SaleCancelled(self.id))
        return Result.success()

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Decimal:
        return sum((item.total_price for item in self.items), ZERO)

    @property
    def tax_amount(self) -> Decimal:
        return self.subtotal * TAX_RATE

    @property
    def total_amount(self) -> Decimal:
        return self.subtotal + self.tax_amount - self.discount_amount

    @property
    def is_pending(self) -> bool:
        return self.status == SaleStatus.PENDING

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_id: UUID) -> SaleItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
