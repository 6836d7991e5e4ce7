"""Unit of work: the transactional writer.

One unit of work serves one use-case call.  Repositories register every
aggregate they add or load with its tracker; ``commit()`` then turns
"persist the changes" and "publish what they raised" into a single step
for the caller:

  1. drain the pending events of every tracked aggregate, in the order
     the aggregates were first touched;
  2. persist all tracked changes in one store transaction;
  3. only once that succeeded, publish the drained events in order.

If step 2 fails nothing is published, and because the events were
already drained a retry with the same instances cannot publish them
twice.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar
from uuid import UUID

import structlog

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.event_publisher import EventPublisher
from pos.domain.events import DomainEvent
from pos.domain.model.event_source import Aggregate
from pos.domain.repository.category_repository import CategoryRepository
from pos.domain.repository.customer_repository import CustomerRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.sale_repository import SaleRepository

logger = structlog.get_logger(__name__)

A = TypeVar("A", bound=Aggregate)


class AggregateTracker:
    """Identity map of the aggregates touched in one unit of work.

    Iteration follows the order in which aggregates were first tracked.
    """

    def __init__(self) -> None:
        self._aggregates: dict[tuple[type, UUID], Aggregate] = {}

    def track(self, aggregate: A) -> A:
        """Register *aggregate*; if an instance with the same identity is
        already tracked, that instance wins and is returned."""
        key = (type(aggregate), aggregate.id)
        return self._aggregates.setdefault(key, aggregate)  # type: ignore[return-value]

    def get(self, kind: type[A], aggregate_id: UUID) -> A | None:
        return self._aggregates.get((kind, aggregate_id))  # type: ignore[return-value]

    def find(self, kind: type[A]) -> list[A]:
        return [a for (k, _), a in self._aggregates.items() if k is kind]  # type: ignore[misc]

    def __iter__(self):
        return iter(list(self._aggregates.values()))

    def __len__(self) -> int:
        return len(self._aggregates)


class AbstractUnitOfWork(ABC):
    """Owns the repositories of one request and commits their changes."""

    products: ProductRepository
    categories: CategoryRepository
    customers: CustomerRepository
    sales: SaleRepository

    def __init__(self) -> None:
        self.tracker = AggregateTracker()

    def commit(
        self,
        publisher: EventPublisher | None = None,
        cancellation: CancellationToken | None = None,
    ) -> list[DomainEvent]:
        """Persist every tracked aggregate, then publish the events they raised.

        Returns the events that were published (or would have been, when
        no publisher is given).  Store faults propagate unchanged.
        """
        raise_if_cancelled(cancellation)

        aggregates = list(self.tracker)
        events: list[DomainEvent] = []
        for aggregate in aggregates:
            events.extend(aggregate.events.drain_events())

        self._persist(aggregates)
        logger.info(
            "unit_of_work_committed",
            aggregates=len(aggregates),
            events=len(events),
        )

        if publisher is not None and events:
            publisher.publish(events)
        return events

    @abstractmethod
    def _persist(self, aggregates: list[Aggregate]) -> None:
        """Write all changes atomically, or raise and write nothing."""
