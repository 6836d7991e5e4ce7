"""In-process publisher for domain events.

The unit of work hands drained events to a publisher only after the
store transaction has committed.  Subscribers therefore run outside
that transaction, and a subscriber that blows up cannot undo it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

import structlog

from pos.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class EventSubscriber(Protocol):

    def handle(self, event: DomainEvent) -> None: ...


class EventPublisher:
    """Routes each event to the subscribers registered for its type.

    A subscriber registered for a base class also receives subclasses,
    so subscribing to ``DomainEvent`` observes everything.
    """

    def __init__(self) -> None:
        self._subscriptions: list[tuple[type[DomainEvent], EventSubscriber]] = []

    def subscribe(self, event_type: type[DomainEvent], subscriber: EventSubscriber) -> None:
        self._subscriptions.append((event_type, subscriber))

    def subscribers_for(self, event: DomainEvent) -> list[EventSubscriber]:
        return [sub for event_type, sub in self._subscriptions if isinstance(event, event_type)]

    def publish(self, events: Iterable[DomainEvent]) -> None:
        """Deliver *events* in order.

        Subscriber faults are logged and skipped: the data they react to
        is already committed.
        """
        for event in events:
            for subscriber in self.subscribers_for(event):
                try:
                    subscriber.handle(event)
                except Exception:
                    logger.exception(
                        "event_subscriber_failed",
                        event_type=type(event).__name__,
                        subscriber=type(subscriber).__name__,
                    )
