"""Pending-event buffer shared by every aggregate.

Aggregates do not inherit event handling.  Each one owns an
``EventSource`` as a plain dataclass field and is recognised by the
unit of work through the ``Aggregate`` protocol.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from pos.domain.events import DomainEvent


class EventSource:
    """Append-only queue of events raised by one aggregate instance.

    Not thread-safe: an aggregate belongs to exactly one unit of work.
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: list[DomainEvent] = []

    def raise_event(self, event: DomainEvent) -> None:
        self._queue.append(event)

    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Snapshot of the queue; the queue itself is left untouched."""
        return tuple(self._queue)

    def drain_events(self) -> list[DomainEvent]:
        """Hand the queued events to the caller and leave the queue empty."""
        drained, self._queue = self._queue, []
        return drained

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventSource(pending={len(self._queue)})"


class Aggregate(Protocol):
    """Anything the unit of work can track: an identity plus an event source."""

    id: UUID
    events: EventSource
