"""Category aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from pos.domain.model.event_source import EventSource


@dataclass
class Category:
    """Groups products in the catalog.  Names are unique (checked by the caller)."""

    id: UUID
    name: str
    description: str | None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    events: EventSource = field(default_factory=EventSource, repr=False, compare=False)

    @staticmethod
    def create(name: str, description: str | None) -> Category:
        return Category(id=uuid4(), name=name, description=description)

    def update(self, name: str, description: str | None) -> None:
        self.name = name
        self.description = description

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False
