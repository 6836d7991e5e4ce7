"""Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from pos.domain.model.event_source import EventSource


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Customer:
    """A buyer.  The email is optional but unique when present."""

    id: UUID
    name: str
    email: str | None
    phone: str | None
    address: str | None
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    events: EventSource = field(default_factory=EventSource, repr=False, compare=False)

    @staticmethod
    def create(
        name: str,
        email: str | None,
        phone: str | None,
        address: str | None,
    ) -> Customer:
        now = _utcnow()
        return Customer(
            id=uuid4(),
            name=name,
            email=email,
            phone=phone,
            address=address,
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        name: str,
        email: str | None,
        phone: str | None,
        address: str | None,
    ) -> None:
        self.name = name
        self.email = email
        self.phone = phone
        self.address = address
        self.updated_at = _utcnow()

    def activate(self) -> None:
        self.is_active = True
        self.updated_at = _utcnow()

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = _utcnow()
