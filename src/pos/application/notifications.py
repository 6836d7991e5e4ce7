"""Outbound notification contract used by the application layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from uuid import UUID


class NotificationSender(ABC):

    @abstractmethod
    def send_confirmation(self, to: str, sale_id: UUID, total_amount: Decimal) -> None:
        """Tell the customer at *to* that sale *sale_id* went through."""
