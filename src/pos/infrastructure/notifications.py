"""Notification sender that writes confirmations to the log.

Stands in for a mail gateway: it formats the message a customer would
receive and logs it instead of delivering it.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

import structlog

from pos.application.notifications import NotificationSender

logger = structlog.get_logger(__name__)


def confirmation_subject(sale_id: UUID) -> str:
    return f"Sale Confirmation - Order #{str(sale_id)[:8].upper()}"


def confirmation_body(sale_id: UUID, total_amount: Decimal) -> str:
    return (
        "Thank you for your purchase!\n\n"
        f"Order ID: {sale_id}\n"
        f"Total Amount: {total_amount:.2f}\n\n"
        "We appreciate your business."
    )


class LoggingNotificationSender(NotificationSender):

    def send_confirmation(self, to: str, sale_id: UUID, total_amount: Decimal) -> None:
        logger.info(
            "email_sent",
            to=to,
            subject=confirmation_subject(sale_id),
            body=confirmation_body(sale_id, total_amount),
        )
