"""Tests for the logging notification sender."""

from decimal import Decimal
from uuid import UUID

from pos.infrastructure.notifications import (
    LoggingNotificationSender,
    confirmation_body,
    confirmation_subject,
)

SALE_ID = UUID("3f2a9c1e-0000-4000-8000-000000000000")


class TestConfirmation:

    def test_subject_uses_short_upper_case_id(self):
        assert confirmation_subject(SALE_ID) == "Sale Confirmation - Order #3F2A9C1E"

    def test_body_mentions_order_and_total(self):
        body = confirmation_body(SALE_ID, Decimal("22.0000"))
        assert str(SALE_ID) in body
        assert "Total Amount: 22.00" in body

    def test_send_does_not_raise(self):
        LoggingNotificationSender().send_confirmation("alice@example.com", SALE_ID, Decimal("1"))
