"""Event subscriber: send a confirmation once a completed sale is committed.

Runs after the publishing unit of work has committed, so it opens a
fresh unit of work of its own to read the sale and its customer.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from pos.application.notifications import NotificationSender
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.events import SaleCompleted

logger = structlog.get_logger(__name__)


class SaleCompletedSubscriber:

    def __init__(
        self,
        uow_factory: Callable[[], AbstractUnitOfWork],
        sender: NotificationSender,
    ) -> None:
        self._uow_factory = uow_factory
        self._sender = sender

    def handle(self, event: SaleCompleted) -> None:
        log = logger.bind(sale_id=str(event.sale_id))
        log.info("sale_completed_received")

        uow = self._uow_factory()
        sale = uow.sales.get_by_id(event.sale_id)
        if sale is None:
            log.warning("sale_completed_sale_missing")
            return

        if sale.customer_id is None:
            return

        customer = uow.customers.get_by_id(sale.customer_id)
        if customer is None or not customer.email:
            return

        self._sender.send_confirmation(customer.email, sale.id, sale.total_amount)
        log.info("sale_confirmation_sent", email=customer.email)
