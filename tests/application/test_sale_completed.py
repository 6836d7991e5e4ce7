"""Tests for the confirmation sent after a completed sale commits."""

from decimal import Decimal
from uuid import uuid4

from pos.application.create_sale import CreateSaleHandler
from pos.application.dto import CreateSaleCommand, SaleItemSpec
from pos.application.event_publisher import EventPublisher
from pos.application.sale_completed import SaleCompletedSubscriber
from pos.domain.events import SaleCompleted
from pos.domain.model.customer import Customer
from pos.domain.model.product import Product
from tests.fakes import FakeNotificationSender, FakeUnitOfWork, InMemoryStore


def _setup(email="alice@example.com"):
    store = InMemoryStore()
    product = Product.create("Widget", "W-1", None, Decimal("10.00"), Decimal("4.00"), 10, uuid4())
    customer = Customer.create("Alice", email, None, None)
    store.seed(product, customer)
    sender = FakeNotificationSender()
    publisher = EventPublisher()
    publisher.subscribe(SaleCompleted, SaleCompletedSubscriber(lambda: FakeUnitOfWork(store), sender))
    return store, product, customer, sender, publisher


class TestSaleCompletedSubscriber:

    def test_confirmation_sent_after_checkout(self):
        store, product, customer, sender, publisher = _setup()

        sale_id = CreateSaleHandler(FakeUnitOfWork(store), publisher).handle(
            CreateSaleCommand(customer.id, "card", [SaleItemSpec(product.id, 2)])
        ).value

        assert sender.sent == [("alice@example.com", sale_id, Decimal("22.00"))]

    def test_no_confirmation_without_email(self):
        store, product, customer, sender, publisher = _setup(email=None)

        CreateSaleHandler(FakeUnitOfWork(store), publisher).handle(
            CreateSaleCommand(customer.id, "card", [SaleItemSpec(product.id, 1)])
        )

        assert sender.sent == []

    def test_no_confirmation_for_anonymous_sale(self):
        store, product, _, sender, publisher = _setup()

        CreateSaleHandler(FakeUnitOfWork(store), publisher).handle(
            CreateSaleCommand(None, "cash", [SaleItemSpec(product.id, 1)])
        )

        assert sender.sent == []

    def test_missing_sale_is_skipped(self):
        store = InMemoryStore()
        sender = FakeNotificationSender()
        subscriber = SaleCompletedSubscriber(lambda: FakeUnitOfWork(store), sender)

        subscriber.handle(SaleCompleted(uuid4()))

        assert sender.sent == []
