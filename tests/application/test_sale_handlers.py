"""Integration tests for the sale use cases."""

from decimal import Decimal
from uuid import uuid4

import pytest

from pos.application.cancel_sale import CancelSaleHandler
from pos.application.complete_sale import CompleteSaleHandler
from pos.application.create_sale import CreateSaleHandler
from pos.application.dto import (
    AddSaleItemCommand,
    ApplyDiscountCommand,
    ByIdQuery,
    CreateSaleCommand,
    OpenSaleCommand,
    RemoveSaleItemCommand,
    SaleCommand,
    SaleItemSpec,
)
from pos.application.edit_sale import AddSaleItemHandler, ApplyDiscountHandler, RemoveSaleItemHandler
from pos.application.event_publisher import EventPublisher
from pos.application.get_sale import GetCustomerSalesHandler, GetSaleByIdHandler
from pos.application.open_sale import OpenSaleHandler
from pos.domain.errors import CustomerErrors, ProductErrors, SaleErrors
from pos.domain.events import SaleCompleted
from pos.domain.exceptions import PersistenceError
from pos.domain.model.customer import Customer
from pos.domain.model.product import Product
from pos.domain.model.sale import SaleStatus
from tests.fakes import FakeUnitOfWork, InMemoryStore, RecordingSubscriber


def _setup():
    store = InMemoryStore()
    widget = Product.create("Widget", "W-1", None, Decimal("10.00"), Decimal("4.00"), 10, uuid4())
    gadget = Product.create("Gadget", "G-1", None, Decimal("25.00"), Decimal("9.00"), 5, uuid4())
    customer = Customer.create("Alice", "alice@example.com", None, None)
    store.seed(widget, gadget, customer)
    publisher = EventPublisher()
    completed = RecordingSubscriber()
    publisher.subscribe(SaleCompleted, completed)
    return store, widget, gadget, customer, publisher, completed


def _open(store, customer_id=None):
    return OpenSaleHandler(FakeUnitOfWork(store)).handle(OpenSaleCommand(customer_id, "card")).value


def _add(store, sale_id, product_id, quantity):
    return AddSaleItemHandler(FakeUnitOfWork(store)).handle(
        AddSaleItemCommand(sale_id, product_id, quantity)
    )


class TestCreateSale:

    def test_checkout_consumes_stock_and_completes(self):
        store, widget, gadget, customer, publisher, completed = _setup()

        result = CreateSaleHandler(FakeUnitOfWork(store), publisher).handle(
            CreateSaleCommand(customer.id, "card", [SaleItemSpec(widget.id, 2), SaleItemSpec(gadget.id, 1)])
        )

        sale = store.sales[result.value]
        assert sale.status == SaleStatus.COMPLETED
        assert sale.subtotal == Decimal("45.00")
        assert sale.total_amount == Decimal("49.50")
        assert store.products[widget.id].stock_quantity == 8
        assert store.products[gadget.id].stock_quantity == 4
        assert completed.received == [SaleCompleted(sale.id)]

    def test_insufficient_stock_aborts_everything(self):
        store, widget, gadget, _, publisher, completed = _setup()

        result = CreateSaleHandler(FakeUnitOfWork(store), publisher).handle(
            CreateSaleCommand(None, "cash", [SaleItemSpec(widget.id, 2), SaleItemSpec(gadget.id, 6)])
        )

        assert result.error == ProductErrors.INSUFFICIENT_STOCK
        assert store.sales == {}
        assert store.products[widget.id].stock_quantity == 10
        assert completed.received == []

    def test_unknown_product(self):
        store, *_ = _setup()
        result = CreateSaleHandler(FakeUnitOfWork(store)).handle(
            CreateSaleCommand(None, "cash", [SaleItemSpec(uuid4(), 1)])
        )
        assert result.error == ProductErrors.NOT_FOUND

    def test_unknown_customer(self):
        store, widget, *_ = _setup()
        result = CreateSaleHandler(FakeUnitOfWork(store)).handle(
            CreateSaleCommand(uuid4(), "cash", [SaleItemSpec(widget.id, 1)])
        )
        assert result.error == CustomerErrors.NOT_FOUND

    def test_empty_checkout_fails_with_no_items(self):
        store, *_ = _setup()
        result = CreateSaleHandler(FakeUnitOfWork(store)).handle(CreateSaleCommand(None, "cash", []))
        assert result.error == SaleErrors.NO_ITEMS
        assert store.sales == {}

    def test_store_failure_publishes_nothing(self):
        store, widget, _, _, publisher, completed = _setup()
        store.fail_with = PersistenceError("down")

        with pytest.raises(PersistenceError):
            CreateSaleHandler(FakeUnitOfWork(store), publisher).handle(
                CreateSaleCommand(None, "cash", [SaleItemSpec(widget.id, 1)])
            )

        assert completed.received == []
        assert store.products[widget.id].stock_quantity == 10


class TestEditSale:

    def test_open_add_discount_complete(self):
        store, widget, _, _, publisher, completed = _setup()
        sale_id = _open(store)

        assert _add(store, sale_id, widget.id, 2).is_success
        ApplyDiscountHandler(FakeUnitOfWork(store)).handle(ApplyDiscountCommand(sale_id, Decimal("2.00")))
        result = CompleteSaleHandler(FakeUnitOfWork(store), publisher).handle(SaleCommand(sale_id))

        assert result.is_success
        sale = store.sales[sale_id]
        assert sale.subtotal == Decimal("20.00")
        assert sale.tax_amount == Decimal("2.00")
        assert sale.total_amount == Decimal("20.00")
        assert sale.status == SaleStatus.COMPLETED
        assert store.products[widget.id].stock_quantity == 8
        assert completed.received == [SaleCompleted(sale_id)]

    def test_open_for_unknown_customer(self):
        store, *_ = _setup()
        result = OpenSaleHandler(FakeUnitOfWork(store)).handle(OpenSaleCommand(uuid4(), "card"))
        assert result.error == CustomerErrors.NOT_FOUND

    def test_added_line_snapshots_product(self):
        store, widget, *_ = _setup()
        sale_id = _open(store)
        _add(store, sale_id, widget.id, 1)
        store.products[widget.id].price = Decimal("99.00")

        _add(store, sale_id, widget.id, 1)

        line = store.sales[sale_id].items[0]
        assert line.quantity == 2
        assert line.unit_price == Decimal("10.00")

    def test_editing_does_not_touch_stock(self):
        store, widget, *_ = _setup()
        sale_id = _open(store)
        _add(store, sale_id, widget.id, 3)
        assert store.products[widget.id].stock_quantity == 10

    def test_remove_item(self):
        store, widget, gadget, *_ = _setup()
        sale_id = _open(store)
        _add(store, sale_id, widget.id, 1)
        _add(store, sale_id, gadget.id, 1)

        result = RemoveSaleItemHandler(FakeUnitOfWork(store)).handle(RemoveSaleItemCommand(sale_id, widget.id))

        assert result.is_success
        assert [i.product_id for i in store.sales[sale_id].items] == [gadget.id]

    def test_remove_missing_item(self):
        store, widget, *_ = _setup()
        sale_id = _open(store)
        result = RemoveSaleItemHandler(FakeUnitOfWork(store)).handle(RemoveSaleItemCommand(sale_id, widget.id))
        assert result.error == SaleErrors.ITEM_NOT_FOUND

    def test_discount_above_subtotal(self):
        store, widget, *_ = _setup()
        sale_id = _open(store)
        _add(store, sale_id, widget.id, 1)
        result = ApplyDiscountHandler(FakeUnitOfWork(store)).handle(ApplyDiscountCommand(sale_id, Decimal("50")))
        assert result.error == SaleErrors.INVALID_DISCOUNT

    def test_add_to_unknown_sale(self):
        store, widget, *_ = _setup()
        assert _add(store, uuid4(), widget.id, 1).error == SaleErrors.NOT_FOUND

    def test_add_unknown_product(self):
        store, *_ = _setup()
        sale_id = _open(store)
        assert _add(store, sale_id, uuid4(), 1).error == ProductErrors.NOT_FOUND


class TestCompleteAndCancel:

    def test_complete_empty_sale(self):
        store, *_ = _setup()
        sale_id = _open(store)
        result = CompleteSaleHandler(FakeUnitOfWork(store)).handle(SaleCommand(sale_id))
        assert result.error == SaleErrors.NO_ITEMS
        assert store.sales[sale_id].status == SaleStatus.PENDING

    def test_complete_with_insufficient_stock_leaves_sale_pending(self):
        store, _, gadget, *_ = _setup()
        sale_id = _open(store)
        _add(store, sale_id, gadget.id, 6)

        result = CompleteSaleHandler(FakeUnitOfWork(store)).handle(SaleCommand(sale_id))

        assert result.error == ProductErrors.INSUFFICIENT_STOCK
        assert store.sales[sale_id].status == SaleStatus.PENDING
        assert store.products[gadget.id].stock_quantity == 5

    def test_completing_twice_consumes_stock_once(self):
        store, widget, _, _, publisher, completed = _setup()
        sale_id = _open(store)
        _add(store, sale_id, widget.id, 4)
        CompleteSaleHandler(FakeUnitOfWork(store), publisher).handle(SaleCommand(sale_id))

        again = CompleteSaleHandler(FakeUnitOfWork(store), publisher).handle(SaleCommand(sale_id))

        assert again.error == SaleErrors.CANNOT_COMPLETE
        assert store.products[widget.id].stock_quantity == 6
        assert len(completed.received) == 1

    def test_cancel_pending_sale(self):
        store, *_ = _setup()
        sale_id = _open(store)
        assert CancelSaleHandler(FakeUnitOfWork(store)).handle(SaleCommand(sale_id)).is_success
        assert store.sales[sale_id].status == SaleStatus.CANCELLED

    def test_cancel_completed_sale(self):
        store, widget, *_ = _setup()
        sale_id = _open(store)
        _add(store, sale_id, widget.id, 1)
        CompleteSaleHandler(FakeUnitOfWork(store)).handle(SaleCommand(sale_id))

        result = CancelSaleHandler(FakeUnitOfWork(store)).handle(SaleCommand(sale_id))

        assert result.error == SaleErrors.CANNOT_CANCEL

    def test_unknown_sale(self):
        result = CancelSaleHandler(FakeUnitOfWork()).handle(SaleCommand(uuid4()))
        assert result.error == SaleErrors.NOT_FOUND


class TestSaleQueries:

    def test_get_by_id_includes_items(self):
        store, widget, *_ = _setup()
        sale_id = _open(store)
        _add(store, sale_id, widget.id, 2)

        response = GetSaleByIdHandler(FakeUnitOfWork(store)).handle(ByIdQuery(sale_id)).value

        assert response.status == "Pending"
        assert response.total_amount == Decimal("22.00")
        assert (str(response.subtotal), str(response.tax_amount)) == ("20.00", "2.00")
        assert [(i.product_name, i.quantity, i.total_price) for i in response.items] == [
            ("Widget", 2, Decimal("20.00"))
        ]

    def test_customer_sales(self):
        store, widget, _, customer, *_ = _setup()
        first = _open(store, customer.id)
        second = _open(store, customer.id)
        _open(store)

        sales = GetCustomerSalesHandler(FakeUnitOfWork(store)).handle(ByIdQuery(customer.id)).value

        assert {s.id for s in sales} == {first, second}

    def test_customer_sales_for_unknown_customer(self):
        result = GetCustomerSalesHandler(FakeUnitOfWork()).handle(ByIdQuery(uuid4()))
        assert result.error == CustomerErrors.NOT_FOUND
