"""Unit tests for the Product aggregate."""

from decimal import Decimal
from uuid import uuid4

from pos.domain.errors import ProductErrors
from pos.domain.events import ProductCreated
from pos.domain.model.product import Product


def _product(stock: int = 10) -> Product:
    return Product.create(
        name="Widget",
        sku="ABC-1",
        description=None,
        price=Decimal("10.00"),
        cost=Decimal("4.00"),
        stock_quantity=stock,
        category_id=uuid4(),
    )


class TestProductCreate:

    def test_create_is_active_and_raises_product_created(self):
        product = _product()
        assert product.is_active
        assert product.events.pending_events() == (ProductCreated(product.id),)

    def test_timestamps_are_utc(self):
        product = _product()
        assert product.created_at.tzinfo is not None
        assert product.created_at == product.updated_at


class TestAdjustStock:

    def test_consume_and_restock(self):
        product = _product(stock=10)

        assert product.adjust_stock(-3).is_success
        assert product.stock_quantity == 7

        assert product.adjust_stock(5).is_success
        assert product.stock_quantity == 12

    def test_going_below_zero_is_rejected_and_leaves_stock(self):
        product = _product(stock=10)
        product.adjust_stock(-3)

        result = product.adjust_stock(-10)

        assert result.is_failure
        assert result.error == ProductErrors.INSUFFICIENT_STOCK
        assert product.stock_quantity == 7

    def test_consuming_exactly_all_stock_is_allowed(self):
        product = _product(stock=4)
        assert product.adjust_stock(-4).is_success
        assert product.stock_quantity == 0

    def test_stock_never_negative_over_a_sequence(self):
        product = _product(stock=5)
        for delta in [-2, -4, 3, -6, -1, 10, -11, -5]:
            product.adjust_stock(delta)
            assert product.stock_quantity >= 0

    def test_adjust_stock_raises_no_event(self):
        product = _product()
        product.events.drain_events()
        product.adjust_stock(-1)
        assert len(product.events) == 0


class TestProductUpdate:

    def test_update_changes_details(self):
        product = _product()
        new_category = uuid4()
        product.update("Gizmo", "shiny", Decimal("12.50"), Decimal("5.00"), new_category)
        assert product.name == "Gizmo"
        assert product.price == Decimal("12.50")
        assert product.category_id == new_category
        assert product.updated_at >= product.created_at

    def test_deactivate_and_activate(self):
        product = _product()
        product.deactivate()
        assert not product.is_active
        product.activate()
        assert product.is_active
