"""In-memory fakes for testing.

The fake unit of work implements the same abstract interfaces as the
SQL one but keeps everything in dicts.  Loads and commits copy the
aggregates, so a test sees exactly what was committed and nothing that
was only mutated in memory.
"""

from __future__ import annotations

from copy import deepcopy
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pos.application.notifications import NotificationSender
from pos.application.unit_of_work import AbstractUnitOfWork, AggregateTracker
from pos.domain.events import DomainEvent
from pos.domain.model.category import Category
from pos.domain.model.customer import Customer
from pos.domain.model.event_source import Aggregate
from pos.domain.model.product import Product
from pos.domain.model.sale import Sale
from pos.domain.repository.category_repository import CategoryRepository
from pos.domain.repository.customer_repository import CustomerRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.sale_repository import SaleRepository


class InMemoryStore:
    """Committed state shared by every FakeUnitOfWork built on it."""

    def __init__(self) -> None:
        self.products: dict[UUID, Product] = {}
        self.categories: dict[UUID, Category] = {}
        self.customers: dict[UUID, Customer] = {}
        self.sales: dict[UUID, Sale] = {}
        self.fail_with: Exception | None = None
        self.commits = 0

    def table_for(self, aggregate: Aggregate) -> dict:
        return {
            Product: self.products,
            Category: self.categories,
            Customer: self.customers,
            Sale: self.sales,
        }[type(aggregate)]

    def seed(self, *aggregates: Aggregate) -> None:
        """Store aggregates as if already committed (their events are discarded)."""
        for aggregate in aggregates:
            aggregate.events.drain_events()
            self.table_for(aggregate)[aggregate.id] = deepcopy(aggregate)


class _FakeRepository:

    kind: type

    def __init__(self, rows: dict, tracker: AggregateTracker) -> None:
        self._rows = rows
        self._tracker = tracker

    def _load(self, stored):
        tracked = self._tracker.get(self.kind, stored.id)
        if tracked is not None:
            return tracked
        return self._tracker.track(deepcopy(stored))

    def _find(self, predicate, key=None) -> list:
        found = [self._load(a) for a in self._rows.values() if predicate(a)]
        if key is not None:
            found.sort(key=key)
        return found

    def get_by_id(self, aggregate_id: UUID):
        stored = self._rows.get(aggregate_id)
        return None if stored is None else self._load(stored)

    def add(self, aggregate) -> None:
        self._tracker.track(aggregate)

    def update(self, aggregate) -> None:
        self._tracker.track(aggregate)


class FakeProductRepository(_FakeRepository, ProductRepository):
    kind = Product

    def get_by_sku(self, sku: str) -> Product | None:
        found = self._find(lambda p: p.sku == sku)
        return found[0] if found else None

    def get_by_category_id(self, category_id: UUID) -> list[Product]:
        return self._find(lambda p: p.category_id == category_id, key=lambda p: p.name)

    def get_all_active(self) -> list[Product]:
        return self._find(lambda p: p.is_active, key=lambda p: p.name)


class FakeCategoryRepository(_FakeRepository, CategoryRepository):
    kind = Category

    def get_by_name(self, name: str) -> Category | None:
        found = self._find(lambda c: c.name == name)
        return found[0] if found else None

    def get_all(self) -> list[Category]:
        return self._find(lambda c: True, key=lambda c: c.name)

    def get_all_active(self) -> list[Category]:
        return self._find(lambda c: c.is_active, key=lambda c: c.name)


class FakeCustomerRepository(_FakeRepository, CustomerRepository):
    kind = Customer

    def get_by_email(self, email: str) -> Customer | None:
        found = self._find(lambda c: c.email == email)
        return found[0] if found else None

    def get_all_active(self) -> list[Customer]:
        return self._find(lambda c: c.is_active, key=lambda c: c.name)


class FakeSaleRepository(_FakeRepository, SaleRepository):
    kind = Sale

    def get_by_customer_id(self, customer_id: UUID) -> list[Sale]:
        return self._find(lambda s: s.customer_id == customer_id, key=lambda s: s.created_at)

    def get_by_date_range(self, start: datetime, end: datetime) -> list[Sale]:
        return self._find(lambda s: start <= s.created_at <= end, key=lambda s: s.created_at)


class FakeUnitOfWork(AbstractUnitOfWork):

    def __init__(self, store: InMemoryStore | None = None) -> None:
        super().__init__()
        self.store = store if store is not None else InMemoryStore()
        self.products = FakeProductRepository(self.store.products, self.tracker)
        self.categories = FakeCategoryRepository(self.store.categories, self.tracker)
        self.customers = FakeCustomerRepository(self.store.customers, self.tracker)
        self.sales = FakeSaleRepository(self.store.sales, self.tracker)
        self.committed = False

    def _persist(self, aggregates: list[Aggregate]) -> None:
        if self.store.fail_with is not None:
            raise self.store.fail_with
        for aggregate in aggregates:
            self.store.table_for(aggregate)[aggregate.id] = deepcopy(aggregate)
        self.store.commits += 1
        self.committed = True


class RecordingSubscriber:

    def __init__(self) -> None:
        self.received: list[DomainEvent] = []

    def handle(self, event: DomainEvent) -> None:
        self.received.append(event)


class FailingSubscriber:

    def handle(self, event: DomainEvent) -> None:
        raise RuntimeError("subscriber exploded")


class FakeNotificationSender(NotificationSender):

    def __init__(self) -> None:
        self.sent: list[tuple[str, UUID, Decimal]] = []

    def send_confirmation(self, to: str, sale_id: UUID, total_amount: Decimal) -> None:
        self.sent.append((to, sale_id, total_amount))
