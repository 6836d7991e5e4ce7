"""SQLAlchemy-backed unit of work."""

from __future__ import annotations

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.exceptions import PersistenceError, PosError
from pos.domain.model.category import Category
from pos.domain.model.customer import Customer
from pos.domain.model.event_source import Aggregate
from pos.domain.model.product import Product
from pos.domain.model.sale import Sale
from pos.infrastructure.persistence.sql_category_repository import SqlCategoryRepository
from pos.infrastructure.persistence.sql_customer_repository import SqlCustomerRepository
from pos.infrastructure.persistence.sql_product_repository import SqlProductRepository
from pos.infrastructure.persistence.sql_repository import SqlRepository
from pos.infrastructure.persistence.sql_sale_repository import SqlSaleRepository
from pos.infrastructure.persistence.tables import metadata

# Parents before children so foreign keys hold at every statement
_WRITE_ORDER: tuple[type, ...] = (Category, Customer, Product, Sale)


class SqlUnitOfWork(AbstractUnitOfWork):

    def __init__(self, engine: Engine) -> None:
        super().__init__()
        self._engine = engine
        self.categories = SqlCategoryRepository(engine, self.tracker)
        self.customers = SqlCustomerRepository(engine, self.tracker)
        self.products = SqlProductRepository(engine, self.tracker)
        self.sales = SqlSaleRepository(engine, self.tracker)
        self._repositories: dict[type, SqlRepository] = {
            Category: self.categories,
            Customer: self.customers,
            Product: self.products,
            Sale: self.sales,
        }

    def _persist(self, aggregates: list[Aggregate]) -> None:
        ordered = sorted(aggregates, key=lambda a: _WRITE_ORDER.index(type(a)))
        on_commit = []
        try:
            with self._engine.begin() as conn:
                for aggregate in ordered:
                    committed = self._repositories[type(aggregate)].write(conn, aggregate)
                    if committed is not None:
                        on_commit.append(committed)
        except PosError:
            raise
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not save changes: {exc}") from exc

        for committed in on_commit:
            committed()


def create_schema(engine: Engine) -> None:
    """Create any missing tables.  Safe to call on an initialised database."""
    try:
        metadata.create_all(engine)
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Could not create schema: {exc}") from exc


def check_database(engine: Engine) -> None:
    """Round-trip a trivial query; raise PersistenceError if the store is unreachable."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Database unreachable: {exc}") from exc
