"""Shared machinery for the SQL-backed repositories.

Reads go straight to the database and register every aggregate they
reconstitute with the unit of work's tracker, remembering the row
version and a snapshot of its columns.  Writes happen only when the
unit of work commits, through ``write()``, inside the commit
transaction:

* staged with ``add()``           -> INSERT with version 1
* loaded and changed since read   -> UPDATE ... WHERE version = <read version>
* loaded and unchanged            -> skipped
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Connection, Engine, Select, Table, select, update

from pos.application.unit_of_work import AggregateTracker
from pos.domain.exceptions import ConcurrencyConflictError, PersistenceError
from pos.domain.model.event_source import Aggregate

A = TypeVar("A", bound=Aggregate)


class SqlRepository(ABC, Generic[A]):

    table: Table
    aggregate_type: type

    def __init__(self, engine: Engine, tracker: AggregateTracker) -> None:
        self._engine = engine
        self._tracker = tracker
        self._snapshots: dict[UUID, tuple[int, Any]] = {}
        self._new: set[UUID] = set()

    # --- Staging ----------------------------------------------------------------

    def add(self, aggregate: A) -> None:
        self._new.add(aggregate.id)
        self._tracker.track(aggregate)

    def update(self, aggregate: A) -> None:
        self._tracker.track(aggregate)

    # --- Loading ----------------------------------------------------------------

    def _fetch_one(self, stmt: Select) -> A | None:
        found = self._fetch_all(stmt.limit(1))
        return found[0] if found else None

    def _fetch_all(self, stmt: Select) -> list[A]:
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
            return [self._reconstitute(conn, row) for row in rows]

    def _reconstitute(self, conn: Connection, row: Mapping[str, Any]) -> A:
        tracked = self._tracker.get(self.aggregate_type, row["id"])
        if tracked is not None:
            return tracked
        aggregate = self._to_domain(conn, row)
        self._snapshots[aggregate.id] = (row["version"], self._snapshot(aggregate))
        return self._tracker.track(aggregate)

    # --- Writing ----------------------------------------------------------------

    def write(self, conn: Connection, aggregate: A) -> Callable[[], None] | None:
        """Write *aggregate* on *conn* if needed.

        Returns a callback that records the new version; the unit of
        work calls it only after the transaction committed.
        """
        snapshot = self._snapshot(aggregate)

        if aggregate.id in self._new:
            conn.execute(self.table.insert().values(**self._to_row(aggregate), version=1))
            version = 1
        else:
            known = self._snapshots.get(aggregate.id)
            if known is not None and known[1] == snapshot:
                return None
            expected = known[0] if known is not None else self._current_version(conn, aggregate.id)
            result = conn.execute(
                update(self.table)
                .where(self.table.c.id == aggregate.id, self.table.c.version == expected)
                .values(**self._to_row(aggregate), version=expected + 1)
            )
            if result.rowcount != 1:
                raise ConcurrencyConflictError(
                    f"{self.aggregate_type.__name__} {aggregate.id} was modified "
                    f"by another transaction (expected version {expected})"
                )
            version = expected + 1

        self._write_children(conn, aggregate)

        def committed() -> None:
            self._snapshots[aggregate.id] = (version, snapshot)
            self._new.discard(aggregate.id)

        return committed

    def _current_version(self, conn: Connection, aggregate_id: UUID) -> int:
        version = conn.execute(
            select(self.table.c.version).where(self.table.c.id == aggregate_id)
        ).scalar_one_or_none()
        if version is None:
            raise PersistenceError(
                f"Cannot update {self.aggregate_type.__name__} {aggregate_id}: it was never stored"
            )
        return version

    # --- Hooks ------------------------------------------------------------------

    def _snapshot(self, aggregate: A) -> Any:
        """Value compared after the fact to decide whether the row is dirty."""
        return self._to_row(aggregate)

    def _write_children(self, conn: Connection, aggregate: A) -> None:
        """Persist rows owned by the aggregate (none by default)."""

    @abstractmethod
    def _to_row(self, aggregate: A) -> dict[str, Any]:
        """Column values of the aggregate's own row, without ``version``."""

    @abstractmethod
    def _to_domain(self, conn: Connection, row: Mapping[str, Any]) -> A:
        """Rebuild an aggregate from its row."""
