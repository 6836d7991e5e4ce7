"""Cooperative cancellation signal passed into every use case."""

from __future__ import annotations

import threading

from pos.domain.exceptions import OperationCancelledError


class CancellationToken:
    """Set once by the caller, observed by handlers and the unit of work.

    Cancellation is honoured up to the moment a commit starts; after
    that the commit runs to completion or fails on its own.
    """

    def __init__(self) -> None:
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    def raise_if_cancelled(self) -> None:
        if self._cancelled.is_set():
            raise OperationCancelledError("Operation was cancelled")


def raise_if_cancelled(cancellation: CancellationToken | None) -> None:
    """Convenience for handlers whose token is optional."""
    if cancellation is not None:
        cancellation.raise_if_cancelled()
