"""Explicit success / failure values.

Aggregates and use-case handlers return a ``Result`` for every outcome
the business expects to happen (a duplicate SKU, a sale that is already
completed, not enough stock).  Exceptions are kept for faults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """A failure code (``"Product.NotFound"``) plus a human message."""

    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class Result(Generic[T]):
    """Either a success carrying an optional value, or a failure carrying an Error."""

    __slots__ = ("_value", "_error")

    def __init__(self, value: T | None, error: Error | None) -> None:
        self._value = value
        self._error = error

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def success(value: T | None = None) -> Result[T]:
        return Result(value, None)

    @staticmethod
    def failure(error: Error) -> Result[T]:
        return Result(None, error)

    # --- Accessors ------------------------------------------------------------

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Cannot read the value of a failed result ({self._error})")
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> Error:
        if self._error is None:
            raise ValueError("A successful result has no error")
        return self._error

    def __repr__(self) -> str:
        if self._error is None:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r})"
