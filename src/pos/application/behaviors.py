"""Pipeline behaviors wrapped around every use-case handler.

A behavior exposes the same ``handle(request, cancellation)`` shape as
the handler it wraps, so they stack:
``LoggingBehavior(ValidationBehavior(handler, validator))``.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

import structlog

from pos.application.cancellation import CancellationToken
from pos.application.validation import Validator
from pos.domain.errors import validation_failed
from pos.domain.result import Result

logger = structlog.get_logger(__name__)

R = TypeVar("R")
T = TypeVar("T")


class Handler(Protocol[R, T]):

    def handle(self, request: R, cancellation: CancellationToken | None = None) -> Result[T]: ...


class ValidationBehavior(Generic[R, T]):
    """Rejects malformed requests with ``Validation.Failed`` before the handler runs."""

    def __init__(self, inner: Handler[R, T], validator: Validator[R]) -> None:
        self._inner = inner
        self._validator = validator

    def handle(self, request: R, cancellation: CancellationToken | None = None) -> Result[T]:
        violations = self._validator.validate(request)
        if violations:
            return Result.failure(validation_failed(violations))
        return self._inner.handle(request, cancellation)


class LoggingBehavior(Generic[R, T]):
    """Logs the start and outcome of every request.

    Failures that are business outcomes log as warnings; exceptions log
    with their traceback and are re-raised untouched.
    """

    def __init__(self, inner: Handler[R, T]) -> None:
        self._inner = inner

    def handle(self, request: R, cancellation: CancellationToken | None = None) -> Result[T]:
        log = logger.bind(request=type(request).__name__)
        log.info("request_started")
        try:
            result = self._inner.handle(request, cancellation)
        except Exception:
            log.exception("request_raised")
            raise

        if result.is_success:
            log.info("request_succeeded")
        else:
            log.warning("request_failed", error_code=result.error.code, error=result.error.message)
        return result


def pipeline(handler: Any, validator: Validator[Any] | None = None) -> LoggingBehavior[Any, Any]:
    """Wrap *handler* in the standard behaviors."""
    if validator is not None:
        handler = ValidationBehavior(handler, validator)
    return LoggingBehavior(handler)
