"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import click

from pos.domain.exceptions import PosError


class DecimalParamType(click.ParamType):
    """Exact decimal amounts (prices, discounts)."""

    name = "decimal"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            return Decimal(str(value))
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid amount", param, ctx)


DECIMAL = DecimalParamType()


def execute(handler: Any, request: Any) -> Any:
    """Run a use case and return its value.

    A failed result or a fault becomes a ClickException, so the command
    exits non-zero with the message on stderr.
    """
    try:
        result = handler.handle(request)
    except PosError as exc:
        raise click.ClickException(str(exc))

    if result.is_failure:
        raise click.ClickException(str(result.error))
    return result.value
