"""CLI helpers for resolving the period a command applies to."""

from __future__ import annotations

import click

from faretrack.cli.error_handling import fail
from faretrack.domain.entities import Period
from faretrack.domain.period import PeriodService


def resolve_period_or_exit(
    ctx: click.Context, period_service: PeriodService, period_id: int | None
) -> Period:
    """Get the given period, or the active one when no ID is passed.

    Exits with a CLI error if there is no such period.
    """
    if period_id is not None:
        period = period_service.get_period(period_id)
        if period is None:
            fail(ctx, f"Period {period_id} not found")
        return period

    period = period_service.get_active_period()
    if period is None:
        fail(ctx, "No active period. Pass a period ID or run 'faretrack period start'.")
    return period
