"""Statistics commands."""

import click

from faretrack.cli.error_handling import handle_domain_error
from faretrack.cli.period_resolution import resolve_period_or_exit
from faretrack.domain.entities import TRANSPORT_TYPE_INFO
from faretrack.domain.fares import calculate_refund_amount
from faretrack.domain.period import PeriodService
from faretrack.domain.stats import StatsService, amount_to_break_even


@click.group()
def stats_group():
    """Show pass savings statistics."""
    pass


@stats_group.command("period")
@click.argument("period_id", type=int, required=False)
@click.option("--all-modes", is_flag=True, help="Include transport types with no trips")
@click.pass_context
def period_stats(ctx, period_id: int | None, all_modes: bool) -> None:
    """Show statistics for a period (defaults to the active period)."""
    db = ctx.obj["db"]
    period = resolve_period_or_exit(ctx, PeriodService(db), period_id)

    try:
        stats = StatsService(db).get_period_stats(period.id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nPeriod {period.id}: {period.start_date} to {period.end_date} ({period.status.value})")
    click.echo("=" * 60)
    click.echo(f"  Ticket price:    NT${period.ticket_price:,}")
    click.echo(f"  Trip total:      NT${stats.total_amount:,} ({stats.trip_count} trips)")
    if stats.saved_amount >= 0:
        click.echo(f"  Saved:           NT${stats.saved_amount:,}")
    else:
        click.echo(f"  Not yet saved:   NT${-stats.saved_amount:,}")
    click.echo(f"  Days elapsed:    {stats.days_elapsed}")
    click.echo(f"  Days remaining:  {stats.days_remaining}")
    click.echo(f"  Daily average:   NT${stats.daily_average:,.1f}")

    click.echo("\nBy transport type:")
    click.echo("-" * 60)
    for transport_type, totals in stats.transport_breakdown.items():
        if totals.count == 0 and not all_modes:
            continue
        label = TRANSPORT_TYPE_INFO[transport_type].label
        click.echo(f"  {label:<12} {totals.count:4d} trips  NT${totals.amount:>7,}")


@stats_group.command("global")
@click.pass_context
def global_stats(ctx) -> None:
    """Show totals across every period."""
    db = ctx.obj["db"]
    stats = StatsService(db).get_global_stats()

    if stats.total_periods == 0:
        click.echo("No periods found.")
        return

    click.echo("\nAll periods:")
    click.echo("=" * 60)
    click.echo(f"  Periods:         {stats.total_periods}")
    click.echo(f"  Pass cost:       NT${stats.total_pass_cost:,}")
    click.echo(f"  Trip total:      NT${stats.total_trip_amount:,} ({stats.total_trip_count} trips)")
    click.echo(f"  Net savings:     NT${stats.total_saved_amount:,}")


@stats_group.command("breakeven")
@click.argument("period_id", type=int, required=False)
@click.pass_context
def breakeven(ctx, period_id: int | None) -> None:
    """Show how far a period is from paying for itself.

    Also estimates the refund for returning the pass today.
    """
    db = ctx.obj["db"]
    period = resolve_period_or_exit(ctx, PeriodService(db), period_id)

    try:
        stats = StatsService(db).get_period_stats(period.id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    remaining = amount_to_break_even(stats.total_amount, period.ticket_price)
    if remaining == 0:
        click.echo(f"Period {period.id} has paid for itself (NT${stats.saved_amount:,} saved).")
    else:
        click.echo(f"Period {period.id} needs NT${remaining:,} more in trips to break even.")
        if stats.days_remaining > 0:
            click.echo(f"That is NT${remaining / stats.days_remaining:,.1f} per remaining day.")

    refund = calculate_refund_amount(stats.days_elapsed, period.ticket_price)
    if refund > 0:
        click.echo(f"Refund if returned now: NT${refund:,}")
    else:
        click.echo("Refund if returned now: none")


def register_commands(cli: click.Group) -> None:
    """Register statistics commands with main CLI."""
    cli.add_command(stats_group, name="stats")
