"""Pass period commands."""

import click

from faretrack.cli.error_handling import handle_domain_error
from faretrack.cli.period_resolution import resolve_period_or_exit
from faretrack.domain.entities import PeriodStatus
from faretrack.domain.period import PeriodService
from faretrack.utils.amount_parser import parse_amount
from faretrack.utils.date_parser import parse_date


@click.group()
def period_group():
    """Manage 30-day pass periods."""
    pass


@period_group.command("start")
@click.option("--date", "start_date", help="First day (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--price", help="Ticket price (defaults to the configured price, e.g. 1200)")
@click.pass_context
def start_period(ctx, start_date: str | None, price: str | None) -> None:
    """Start a new pass period.

    Only one period can be active at a time.

    Examples:
        faretrack period start
        faretrack period start --date 2025-03-01 --price 1200
    """
    db = ctx.obj["db"]
    service = PeriodService(db)

    first_day = None
    if start_date is not None:
        try:
            first_day = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    ticket_price = None
    if price is not None:
        try:
            ticket_price = parse_amount(price)
        except ValueError as e:
            click.echo(f"Error: Invalid price: {e}", err=True)
            ctx.exit(1)

    try:
        period_id = service.start_period(start_date=first_day, ticket_price=ticket_price)
    except ValueError as e:
        handle_domain_error(ctx, e)

    period = service.get_period(period_id)
    click.echo(
        f"Started period {period_id}: {period.start_date} to {period.end_date} "
        f"(ticket NT${period.ticket_price:,})"
    )


@period_group.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in PeriodStatus]),
    help="Only show periods with this status",
)
@click.pass_context
def list_periods(ctx, status: str | None) -> None:
    """List pass periods, newest first."""
    db = ctx.obj["db"]
    service = PeriodService(db)

    periods = service.list_periods(status=PeriodStatus(status) if status else None)
    if not periods:
        click.echo("No periods found.")
        return

    click.echo("\nPeriods:")
    click.echo("-" * 60)
    for p in periods:
        click.echo(
            f"ID: {p.id:3d} | {p.start_date} to {p.end_date} | "
            f"NT${p.ticket_price:>5,} | {p.status.value}"
        )


@period_group.command("show")
@click.argument("period_id", type=int, required=False)
@click.pass_context
def show_period(ctx, period_id: int | None) -> None:
    """Show a period (defaults to the active period)."""
    db = ctx.obj["db"]
    service = PeriodService(db)

    period = resolve_period_or_exit(ctx, service, period_id)
    trip_count = db.get_period_trip_count(period.id)

    click.echo(f"\nPeriod {period.id}")
    click.echo("-" * 40)
    click.echo(f"  Dates:  {period.start_date} to {period.end_date}")
    click.echo(f"  Ticket: NT${period.ticket_price:,}")
    click.echo(f"  Status: {period.status.value}")
    click.echo(f"  Trips:  {trip_count}")


@period_group.command("complete")
@click.argument("period_id", type=int)
@click.pass_context
def complete_period(ctx, period_id: int) -> None:
    """Mark a period as completed before its end date."""
    db = ctx.obj["db"]
    service = PeriodService(db)

    try:
        changed = service.complete_period(period_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if changed:
        click.echo(f"Completed period {period_id}")
    else:
        click.echo(f"Period {period_id} is already completed")


@period_group.command("delete")
@click.argument("period_id", type=int)
@click.pass_context
def delete_period(ctx, period_id: int) -> None:
    """Delete a period.

    The period can only be deleted once it has no trips. Use
    'faretrack trip delete' to remove them first.
    """
    db = ctx.obj["db"]
    service = PeriodService(db)

    period = service.get_period(period_id)
    if period is None:
        click.echo(f"Error: Period {period_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(f"Are you sure you want to delete period {period_id} ({period.start_date})?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_period(period_id)
        click.echo(f"Deleted period {period_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register period commands with main CLI."""
    cli.add_command(period_group, name="period")
