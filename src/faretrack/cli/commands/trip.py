"""Trip commands."""

import click

from faretrack.cli.error_handling import handle_domain_error
from faretrack.cli.period_resolution import resolve_period_or_exit
from faretrack.domain.entities import TRANSPORT_TYPE_INFO, BikeCity, TransportType, Trip
from faretrack.domain.period import PeriodService
from faretrack.domain.trip import TripService
from faretrack.utils.amount_parser import parse_amount
from faretrack.utils.date_parser import parse_datetime

TRANSPORT_CHOICE = click.Choice([t.value for t in TransportType])
CITY_CHOICE = click.Choice([c.value for c in BikeCity])


def describe_trip(trip: Trip) -> str:
    """One-line description of where a trip went."""
    if trip.departure_station or trip.arrival_station:
        return f"{trip.departure_station or '?'} → {trip.arrival_station or '?'}"
    if trip.transport_type == TransportType.YOUBIKE:
        city = trip.city.value if trip.city else BikeCity.TAIPEI.value
        return f"{trip.duration or 0} min ({city})"
    parts = []
    if trip.route_number:
        parts.append(f"Route {trip.route_number}")
    if trip.ferry_route:
        parts.append(trip.ferry_route)
    if trip.segments and trip.segments > 1:
        parts.append(f"{trip.segments} segments")
    return ", ".join(parts)


def _parse_optional_amount(ctx, amount: str | None) -> int | None:
    if amount is None:
        return None
    try:
        return parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


def _parse_optional_time(ctx, value: str | None):
    if value is None:
        return None
    try:
        return parse_datetime(value)
    except ValueError as e:
        click.echo(f"Error: Invalid time format: {e}", err=True)
        ctx.exit(1)


@click.group()
def trip_group():
    """Record and manage trips."""
    pass


@trip_group.command("add")
@click.argument("transport_type", type=TRANSPORT_CHOICE)
@click.option("--from", "departure", help="Departure station (rail modes)")
@click.option("--to", "arrival", help="Arrival station (rail modes)")
@click.option("--route", "route_number", help="Bus or highway bus route number")
@click.option("--segments", type=int, help="Bus segment count (default 1)")
@click.option("--duration", type=int, help="Bike-share ride duration in minutes")
@click.option("--city", type=CITY_CHOICE, help="Bike-share city (default taipei)")
@click.option("--ferry-route", help="Ferry route name")
@click.option("--amount", help="Fare paid (calculated when omitted, e.g. 45 or NT$45)")
@click.option("--period", "period_id", type=int, help="Period ID (defaults to the active period)")
@click.option("--time", "when", help="When the trip happened (e.g. 'now', 'yesterday 08:30', '2025-03-01 18:05')")
@click.option("--note", help="Note")
@click.pass_context
def add_trip(
    ctx,
    transport_type: str,
    departure: str | None,
    arrival: str | None,
    route_number: str | None,
    segments: int | None,
    duration: int | None,
    city: str | None,
    ferry_route: str | None,
    amount: str | None,
    period_id: int | None,
    when: str | None,
    note: str | None,
) -> None:
    """Record a trip.

    The fare is calculated from the stations, segments or ride duration
    unless --amount is given. Highway bus and ferry trips always need
    --amount.

    Examples:
        faretrack trip add taipei_metro --from 台北車站 --to 淡水
        faretrack trip add bus --route 307 --segments 2
        faretrack trip add youbike --duration 45 --city taoyuan
        faretrack trip add ferry --ferry-route 淡水-八里 --amount 35
    """
    db = ctx.obj["db"]
    service = TripService(db)

    trip_amount = _parse_optional_amount(ctx, amount)
    timestamp = _parse_optional_time(ctx, when)

    try:
        trip_id = service.record_trip(
            transport_type=TransportType(transport_type),
            amount=trip_amount,
            period_id=period_id,
            timestamp=timestamp,
            departure_station=departure,
            arrival_station=arrival,
            route_number=route_number,
            segments=segments,
            duration=duration,
            city=BikeCity(city) if city else None,
            ferry_route=ferry_route,
            note=note,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    trip = service.get_trip(trip_id)
    label = TRANSPORT_TYPE_INFO[trip.transport_type].label
    click.echo(f"Recorded trip {trip_id}: {label} {describe_trip(trip)} NT${trip.amount}")


@trip_group.command("list")
@click.option("--period", "period_id", type=int, help="Period ID (defaults to the active period)")
@click.option("--all", "show_all", is_flag=True, help="Show trips from every period")
@click.option("--type", "transport_type", type=TRANSPORT_CHOICE, help="Only show this transport type")
@click.pass_context
def list_trips(ctx, period_id: int | None, show_all: bool, transport_type: str | None) -> None:
    """List trips, newest first."""
    db = ctx.obj["db"]
    service = TripService(db)

    if not show_all:
        period_id = resolve_period_or_exit(ctx, PeriodService(db), period_id).id

    trips = service.list_trips(
        period_id=period_id,
        transport_type=TransportType(transport_type) if transport_type else None,
    )
    if not trips:
        click.echo("No trips found.")
        return

    click.echo(f"\nFound {len(trips)} trip(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Time':<17} {'Type':<12} {'Amount':>8}  {'Details':<40}")
    click.echo("-" * 90)
    for t in trips:
        label = TRANSPORT_TYPE_INFO[t.transport_type].label
        click.echo(
            f"{t.id:<6} {t.timestamp:%Y-%m-%d %H:%M} {label:<12} {f'NT${t.amount}':>8}  {describe_trip(t):<40}"
        )
        if t.note:
            click.echo(f"{'':<6} Note: {t.note}")

    click.echo("-" * 90)
    click.echo(f"{'TOTAL':<6} NT${sum(t.amount for t in trips):,} | Count: {len(trips)}")


@trip_group.command("edit")
@click.argument("trip_id", type=int)
@click.option("--from", "departure", help="Departure station")
@click.option("--to", "arrival", help="Arrival station")
@click.option("--route", "route_number", help="Route number")
@click.option("--segments", type=int, help="Bus segment count")
@click.option("--duration", type=int, help="Bike-share ride duration in minutes")
@click.option("--city", type=CITY_CHOICE, help="Bike-share city")
@click.option("--amount", help="Fare paid")
@click.option("--time", "when", help="When the trip happened")
@click.option("--note", help="Note")
@click.option("--recalculate", is_flag=True, help="Recalculate the fare from the updated fields")
@click.pass_context
def edit_trip(
    ctx,
    trip_id: int,
    departure: str | None,
    arrival: str | None,
    route_number: str | None,
    segments: int | None,
    duration: int | None,
    city: str | None,
    amount: str | None,
    when: str | None,
    note: str | None,
    recalculate: bool,
) -> None:
    """Edit a trip.

    Updates only the fields that are provided. The stored amount is kept
    unless --amount or --recalculate is given.

    Examples:
        faretrack trip edit 3 --amount 30
        faretrack trip edit 3 --to 北投 --recalculate
    """
    db = ctx.obj["db"]
    service = TripService(db)

    trip_amount = _parse_optional_amount(ctx, amount)
    timestamp = _parse_optional_time(ctx, when)

    try:
        service.update_trip(
            trip_id,
            amount=trip_amount,
            timestamp=timestamp,
            departure_station=departure,
            arrival_station=arrival,
            route_number=route_number,
            segments=segments,
            duration=duration,
            city=BikeCity(city) if city else None,
            note=note,
            recalculate=recalculate,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    trip = service.get_trip(trip_id)
    click.echo(f"Updated trip {trip_id} (NT${trip.amount})")


@trip_group.command("delete")
@click.argument("trip_id", type=int)
@click.pass_context
def delete_trip(ctx, trip_id: int) -> None:
    """Delete a trip."""
    db = ctx.obj["db"]
    service = TripService(db)

    trip = service.get_trip(trip_id)
    if trip is None:
        click.echo(f"Error: Trip {trip_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(f"Are you sure you want to delete trip {trip_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_trip(trip_id)
        click.echo(f"Deleted trip {trip_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register trip commands with main CLI."""
    cli.add_command(trip_group, name="trip")
