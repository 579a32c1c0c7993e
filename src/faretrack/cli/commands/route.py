"""Favorite route commands."""

import click

from faretrack.cli.commands.trip import CITY_CHOICE, TRANSPORT_CHOICE, describe_trip
from faretrack.cli.error_handling import handle_domain_error
from faretrack.domain.entities import BikeCity, TransportType
from faretrack.domain.favorite import FavoriteRouteService
from faretrack.utils.amount_parser import parse_amount
from faretrack.utils.date_parser import parse_datetime


@click.group()
def route_group():
    """Manage favorite routes."""
    pass


@route_group.command("add")
@click.argument("name")
@click.argument("transport_type", type=TRANSPORT_CHOICE)
@click.option("--from", "departure", help="Departure station")
@click.option("--to", "arrival", help="Arrival station")
@click.option("--route", "route_number", help="Bus route number")
@click.option("--segments", type=int, help="Bus segment count")
@click.option("--duration", type=int, help="Bike-share ride duration in minutes")
@click.option("--city", type=CITY_CHOICE, help="Bike-share city (default taipei)")
@click.option("--amount", help="Default amount (calculated on use when omitted)")
@click.pass_context
def add_route(
    ctx,
    name: str,
    transport_type: str,
    departure: str | None,
    arrival: str | None,
    route_number: str | None,
    segments: int | None,
    duration: int | None,
    city: str | None,
    amount: str | None,
) -> None:
    """Save a favorite route.

    Examples:
        faretrack route add commute taipei_metro --from 台北車站 --to 淡水
        faretrack route add airport highway_bus --route 1819 --amount 145
        faretrack route add ride youbike --duration 25 --city taipei
    """
    service = FavoriteRouteService(ctx.obj["db"])

    try:
        default_amount = parse_amount(amount) if amount is not None else None
        route_id = service.add_route(
            name=name,
            transport_type=TransportType(transport_type),
            departure_station=departure,
            arrival_station=arrival,
            route_number=route_number,
            default_amount=default_amount,
            segments=segments,
            duration=duration,
            city=BikeCity(city) if city else None,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Saved route '{name}' (ID: {route_id})")


@route_group.command("list")
@click.pass_context
def list_routes(ctx) -> None:
    """List favorite routes."""
    routes = FavoriteRouteService(ctx.obj["db"]).list_routes()
    if not routes:
        click.echo("No favorite routes found.")
        return

    click.echo("\nFavorite routes:")
    click.echo("-" * 60)
    for r in routes:
        details = []
        if r.departure_station or r.arrival_station:
            details.append(f"{r.departure_station} → {r.arrival_station}")
        if r.route_number:
            details.append(f"Route {r.route_number}")
        if r.segments and r.segments > 1:
            details.append(f"{r.segments} segments")
        if r.duration is not None:
            city = r.city.value if r.city else BikeCity.TAIPEI.value
            details.append(f"{r.duration} min ({city})")
        if r.default_amount is not None:
            details.append(f"NT${r.default_amount}")
        click.echo(f"{r.name:<16} {r.transport_type.value:<16} {' | '.join(details)}")


@route_group.command("delete")
@click.argument("name")
@click.pass_context
def delete_route(ctx, name: str) -> None:
    """Delete a favorite route."""
    service = FavoriteRouteService(ctx.obj["db"])

    try:
        service.get_route(name)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not click.confirm(f"Are you sure you want to delete route '{name}'?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_route(name)
    click.echo(f"Deleted route '{name}'")


@route_group.command("use")
@click.argument("name")
@click.option("--amount", help="Override the fare for this trip")
@click.option("--time", "when", help="When the trip happened")
@click.option("--note", help="Note")
@click.pass_context
def use_route(ctx, name: str, amount: str | None, when: str | None, note: str | None) -> None:
    """Record a trip from a favorite route in the active period."""
    service = FavoriteRouteService(ctx.obj["db"])

    try:
        trip_id = service.use_route(
            name,
            amount=parse_amount(amount) if amount is not None else None,
            timestamp=parse_datetime(when) if when is not None else None,
            note=note,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    trip = service.trips.get_trip(trip_id)
    click.echo(f"Recorded trip {trip_id}: {describe_trip(trip)} NT${trip.amount}")


def register_commands(cli: click.Group) -> None:
    """Register favorite route commands with main CLI."""
    cli.add_command(route_group, name="route")
