"""Fare calculator commands."""

import click

from faretrack.domain.entities import TRANSPORT_TYPE_INFO, BikeCity, TransportType
from faretrack.domain.fares import (
    BikeFare,
    SegmentFare,
    StationFare,
    compute_fare,
    free_minutes,
)
from faretrack.domain.validation import is_valid_duration, is_valid_segments
from faretrack.networks import NETWORKS


@click.group()
def fare_group():
    """Calculate fares without recording a trip."""
    pass


@fare_group.command("station")
@click.argument("network", type=click.Choice(list(NETWORKS)))
@click.argument("departure")
@click.argument("arrival")
@click.pass_context
def station_fare(ctx, network: str, departure: str, arrival: str) -> None:
    """Look up a rail fare between two stations.

    Examples:
        faretrack fare station taipei_metro 台北車站 淡水
        faretrack fare station tra Keelung Zhongli
    """
    transport_type = TransportType(network)
    fare = compute_fare(StationFare(transport_type, departure, arrival))
    if fare == 0:
        click.echo(f"Error: Unknown station pair '{departure}' → '{arrival}' on {network}", err=True)
        ctx.exit(1)

    label = TRANSPORT_TYPE_INFO[transport_type].label
    click.echo(f"{label} {departure} → {arrival}: NT${fare}")


@fare_group.command("bike")
@click.argument("minutes", type=int)
@click.option(
    "--city",
    type=click.Choice([c.value for c in BikeCity]),
    default=BikeCity.TAIPEI.value,
    show_default=True,
    help="Bike-share city",
)
@click.pass_context
def bike_fare(ctx, minutes: int, city: str) -> None:
    """Calculate a bike-share fee for a ride of MINUTES minutes."""
    if not is_valid_duration(minutes):
        click.echo(f"Error: Invalid duration: {minutes} (must be 1-1440 minutes)", err=True)
        ctx.exit(1)

    bike_city = BikeCity(city)
    fee = compute_fare(BikeFare(minutes, bike_city))
    click.echo(f"YouBike {minutes} min in {city}: NT${fee} (first {free_minutes(bike_city)} min free)")


@fare_group.command("bus")
@click.argument("segments", type=int, default=1)
@click.option("--fare-per-segment", type=int, help="Fare per segment (defaults to the configured bus fare)")
@click.pass_context
def bus_fare(ctx, segments: int, fare_per_segment: int | None) -> None:
    """Calculate a bus fare for SEGMENTS segments."""
    if not is_valid_segments(segments):
        click.echo(f"Error: Invalid segment count: {segments} (must be 1-10)", err=True)
        ctx.exit(1)

    if fare_per_segment is None:
        fare_per_segment = ctx.obj["db"].get_settings().default_bus_fare

    fare = compute_fare(SegmentFare(segments, fare_per_segment))
    click.echo(f"Bus {segments} segment(s) × NT${fare_per_segment}: NT${fare}")


def register_commands(cli: click.Group) -> None:
    """Register fare commands with main CLI."""
    cli.add_command(fare_group, name="fare")
