"""Station lookup commands."""

import click

from faretrack.networks import NETWORKS, get_network, list_networks, search_stations
from faretrack.networks.base import Station


def _format_station(station: Station) -> str:
    extras = []
    if station.transfer_lines:
        extras.append(f"transfer: {', '.join(station.transfer_lines)}")
    if station.is_express:
        extras.append("express")
    suffix = f" ({'; '.join(extras)})" if extras else ""
    return f"{station.code:<6} {station.name} {station.name_en}{suffix}"


@click.group()
def station_group():
    """Browse station reference data."""
    pass


@station_group.command("list")
@click.argument("network", type=click.Choice(list(NETWORKS)), required=False)
def list_stations(network: str | None) -> None:
    """List networks, or the stations of NETWORK."""
    if network is None:
        click.echo("\nNetworks:")
        click.echo("-" * 60)
        for n in list_networks():
            kind = "fare table" if n.matrix is not None else "estimated"
            click.echo(f"{n.key:<18} {n.label:<12} {len(n.stations):3d} stations, {kind}")
        return

    n = get_network(network)
    click.echo(f"\n{n.label} ({len(n.stations)} stations):")
    click.echo("-" * 60)
    current_line = None
    for station in n.stations:
        if station.line != current_line:
            current_line = station.line
            click.echo(f"[{current_line}] {n.line_name(current_line)}")
        click.echo(f"  {_format_station(station)}")


@station_group.command("search")
@click.argument("query")
def search(query: str) -> None:
    """Search stations by name, English name or code across all networks."""
    results = search_stations(query)
    if not results:
        click.echo(f"No stations matching '{query}'.")
        return

    for network, station in results:
        click.echo(f"{network.key:<18} {_format_station(station)}")


def register_commands(cli: click.Group) -> None:
    """Register station commands with main CLI."""
    cli.add_command(station_group, name="station")
