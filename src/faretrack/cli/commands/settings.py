"""Settings commands."""

import click

from faretrack.cli.error_handling import handle_domain_error
from faretrack.domain.settings import SettingsService
from faretrack.utils.amount_parser import parse_amount


def _echo_settings(settings) -> None:
    click.echo(f"Default bus fare:     NT${settings.default_bus_fare}")
    click.echo(f"Default ticket price: NT${settings.default_ticket_price:,}")


@click.group()
def settings_group():
    """View and change defaults."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx) -> None:
    """Show current settings."""
    _echo_settings(SettingsService(ctx.obj["db"]).get_settings())


@settings_group.command("set")
@click.option("--bus-fare", help="Fare per bus segment (e.g. 15)")
@click.option("--ticket-price", help="Default pass price for new periods (e.g. 1200)")
@click.pass_context
def set_settings(ctx, bus_fare: str | None, ticket_price: str | None) -> None:
    """Change default values.

    Examples:
        faretrack settings set --bus-fare 15
        faretrack settings set --ticket-price 1200
    """
    if bus_fare is None and ticket_price is None:
        click.echo("Error: Nothing to update. Pass --bus-fare and/or --ticket-price.", err=True)
        ctx.exit(1)

    try:
        settings = SettingsService(ctx.obj["db"]).update_settings(
            default_bus_fare=parse_amount(bus_fare) if bus_fare is not None else None,
            default_ticket_price=parse_amount(ticket_price) if ticket_price is not None else None,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo("Settings updated.")
    _echo_settings(settings)


def register_commands(cli: click.Group) -> None:
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
