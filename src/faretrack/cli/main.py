"""Main CLI entry point."""

import logging

import click

from faretrack.cli.commands import fare, period, route, settings, station, stats, trip
from faretrack.database.factories import create_sqlite_database
from faretrack.domain.period import PeriodService


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FARETRACK_DB_PATH environment variable)",
    envvar="FARETRACK_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log informational messages")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Faretrack - TPASS monthly pass tracker.

    Record the trips you take on Taipei-area public transport and see
    whether the flat-rate pass is paying for itself.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Only open the database when a command runs, not for --help
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db

        for period_id in PeriodService(db).check_and_expire_periods():
            click.echo(f"Period {period_id} has ended and was marked completed.", err=True)


fare.register_commands(cli)
period.register_commands(cli)
route.register_commands(cli)
settings.register_commands(cli)
station.register_commands(cli)
stats.register_commands(cli)
trip.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
