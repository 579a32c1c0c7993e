"""Integration tests for complete workflows."""

from datetime import date, timedelta

from faretrack.cli.main import cli
from faretrack.domain.entities import TransportType


def test_full_workflow(cli_runner, temp_db):
    """Test settings → period → trips → stats → route."""

    def run(*args, **kwargs):
        result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)
        assert result.exit_code == 0, result.output
        return result

    run("settings", "set", "--ticket-price", "1200")
    run("period", "start", "--date", "today")

    run("trip", "add", "taipei_metro", "--from", "台北車站", "--to", "淡水", "--time", "today 08:10")
    run("trip", "add", "taipei_metro", "--from", "淡水", "--to", "台北車站", "--time", "today 18:40")
    run("trip", "add", "bus", "--route", "307", "--segments", "3")
    run("trip", "add", "youbike", "--duration", "20")
    run("trip", "add", "highway_bus", "--route", "1819", "--amount", "145")

    result = run("trip", "list")
    assert "Found 5 trip(s)" in result.output
    assert "Count: 5" in result.output

    result = run("stats", "period")
    assert "NT$290 (5 trips)" in result.output

    run("route", "add", "commute", "taipei_metro", "--from", "台北車站", "--to", "淡水")
    run("route", "use", "commute")

    result = run("stats", "global")
    assert "NT$340 (6 trips)" in result.output


def test_service_workflow_across_periods(period_service, trip_service, stats_service):
    """Test an expired period keeps its trips while a new one starts."""
    first_id = period_service.start_period(start_date=date.today() - timedelta(days=35))
    trip_service.record_trip(TransportType.BUS, segments=3)
    trip_service.record_trip(TransportType.TRA, departure_station="基隆", arrival_station="中壢")

    assert period_service.check_and_expire_periods() == [first_id]

    second_id = period_service.start_period()
    trip_service.record_trip(TransportType.FERRY, amount=35)

    first = stats_service.get_period_stats(first_id)
    assert first.total_amount == 45 + 97
    assert first.days_elapsed == 30
    assert first.days_remaining == 0

    second = stats_service.get_period_stats(second_id)
    assert second.trip_count == 1
    assert second.saved_amount == 35 - 1200

    totals = stats_service.get_global_stats()
    assert totals.total_periods == 2
    assert totals.total_trip_amount == 45 + 97 + 35
