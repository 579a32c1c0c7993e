"""Tests for CLI commands."""

from datetime import date, timedelta

from faretrack.cli.main import cli
from faretrack.domain.entities import PeriodStatus, TransportType


def run(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_help_does_not_need_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "period" in result.output
    assert "trip" in result.output


class TestPeriodCommands:
    """Tests for period commands."""

    def test_start_and_show(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "period", "start", "--date", "today", "--price", "NT$1,200")
        assert result.exit_code == 0
        assert "Started period" in result.output

        result = run(cli_runner, temp_db, "period", "show")
        assert result.exit_code == 0
        assert str(date.today()) in result.output
        assert "active" in result.output

    def test_second_start_fails(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "period", "start")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_date(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "period", "start", "--date", "someday")
        assert result.exit_code == 1
        assert "Invalid date" in result.output

    def test_list_and_complete(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "period", "complete", str(active_period.id))
        assert result.exit_code == 0
        assert "Completed period" in result.output

        result = run(cli_runner, temp_db, "period", "list", "--status", "completed")
        assert result.exit_code == 0
        assert f"ID: {active_period.id:3d}" in result.output

    def test_show_without_active_period(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "period", "show")
        assert result.exit_code == 1
        assert "No active period" in result.output

    def test_delete_with_confirmation(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "period", "delete", str(active_period.id), input="y\n")
        assert result.exit_code == 0
        assert "Deleted period" in result.output

    def test_delete_cancelled(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "period", "delete", str(active_period.id), input="n\n")
        assert result.exit_code == 0
        assert "Deletion cancelled" in result.output

    def test_expired_period_is_completed_on_start(self, cli_runner, temp_db, period_service):
        period_id = period_service.start_period(start_date=date.today() - timedelta(days=40))
        temp_db.disconnect()

        result = run(cli_runner, temp_db, "period", "list")

        assert result.exit_code == 0
        assert f"Period {period_id} has ended" in result.output
        assert period_service.get_period(period_id).status == PeriodStatus.COMPLETED


class TestTripCommands:
    """Tests for trip commands."""

    def test_add_metro_trip(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "trip", "add", "taipei_metro", "--from", "台北車站", "--to", "淡水")
        assert result.exit_code == 0
        assert "NT$50" in result.output

    def test_add_bus_trip(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "trip", "add", "bus", "--route", "307", "--segments", "3")
        assert result.exit_code == 0
        assert "NT$45" in result.output

    def test_unknown_station_needs_amount(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "trip", "add", "tra", "--from", "台北", "--to", "高雄")
        assert result.exit_code == 1
        assert "provide the amount" in result.output

        result = run(
            cli_runner, temp_db, "trip", "add", "tra", "--from", "台北", "--to", "高雄", "--amount", "843"
        )
        assert result.exit_code == 0

    def test_add_without_period(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "trip", "add", "bus")
        assert result.exit_code == 1
        assert "No active period" in result.output

    def test_invalid_transport_type(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "trip", "add", "rocket")
        assert result.exit_code != 0

    def test_list_edit_delete(self, cli_runner, temp_db, active_period, trip_service):
        trip_id = trip_service.record_trip(TransportType.BUS, route_number="307", note="to work")

        result = run(cli_runner, temp_db, "trip", "list")
        assert result.exit_code == 0
        assert "Route 307" in result.output
        assert "to work" in result.output
        assert "Count: 1" in result.output

        result = run(cli_runner, temp_db, "trip", "edit", str(trip_id), "--amount", "20")
        assert result.exit_code == 0
        assert "NT$20" in result.output

        result = run(cli_runner, temp_db, "trip", "delete", str(trip_id), input="y\n")
        assert result.exit_code == 0
        assert f"Deleted trip {trip_id}" in result.output

    def test_delete_missing_trip(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "trip", "delete", "999")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestFareCommands:
    """Tests for the fare calculator commands."""

    def test_station_fare(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "fare", "station", "tra", "基隆", "中壢")
        assert result.exit_code == 0
        assert "NT$97" in result.output

    def test_unknown_station(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "fare", "station", "danhai_lrt", "紅樹林", "不存在")
        assert result.exit_code == 1
        assert "Unknown station" in result.output

    def test_bike_fare(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "fare", "bike", "90", "--city", "taoyuan")
        assert result.exit_code == 0
        assert "NT$10" in result.output

    def test_bike_invalid_duration(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "fare", "bike", "0")
        assert result.exit_code == 1

    def test_bus_fare(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "fare", "bus", "3")
        assert result.exit_code == 0
        assert "NT$45" in result.output


class TestStationCommands:
    """Tests for station lookups."""

    def test_list_networks(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "station", "list")
        assert result.exit_code == 0
        assert "taoyuan_metro" in result.output

    def test_list_network_stations(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "station", "list", "ankeng_lrt")
        assert result.exit_code == 0
        assert "玫瑰中國城" in result.output
        assert "[K] 安坑線" in result.output

    def test_list_groups_stations_by_line(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "station", "list", "danhai_lrt")
        assert result.exit_code == 0
        assert result.output.index("[V] 綠山線") < result.output.index("[VB] 藍海線")

    def test_search(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "station", "search", "zhongli")
        assert result.exit_code == 0
        assert "中壢" in result.output


class TestStatsCommands:
    """Tests for statistics commands."""

    def test_period_stats(self, cli_runner, temp_db, active_period, trip_service):
        trip_service.record_trip(TransportType.BUS, segments=3)

        result = run(cli_runner, temp_db, "stats", "period")
        assert result.exit_code == 0
        assert "NT$45" in result.output
        assert "公車" in result.output

    def test_breakeven(self, cli_runner, temp_db, active_period, trip_service):
        trip_service.record_trip(TransportType.FERRY, amount=200)

        result = run(cli_runner, temp_db, "stats", "breakeven")
        assert result.exit_code == 0
        assert "NT$1,000 more" in result.output
        assert "Refund if returned now: NT$880" in result.output

    def test_global_without_periods(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "stats", "global")
        assert result.exit_code == 0
        assert "No periods found" in result.output


class TestSettingsCommands:
    """Tests for settings commands."""

    def test_show_and_set(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "settings", "show")
        assert result.exit_code == 0
        assert "NT$15" in result.output

        result = run(cli_runner, temp_db, "settings", "set", "--bus-fare", "16")
        assert result.exit_code == 0
        assert "NT$16" in result.output

    def test_set_nothing(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "settings", "set")
        assert result.exit_code == 1

    def test_set_invalid(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "settings", "set", "--ticket-price", "0")
        assert result.exit_code == 1
        assert "Invalid ticket price" in result.output


class TestRouteCommands:
    """Tests for favorite route commands."""

    def test_add_list_use_delete(self, cli_runner, temp_db, active_period):
        result = run(
            cli_runner, temp_db, "route", "add", "commute", "taipei_metro", "--from", "台北車站", "--to", "淡水"
        )
        assert result.exit_code == 0
        assert "Saved route 'commute'" in result.output

        result = run(cli_runner, temp_db, "route", "list")
        assert result.exit_code == 0
        assert "commute" in result.output

        result = run(cli_runner, temp_db, "route", "use", "commute")
        assert result.exit_code == 0
        assert "NT$50" in result.output

        result = run(cli_runner, temp_db, "route", "delete", "commute", input="y\n")
        assert result.exit_code == 0
        assert "Deleted route" in result.output

    def test_bike_route(self, cli_runner, temp_db, active_period):
        result = run(
            cli_runner, temp_db, "route", "add", "ride", "youbike", "--duration", "45", "--city", "taipei"
        )
        assert result.exit_code == 0

        result = run(cli_runner, temp_db, "route", "list")
        assert "45 min (taipei)" in result.output

        result = run(cli_runner, temp_db, "route", "use", "ride")
        assert result.exit_code == 0
        assert "45 min (taipei) NT$10" in result.output

    def test_bike_route_without_duration(self, cli_runner, temp_db):
        result = run(cli_runner, temp_db, "route", "add", "ride", "youbike")
        assert result.exit_code == 1
        assert "duration" in result.output

    def test_use_unknown_route(self, cli_runner, temp_db, active_period):
        result = run(cli_runner, temp_db, "route", "use", "nowhere")
        assert result.exit_code == 1
        assert "not found" in result.output
