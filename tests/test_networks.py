"""Tests for station and fare reference data."""

import pytest

from faretrack.networks import NETWORKS, get_network, list_networks, search_stations
from faretrack.networks import taipei_metro, taoyuan_metro
from faretrack.networks.base import FareMatrix, Station, StationTable, matrix_fare


MATRIX_NETWORKS = ["new_taipei_metro", "taoyuan_metro", "danhai_lrt", "ankeng_lrt", "tra"]


def test_all_networks_registered():
    """Test the six rail networks are available."""
    assert set(NETWORKS) == {
        "taipei_metro",
        "new_taipei_metro",
        "taoyuan_metro",
        "danhai_lrt",
        "ankeng_lrt",
        "tra",
    }
    assert len(list_networks()) == 6
    assert get_network("unknown") is None


@pytest.mark.parametrize("key", MATRIX_NETWORKS)
def test_matrix_shape(key):
    """Test every fare matrix is square, symmetric and zero on the diagonal."""
    network = get_network(key)
    matrix = network.matrix
    size = len(network.stations)

    assert len(matrix) == size
    rows = matrix.rows()
    for i in range(size):
        assert len(rows[i]) == size
        assert rows[i][i] == 0
        for j in range(size):
            assert rows[i][j] == rows[j][i]
            assert rows[i][j] >= 0


@pytest.mark.parametrize("key", list(NETWORKS))
def test_unknown_station_returns_zero(key):
    """Test unknown station names degrade to 0 instead of raising."""
    network = get_network(key)
    first = network.stations.stations[0].name

    assert network.fare("不存在", first) == 0
    assert network.fare(first, "不存在") == 0
    assert network.fare("", "") == 0


def test_exact_matrix_fares():
    """Test fares read straight from the bundled tables."""
    assert get_network("tra").fare("基隆", "中壢") == 97
    assert get_network("tra").fare("台北", "板橋") == 19
    assert get_network("ankeng_lrt").fare("十四張", "玫瑰中國城") == 30
    assert get_network("new_taipei_metro").fare("大坪林", "幸福") == 20


def test_same_station_on_matrix_network_is_zero():
    """Test matrix networks price a same-station query at 0, unlike Taipei Metro."""
    assert get_network("tra").fare("台北", "台北") == 0
    assert get_network("taoyuan_metro").fare("三重", "三重") == 0


def test_english_names_resolve():
    """Test English names are accepted case-insensitively."""
    tra = get_network("tra")
    assert tra.fare("keelung", "ZHONGLI") == tra.fare("基隆", "中壢")


class TestTaoyuanZoneFares:
    """Tests for the Taoyuan Airport MRT zone rule."""

    def test_base_fare_within_five_km(self):
        assert taoyuan_metro.zone_fare(0) == 30
        assert taoyuan_metro.zone_fare(50) == 30

    def test_started_two_km_steps(self):
        assert taoyuan_metro.zone_fare(51) == 35
        assert taoyuan_metro.zone_fare(70) == 35
        assert taoyuan_metro.zone_fare(71) == 40

    def test_station_fares(self):
        assert taoyuan_metro.get_fare("台北車站", "三重") == 30
        assert taoyuan_metro.get_fare("台北車站", "新北產業園區") == 40
        assert taoyuan_metro.get_fare("老街溪", "台北車站") == 155


class TestTaipeiMetroFares:
    """Tests for the approximate Taipei Metro fares."""

    def test_step_table(self):
        assert taipei_metro.fare_by_station_count(1) == 20
        assert taipei_metro.fare_by_station_count(2) == 20
        assert taipei_metro.fare_by_station_count(3) == 25
        assert taipei_metro.fare_by_station_count(15) == 50
        assert taipei_metro.fare_by_station_count(22) == 60
        assert taipei_metro.fare_by_station_count(23) == 65

    def test_same_line_estimate(self):
        assert taipei_metro.get_fare("動物園", "木柵") == 20
        assert taipei_metro.get_fare("動物園", "大安") == 35
        assert taipei_metro.get_fare("動物園", "忠孝復興") == 40

    def test_common_routes_in_both_directions(self):
        assert taipei_metro.get_fare("台北車站", "淡水") == 50
        assert taipei_metro.get_fare("淡水", "台北車站") == 50
        assert taipei_metro.get_fare("西門", "龍山寺") == 20

    def test_cross_line_without_direct_transfer(self):
        # 28 stations apart plus two transfers
        assert taipei_metro.get_fare("淡水", "新店") == 65

    def test_cross_line_with_direct_transfer(self):
        # 16 stations apart plus one transfer
        assert taipei_metro.get_fare("中正紀念堂", "古亭") == 55

    def test_same_station_costs_minimum_fare(self):
        assert taipei_metro.get_fare("台北車站", "台北車站") == 20

    def test_unknown_code_estimate(self):
        assert taipei_metro.estimate_fare("XX99", "BR01") == 0

    def test_direct_transfer_is_symmetric(self):
        a = taipei_metro.STATIONS.get_by_code("R23")
        b = taipei_metro.STATIONS.get_by_code("G09")
        assert taipei_metro.has_direct_transfer(a, b)
        assert taipei_metro.has_direct_transfer(b, a)

    def test_english_name_lookup(self):
        assert taipei_metro.get_fare("Taipei Main Station", "tamsui") == 50


class TestStationTable:
    """Tests for station lookup."""

    def test_first_occurrence_wins(self):
        station = taipei_metro.STATIONS.resolve("台北車站")
        assert station.code == "R21"

    def test_get_by_code(self):
        assert taipei_metro.STATIONS.get_by_code("BL12").name == "台北車站"
        assert taipei_metro.STATIONS.get_by_code("ZZ") is None

    def test_duplicate_code_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            StationTable([Station("A", "甲", "Alpha", "L"), Station("A", "乙", "Beta", "L")])

    def test_search(self):
        table = get_network("ankeng_lrt").stations
        assert [s.code for s in table.search("景文")] == ["K05"]
        assert [s.code for s in table.search("rose")] == ["K09"]
        assert [s.code for s in table.search("k01")] == ["K01"]
        assert len(table.search("")) == len(table)


def test_search_stations_across_networks():
    """Test searching every network at once."""
    keys = {network.key for network, _ in search_stations("Banqiao")}
    assert {"taipei_metro", "new_taipei_metro", "tra"} <= keys

    assert search_stations("no such station") == []


class TestFareMatrix:
    """Tests for fare matrix validation."""

    def test_rejects_non_square(self):
        with pytest.raises(ValueError):
            FareMatrix([[0, 20], [20]])

    def test_rejects_asymmetric(self):
        with pytest.raises(ValueError, match="symmetric"):
            FareMatrix([[0, 20], [25, 0]])

    def test_rejects_non_zero_diagonal(self):
        with pytest.raises(ValueError, match="diagonal"):
            FareMatrix([[5, 20], [20, 0]])

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            FareMatrix([[0, -1], [-1, 0]])

    def test_matrix_fare_lookup(self):
        stations = StationTable([Station("A", "甲", "Alpha", "L"), Station("B", "乙", "Beta", "L")])
        fare = matrix_fare(stations, FareMatrix([[0, 25], [25, 0]]))
        assert fare("甲", "乙") == 25
        assert fare("beta", "alpha") == 25
        assert fare("甲", "丙") == 0


def test_line_names():
    """Test line codes map to their display names."""
    assert get_network("taipei_metro").line_name("BL") == "板南線"
    assert get_network("danhai_lrt").line_name("VB") == "藍海線"
    assert get_network("tra").line_name("XX") == "XX"
