"""Ankeng Light Rail (K01-K09)."""

from faretrack.networks.base import FareMatrix, Network, Station, StationTable, matrix_fare

LINES = (("K", "安坑線"),)

STATIONS = StationTable(
    [
        Station("K01", "十四張", "Shisizhang", "K", ("Y",)),
        Station("K02", "陽光運動公園", "Sunshine Sports Park", "K"),
        Station("K03", "新和國小", "Xinhe Elementary School", "K"),
        Station("K04", "安康", "Ankang", "K"),
        Station("K05", "景文科大", "Jinwen University", "K"),
        Station("K06", "耕莘安康院區", "Cardinal Tien Ankang", "K"),
        Station("K07", "安坑國小", "Ankeng Elementary School", "K"),
        Station("K08", "雙城", "Shuangcheng", "K"),
        Station("K09", "玫瑰中國城", "Rose Chinatown", "K"),
    ]
)

MATRIX = FareMatrix(
    [
        [0, 20, 20, 20, 25, 25, 25, 30, 30],
        [20, 0, 20, 20, 20, 25, 25, 25, 30],
        [20, 20, 0, 20, 20, 20, 25, 25, 25],
        [20, 20, 20, 0, 20, 20, 20, 25, 25],
        [25, 20, 20, 20, 0, 20, 20, 20, 25],
        [25, 25, 20, 20, 20, 0, 20, 20, 20],
        [25, 25, 25, 20, 20, 20, 0, 20, 20],
        [30, 25, 25, 25, 20, 20, 20, 0, 20],
        [30, 30, 25, 25, 25, 20, 20, 20, 0],
    ]
)

get_fare = matrix_fare(STATIONS, MATRIX)

NETWORK = Network(
    key="ankeng_lrt",
    label="安坑輕軌",
    stations=STATIONS,
    fare=get_fare,
    matrix=MATRIX,
    lines=LINES,
)
