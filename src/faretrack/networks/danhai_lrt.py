"""Danhai Light Rail: Green Mountain Line (V) and Blue Coast Line (VB)."""

from faretrack.networks.base import FareMatrix, Network, Station, StationTable, matrix_fare

LINES = (("V", "綠山線"), ("VB", "藍海線"))

STATIONS = StationTable(
    [
        Station("V01", "紅樹林", "Hongshulin", "V", ("R",)),
        Station("V02", "竿蓁林", "Ganzhenlin", "V"),
        Station("V03", "淡金鄧公", "Danjin Denggong", "V"),
        Station("V04", "淡江大學", "Tamkang University", "V"),
        Station("V05", "淡金北新", "Danjin Beixin", "V"),
        Station("V06", "新市一路", "Xinshi 1st Road", "V"),
        Station("V07", "淡水行政中心", "Tamsui Admin Center", "V"),
        Station("V08", "濱海義山", "Binhai Yishan", "V"),
        Station("V09", "濱海沙崙", "Binhai Shalun", "V"),
        Station("V10", "淡海新市鎮", "Danhai New Town", "V"),
        Station("V11", "崁頂", "Kanding", "V"),
        Station("V26", "淡水漁人碼頭", "Tamsui Fisherman's Wharf", "VB"),
        Station("V27", "沙崙", "Shalun", "VB"),
        Station("V28", "台北海洋大學", "Taipei Ocean University", "VB"),
    ]
)

MATRIX = FareMatrix(
    [
        [0, 20, 20, 20, 25, 25, 25, 30, 30, 30, 30, 30, 30, 30],
        [20, 0, 20, 20, 20, 25, 25, 25, 30, 30, 30, 30, 30, 30],
        [20, 20, 0, 20, 20, 20, 25, 25, 25, 30, 30, 30, 30, 30],
        [20, 20, 20, 0, 20, 20, 20, 25, 25, 25, 30, 30, 30, 30],
        [25, 20, 20, 20, 0, 20, 20, 20, 25, 25, 25, 30, 30, 30],
        [25, 25, 20, 20, 20, 0, 20, 20, 20, 25, 25, 30, 30, 30],
        [25, 25, 25, 20, 20, 20, 0, 20, 20, 20, 25, 25, 25, 25],
        [30, 25, 25, 25, 20, 20, 20, 0, 20, 20, 20, 25, 25, 25],
        [30, 30, 25, 25, 25, 20, 20, 20, 0, 20, 20, 20, 20, 20],
        [30, 30, 30, 25, 25, 25, 20, 20, 20, 0, 20, 25, 25, 25],
        [30, 30, 30, 30, 25, 25, 25, 20, 20, 20, 0, 25, 25, 25],
        [30, 30, 30, 30, 30, 30, 25, 25, 20, 25, 25, 0, 20, 20],
        [30, 30, 30, 30, 30, 30, 25, 25, 20, 25, 25, 20, 0, 20],
        [30, 30, 30, 30, 30, 30, 25, 25, 20, 25, 25, 20, 20, 0],
    ]
)

get_fare = matrix_fare(STATIONS, MATRIX)

NETWORK = Network(
    key="danhai_lrt",
    label="淡海輕軌",
    stations=STATIONS,
    fare=get_fare,
    matrix=MATRIX,
    lines=LINES,
)
