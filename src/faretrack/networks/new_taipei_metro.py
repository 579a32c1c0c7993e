"""New Taipei Metro Circular Line (Y06-Y20)."""

from faretrack.networks.base import FareMatrix, Network, Station, StationTable, matrix_fare

LINES = (("Y", "環狀線"),)

STATIONS = StationTable(
    [
        Station("Y06", "大坪林", "Dapinglin", "Y", ("G",)),
        Station("Y07", "新北產業園區", "New Taipei Industrial Park", "Y", ("A",)),
        Station("Y08", "幸福", "Xingfu", "Y"),
        Station("Y09", "頭前庄", "Touqianzhuang", "Y", ("O",)),
        Station("Y10", "新埔民生", "Xinpu Minsheng", "Y", ("BL",)),
        Station("Y11", "板橋", "Banqiao", "Y", ("BL",)),
        Station("Y12", "板新", "Banxin", "Y"),
        Station("Y13", "中和", "Zhonghe", "Y"),
        Station("Y14", "橋和", "Qiaohe", "Y"),
        Station("Y15", "中原", "Zhongyuan", "Y"),
        Station("Y16", "板南", "Bannan", "Y"),
        Station("Y17", "景安", "Jingan", "Y", ("O",)),
        Station("Y18", "景平", "Jingping", "Y"),
        Station("Y19", "秀朗橋", "Xiulanqiao", "Y"),
        Station("Y20", "十四張", "Shisizhang", "Y", ("K",)),
    ]
)

# Fares 20-55 TWD, rows/columns in STATIONS order
MATRIX = FareMatrix(
    [
        [0, 20, 20, 25, 30, 30, 35, 35, 40, 40, 45, 45, 50, 50, 55],
        [20, 0, 20, 20, 25, 25, 30, 30, 35, 35, 40, 40, 45, 45, 50],
        [20, 20, 0, 20, 20, 25, 25, 30, 30, 35, 35, 40, 40, 45, 45],
        [25, 20, 20, 0, 20, 20, 25, 25, 30, 30, 35, 35, 40, 40, 45],
        [30, 25, 20, 20, 0, 20, 20, 25, 25, 30, 30, 35, 35, 40, 40],
        [30, 25, 25, 20, 20, 0, 20, 20, 25, 25, 30, 30, 35, 35, 40],
        [35, 30, 25, 25, 20, 20, 0, 20, 20, 25, 25, 30, 30, 35, 35],
        [35, 30, 30, 25, 25, 20, 20, 0, 20, 20, 25, 25, 30, 30, 35],
        [40, 35, 30, 30, 25, 25, 20, 20, 0, 20, 20, 25, 25, 30, 30],
        [40, 35, 35, 30, 30, 25, 25, 20, 20, 0, 20, 20, 25, 25, 30],
        [45, 40, 35, 35, 30, 30, 25, 25, 20, 20, 0, 20, 20, 25, 25],
        [45, 40, 40, 35, 35, 30, 30, 25, 25, 20, 20, 0, 20, 20, 25],
        [50, 45, 40, 40, 35, 35, 30, 30, 25, 25, 20, 20, 0, 20, 20],
        [50, 45, 45, 40, 40, 35, 35, 30, 30, 25, 25, 20, 20, 0, 20],
        [55, 50, 45, 45, 40, 40, 35, 35, 30, 30, 25, 25, 20, 20, 0],
    ]
)

get_fare = matrix_fare(STATIONS, MATRIX)

NETWORK = Network(
    key="new_taipei_metro",
    label="新北捷運",
    stations=STATIONS,
    fare=get_fare,
    matrix=MATRIX,
    lines=LINES,
)
