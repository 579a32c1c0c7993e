"""Taiwan Railways local-train fares, Keelung to Zhongli."""

from faretrack.networks.base import FareMatrix, Network, Station, StationTable, matrix_fare

LINES = (("TRA", "台鐵"),)

STATIONS = StationTable(
    [
        Station("TRA01", "基隆", "Keelung", "TRA"),
        Station("TRA02", "三坑", "Sankeng", "TRA"),
        Station("TRA03", "八堵", "Badu", "TRA"),
        Station("TRA04", "七堵", "Qidu", "TRA"),
        Station("TRA05", "百福", "Baifu", "TRA"),
        Station("TRA06", "五堵", "Wudu", "TRA"),
        Station("TRA07", "汐止", "Xizhi", "TRA"),
        Station("TRA08", "汐科", "Xike", "TRA"),
        Station("TRA09", "南港", "Nangang", "TRA"),
        Station("TRA10", "松山", "Songshan", "TRA"),
        Station("TRA11", "台北", "Taipei", "TRA"),
        Station("TRA12", "萬華", "Wanhua", "TRA"),
        Station("TRA13", "板橋", "Banqiao", "TRA"),
        Station("TRA14", "浮洲", "Fuzhou", "TRA"),
        Station("TRA15", "樹林", "Shulin", "TRA"),
        Station("TRA16", "南樹林", "South Shulin", "TRA"),
        Station("TRA17", "山佳", "Shanjia", "TRA"),
        Station("TRA18", "鶯歌", "Yingge", "TRA"),
        Station("TRA19", "桃園", "Taoyuan", "TRA"),
        Station("TRA20", "內壢", "Neili", "TRA"),
        Station("TRA21", "中壢", "Zhongli", "TRA"),
    ]
)

# Local train (區間車) fares
MATRIX = FareMatrix(
    [
        [0, 15, 15, 19, 19, 23, 27, 31, 39, 46, 50, 54, 58, 62, 66, 70, 74, 78, 86, 93, 97],
        [15, 0, 15, 15, 19, 19, 23, 27, 35, 42, 46, 50, 54, 58, 62, 66, 70, 74, 82, 89, 93],
        [15, 15, 0, 15, 15, 19, 23, 27, 35, 42, 46, 50, 54, 58, 62, 66, 70, 74, 82, 89, 93],
        [19, 15, 15, 0, 15, 15, 19, 23, 31, 38, 42, 46, 50, 54, 58, 62, 66, 70, 78, 85, 89],
        [19, 19, 15, 15, 0, 15, 19, 23, 31, 38, 42, 46, 50, 54, 58, 62, 66, 70, 78, 85, 89],
        [23, 19, 19, 15, 15, 0, 15, 19, 27, 34, 38, 42, 46, 50, 54, 58, 62, 66, 74, 81, 85],
        [27, 23, 23, 19, 19, 15, 0, 15, 23, 30, 34, 38, 42, 46, 50, 54, 58, 62, 70, 77, 81],
        [31, 27, 27, 23, 23, 19, 15, 0, 19, 26, 30, 34, 38, 42, 46, 50, 54, 58, 66, 73, 77],
        [39, 35, 35, 31, 31, 27, 23, 19, 0, 15, 19, 23, 27, 31, 35, 39, 43, 47, 55, 62, 66],
        [46, 42, 42, 38, 38, 34, 30, 26, 15, 0, 15, 19, 23, 27, 31, 35, 39, 43, 51, 58, 62],
        [50, 46, 46, 42, 42, 38, 34, 30, 19, 15, 0, 15, 19, 23, 27, 31, 35, 39, 47, 54, 58],
        [54, 50, 50, 46, 46, 42, 38, 34, 23, 19, 15, 0, 15, 19, 23, 27, 31, 35, 43, 50, 54],
        [58, 54, 54, 50, 50, 46, 42, 38, 27, 23, 19, 15, 0, 15, 19, 23, 27, 31, 39, 46, 50],
        [62, 58, 58, 54, 54, 50, 46, 42, 31, 27, 23, 19, 15, 0, 15, 19, 23, 27, 35, 42, 46],
        [66, 62, 62, 58, 58, 54, 50, 46, 35, 31, 27, 23, 19, 15, 0, 15, 19, 23, 31, 38, 42],
        [70, 66, 66, 62, 62, 58, 54, 50, 39, 35, 31, 27, 23, 19, 15, 0, 15, 19, 27, 34, 38],
        [74, 70, 70, 66, 66, 62, 58, 54, 43, 39, 35, 31, 27, 23, 19, 15, 0, 15, 23, 30, 34],
        [78, 74, 74, 70, 70, 66, 62, 58, 47, 43, 39, 35, 31, 27, 23, 19, 15, 0, 19, 26, 30],
        [86, 82, 82, 78, 78, 74, 70, 66, 55, 51, 47, 43, 39, 35, 31, 27, 23, 19, 0, 15, 19],
        [93, 89, 89, 85, 85, 81, 77, 73, 62, 58, 54, 50, 46, 42, 38, 34, 30, 26, 15, 0, 15],
        [97, 93, 93, 89, 89, 85, 81, 77, 66, 62, 58, 54, 50, 46, 42, 38, 34, 30, 19, 15, 0],
    ]
)

get_fare = matrix_fare(STATIONS, MATRIX)

NETWORK = Network(
    key="tra",
    label="台鐵",
    stations=STATIONS,
    fare=get_fare,
    matrix=MATRIX,
    lines=LINES,
)
