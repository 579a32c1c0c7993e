"""Taoyuan Airport MRT (A1-A22).

No official fare table is bundled for this line. Fares follow a simplified
zone rule over each station's distance from Taipei Main Station: NT$30 for the
first 5 km, then NT$5 per started 2 km. The rule is materialised into a fare
matrix at import time.
"""

from faretrack.networks.base import FareMatrix, Network, Station, StationTable, matrix_fare

LINES = (("A", "機場線"),)

BASE_FARE = 30
BASE_DISTANCE = 50  # 0.1 km units
STEP_DISTANCE = 20
STEP_FARE = 5

STATIONS = StationTable(
    [
        Station("A1", "台北車站", "Taipei Main Station", "A", is_express=True),
        Station("A2", "三重", "Sanchong", "A"),
        Station("A3", "新北產業園區", "New Taipei Industrial Park", "A", is_express=True),
        Station("A4", "新莊副都心", "Xinzhuang Fuduxin", "A"),
        Station("A5", "泰山", "Taishan", "A"),
        Station("A6", "泰山貴和", "Taishan Guihe", "A"),
        Station("A7", "體育大學", "National Sports University", "A"),
        Station("A8", "長庚醫院", "Chang Gung Memorial Hospital", "A", is_express=True),
        Station("A9", "林口", "Linkou", "A"),
        Station("A10", "山鼻", "Shanbi", "A"),
        Station("A11", "坑口", "Kengkou", "A"),
        Station("A12", "機場第一航廈", "Airport Terminal 1", "A", is_express=True),
        Station("A13", "機場第二航廈", "Airport Terminal 2", "A", is_express=True),
        Station("A14a", "機場旅館", "Airport Hotel", "A"),
        Station("A15", "大園", "Dayuan", "A"),
        Station("A16", "橫山", "Hengshan", "A"),
        Station("A17", "領航", "Linghang", "A"),
        Station("A18", "高鐵桃園站", "HSR Taoyuan", "A", is_express=True),
        Station("A19", "桃園體育園區", "Taoyuan Sports Park", "A"),
        Station("A20", "興南", "Xingnan", "A"),
        Station("A21", "環北", "Huanbei", "A", is_express=True),
        Station("A22", "老街溪", "Laojie Creek", "A"),
    ]
)

# Distance from A1 in 0.1 km units, in STATIONS order
CHAINAGE = (
    0, 48, 73, 90, 112, 127, 166, 183, 206, 263, 298,
    350, 360, 372, 396, 419, 436, 462, 478, 493, 510, 531,
)


def zone_fare(distance: int) -> int:
    """Get the fare for a travelled distance in 0.1 km units."""
    if distance <= BASE_DISTANCE:
        return BASE_FARE
    steps = -(-(distance - BASE_DISTANCE) // STEP_DISTANCE)
    return BASE_FARE + steps * STEP_FARE


MATRIX = FareMatrix.from_rule(
    len(STATIONS), lambda i, j: zone_fare(abs(CHAINAGE[i] - CHAINAGE[j]))
)

get_fare = matrix_fare(STATIONS, MATRIX)

NETWORK = Network(
    key="taoyuan_metro",
    label="桃園機捷",
    stations=STATIONS,
    fare=get_fare,
    matrix=MATRIX,
    lines=LINES,
)
