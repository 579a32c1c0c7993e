"""Taipei Metro stations and approximate fares.

There is no full fare matrix for this network. Fares come from a small table
of common routes, falling back to an estimate from the distance between the
two stations in the station list:

    stations travelled  <=2  <=4  <=6  <=8  <=10  <=12  <=15  <=18  <=22  more
    fare (TWD)           20   25   30   35   40    45    50    55    60    65
"""

from typing import Optional

from faretrack.networks.base import Network, Station, StationTable

LINES = (
    ("BR", "文湖線"),
    ("R", "淡水信義線"),
    ("G", "松山新店線"),
    ("O", "中和新蘆線"),
    ("BL", "板南線"),
)

MINIMUM_FARE = 20
TRANSFER_PENALTY = 2

FARE_STEPS = (
    (2, 20),
    (4, 25),
    (6, 30),
    (8, 35),
    (10, 40),
    (12, 45),
    (15, 50),
    (18, 55),
    (22, 60),
)
MAXIMUM_FARE = 65

STATIONS = StationTable(
    [
        # Wenhu Line
        Station("BR01", "動物園", "Taipei Zoo", "BR"),
        Station("BR02", "木柵", "Muzha", "BR"),
        Station("BR03", "萬芳社區", "Wanfang Community", "BR"),
        Station("BR04", "萬芳醫院", "Wanfang Hospital", "BR"),
        Station("BR05", "辛亥", "Xinhai", "BR"),
        Station("BR06", "麟光", "Linguang", "BR"),
        Station("BR07", "六張犁", "Liuzhangli", "BR"),
        Station("BR08", "科技大樓", "Technology Building", "BR"),
        Station("BR09", "大安", "Daan", "BR", ("R",)),
        Station("BR10", "忠孝復興", "Zhongxiao Fuxing", "BR", ("BL",)),
        Station("BR11", "南京復興", "Nanjing Fuxing", "BR", ("G",)),
        Station("BR12", "中山國中", "Zhongshan Junior High School", "BR"),
        Station("BR13", "松山機場", "Songshan Airport", "BR"),
        Station("BR14", "大直", "Dazhi", "BR"),
        Station("BR15", "劍南路", "Jiannan Road", "BR"),
        Station("BR16", "西湖", "Xihu", "BR"),
        Station("BR17", "港墘", "Gangqian", "BR"),
        Station("BR18", "文德", "Wende", "BR"),
        Station("BR19", "內湖", "Neihu", "BR"),
        Station("BR20", "大湖公園", "Dahu Park", "BR"),
        Station("BR21", "葫洲", "Huzhou", "BR"),
        Station("BR22", "東湖", "Donghu", "BR"),
        Station("BR23", "南港軟體園區", "Nangang Software Park", "BR"),
        Station("BR24", "南港展覽館", "Taipei Nangang Exhibition Center", "BR", ("BL",)),
        # Tamsui-Xinyi Line
        Station("R02", "淡水", "Tamsui", "R"),
        Station("R03", "紅樹林", "Hongshulin", "R"),
        Station("R04", "竹圍", "Zhuwei", "R"),
        Station("R05", "關渡", "Guandu", "R"),
        Station("R06", "忠義", "Zhongyi", "R"),
        Station("R07", "復興崗", "Fuxinggang", "R"),
        Station("R08", "北投", "Beitou", "R"),
        Station("R09", "新北投", "Xinbeitou", "R"),
        Station("R10", "奇岩", "Qiyan", "R"),
        Station("R11", "唭哩岸", "Qilian", "R"),
        Station("R12", "石牌", "Shipai", "R"),
        Station("R13", "明德", "Mingde", "R"),
        Station("R14", "芝山", "Zhishan", "R"),
        Station("R15", "士林", "Shilin", "R"),
        Station("R16", "劍潭", "Jiantan", "R"),
        Station("R17", "圓山", "Yuanshan", "R"),
        Station("R18", "民權西路", "Minquan W. Rd.", "R", ("O",)),
        Station("R19", "雙連", "Shuanglian", "R"),
        Station("R20", "中山", "Zhongshan", "R", ("G",)),
        Station("R21", "台北車站", "Taipei Main Station", "R", ("BL",)),
        Station("R22", "台大醫院", "NTU Hospital", "R"),
        Station("R23", "中正紀念堂", "Chiang Kai-Shek Memorial Hall", "R", ("G",)),
        Station("R24", "東門", "Dongmen", "R", ("O",)),
        Station("R25", "大安森林公園", "Daan Park", "R"),
        Station("R26", "大安", "Daan", "R", ("BR",)),
        Station("R27", "信義安和", "Xinyi Anhe", "R"),
        Station("R28", "台北101/世貿", "Taipei 101/World Trade Center", "R"),
        Station("R29", "象山", "Xiangshan", "R"),
        # Songshan-Xindian Line
        Station("G01", "新店", "Xindian", "G"),
        Station("G02", "新店區公所", "Xindian District Office", "G"),
        Station("G03", "七張", "Qizhang", "G"),
        Station("G03A", "小碧潭", "Xiaobitan", "G"),
        Station("G04", "大坪林", "Dapinglin", "G"),
        Station("G05", "景美", "Jingmei", "G"),
        Station("G06", "萬隆", "Wanlong", "G"),
        Station("G07", "公館", "Gongguan", "G"),
        Station("G08", "台電大樓", "Taipower Building", "G"),
        Station("G09", "古亭", "Guting", "G", ("O",)),
        Station("G10", "中正紀念堂", "Chiang Kai-Shek Memorial Hall", "G", ("R",)),
        Station("G11", "小南門", "Xiaonanmen", "G"),
        Station("G12", "西門", "Ximen", "G", ("BL",)),
        Station("G13", "北門", "Beimen", "G"),
        Station("G14", "中山", "Zhongshan", "G", ("R",)),
        Station("G15", "松江南京", "Songjiang Nanjing", "G", ("O",)),
        Station("G16", "南京復興", "Nanjing Fuxing", "G", ("BR",)),
        Station("G17", "台北小巨蛋", "Taipei Arena", "G"),
        Station("G18", "南京三民", "Nanjing Sanmin", "G"),
        Station("G19", "松山", "Songshan", "G"),
        # Zhonghe-Xinlu Line
        Station("O01", "南勢角", "Nanshijiao", "O"),
        Station("O02", "景安", "Jingan", "O"),
        Station("O03", "永安市場", "Yongan Market", "O"),
        Station("O04", "頂溪", "Dingxi", "O"),
        Station("O05", "古亭", "Guting", "O", ("G",)),
        Station("O06", "東門", "Dongmen", "O", ("R",)),
        Station("O07", "忠孝新生", "Zhongxiao Xinsheng", "O", ("BL",)),
        Station("O08", "松江南京", "Songjiang Nanjing", "O", ("G",)),
        Station("O09", "行天宮", "Xingtian Temple", "O"),
        Station("O10", "中山國小", "Zhongshan Elementary School", "O"),
        Station("O11", "民權西路", "Minquan W. Rd.", "O", ("R",)),
        Station("O12", "大橋頭", "Daqiaotou", "O"),
        Station("O13", "台北橋", "Taipei Bridge", "O"),
        Station("O14", "菜寮", "Cailiao", "O"),
        Station("O15", "三重", "Sanchong", "O"),
        Station("O16", "先嗇宮", "Xianse Temple", "O"),
        Station("O17", "頭前庄", "Touqianzhuang", "O"),
        Station("O18", "新莊", "Xinzhuang", "O"),
        Station("O19", "輔大", "Fu Jen University", "O"),
        Station("O20", "丹鳳", "Danfeng", "O"),
        Station("O21", "迴龍", "Huilong", "O"),
        Station("O50", "蘆洲", "Luzhou", "O"),
        Station("O51", "三民高中", "Sanmin Senior High School", "O"),
        Station("O52", "徐匯中學", "St. Ignatius High School", "O"),
        Station("O53", "三和國中", "Sanhe Junior High School", "O"),
        Station("O54", "三重國小", "Sanchong Elementary School", "O"),
        # Bannan Line
        Station("BL01", "頂埔", "Dingpu", "BL"),
        Station("BL02", "永寧", "Yongning", "BL"),
        Station("BL03", "土城", "Tucheng", "BL"),
        Station("BL04", "海山", "Haishan", "BL"),
        Station("BL05", "亞東醫院", "Far Eastern Hospital", "BL"),
        Station("BL06", "府中", "Fuzhong", "BL"),
        Station("BL07", "板橋", "Banqiao", "BL"),
        Station("BL08", "新埔", "Xinpu", "BL"),
        Station("BL09", "江子翠", "Jiangzicui", "BL"),
        Station("BL10", "龍山寺", "Longshan Temple", "BL"),
        Station("BL11", "西門", "Ximen", "BL", ("G",)),
        Station("BL12", "台北車站", "Taipei Main Station", "BL", ("R",)),
        Station("BL13", "善導寺", "Shandao Temple", "BL"),
        Station("BL14", "忠孝新生", "Zhongxiao Xinsheng", "BL", ("O",)),
        Station("BL15", "忠孝復興", "Zhongxiao Fuxing", "BL", ("BR",)),
        Station("BL16", "忠孝敦化", "Zhongxiao Dunhua", "BL"),
        Station("BL17", "國父紀念館", "Sun Yat-Sen Memorial Hall", "BL"),
        Station("BL18", "市政府", "Taipei City Hall", "BL"),
        Station("BL19", "永春", "Yongchun", "BL"),
        Station("BL20", "後山埤", "Houshanpi", "BL"),
        Station("BL21", "昆陽", "Kunyang", "BL"),
        Station("BL22", "南港", "Nangang", "BL"),
        Station("BL23", "南港展覽館", "Taipei Nangang Exhibition Center", "BL", ("BR",)),
    ]
)

# Frequently used routes, keyed by local station names in either direction
COMMON_FARES: dict[tuple[str, str], int] = {
    ("台北車站", "西門"): 20,
    ("台北車站", "忠孝復興"): 20,
    ("台北車站", "市政府"): 25,
    ("台北車站", "南港展覽館"): 30,
    ("台北車站", "板橋"): 25,
    ("台北車站", "淡水"): 50,
    ("台北車站", "動物園"): 35,
    ("西門", "龍山寺"): 20,
    ("忠孝復興", "南京復興"): 20,
    ("忠孝復興", "台北101/世貿"): 25,
}


def fare_by_station_count(station_count: int) -> int:
    """Map a number of stations travelled onto the fare step table."""
    for max_stations, fare in FARE_STEPS:
        if station_count <= max_stations:
            return fare
    return MAXIMUM_FARE


def has_direct_transfer(from_station: Station, to_station: Station) -> bool:
    """Check whether two stations share a listed transfer connection.

    The check is symmetric in its arguments.
    """
    if not from_station.transfer_lines or not to_station.transfer_lines:
        return False
    if to_station.line in from_station.transfer_lines:
        return True
    if from_station.line in to_station.transfer_lines:
        return True
    return bool(set(from_station.transfer_lines) & set(to_station.transfer_lines))


def estimate_fare(from_code: str, to_code: str) -> int:
    """Estimate the fare between two station codes.

    Returns 0 when either code is unknown. The same station costs the minimum
    fare rather than 0.
    """
    from_index = STATIONS.index_of_code(from_code)
    to_index = STATIONS.index_of_code(to_code)
    if from_index is None or to_index is None:
        return 0
    if from_index == to_index:
        return MINIMUM_FARE

    from_station = STATIONS.stations[from_index]
    to_station = STATIONS.stations[to_index]
    station_count = abs(to_index - from_index)

    if from_station.line != to_station.line:
        transfers = 1 if has_direct_transfer(from_station, to_station) else 2
        station_count += transfers * TRANSFER_PENALTY

    return fare_by_station_count(station_count)


def get_common_fare(from_name: str, to_name: str) -> Optional[int]:
    """Look up a route in the common-fare table, in either direction."""
    fare = COMMON_FARES.get((from_name, to_name))
    if fare is None:
        fare = COMMON_FARES.get((to_name, from_name))
    return fare


def get_fare(from_name: str, to_name: str) -> int:
    """Get the fare between two station names.

    Returns 0 when either station name cannot be resolved.
    """
    from_station = STATIONS.resolve(from_name)
    to_station = STATIONS.resolve(to_name)
    if from_station is None or to_station is None:
        return 0

    common = get_common_fare(from_station.name, to_station.name)
    if common is not None:
        return common

    return estimate_fare(from_station.code, to_station.code)


NETWORK = Network(
    key="taipei_metro",
    label="台北捷運",
    stations=STATIONS,
    fare=get_fare,
    lines=LINES,
)
