"""Domain model entities for faretrack.

These are pure data classes representing business concepts, independent of
database schema. Amounts are whole New Taiwan dollars stored as ``int``.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from enum import Enum
from typing import Optional


class TransportType(str, Enum):
    """Transit modes covered by the pass."""

    TAIPEI_METRO = "taipei_metro"
    NEW_TAIPEI_METRO = "new_taipei_metro"
    TAOYUAN_METRO = "taoyuan_metro"
    DANHAI_LRT = "danhai_lrt"
    ANKENG_LRT = "ankeng_lrt"
    TRA = "tra"
    BUS = "bus"
    HIGHWAY_BUS = "highway_bus"
    YOUBIKE = "youbike"
    FERRY = "ferry"

    @property
    def is_station_based(self) -> bool:
        """True for modes priced by departure/arrival station."""
        return self in STATION_BASED_TYPES


STATION_BASED_TYPES = frozenset(
    {
        TransportType.TAIPEI_METRO,
        TransportType.NEW_TAIPEI_METRO,
        TransportType.TAOYUAN_METRO,
        TransportType.DANHAI_LRT,
        TransportType.ANKENG_LRT,
        TransportType.TRA,
    }
)


class PeriodStatus(str, Enum):
    """Period lifecycle status. Only ACTIVE -> COMPLETED is allowed."""

    ACTIVE = "active"
    COMPLETED = "completed"


class BikeCity(str, Enum):
    """City of a bike-share ride, which sets the free allowance."""

    TAIPEI = "taipei"
    NEW_TAIPEI = "new_taipei"
    TAOYUAN = "taoyuan"
    KEELUNG = "keelung"


@dataclass(frozen=True)
class TransportTypeInfo:
    """Display information for a transport type."""

    type: TransportType
    label: str
    icon_type: str
    color: str


TRANSPORT_TYPE_INFO: dict[TransportType, TransportTypeInfo] = {
    TransportType.TAIPEI_METRO: TransportTypeInfo(TransportType.TAIPEI_METRO, "台北捷運", "metro", "#0066CC"),
    TransportType.NEW_TAIPEI_METRO: TransportTypeInfo(TransportType.NEW_TAIPEI_METRO, "新北捷運", "metro", "#FFCC00"),
    TransportType.TAOYUAN_METRO: TransportTypeInfo(
        TransportType.TAOYUAN_METRO, "桃園機捷", "airportExpress", "#8246AF"
    ),
    TransportType.DANHAI_LRT: TransportTypeInfo(TransportType.DANHAI_LRT, "淡海輕軌", "lightRail", "#00A3E0"),
    TransportType.ANKENG_LRT: TransportTypeInfo(TransportType.ANKENG_LRT, "安坑輕軌", "lightRail", "#80CC28"),
    TransportType.TRA: TransportTypeInfo(TransportType.TRA, "台鐵", "train", "#0072BC"),
    TransportType.BUS: TransportTypeInfo(TransportType.BUS, "公車", "bus", "#E31937"),
    TransportType.HIGHWAY_BUS: TransportTypeInfo(TransportType.HIGHWAY_BUS, "客運", "coach", "#FF6600"),
    TransportType.YOUBIKE: TransportTypeInfo(TransportType.YOUBIKE, "YouBike", "bike", "#FFA500"),
    TransportType.FERRY: TransportTypeInfo(TransportType.FERRY, "渡輪", "ferry", "#006994"),
}


@dataclass(frozen=True)
class Period:
    """A 30-day pass period."""

    id: int
    start_date: date
    end_date: date
    ticket_price: int
    status: PeriodStatus
    created_at: datetime
    updated_at: datetime

    @property
    def is_active(self) -> bool:
        return self.status == PeriodStatus.ACTIVE


@dataclass(frozen=True)
class Trip:
    """A single recorded trip belonging to one period."""

    id: int
    period_id: int
    transport_type: TransportType
    amount: int
    timestamp: datetime
    departure_station: Optional[str] = None
    arrival_station: Optional[str] = None
    route_number: Optional[str] = None
    segments: Optional[int] = None
    duration: Optional[int] = None
    city: Optional[BikeCity] = None
    ferry_route: Optional[str] = None
    note: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class ModeTotals:
    """Trip count and amount for one transport type."""

    count: int = 0
    amount: int = 0


@dataclass(frozen=True)
class PeriodStats:
    """Statistics for one period, computed on demand and never stored."""

    total_amount: int
    trip_count: int
    saved_amount: int
    days_elapsed: int
    days_remaining: int
    daily_average: float
    transport_breakdown: dict[TransportType, ModeTotals] = field(default_factory=dict)


@dataclass(frozen=True)
class GlobalStats:
    """Statistics across every period, computed on demand."""

    total_periods: int
    total_pass_cost: int
    total_trip_amount: int
    total_saved_amount: int
    total_trip_count: int


@dataclass(frozen=True)
class UserSettings:
    """User-tunable defaults."""

    default_bus_fare: int
    default_ticket_price: int
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class FavoriteRoute:
    """Named shortcut for a frequently taken trip."""

    id: int
    name: str
    transport_type: TransportType
    departure_station: Optional[str] = None
    arrival_station: Optional[str] = None
    route_number: Optional[str] = None
    default_amount: Optional[int] = None
    segments: Optional[int] = None
    duration: Optional[int] = None
    city: Optional[BikeCity] = None
    sort_order: int = 0
