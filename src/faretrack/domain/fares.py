"""Fare calculation.

Each transport mode family has its own fare query type; ``compute_fare``
resolves any of them to an amount in whole TWD.

Station lookups degrade to 0 for unknown stations instead of raising. Station
modes never legitimately cost 0, so callers must treat a 0 station fare as
"unknown" rather than as a free ride.
"""

from dataclasses import dataclass
from typing import Optional, Union

from faretrack.domain.entities import BikeCity, TransportType
from faretrack.networks import get_network

TPASS_TICKET_PRICE = 1200
DEFAULT_BUS_FARE = 15

# Bike-share billing
BIKE_BLOCK_MINUTES = 30
BIKE_TIER_WINDOW = 240
BIKE_TIER1_RATE = 10
BIKE_TIER2_RATE = 20
BIKE_TIER3_RATE = 40
BIKE_FREE_MINUTES = 30
BIKE_EXTENDED_FREE_MINUTES = {BikeCity.TAOYUAN: 60}

# Refund estimate when returning a pass early
REFUND_DAILY_DEDUCTION = 300
REFUND_HANDLING_FEE = 20


@dataclass(frozen=True)
class StationFare:
    """Rail trip priced by departure and arrival station names."""

    transport_type: TransportType
    departure: str
    arrival: str


@dataclass(frozen=True)
class BikeFare:
    """Bike-share ride priced by duration and city."""

    minutes: int
    city: BikeCity = BikeCity.TAIPEI


@dataclass(frozen=True)
class SegmentFare:
    """Bus ride priced per segment."""

    segments: int
    fare_per_segment: int = DEFAULT_BUS_FARE


@dataclass(frozen=True)
class FlatFare:
    """Manually entered amount (highway bus, ferry)."""

    amount: int


FareQuery = Union[StationFare, BikeFare, SegmentFare, FlatFare]


def _ceil_div(value: int, divisor: int) -> int:
    return -(-value // divisor)


def free_minutes(city: BikeCity) -> int:
    """Get the free bike-share allowance for a city."""
    return BIKE_EXTENDED_FREE_MINUTES.get(BikeCity(city), BIKE_FREE_MINUTES)


def calculate_bike_fee(minutes: int, city: BikeCity) -> int:
    """Calculate a bike-share fee.

    Minutes past the free allowance are billed per started 30 minutes at
    10 TWD until the 4-hour mark, 20 TWD for the next 4 hours and 40 TWD
    after that.

    Args:
        minutes: Total ride duration in minutes
        city: City where the ride took place

    Returns:
        Fee in TWD
    """
    allowance = free_minutes(city)
    if minutes <= allowance:
        return 0

    remaining = minutes - allowance
    fee = 0

    tier1_minutes = min(remaining, BIKE_TIER_WINDOW - allowance)
    fee += _ceil_div(tier1_minutes, BIKE_BLOCK_MINUTES) * BIKE_TIER1_RATE
    remaining -= tier1_minutes

    if remaining > 0:
        tier2_minutes = min(remaining, BIKE_TIER_WINDOW)
        fee += _ceil_div(tier2_minutes, BIKE_BLOCK_MINUTES) * BIKE_TIER2_RATE
        remaining -= tier2_minutes

    if remaining > 0:
        fee += _ceil_div(remaining, BIKE_BLOCK_MINUTES) * BIKE_TIER3_RATE

    return fee


def calculate_segment_fare(segments: int, fare_per_segment: int = DEFAULT_BUS_FARE) -> int:
    """Calculate a bus fare from its segment count."""
    return segments * fare_per_segment


def calculate_station_fare(transport_type: TransportType, departure: str, arrival: str) -> int:
    """Look up a rail fare between two station names.

    Returns 0 if the network or either station is unknown, including
    non-rail modes and keys that name no transport type.
    """
    key = transport_type.value if isinstance(transport_type, TransportType) else transport_type
    network = get_network(key)
    if network is None:
        return 0
    return network.fare(departure, arrival)


def calculate_saved_amount(total_trip_amount: int, ticket_price: int = TPASS_TICKET_PRICE) -> int:
    """Savings of the pass over per-trip fares; negative means a loss."""
    return total_trip_amount - ticket_price


def calculate_refund_amount(days_elapsed: int, ticket_price: int = TPASS_TICKET_PRICE) -> int:
    """Estimate the refund for returning a pass after ``days_elapsed`` days.

    A result of 0 or less means no refund is available.
    """
    return ticket_price - days_elapsed * REFUND_DAILY_DEDUCTION - REFUND_HANDLING_FEE


def compute_fare(query: FareQuery) -> int:
    """Compute the fare for a query."""
    match query:
        case StationFare(transport_type=transport_type, departure=departure, arrival=arrival):
            return calculate_station_fare(transport_type, departure, arrival)
        case BikeFare(minutes=minutes, city=city):
            return calculate_bike_fee(minutes, city)
        case SegmentFare(segments=segments, fare_per_segment=fare_per_segment):
            return calculate_segment_fare(segments, fare_per_segment)
        case FlatFare(amount=amount):
            return amount
    raise TypeError(f"Unsupported fare query: {query!r}")


def fare_query_for(
    transport_type: TransportType,
    departure: Optional[str] = None,
    arrival: Optional[str] = None,
    segments: Optional[int] = None,
    fare_per_segment: int = DEFAULT_BUS_FARE,
    duration: Optional[int] = None,
    city: Optional[BikeCity] = None,
    amount: Optional[int] = None,
) -> FareQuery:
    """Build the fare query for a transport type and its parameters.

    Missing parameters fall back to values that price to 0 (station modes) or
    to the smallest trip (one bus segment), so the result is always computable.
    """
    transport_type = TransportType(transport_type)
    if transport_type.is_station_based:
        return StationFare(transport_type, departure or "", arrival or "")
    if transport_type == TransportType.BUS:
        return SegmentFare(segments if segments is not None else 1, fare_per_segment)
    if transport_type == TransportType.YOUBIKE:
        return BikeFare(duration or 0, BikeCity(city) if city is not None else BikeCity.TAIPEI)
    return FlatFare(amount or 0)


def compute_fare_for(transport_type: TransportType, **params) -> int:
    """Compute a fare from a transport type and its mode-specific parameters."""
    return compute_fare(fare_query_for(transport_type, **params))
