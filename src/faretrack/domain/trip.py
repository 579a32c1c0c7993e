"""Trip domain service."""

import logging
from datetime import datetime
from typing import Optional

from faretrack.database.base import Database
from faretrack.domain.entities import BikeCity, TransportType, Trip as TripEntity
from faretrack.domain.errors import (
    NotFoundError,
    ValidationError,
    no_active_period,
    period_not_found,
    trip_not_found,
    unknown_fare,
)
from faretrack.domain.fares import compute_fare, fare_query_for
from faretrack.domain.validation import (
    is_valid_amount,
    is_valid_bike_amount,
    is_valid_duration,
    is_valid_segments,
)

logger = logging.getLogger(__name__)

MANUAL_FARE_TYPES = frozenset({TransportType.HIGHWAY_BUS, TransportType.FERRY})


class TripService:
    """Service for recording and editing trips."""

    def __init__(self, db: Database):
        """Initialize trip service.

        Args:
            db: Database instance
        """
        self.db = db

    def calculate_amount(
        self,
        transport_type: TransportType,
        departure_station: Optional[str] = None,
        arrival_station: Optional[str] = None,
        segments: Optional[int] = None,
        duration: Optional[int] = None,
        city: Optional[BikeCity] = None,
    ) -> int:
        """Calculate the fare for a trip using the configured bus fare.

        Returns 0 if a station fare cannot be resolved.
        """
        query = fare_query_for(
            transport_type,
            departure=departure_station,
            arrival=arrival_station,
            segments=segments,
            fare_per_segment=self.db.get_settings().default_bus_fare,
            duration=duration,
            city=city,
        )
        return compute_fare(query)

    def _validate_parameters(
        self,
        transport_type: TransportType,
        departure_station: Optional[str],
        arrival_station: Optional[str],
        segments: Optional[int],
        duration: Optional[int],
    ) -> None:
        if transport_type.is_station_based and (not departure_station or not arrival_station):
            raise ValidationError("Departure and arrival stations are required")
        if segments is not None and not is_valid_segments(segments):
            raise ValidationError(f"Invalid segment count: {segments} (must be 1-10)")
        if transport_type == TransportType.YOUBIKE:
            if duration is None:
                raise ValidationError("Ride duration is required")
            if not is_valid_duration(duration):
                raise ValidationError(f"Invalid duration: {duration} (must be 1-1440 minutes)")

    def _validate_amount(self, transport_type: TransportType, amount: int) -> None:
        if transport_type == TransportType.YOUBIKE:
            if not is_valid_bike_amount(amount):
                raise ValidationError(f"Invalid amount: {amount} (must be 0-10000)")
        elif not is_valid_amount(amount):
            raise ValidationError(f"Invalid amount: {amount} (must be 1-10000)")

    def _resolve_amount(
        self,
        transport_type: TransportType,
        amount: Optional[int],
        departure_station: Optional[str],
        arrival_station: Optional[str],
        segments: Optional[int],
        duration: Optional[int],
        city: Optional[BikeCity],
    ) -> int:
        if amount is not None:
            return amount
        if transport_type in MANUAL_FARE_TYPES:
            raise ValidationError(f"Amount is required for {transport_type.value} trips")

        amount = self.calculate_amount(
            transport_type,
            departure_station=departure_station,
            arrival_station=arrival_station,
            segments=segments,
            duration=duration,
            city=city,
        )
        # A station fare of 0 means one of the stations is unknown
        if transport_type.is_station_based and amount == 0:
            raise ValidationError(
                unknown_fare(transport_type.value, departure_station or "", arrival_station or "")
            )
        return amount

    def record_trip(
        self,
        transport_type: TransportType,
        amount: Optional[int] = None,
        period_id: Optional[int] = None,
        timestamp: Optional[datetime] = None,
        departure_station: Optional[str] = None,
        arrival_station: Optional[str] = None,
        route_number: Optional[str] = None,
        segments: Optional[int] = None,
        duration: Optional[int] = None,
        city: Optional[BikeCity] = None,
        ferry_route: Optional[str] = None,
        note: Optional[str] = None,
    ) -> int:
        """Record a trip.

        Args:
            transport_type: Transport mode
            amount: Fare paid; calculated from the other fields when omitted
            period_id: Period to attach the trip to (defaults to the active period)
            timestamp: When the trip happened (defaults to now)
            departure_station: Departure station name (rail modes)
            arrival_station: Arrival station name (rail modes)
            route_number: Bus or highway bus route
            segments: Bus segment count
            duration: Bike-share ride duration in minutes
            city: Bike-share city
            ferry_route: Ferry route name
            note: Free-form note

        Returns:
            Trip ID

        Raises:
            NotFoundError: If there is no such period or no active period
            ValidationError: If parameters are invalid or the fare is unknown
        """
        transport_type = TransportType(transport_type)
        if city is not None:
            city = BikeCity(city)
        if transport_type == TransportType.YOUBIKE and city is None:
            city = BikeCity.TAIPEI
        if transport_type == TransportType.BUS and segments is None:
            segments = 1

        if period_id is None:
            period = self.db.get_active_period()
            if period is None:
                raise NotFoundError(no_active_period())
            period_id = period.id
        elif self.db.get_period(period_id) is None:
            raise NotFoundError(period_not_found(period_id))

        self._validate_parameters(transport_type, departure_station, arrival_station, segments, duration)
        amount = self._resolve_amount(
            transport_type, amount, departure_station, arrival_station, segments, duration, city
        )
        self._validate_amount(transport_type, amount)

        trip_id = self.db.create_trip(
            period_id=period_id,
            transport_type=transport_type,
            amount=amount,
            timestamp=timestamp or datetime.now(),
            departure_station=departure_station,
            arrival_station=arrival_station,
            route_number=route_number,
            segments=segments,
            duration=duration,
            city=city,
            ferry_route=ferry_route,
            note=note,
        )
        logger.debug("Recorded %s trip %s (%s TWD) in period %s", transport_type.value, trip_id, amount, period_id)
        return trip_id

    def get_trip(self, trip_id: int) -> Optional[TripEntity]:
        """Get trip by ID."""
        return self.db.get_trip(trip_id)

    def list_trips(
        self,
        period_id: Optional[int] = None,
        transport_type: Optional[TransportType] = None,
    ) -> list[TripEntity]:
        """List trips, newest first."""
        return self.db.list_trips(period_id=period_id, transport_type=transport_type)

    def update_trip(
        self,
        trip_id: int,
        amount: Optional[int] = None,
        timestamp: Optional[datetime] = None,
        departure_station: Optional[str] = None,
        arrival_station: Optional[str] = None,
        route_number: Optional[str] = None,
        segments: Optional[int] = None,
        duration: Optional[int] = None,
        city: Optional[BikeCity] = None,
        note: Optional[str] = None,
        recalculate: bool = False,
    ) -> None:
        """Update trip fields.

        Args:
            trip_id: Trip ID to update
            amount: Optional new amount
            timestamp: Optional new timestamp
            departure_station: Optional new departure station
            arrival_station: Optional new arrival station
            route_number: Optional new route number
            segments: Optional new segment count
            duration: Optional new duration
            city: Optional new bike-share city
            note: Optional new note
            recalculate: If True and no amount is given, recompute the fare
                from the updated fields

        Raises:
            NotFoundError: If the trip doesn't exist
            ValidationError: If a new value is invalid
        """
        trip = self.db.get_trip(trip_id)
        if trip is None:
            raise NotFoundError(trip_not_found(trip_id))

        if city is not None:
            city = BikeCity(city)
        new_departure = departure_station if departure_station is not None else trip.departure_station
        new_arrival = arrival_station if arrival_station is not None else trip.arrival_station
        new_segments = segments if segments is not None else trip.segments
        new_duration = duration if duration is not None else trip.duration
        new_city = city if city is not None else trip.city

        self._validate_parameters(trip.transport_type, new_departure, new_arrival, new_segments, new_duration)

        if amount is None and recalculate:
            amount = self._resolve_amount(
                trip.transport_type, None, new_departure, new_arrival, new_segments, new_duration, new_city
            )
        if amount is not None:
            self._validate_amount(trip.transport_type, amount)

        self.db.update_trip(
            trip_id,
            amount=amount,
            timestamp=timestamp,
            departure_station=departure_station,
            arrival_station=arrival_station,
            route_number=route_number,
            segments=segments,
            duration=duration,
            city=city,
            note=note,
        )

    def delete_trip(self, trip_id: int) -> None:
        """Delete a trip.

        Raises:
            NotFoundError: If the trip doesn't exist
        """
        if self.db.get_trip(trip_id) is None:
            raise NotFoundError(trip_not_found(trip_id))
        self.db.delete_trip(trip_id)
