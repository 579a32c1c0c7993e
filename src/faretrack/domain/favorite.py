"""Favorite route domain service."""

from datetime import datetime
from typing import Optional

from faretrack.database.base import Database
from faretrack.domain.entities import BikeCity, FavoriteRoute, TransportType
from faretrack.domain.errors import ConflictError, NotFoundError, ValidationError, route_not_found
from faretrack.domain.trip import TripService
from faretrack.domain.validation import is_valid_amount, is_valid_duration, is_valid_segments


class FavoriteRouteService:
    """Service for saving and replaying frequently taken trips."""

    def __init__(self, db: Database):
        self.db = db
        self.trips = TripService(db)

    def add_route(
        self,
        name: str,
        transport_type: TransportType,
        departure_station: Optional[str] = None,
        arrival_station: Optional[str] = None,
        route_number: Optional[str] = None,
        default_amount: Optional[int] = None,
        segments: Optional[int] = None,
        duration: Optional[int] = None,
        city: Optional[BikeCity] = None,
    ) -> int:
        """Save a favorite route.

        Bike-share routes keep a ride duration and city, bus routes a segment
        count, so the fare can be calculated each time the route is used.

        Returns:
            Route ID

        Raises:
            ConflictError: If a route with this name exists
            ValidationError: If the name, amount or trip details are invalid
        """
        name = name.strip()
        if not name:
            raise ValidationError("Route name cannot be empty")
        transport_type = TransportType(transport_type)
        if transport_type.is_station_based and (not departure_station or not arrival_station):
            raise ValidationError("Departure and arrival stations are required")
        if segments is not None and not is_valid_segments(segments):
            raise ValidationError(f"Invalid segment count: {segments} (must be 1-10)")
        if transport_type == TransportType.YOUBIKE:
            if duration is None:
                raise ValidationError("Ride duration is required")
            if not is_valid_duration(duration):
                raise ValidationError(f"Invalid duration: {duration} (must be 1-1440 minutes)")
        if default_amount is not None and not is_valid_amount(default_amount):
            raise ValidationError(f"Invalid amount: {default_amount} (must be 1-10000)")
        if self.db.get_favorite_route_by_name(name) is not None:
            raise ConflictError(f"Favorite route '{name}' already exists")

        return self.db.create_favorite_route(
            name=name,
            transport_type=transport_type,
            departure_station=departure_station,
            arrival_station=arrival_station,
            route_number=route_number,
            default_amount=default_amount,
            segments=segments,
            duration=duration,
            city=city,
        )

    def list_routes(self) -> list[FavoriteRoute]:
        """List favorite routes in sort order."""
        return self.db.list_favorite_routes()

    def get_route(self, name: str) -> FavoriteRoute:
        """Get a favorite route by name or raise NotFoundError."""
        route = self.db.get_favorite_route_by_name(name)
        if route is None:
            raise NotFoundError(route_not_found(name))
        return route

    def delete_route(self, name: str) -> None:
        """Delete a favorite route by name."""
        route = self.get_route(name)
        self.db.delete_favorite_route(route.id)

    def use_route(
        self,
        name: str,
        amount: Optional[int] = None,
        timestamp: Optional[datetime] = None,
        note: Optional[str] = None,
    ) -> int:
        """Record a trip in the active period from a favorite route.

        The amount falls back to the route's default amount, then to the
        calculated fare.

        Returns:
            Trip ID
        """
        route = self.get_route(name)
        if amount is None:
            amount = route.default_amount
        return self.trips.record_trip(
            transport_type=route.transport_type,
            amount=amount,
            timestamp=timestamp,
            departure_station=route.departure_station,
            arrival_station=route.arrival_station,
            route_number=route.route_number,
            segments=route.segments,
            duration=route.duration,
            city=route.city,
            note=note,
        )
