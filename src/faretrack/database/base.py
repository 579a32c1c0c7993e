"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime

# Import entities directly to avoid circular import through domain/__init__.py
from faretrack.domain.entities import (
    BikeCity,
    FavoriteRoute,
    Period,
    PeriodStatus,
    TransportType,
    Trip,
    UserSettings,
)


class Database(ABC):
    """Abstract database interface for faretrack.

    This is the persistence collaborator of the fare core: it supplies period
    and trip snapshots and stores the amounts the calculator produced.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Period operations
    @abstractmethod
    def create_period(
        self,
        start_date: date,
        end_date: date,
        ticket_price: int,
        status: PeriodStatus = PeriodStatus.ACTIVE,
    ) -> int:
        """Create a period. Returns period ID."""
        pass

    @abstractmethod
    def get_period(self, period_id: int) -> Optional[Period]:
        """Get period by ID."""
        pass

    @abstractmethod
    def get_active_period(self) -> Optional[Period]:
        """Get the active period, if any."""
        pass

    @abstractmethod
    def list_periods(self, status: Optional[PeriodStatus] = None) -> list[Period]:
        """List periods, newest first, optionally filtered by status."""
        pass

    @abstractmethod
    def update_period_status(self, period_id: int, status: PeriodStatus) -> None:
        """Set the status of a period."""
        pass

    @abstractmethod
    def delete_period(self, period_id: int) -> None:
        """Delete a period."""
        pass

    @abstractmethod
    def get_period_trip_count(self, period_id: int) -> int:
        """Get count of trips belonging to a period."""
        pass

    # Trip operations
    @abstractmethod
    def create_trip(
        self,
        period_id: int,
        transport_type: TransportType,
        amount: int,
        timestamp: datetime,
        departure_station: Optional[str] = None,
        arrival_station: Optional[str] = None,
        route_number: Optional[str] = None,
        segments: Optional[int] = None,
        duration: Optional[int] = None,
        city: Optional[BikeCity] = None,
        ferry_route: Optional[str] = None,
        note: Optional[str] = None,
    ) -> int:
        """Create a trip. Returns trip ID."""
        pass

    @abstractmethod
    def get_trip(self, trip_id: int) -> Optional[Trip]:
        """Get trip by ID."""
        pass

    @abstractmethod
    def list_trips(
        self,
        period_id: Optional[int] = None,
        transport_type: Optional[TransportType] = None,
    ) -> list[Trip]:
        """List trips, newest first, with optional filters."""
        pass

    @abstractmethod
    def update_trip(
        self,
        trip_id: int,
        transport_type: Optional[TransportType] = None,
        amount: Optional[int] = None,
        timestamp: Optional[datetime] = None,
        departure_station: Optional[str] = None,
        arrival_station: Optional[str] = None,
        route_number: Optional[str] = None,
        segments: Optional[int] = None,
        duration: Optional[int] = None,
        city: Optional[BikeCity] = None,
        note: Optional[str] = None,
    ) -> None:
        """Update trip fields. None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_trip(self, trip_id: int) -> None:
        """Delete a trip."""
        pass

    # Settings operations
    @abstractmethod
    def get_settings(self) -> UserSettings:
        """Get user settings, creating defaults on first use."""
        pass

    @abstractmethod
    def update_settings(
        self,
        default_bus_fare: Optional[int] = None,
        default_ticket_price: Optional[int] = None,
    ) -> None:
        """Update user settings."""
        pass

    # Favorite route operations
    @abstractmethod
    def create_favorite_route(
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
        """Create a favorite route. Returns route ID."""
        pass

    @abstractmethod
    def get_favorite_route_by_name(self, name: str) -> Optional[FavoriteRoute]:
        """Get favorite route by name."""
        pass

    @abstractmethod
    def list_favorite_routes(self) -> list[FavoriteRoute]:
        """List favorite routes in sort order."""
        pass

    @abstractmethod
    def delete_favorite_route(self, route_id: int) -> None:
        """Delete a favorite route."""
        pass
