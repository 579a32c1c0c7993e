"""Generic SQLAlchemy database implementation."""

from typing import Optional
from datetime import date, datetime
from sqlalchemy.orm import Session

from faretrack.database.base import Database
from faretrack.database.models import (
    FavoriteRoute,
    Period,
    Settings,
    Trip,
    create_session_factory,
)
from faretrack.database.mappers import (
    favorite_route_to_domain,
    period_to_domain,
    settings_to_domain,
    trip_to_domain,
)
from faretrack.domain.entities import (
    BikeCity,
    FavoriteRoute as DomainFavoriteRoute,
    Period as DomainPeriod,
    PeriodStatus,
    TransportType,
    Trip as DomainTrip,
    UserSettings as DomainUserSettings,
)
from faretrack.domain.fares import DEFAULT_BUS_FARE, TPASS_TICKET_PRICE


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    # Period operations
    def create_period(
        self,
        start_date: date,
        end_date: date,
        ticket_price: int,
        status: PeriodStatus = PeriodStatus.ACTIVE,
    ) -> int:
        """Create a period. Returns period ID."""
        session = self._get_session()
        period = Period(
            start_date=start_date,
            end_date=end_date,
            ticket_price=ticket_price,
            status=PeriodStatus(status).value,
        )
        session.add(period)
        session.commit()
        return period.id

    def get_period(self, period_id: int) -> Optional[DomainPeriod]:
        """Get period by ID."""
        session = self._get_session()
        period = session.query(Period).filter(Period.id == period_id).first()
        if period is None:
            return None
        return period_to_domain(period)

    def get_active_period(self) -> Optional[DomainPeriod]:
        """Get the active period, if any."""
        session = self._get_session()
        period = (
            session.query(Period)
            .filter(Period.status == PeriodStatus.ACTIVE.value)
            .order_by(Period.start_date.desc(), Period.id.desc())
            .first()
        )
        if period is None:
            return None
        return period_to_domain(period)

    def list_periods(self, status: Optional[PeriodStatus] = None) -> list[DomainPeriod]:
        """List periods, newest first, optionally filtered by status."""
        session = self._get_session()
        query = session.query(Period)
        if status is not None:
            query = query.filter(Period.status == PeriodStatus(status).value)
        periods = query.order_by(Period.start_date.desc(), Period.id.desc()).all()
        return [period_to_domain(p) for p in periods]

    def update_period_status(self, period_id: int, status: PeriodStatus) -> None:
        """Set the status of a period."""
        session = self._get_session()
        period = session.query(Period).filter(Period.id == period_id).first()
        if period is None:
            raise ValueError(f"Period {period_id} not found")
        period.status = PeriodStatus(status).value
        session.commit()

    def delete_period(self, period_id: int) -> None:
        """Delete a period."""
        session = self._get_session()
        period = session.query(Period).filter(Period.id == period_id).first()
        if period is None:
            raise ValueError(f"Period {period_id} not found")
        session.delete(period)
        session.commit()

    def get_period_trip_count(self, period_id: int) -> int:
        """Get count of trips belonging to a period."""
        session = self._get_session()
        return session.query(Trip).filter(Trip.period_id == period_id).count()

    # Trip operations
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
        session = self._get_session()
        trip = Trip(
            period_id=period_id,
            transport_type=TransportType(transport_type).value,
            amount=amount,
            timestamp=timestamp,
            departure_station=departure_station,
            arrival_station=arrival_station,
            route_number=route_number,
            segments=segments,
            duration=duration,
            city=BikeCity(city).value if city is not None else None,
            ferry_route=ferry_route,
            note=note,
        )
        session.add(trip)
        session.commit()
        return trip.id

    def get_trip(self, trip_id: int) -> Optional[DomainTrip]:
        """Get trip by ID."""
        session = self._get_session()
        trip = session.query(Trip).filter(Trip.id == trip_id).first()
        if trip is None:
            return None
        return trip_to_domain(trip)

    def list_trips(
        self,
        period_id: Optional[int] = None,
        transport_type: Optional[TransportType] = None,
    ) -> list[DomainTrip]:
        """List trips, newest first, with optional filters."""
        session = self._get_session()
        query = session.query(Trip)
        if period_id is not None:
            query = query.filter(Trip.period_id == period_id)
        if transport_type is not None:
            query = query.filter(Trip.transport_type == TransportType(transport_type).value)
        trips = query.order_by(Trip.timestamp.desc(), Trip.id.desc()).all()
        return [trip_to_domain(t) for t in trips]

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
        session = self._get_session()
        trip = session.query(Trip).filter(Trip.id == trip_id).first()
        if trip is None:
            raise ValueError(f"Trip {trip_id} not found")

        if transport_type is not None:
            trip.transport_type = TransportType(transport_type).value
        if amount is not None:
            trip.amount = amount
        if timestamp is not None:
            trip.timestamp = timestamp
        if departure_station is not None:
            trip.departure_station = departure_station
        if arrival_station is not None:
            trip.arrival_station = arrival_station
        if route_number is not None:
            trip.route_number = route_number
        if segments is not None:
            trip.segments = segments
        if duration is not None:
            trip.duration = duration
        if city is not None:
            trip.city = BikeCity(city).value
        if note is not None:
            trip.note = note

        session.commit()

    def delete_trip(self, trip_id: int) -> None:
        """Delete a trip."""
        session = self._get_session()
        trip = session.query(Trip).filter(Trip.id == trip_id).first()
        if trip is None:
            raise ValueError(f"Trip {trip_id} not found")
        session.delete(trip)
        session.commit()

    # Settings operations
    def _get_or_create_settings(self) -> Settings:
        session = self._get_session()
        settings = session.query(Settings).order_by(Settings.id).first()
        if settings is None:
            settings = Settings(
                default_bus_fare=DEFAULT_BUS_FARE,
                default_ticket_price=TPASS_TICKET_PRICE,
            )
            session.add(settings)
            session.commit()
        return settings

    def get_settings(self) -> DomainUserSettings:
        """Get user settings, creating defaults on first use."""
        return settings_to_domain(self._get_or_create_settings())

    def update_settings(
        self,
        default_bus_fare: Optional[int] = None,
        default_ticket_price: Optional[int] = None,
    ) -> None:
        """Update user settings."""
        session = self._get_session()
        settings = self._get_or_create_settings()
        if default_bus_fare is not None:
            settings.default_bus_fare = default_bus_fare
        if default_ticket_price is not None:
            settings.default_ticket_price = default_ticket_price
        session.commit()

    # Favorite route operations
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
        session = self._get_session()
        sort_order = session.query(FavoriteRoute).count()
        route = FavoriteRoute(
            name=name,
            transport_type=TransportType(transport_type).value,
            departure_station=departure_station,
            arrival_station=arrival_station,
            route_number=route_number,
            default_amount=default_amount,
            segments=segments,
            duration=duration,
            city=BikeCity(city).value if city is not None else None,
            sort_order=sort_order,
        )
        session.add(route)
        session.commit()
        return route.id

    def get_favorite_route_by_name(self, name: str) -> Optional[DomainFavoriteRoute]:
        """Get favorite route by name."""
        session = self._get_session()
        route = session.query(FavoriteRoute).filter(FavoriteRoute.name == name).first()
        if route is None:
            return None
        return favorite_route_to_domain(route)

    def list_favorite_routes(self) -> list[DomainFavoriteRoute]:
        """List favorite routes in sort order."""
        session = self._get_session()
        routes = session.query(FavoriteRoute).order_by(FavoriteRoute.sort_order, FavoriteRoute.id).all()
        return [favorite_route_to_domain(r) for r in routes]

    def delete_favorite_route(self, route_id: int) -> None:
        """Delete a favorite route."""
        session = self._get_session()
        route = session.query(FavoriteRoute).filter(FavoriteRoute.id == route_id).first()
        if route is None:
            raise ValueError(f"Favorite route {route_id} not found")
        session.delete(route)
        session.commit()
