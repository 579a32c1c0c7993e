"""Mapper functions to convert between domain models and SQLAlchemy models.

Status, transport type and city columns are stored as their string values
and converted back to enums here.
"""

from faretrack.domain import entities as domain
from faretrack.database.models import (
    FavoriteRoute as ORMFavoriteRoute,
    Period as ORMPeriod,
    Settings as ORMSettings,
    Trip as ORMTrip,
)


def period_to_domain(orm_period: ORMPeriod) -> domain.Period:
    """Convert SQLAlchemy Period model to domain Period entity."""
    return domain.Period(
        id=orm_period.id,
        start_date=orm_period.start_date,
        end_date=orm_period.end_date,
        ticket_price=orm_period.ticket_price,
        status=domain.PeriodStatus(orm_period.status),
        created_at=orm_period.created_at,
        updated_at=orm_period.updated_at,
    )


def trip_to_domain(orm_trip: ORMTrip) -> domain.Trip:
    """Convert SQLAlchemy Trip model to domain Trip entity."""
    return domain.Trip(
        id=orm_trip.id,
        period_id=orm_trip.period_id,
        transport_type=domain.TransportType(orm_trip.transport_type),
        amount=orm_trip.amount,
        timestamp=orm_trip.timestamp,
        departure_station=orm_trip.departure_station,
        arrival_station=orm_trip.arrival_station,
        route_number=orm_trip.route_number,
        segments=orm_trip.segments,
        duration=orm_trip.duration,
        city=domain.BikeCity(orm_trip.city) if orm_trip.city else None,
        ferry_route=orm_trip.ferry_route,
        note=orm_trip.note,
        created_at=orm_trip.created_at,
        updated_at=orm_trip.updated_at,
    )


def settings_to_domain(orm_settings: ORMSettings) -> domain.UserSettings:
    """Convert SQLAlchemy Settings model to domain UserSettings entity."""
    return domain.UserSettings(
        default_bus_fare=orm_settings.default_bus_fare,
        default_ticket_price=orm_settings.default_ticket_price,
        updated_at=orm_settings.updated_at,
    )


def favorite_route_to_domain(orm_route: ORMFavoriteRoute) -> domain.FavoriteRoute:
    """Convert SQLAlchemy FavoriteRoute model to domain FavoriteRoute entity."""
    return domain.FavoriteRoute(
        id=orm_route.id,
        name=orm_route.name,
        transport_type=domain.TransportType(orm_route.transport_type),
        departure_station=orm_route.departure_station,
        arrival_station=orm_route.arrival_station,
        route_number=orm_route.route_number,
        default_amount=orm_route.default_amount,
        segments=orm_route.segments,
        duration=orm_route.duration,
        city=domain.BikeCity(orm_route.city) if orm_route.city else None,
        sort_order=orm_route.sort_order,
    )
