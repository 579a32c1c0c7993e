"""Tests for favorite routes."""

import pytest

from faretrack.domain.entities import BikeCity, TransportType
from faretrack.domain.errors import ConflictError, NotFoundError, ValidationError


def test_add_and_list_routes(route_service):
    route_service.add_route("commute", TransportType.TAIPEI_METRO, "台北車站", "淡水")
    route_service.add_route("airport", TransportType.HIGHWAY_BUS, route_number="1819", default_amount=145)

    routes = route_service.list_routes()

    assert [r.name for r in routes] == ["commute", "airport"]
    assert routes[0].transport_type == TransportType.TAIPEI_METRO
    assert routes[1].default_amount == 145
    assert routes[1].sort_order == 1


def test_duplicate_name(route_service):
    route_service.add_route("commute", TransportType.BUS)
    with pytest.raises(ConflictError):
        route_service.add_route("commute", TransportType.BUS)


def test_invalid_routes(route_service):
    with pytest.raises(ValidationError):
        route_service.add_route("  ", TransportType.BUS)
    with pytest.raises(ValidationError):
        route_service.add_route("half", TransportType.TRA, departure_station="台北")
    with pytest.raises(ValidationError):
        route_service.add_route("free", TransportType.BUS, default_amount=0)


def test_delete_route(route_service):
    route_service.add_route("commute", TransportType.BUS)

    route_service.delete_route("commute")

    assert route_service.list_routes() == []
    with pytest.raises(NotFoundError):
        route_service.delete_route("commute")


def test_use_route_calculates_fare(route_service, trip_service, active_period):
    route_service.add_route("commute", TransportType.TAIPEI_METRO, "台北車站", "淡水")

    trip = trip_service.get_trip(route_service.use_route("commute"))

    assert trip.amount == 50
    assert trip.period_id == active_period.id
    assert trip.arrival_station == "淡水"


def test_use_route_default_amount_and_override(route_service, trip_service, active_period):
    route_service.add_route("airport", TransportType.HIGHWAY_BUS, route_number="1819", default_amount=145)

    assert trip_service.get_trip(route_service.use_route("airport")).amount == 145
    assert trip_service.get_trip(route_service.use_route("airport", amount=140)).amount == 140


def test_use_missing_route(route_service, active_period):
    with pytest.raises(NotFoundError):
        route_service.use_route("nowhere")


def test_use_bike_route_keeps_duration_and_city(route_service, trip_service, active_period):
    route_service.add_route("ride", TransportType.YOUBIKE, duration=61, city=BikeCity.TAOYUAN)

    trip = trip_service.get_trip(route_service.use_route("ride"))

    assert trip.duration == 61
    assert trip.city == BikeCity.TAOYUAN
    assert trip.amount == 10


def test_bike_route_requires_duration(route_service):
    with pytest.raises(ValidationError, match="duration"):
        route_service.add_route("ride", TransportType.YOUBIKE)
    with pytest.raises(ValidationError):
        route_service.add_route("ride", TransportType.YOUBIKE, duration=0)


def test_use_bus_route_prices_saved_segments(route_service, trip_service, active_period):
    route_service.add_route("school", TransportType.BUS, route_number="307", segments=3)

    trip = trip_service.get_trip(route_service.use_route("school"))

    assert trip.segments == 3
    assert trip.amount == 45


def test_bus_route_rejects_bad_segments(route_service):
    with pytest.raises(ValidationError):
        route_service.add_route("school", TransportType.BUS, segments=11)
