"""Tests for domain entities."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from faretrack.domain.entities import (
    STATION_BASED_TYPES,
    TRANSPORT_TYPE_INFO,
    Period,
    PeriodStatus,
    TransportType,
)


def test_transport_type_values():
    assert TransportType("taipei_metro") is TransportType.TAIPEI_METRO
    assert TransportType.YOUBIKE == "youbike"
    assert len(TransportType) == 10


def test_station_based_types():
    assert TransportType.TRA.is_station_based
    assert TransportType.TAOYUAN_METRO.is_station_based
    assert not TransportType.BUS.is_station_based
    assert not TransportType.FERRY.is_station_based
    assert len(STATION_BASED_TYPES) == 6


def test_every_type_has_display_info():
    assert set(TRANSPORT_TYPE_INFO) == set(TransportType)
    for transport_type, info in TRANSPORT_TYPE_INFO.items():
        assert info.type == transport_type
        assert info.color.startswith("#")


def test_period_is_frozen():
    period = Period(
        id=1,
        start_date=date(2025, 3, 1),
        end_date=date(2025, 3, 30),
        ticket_price=1200,
        status=PeriodStatus.ACTIVE,
        created_at=datetime(2025, 3, 1),
        updated_at=datetime(2025, 3, 1),
    )
    assert period.is_active
    with pytest.raises(FrozenInstanceError):
        period.ticket_price = 1000
