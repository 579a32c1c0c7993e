"""SQLAlchemy models for faretrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _now() -> datetime:
    return datetime.now(UTC)


class Period(Base):
    """Pass period model."""

    __tablename__ = "periods"

    id = Column(Integer, primary_key=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    ticket_price = Column(Integer, nullable=False)
    status = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    trips = relationship("Trip", back_populates="period")


class Trip(Base):
    """Trip model."""

    __tablename__ = "trips"

    id = Column(Integer, primary_key=True)
    period_id = Column(Integer, ForeignKey("periods.id"), nullable=False, index=True)
    transport_type = Column(String, nullable=False)
    departure_station = Column(String, nullable=True)
    arrival_station = Column(String, nullable=True)
    route_number = Column(String, nullable=True)
    segments = Column(Integer, nullable=True)
    duration = Column(Integer, nullable=True)
    city = Column(String, nullable=True)
    ferry_route = Column(String, nullable=True)
    amount = Column(Integer, nullable=False)
    timestamp = Column(DateTime, nullable=False)
    note = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    period = relationship("Period", back_populates="trips")


class Settings(Base):
    """Single-row user settings model."""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True)
    default_bus_fare = Column(Integer, nullable=False)
    default_ticket_price = Column(Integer, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)


class FavoriteRoute(Base):
    """Favorite route model."""

    __tablename__ = "favorite_routes"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    transport_type = Column(String, nullable=False)
    departure_station = Column(String, nullable=True)
    arrival_station = Column(String, nullable=True)
    route_number = Column(String, nullable=True)
    default_amount = Column(Integer, nullable=True)
    segments = Column(Integer, nullable=True)
    duration = Column(Integer, nullable=True)
    city = Column(String, nullable=True)
    sort_order = Column(Integer, default=0, nullable=False)

    __table_args__ = (UniqueConstraint("name", name="uq_favorite_route_name"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
