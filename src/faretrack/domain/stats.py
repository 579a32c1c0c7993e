"""Period statistics.

Statistics are a read-only projection recomputed from a period and its full
trip set on every call. Nothing is cached or updated incrementally.
"""

from datetime import date
from typing import Iterable, Optional, Sequence

from faretrack.database.base import Database
from faretrack.domain.entities import (
    GlobalStats,
    ModeTotals,
    Period,
    PeriodStats,
    TransportType,
    Trip,
)
from faretrack.domain.errors import NotFoundError, period_not_found
from faretrack.domain.fares import TPASS_TICKET_PRICE, calculate_saved_amount

PERIOD_LENGTH_DAYS = 30


def days_elapsed(start_date: date, today: Optional[date] = None) -> int:
    """Days elapsed in a period, counting the start day as day 1.

    Clamped to [1, 30] so it stays valid before the start and after expiry.
    """
    today = today or date.today()
    days = (today - start_date).days + 1
    return max(1, min(days, PERIOD_LENGTH_DAYS))


def days_remaining(end_date: date, today: Optional[date] = None) -> int:
    """Days remaining in a period, counting today; never negative."""
    today = today or date.today()
    return max(0, (end_date - today).days + 1)


def amount_to_break_even(current_amount: int, ticket_price: int = TPASS_TICKET_PRICE) -> int:
    """Spending still needed before the pass pays for itself (0 once reached)."""
    return max(0, ticket_price - current_amount)


def build_transport_breakdown(trips: Iterable[Trip]) -> dict[TransportType, ModeTotals]:
    """Count trips and sum amounts per transport type.

    Every transport type is present, with zero totals if unused.
    """
    counts = {transport_type: 0 for transport_type in TransportType}
    amounts = {transport_type: 0 for transport_type in TransportType}
    for trip in trips:
        transport_type = TransportType(trip.transport_type)
        counts[transport_type] += 1
        amounts[transport_type] += trip.amount
    return {
        transport_type: ModeTotals(count=counts[transport_type], amount=amounts[transport_type])
        for transport_type in TransportType
    }


def compute_period_stats(
    period: Period, trips: Sequence[Trip], today: Optional[date] = None
) -> PeriodStats:
    """Compute statistics for a period from its trips.

    Args:
        period: Period to summarise
        trips: Every trip belonging to the period
        today: Reference date (defaults to the current date)

    Returns:
        PeriodStats snapshot
    """
    today = today or date.today()
    total_amount = sum(trip.amount for trip in trips)
    trip_count = len(trips)
    elapsed = days_elapsed(period.start_date, today)
    daily_average = total_amount / elapsed if elapsed > 0 else 0.0

    return PeriodStats(
        total_amount=total_amount,
        trip_count=trip_count,
        saved_amount=calculate_saved_amount(total_amount, period.ticket_price),
        days_elapsed=elapsed,
        days_remaining=days_remaining(period.end_date, today),
        daily_average=daily_average,
        transport_breakdown=build_transport_breakdown(trips),
    )


def compute_global_stats(periods: Sequence[Period], trips: Sequence[Trip]) -> GlobalStats:
    """Compute totals across every period and trip."""
    total_pass_cost = sum(period.ticket_price for period in periods)
    total_trip_amount = sum(trip.amount for trip in trips)
    return GlobalStats(
        total_periods=len(periods),
        total_pass_cost=total_pass_cost,
        total_trip_amount=total_trip_amount,
        total_saved_amount=total_trip_amount - total_pass_cost,
        total_trip_count=len(trips),
    )


class StatsService:
    """Service loading trip snapshots and computing statistics."""

    def __init__(self, db: Database):
        """Initialize stats service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_period_stats(self, period_id: int, today: Optional[date] = None) -> PeriodStats:
        """Compute statistics for a stored period.

        Raises:
            NotFoundError: If the period does not exist
        """
        period = self.db.get_period(period_id)
        if period is None:
            raise NotFoundError(period_not_found(period_id))
        trips = self.db.list_trips(period_id=period_id)
        return compute_period_stats(period, trips, today=today)

    def get_global_stats(self) -> GlobalStats:
        """Compute statistics across all stored periods."""
        return compute_global_stats(self.db.list_periods(), self.db.list_trips())
