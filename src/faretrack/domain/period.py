"""Period domain service and lifecycle rules."""

import logging
from datetime import date, timedelta
from typing import Optional

from faretrack.database.base import Database
from faretrack.domain.entities import Period as PeriodEntity, PeriodStatus
from faretrack.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    active_period_exists,
    period_delete_blocked,
    period_not_found,
)
from faretrack.domain.validation import is_valid_ticket_price

logger = logging.getLogger(__name__)

PERIOD_SPAN_DAYS = 29


def calculate_end_date(start_date: date) -> date:
    """Get the last day of a period (30-day inclusive window)."""
    return start_date + timedelta(days=PERIOD_SPAN_DAYS)


def is_period_ended(end_date: date, today: Optional[date] = None) -> bool:
    """A period has ended from the day after its end date."""
    today = today or date.today()
    return today > end_date


class PeriodService:
    """Service for managing pass periods."""

    def __init__(self, db: Database):
        """Initialize period service.

        Args:
            db: Database instance
        """
        self.db = db

    def start_period(
        self,
        start_date: Optional[date] = None,
        ticket_price: Optional[int] = None,
    ) -> int:
        """Start a new active period.

        Args:
            start_date: First day of the period (defaults to today)
            ticket_price: Pass price (defaults to the configured price)

        Returns:
            Period ID

        Raises:
            ConflictError: If another period is still active
            ValidationError: If the ticket price is out of range
        """
        active = self.db.get_active_period()
        if active is not None:
            raise ConflictError(active_period_exists(active.id))

        if ticket_price is None:
            ticket_price = self.db.get_settings().default_ticket_price
        if not is_valid_ticket_price(ticket_price):
            raise ValidationError(f"Invalid ticket price: {ticket_price}")

        start_date = start_date or date.today()
        period_id = self.db.create_period(
            start_date=start_date,
            end_date=calculate_end_date(start_date),
            ticket_price=ticket_price,
            status=PeriodStatus.ACTIVE,
        )
        logger.debug("Started period %s on %s", period_id, start_date)
        return period_id

    def get_period(self, period_id: int) -> Optional[PeriodEntity]:
        """Get period by ID.

        Returns:
            Period entity or None if not found
        """
        return self.db.get_period(period_id)

    def require_period(self, period_id: int) -> PeriodEntity:
        """Get period by ID or raise NotFoundError."""
        period = self.db.get_period(period_id)
        if period is None:
            raise NotFoundError(period_not_found(period_id))
        return period

    def get_active_period(self) -> Optional[PeriodEntity]:
        """Get the active period, if any."""
        return self.db.get_active_period()

    def list_periods(self, status: Optional[PeriodStatus] = None) -> list[PeriodEntity]:
        """List periods, newest first."""
        return self.db.list_periods(status=status)

    def complete_period(self, period_id: int) -> bool:
        """Mark a period completed.

        Returns:
            True if the status changed, False if it was already completed
        """
        period = self.require_period(period_id)
        if period.status == PeriodStatus.COMPLETED:
            return False
        self.db.update_period_status(period_id, PeriodStatus.COMPLETED)
        return True

    def check_and_expire_periods(self, today: Optional[date] = None) -> list[int]:
        """Complete every active period whose end date has passed.

        Repeated calls are no-ops once a period is completed, and trips are
        never touched.

        Args:
            today: Reference date (defaults to the current date)

        Returns:
            IDs of the periods that were completed by this call
        """
        today = today or date.today()
        expired = []
        for period in self.db.list_periods(status=PeriodStatus.ACTIVE):
            if is_period_ended(period.end_date, today):
                self.db.update_period_status(period.id, PeriodStatus.COMPLETED)
                logger.info("Period %s marked as completed (ended %s)", period.id, period.end_date)
                expired.append(period.id)
        return expired

    def delete_period(self, period_id: int) -> None:
        """Delete a period without trips.

        Raises:
            NotFoundError: If the period does not exist
            DependencyError: If trips still belong to the period
        """
        self.require_period(period_id)
        trip_count = self.db.get_period_trip_count(period_id)
        if trip_count > 0:
            raise DependencyError(period_delete_blocked(period_id, trip_count))
        self.db.delete_period(period_id)
