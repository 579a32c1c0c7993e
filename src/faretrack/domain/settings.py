"""User settings domain service."""

from typing import Optional

from faretrack.database.base import Database
from faretrack.domain.entities import UserSettings
from faretrack.domain.errors import ValidationError
from faretrack.domain.validation import is_valid_amount, is_valid_ticket_price


class SettingsService:
    """Service for reading and updating user settings."""

    def __init__(self, db: Database):
        self.db = db

    def get_settings(self) -> UserSettings:
        """Get current settings."""
        return self.db.get_settings()

    def update_settings(
        self,
        default_bus_fare: Optional[int] = None,
        default_ticket_price: Optional[int] = None,
    ) -> UserSettings:
        """Update settings and return the new values.

        Raises:
            ValidationError: If a value is out of range
        """
        if default_bus_fare is not None and not is_valid_amount(default_bus_fare):
            raise ValidationError(f"Invalid bus fare: {default_bus_fare}")
        if default_ticket_price is not None and not is_valid_ticket_price(default_ticket_price):
            raise ValidationError(f"Invalid ticket price: {default_ticket_price}")

        self.db.update_settings(
            default_bus_fare=default_bus_fare,
            default_ticket_price=default_ticket_price,
        )
        return self.db.get_settings()
