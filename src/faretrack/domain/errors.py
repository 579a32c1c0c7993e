"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a second active period."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def period_not_found(period_id: int) -> str:
    """Return message for missing period."""
    return f"Period {period_id} not found"


def trip_not_found(trip_id: int) -> str:
    """Return message for missing trip."""
    return f"Trip {trip_id} not found"


def route_not_found(name: str) -> str:
    """Return message for missing favorite route."""
    return f"Favorite route '{name}' not found"


def no_active_period() -> str:
    """Return message when a trip needs the active period and there is none."""
    return "No active period. Start one with 'faretrack period start'."


def active_period_exists(period_id: int) -> str:
    """Return message when a second active period would be started."""
    return f"Period {period_id} is still active. Complete it before starting a new one."


def unknown_fare(transport_type: str, departure: str, arrival: str) -> str:
    """Return message when a station fare cannot be resolved."""
    return (
        f"Cannot determine {transport_type} fare from '{departure}' to '{arrival}'. "
        "Please provide the amount explicitly."
    )


def period_delete_blocked(period_id: int, trip_count: int) -> str:
    """Return message when a period still has trips."""
    return (
        f"Cannot delete period {period_id}: it has "
        f"{trip_count} trip{'s' if trip_count != 1 else ''}. "
        "Please delete them first."
    )
