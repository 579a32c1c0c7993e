"""Input range checks shared by the fare calculator and its callers.

These only classify values; rejecting invalid input is up to the caller.
"""

from numbers import Real

MAX_AMOUNT = 10000
MIN_DURATION = 1
MAX_DURATION = 1440
MIN_SEGMENTS = 1
MAX_SEGMENTS = 10


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value == value


def is_valid_amount(amount) -> bool:
    """Check a trip amount is in (0, 10000]."""
    return _is_number(amount) and 0 < amount <= MAX_AMOUNT


def is_valid_bike_amount(amount) -> bool:
    """Check a bike-share amount is in [0, 10000]; free rides are allowed."""
    return _is_number(amount) and 0 <= amount <= MAX_AMOUNT


def is_valid_duration(duration) -> bool:
    """Check a ride duration is in [1, 1440] minutes."""
    return _is_number(duration) and MIN_DURATION <= duration <= MAX_DURATION


def is_valid_segments(segments) -> bool:
    """Check a bus segment count is in [1, 10]."""
    return _is_number(segments) and MIN_SEGMENTS <= segments <= MAX_SEGMENTS


def is_valid_ticket_price(price) -> bool:
    """Check a pass price is in (0, 10000]."""
    return _is_number(price) and 0 < price <= MAX_AMOUNT
