"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

CURRENCY_PATTERN = re.compile(r"^(?:NT\$|NTD|TWD|\$)|(?:元|NTD|TWD)$", re.IGNORECASE)


def parse_amount(amount_str: str) -> int:
    """Parse an amount string into whole New Taiwan dollars.

    Handles formats such as:
    - "45"
    - "NT$45", "$45", "TWD 45", "45元"
    - "1,200"
    - "45.0" (integral decimals only)

    Args:
        amount_str: Amount string

    Returns:
        Integer amount

    Raises:
        ValueError: If the string is empty, not a number, or has a fractional part
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = CURRENCY_PATTERN.sub("", amount_str.strip())
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'") from None

    if not amount.is_finite() or amount != amount.to_integral_value():
        raise ValueError(f"Amount must be a whole number of dollars: '{amount_str}'")
    return int(amount)
