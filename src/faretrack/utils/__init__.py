"""Utility functions for faretrack."""

from faretrack.utils.amount_parser import parse_amount
from faretrack.utils.date_parser import parse_date, parse_datetime

__all__ = ["parse_amount", "parse_date", "parse_datetime"]
