"""Utility functions for billtrack."""

from billtrack.utils.date_parser import parse_date, validate_date
from billtrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "validate_date", "parse_amount"]
