"""Date parsing utilities."""

from datetime import date
from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts the absolute formats dateutil understands: "2024-01-15",
    "15/01/2024", "January 15, 2024", etc.

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    try:
        dt = date_parser.parse(date_str.strip())
        return dt.date()
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def validate_date(date_str: str) -> str:
    """Check that a string is a date and return it trimmed but unchanged.

    Imported dates are stored exactly as presented; this only rejects
    text that is not a date at all.

    Raises:
        ValueError: If date string cannot be parsed
    """
    parse_date(date_str)
    return date_str.strip()
