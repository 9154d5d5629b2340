"""Amount parsing utilities."""

from decimal import Decimal
import re

# Invoice and transaction amounts are stored as NUMERIC(14, 2)
CURRENCY_PRECISION = 14
CURRENCY_SCALE = 2
MAX_INTEGER_DIGITS = CURRENCY_PRECISION - CURRENCY_SCALE

_PLAIN_NUMBER = re.compile(r"^-?(\d+(\.\d*)?|\.\d+)$")


def parse_amount(amount_str: str, max_places: int = CURRENCY_SCALE) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Scientific notation ("1e3"), NaN and Infinity are rejected, and so are
    values with more than ``max_places`` decimal places or more than
    ``MAX_INTEGER_DIGITS`` integer digits, since storing them would round.

    Args:
        amount_str: Amount string
        max_places: Maximum number of digits after the decimal point

    Returns:
        Decimal amount with the precision it was written with

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    original = amount_str.strip()
    amount_str = original

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    if not _PLAIN_NUMBER.match(amount_str):
        raise ValueError(f"Could not parse amount '{original}'")

    amount = Decimal(amount_str)
    if -amount.as_tuple().exponent > max_places:
        raise ValueError(
            f"Amount '{original}' has more than {max_places} decimal places"
        )
    parts = amount.as_tuple()
    if len(parts.digits) + parts.exponent > MAX_INTEGER_DIGITS:
        raise ValueError(
            f"Amount '{original}' has more than {MAX_INTEGER_DIGITS} integer digits"
        )
    if is_negative:
        amount = -amount
    return amount
