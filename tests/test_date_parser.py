"""Tests for date parser."""

import pytest
from datetime import date
from billtrack.utils.date_parser import parse_date, validate_date


def test_parse_iso_date():
    """Test parsing ISO dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_written_date():
    """Test parsing a long-form date."""
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_invalid_date():
    """Test that garbage is rejected."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_parse_impossible_date():
    """Test that impossible calendar dates are rejected."""
    with pytest.raises(ValueError):
        parse_date("2024-02-30")


def test_validate_date_returns_text_as_presented():
    """Test that validation keeps the original format."""
    assert validate_date(" 15/01/2024 ") == "15/01/2024"
    assert validate_date("2024-01-15") == "2024-01-15"


def test_validate_date_rejects_garbage():
    """Test validation failure."""
    with pytest.raises(ValueError):
        validate_date("soon")
