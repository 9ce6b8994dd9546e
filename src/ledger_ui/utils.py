"""
Utility functions for document data normalization and formatting.

Provides helpers for:
- Timestamp parsing from the backend's ISO-8601 strings
- Uniform normalization of every date-bearing field of a record
- Decimal conversion for monetary fields
- Currency and date formatting for display
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from dateutil import parser as date_parser

from ledger_ui.errors import ValidationError


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse a wire timestamp into a datetime.

    Accepts ISO-8601 strings (including the seven fractional digits the
    backend emits, which are truncated to microseconds), date-only strings,
    and values that are already date or datetime objects.

    Args:
        value: Raw field value.

    Returns:
        datetime if the value is present and parseable, None otherwise.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value:
        return None
    try:
        return date_parser.isoparse(value)
    except (ValueError, OverflowError):
        return None


def normalize_timestamps(
    record: Mapping[str, Any],
    required: Iterable[str] = (),
    optional: Iterable[str] = (),
) -> dict[str, Any]:
    """
    Return a copy of record with its timestamp fields converted to datetime.

    Required fields must be present and parseable. Optional fields are
    converted only when present; absent or blank ones become None.

    Raises:
        ValidationError: If a required field is missing or unparseable.
    """
    normalized = dict(record)
    for key in required:
        parsed = parse_timestamp(record.get(key))
        if parsed is None:
            raise ValidationError(f"Invalid or missing timestamp {key!r}: {record.get(key)!r}")
        normalized[key] = parsed
    for key in optional:
        if key in record:
            normalized[key] = parse_timestamp(record.get(key))
    return normalized


def to_decimal(value: Any, default: str = "0") -> Decimal:
    """Convert a wire number to Decimal without float rounding artifacts."""
    if value is None or value == "":
        return Decimal(default)
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid amount: {value!r}") from exc


def format_currency(value: Decimal | float, currency: str) -> str:
    """
    Format a currency amount with the currency code prefix.

    Returns:
        Formatted string like 'ILS 1,234.56'.
    """
    return f"{currency} {value:,.2f}"


def format_date(value: datetime | None) -> str:
    """Format a date as DD/MM/YYYY, or N/A when absent."""
    if not value:
        return "N/A"
    return value.strftime("%d/%m/%Y")
