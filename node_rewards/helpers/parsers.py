"""Parsing utilities for common data transformations."""

from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation


def parse_unix_timestamp(timestamp: int | str) -> datetime:
    """Parse a Unix timestamp in seconds to a UTC datetime.

    Args:
        timestamp: Seconds since epoch, as int or decimal string

    Returns:
        datetime: Timezone-aware UTC datetime

    Example:
        >>> parse_unix_timestamp("1705276800")
        datetime.datetime(2024, 1, 15, 0, 0, tzinfo=datetime.timezone.utc)
    """
    return datetime.fromtimestamp(int(timestamp), tz=UTC)


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Coerce a numeric upstream value to Decimal.

    Floats go through ``str`` so that ``0.1`` stays ``Decimal("0.1")``.

    Args:
        value: Number or numeric string

    Returns:
        Decimal: The value as Decimal

    Raises:
        ValueError: If the value is not numeric

    Example:
        >>> to_decimal("12.5")
        Decimal('12.5')
        >>> to_decimal(0.1)
        Decimal('0.1')
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        msg = f"Not a numeric value: {value!r}"
        raise ValueError(msg)
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        msg = f"Not a numeric value: {value!r}"
        raise ValueError(msg) from e


def month_key(date: datetime) -> str:
    """Format the year and month of a date as ``YYYY-MM``.

    Example:
        >>> month_key(datetime(2024, 2, 10))
        '2024-02'
    """
    return f"{date.year:04d}-{date.month:02d}"
