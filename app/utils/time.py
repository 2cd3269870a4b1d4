"""Time and date utilities."""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Get current UTC datetime.

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)


def as_datetime(value: date | datetime) -> datetime:
    """Promote a date to a UTC midnight datetime.

    Naive datetimes are assumed to be UTC so they can be compared with
    the timezone-aware clock.

    Args:
        value: Date or datetime

    Returns:
        Timezone-aware datetime
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value
