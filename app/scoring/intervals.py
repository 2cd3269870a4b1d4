"""ASQ-3 age resolution.

Maps a child's date of birth to an age in whole months and that age to the
standardized questionnaire interval to administer.

Interval selection:
- Younger than 2 months: the 2-month questionnaire
- 60 months or older: the 60-month questionnaire
- Otherwise the closest interval, ties going to the older questionnaire
  (a 3-month-old gets the 4-month questionnaire, a 7-month-old the 8-month)

Administration window: a questionnaire may be given when the child's age is
within 30 days (twice the 15-day half-window) of the interval.
"""

from datetime import date, datetime

from app.scoring.models import ASQ_INTERVALS, MAX_INTERVAL, MIN_INTERVAL
from app.utils.time import as_datetime, utc_now

# Average days per month used for day-based comparisons
DAYS_PER_MONTH = 30.44

# Half-width of the administration window, in days
AGE_WINDOW_DAYS = 15


def calculate_age_in_months(
    date_of_birth: date | datetime,
    now: date | datetime | None = None,
) -> int:
    """Calculate whole calendar months elapsed since birth.

    The month count only advances once the monthly anniversary day has
    been reached. Future birth dates yield 0.

    Args:
        date_of_birth: Child's date of birth
        now: Reference instant (defaults to current UTC time)

    Returns:
        Age in whole months, never negative
    """
    if now is None:
        now = utc_now()

    months = (now.year - date_of_birth.year) * 12
    months += now.month - date_of_birth.month

    if now.day < date_of_birth.day:
        months -= 1

    return max(0, months)


def calculate_precise_age_in_months(
    date_of_birth: date | datetime,
    now: date | datetime | None = None,
) -> float:
    """Calculate fractional age in months using an average month length."""
    now_dt = as_datetime(now) if now is not None else utc_now()
    elapsed_days = (now_dt - as_datetime(date_of_birth)).total_seconds() / 86400
    return max(0.0, elapsed_days / DAYS_PER_MONTH)


def get_asq_interval(age_in_months: float) -> int:
    """Determine the ASQ interval closest to a child's age.

    Args:
        age_in_months: Age in months (may be fractional)

    Returns:
        One of ASQ_INTERVALS
    """
    if age_in_months < MIN_INTERVAL:
        return MIN_INTERVAL
    if age_in_months >= MAX_INTERVAL:
        return MAX_INTERVAL

    closest = ASQ_INTERVALS[0]
    min_difference = abs(age_in_months - closest)

    for interval in ASQ_INTERVALS:
        difference = abs(age_in_months - interval)
        # Equidistant intervals resolve to the older questionnaire
        if difference < min_difference or (
            difference == min_difference and interval > closest
        ):
            min_difference = difference
            closest = interval

    return closest


def get_next_asq_interval(age_in_months: float) -> int:
    """Get the smallest interval strictly older than the given age."""
    for interval in ASQ_INTERVALS:
        if interval > age_in_months:
            return interval
    return MAX_INTERVAL


def is_within_age_window(
    age_in_months: float,
    interval: int,
    window_days: int = AGE_WINDOW_DAYS,
) -> bool:
    """Check if a child's age falls inside an interval's administration window.

    Args:
        age_in_months: Child's age in months
        interval: ASQ interval in months
        window_days: Half-width of the window in days

    Returns:
        True if the age is within twice the half-window of the interval
    """
    age_in_days = age_in_months * DAYS_PER_MONTH
    interval_in_days = interval * DAYS_PER_MONTH
    return abs(age_in_days - interval_in_days) <= window_days * 2


def get_available_intervals(
    age_in_months: float,
    window_days: int = AGE_WINDOW_DAYS,
) -> list[int]:
    """Get all intervals whose questionnaire may be administered at this age."""
    return [
        interval
        for interval in ASQ_INTERVALS
        if is_within_age_window(age_in_months, interval, window_days)
    ]
