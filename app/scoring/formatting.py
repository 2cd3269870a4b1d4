"""Display helpers for ages, intervals and domains."""

from app.scoring.models import Domain

DOMAIN_LABELS: dict[Domain, str] = {
    Domain.COMMUNICATION: "Communication",
    Domain.GROSS_MOTOR: "Gross Motor",
    Domain.FINE_MOTOR: "Fine Motor",
    Domain.PROBLEM_SOLVING: "Problem Solving",
    Domain.PERSONAL_SOCIAL: "Personal-Social",
}


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_age(age_in_months: int) -> str:
    """Format an age in months, e.g. "5 months" or "2 years, 3 months"."""
    if age_in_months < 12:
        return _plural(age_in_months, "month")

    years, months = divmod(age_in_months, 12)
    if months == 0:
        return _plural(years, "year")

    return f"{_plural(years, 'year')}, {_plural(months, 'month')}"


def format_interval_name(interval: int) -> str:
    """Format an interval as a questionnaire name."""
    return f"{interval}-Month ASQ-3"


def get_domain_display_name(domain: Domain | str) -> str:
    return DOMAIN_LABELS[Domain(domain)]


def get_all_domains() -> list[Domain]:
    """Get all ASQ-3 domains in questionnaire order."""
    return list(Domain)
