"""ASQ-3 value types: intervals, domains, answers and statuses."""

from dataclasses import dataclass
from enum import Enum


# Standardized questionnaire intervals, in months
ASQ_INTERVALS: tuple[int, ...] = (
    2, 4, 6, 8, 9, 10, 12, 14, 16, 18, 20, 22, 24, 27, 30, 33, 36, 42, 48, 54, 60,
)

MIN_INTERVAL = ASQ_INTERVALS[0]
MAX_INTERVAL = ASQ_INTERVALS[-1]


class Domain(str, Enum):
    """Developmental areas screened independently by the ASQ-3."""

    COMMUNICATION = "COMMUNICATION"
    GROSS_MOTOR = "GROSS_MOTOR"
    FINE_MOTOR = "FINE_MOTOR"
    PROBLEM_SOLVING = "PROBLEM_SOLVING"
    PERSONAL_SOCIAL = "PERSONAL_SOCIAL"


class AnswerValue(str, Enum):
    """Parent response to a single ASQ-3 item."""

    YES = "YES"
    SOMETIMES = "SOMETIMES"
    NOT_YET = "NOT_YET"


class DevelopmentStatus(str, Enum):
    """Classification of a domain score against its thresholds."""

    ON_TRACK = "on-track"
    NEEDS_MONITORING = "needs-monitoring"
    NEEDS_INTERVENTION = "needs-intervention"


@dataclass(frozen=True)
class ThresholdPair:
    """Cutoff and monitoring boundaries for one (interval, domain).

    Scores at or below ``cutoff`` need intervention; scores above the cutoff
    and at or below ``monitoring`` need monitoring.
    """

    cutoff: float
    monitoring: float
