"""Owner dashboard analytics.

Aggregates stored assessment data into the metrics shown on the owner
dashboard:
- Completion rate
- Average score and intervention rate by domain
- Assessment volume by month
- Recent assessments with overall status

Fetching the data is the caller's job; everything here is pure.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime

from app.scoring.models import DevelopmentStatus, Domain
from app.services.screening import DomainScoreResult, overall_status, round_threshold

MONTHS_SHOWN = 6
RECENT_ASSESSMENTS_SHOWN = 10


@dataclass
class AssessmentSummary:
    """Stored assessment with its domain scores."""

    id: str
    created_at: datetime
    age_at_assessment: int
    age_interval: int
    completed: bool = True
    domain_scores: list[DomainScoreResult] = field(default_factory=list)


@dataclass
class DomainAnalytics:
    """Score statistics for one domain."""

    domain: Domain
    average_score: int
    intervention_rate: int  # percent
    assessed: int


@dataclass
class MonthlyCount:
    """Assessment volume for one calendar month."""

    month: str
    count: int


@dataclass
class RecentAssessment:
    """Row of the recent assessments table."""

    id: str
    child_age: int
    age_interval: int
    created_at: datetime
    overall_status: DevelopmentStatus


@dataclass
class DashboardMetrics:
    """All owner dashboard metrics."""

    total_parents: int
    total_children: int
    total_assessments: int
    completion_rate: int
    assessments_by_month: list[MonthlyCount]
    scores_by_domain: list[DomainAnalytics]
    recent_assessments: list[RecentAssessment]


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage, 0 when there is nothing to divide by."""
    if whole <= 0:
        return 0
    return round_threshold(part / whole * 100)


def completion_rate(assessments: list[AssessmentSummary]) -> int:
    completed = sum(1 for a in assessments if a.completed)
    return percentage(completed, len(assessments))


def domain_analytics(assessments: list[AssessmentSummary]) -> list[DomainAnalytics]:
    """Average score and intervention rate per domain, in questionnaire order.

    Domains that were never scored are omitted.
    """
    results = []

    for domain in Domain:
        scores = [
            s
            for a in assessments
            for s in a.domain_scores
            if s.domain == domain
        ]
        if not scores:
            continue

        flagged = sum(1 for s in scores if s.needs_intervention)
        results.append(
            DomainAnalytics(
                domain=domain,
                average_score=round_threshold(
                    sum(s.total_score for s in scores) / len(scores)
                ),
                intervention_rate=percentage(flagged, len(scores)),
                assessed=len(scores),
            )
        )

    return results


def monthly_counts(
    assessments: list[AssessmentSummary],
    months: int = MONTHS_SHOWN,
) -> list[MonthlyCount]:
    """Count assessments per calendar month.

    Returns:
        The most recent ``months`` months that have assessments, oldest first,
        labelled with the short month name
    """
    counts = Counter((a.created_at.year, a.created_at.month) for a in assessments)
    recent = sorted(counts, reverse=True)[:months]

    return [
        MonthlyCount(
            month=datetime(year, month, 1).strftime("%b"),
            count=counts[(year, month)],
        )
        for year, month in reversed(recent)
    ]


def recent_assessments(
    assessments: list[AssessmentSummary],
    limit: int = RECENT_ASSESSMENTS_SHOWN,
) -> list[RecentAssessment]:
    newest_first = sorted(assessments, key=lambda a: a.created_at, reverse=True)
    return [
        RecentAssessment(
            id=a.id,
            child_age=a.age_at_assessment,
            age_interval=a.age_interval,
            created_at=a.created_at,
            overall_status=overall_status(a.domain_scores),
        )
        for a in newest_first[:limit]
    ]


def build_dashboard_metrics(
    total_parents: int,
    total_children: int,
    assessments: list[AssessmentSummary],
) -> DashboardMetrics:
    """Assemble every owner dashboard metric."""
    return DashboardMetrics(
        total_parents=total_parents,
        total_children=total_children,
        total_assessments=len(assessments),
        completion_rate=completion_rate(assessments),
        assessments_by_month=monthly_counts(assessments),
        scores_by_domain=domain_analytics(assessments),
        recent_assessments=recent_assessments(assessments),
    )
