"""ASQ-3 screening service.

Turns a completed questionnaire into per-domain score records ready for
storage, and resolves which questionnaire a child should receive.

All scoring is deterministic. The only side effect is a warning log when
an interval is scored against the flat default thresholds instead of a
curated row.
"""

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from app.core.config import settings
from app.scoring.answers import calculate_domain_score, calculate_max_score
from app.scoring.cutoffs import (
    ASQ3_CUTOFF_TABLE,
    CutoffTable,
    get_cutoff_score,
    get_development_status,
)
from app.scoring.intervals import (
    calculate_age_in_months,
    get_asq_interval,
    get_available_intervals,
    get_next_asq_interval,
)
from app.scoring.models import AnswerValue, DevelopmentStatus, Domain

logger = logging.getLogger(__name__)

# More flagged domains than this marks the whole assessment for intervention
MAX_FLAGGED_DOMAINS_FOR_MONITORING = 2


@dataclass(frozen=True)
class AnswerSubmission:
    """One answered question."""

    question_id: str
    domain: Domain
    answer: AnswerValue
    score: Optional[float] = None


@dataclass
class DomainScoreResult:
    """Scored domain, shaped like the stored domain score row."""

    domain: Domain
    total_score: float
    max_possible_score: int
    threshold: int
    needs_intervention: bool
    status: DevelopmentStatus


@dataclass
class ScreeningResult:
    """Result of scoring one assessment."""

    age_interval: int
    domain_scores: list[DomainScoreResult]
    overall_status: DevelopmentStatus
    used_default_cutoffs: bool
    table_version: str


@dataclass
class IntervalResolution:
    """Which questionnaire(s) apply to a child today."""

    age_in_months: int
    asq_interval: int
    next_interval: int
    available_intervals: list[int] = field(default_factory=list)


def round_threshold(cutoff: float) -> int:
    """Round a cutoff to the nearest integer, halves rounding up."""
    return math.floor(cutoff + 0.5)


def overall_status(domain_scores: list[DomainScoreResult]) -> DevelopmentStatus:
    """Summarize an assessment from its flagged domains.

    Args:
        domain_scores: Scored domains of one assessment

    Returns:
        NEEDS_INTERVENTION if more than two domains are flagged,
        NEEDS_MONITORING if one or two are, otherwise ON_TRACK
    """
    flagged = sum(1 for score in domain_scores if score.needs_intervention)

    if flagged > MAX_FLAGGED_DOMAINS_FOR_MONITORING:
        return DevelopmentStatus.NEEDS_INTERVENTION
    if flagged > 0:
        return DevelopmentStatus.NEEDS_MONITORING
    return DevelopmentStatus.ON_TRACK


def score_domain(
    domain: Domain,
    answers: list[AnswerSubmission],
    age_interval: int,
    table: Optional[CutoffTable] = None,
) -> DomainScoreResult:
    """Score and classify a single domain."""
    total = calculate_domain_score(answers)
    thresholds = get_cutoff_score(age_interval, domain, table)
    status = get_development_status(total, age_interval, domain, table)

    return DomainScoreResult(
        domain=domain,
        total_score=total,
        max_possible_score=calculate_max_score(len(answers)),
        threshold=round_threshold(thresholds.cutoff),
        needs_intervention=status == DevelopmentStatus.NEEDS_INTERVENTION,
        status=status,
    )


def score_assessment(
    age_interval: int,
    answers: list[AnswerSubmission],
    table: Optional[CutoffTable] = None,
) -> ScreeningResult:
    """Score a completed questionnaire.

    Answers are grouped by domain. Domains without answers produce no
    record; the rest are returned in questionnaire order.

    Args:
        age_interval: Interval of the questionnaire that was administered
        answers: Submitted answers
        table: Threshold snapshot (defaults to the built-in ASQ-3 table)

    Returns:
        ScreeningResult with one DomainScoreResult per answered domain
    """
    table = table or ASQ3_CUTOFF_TABLE
    used_default = not table.is_curated(age_interval)

    if used_default and settings.asq_warn_on_default_cutoffs:
        logger.warning(
            f"No curated ASQ-3 cutoffs for {age_interval}-month interval; "
            f"scoring against default thresholds",
            extra={"age_interval": age_interval, "table_version": table.version},
        )

    by_domain: dict[Domain, list[AnswerSubmission]] = defaultdict(list)
    for answer in answers:
        by_domain[Domain(answer.domain)].append(answer)

    domain_scores = [
        score_domain(domain, by_domain[domain], age_interval, table)
        for domain in Domain
        if by_domain.get(domain)
    ]

    return ScreeningResult(
        age_interval=age_interval,
        domain_scores=domain_scores,
        overall_status=overall_status(domain_scores),
        used_default_cutoffs=used_default,
        table_version=table.version,
    )


def resolve_screening(
    date_of_birth: date | datetime,
    now: date | datetime | None = None,
    window_days: Optional[int] = None,
) -> IntervalResolution:
    """Resolve a child's age and applicable questionnaire intervals."""
    if window_days is None:
        window_days = settings.asq_age_window_days

    age = calculate_age_in_months(date_of_birth, now)

    return IntervalResolution(
        age_in_months=age,
        asq_interval=get_asq_interval(age),
        next_interval=get_next_asq_interval(age),
        available_intervals=get_available_intervals(age, window_days),
    )
