"""ASQ-3 screening engine: age resolution, answer scoring, classification."""

from app.scoring.answers import (
    ANSWER_SCORES,
    calculate_domain_score,
    calculate_max_score,
    score_answer,
)
from app.scoring.cutoffs import (
    ASQ3_CUTOFF_TABLE,
    CutoffTable,
    get_cutoff_score,
    get_development_status,
    needs_intervention,
    needs_monitoring,
    validate_cutoff_table,
)
from app.scoring.intervals import (
    calculate_age_in_months,
    calculate_precise_age_in_months,
    get_asq_interval,
    get_available_intervals,
    get_next_asq_interval,
    is_within_age_window,
)
from app.scoring.models import (
    ASQ_INTERVALS,
    AnswerValue,
    DevelopmentStatus,
    Domain,
    ThresholdPair,
)

__all__ = [
    "ASQ_INTERVALS",
    "AnswerValue",
    "DevelopmentStatus",
    "Domain",
    "ThresholdPair",
    "calculate_age_in_months",
    "calculate_precise_age_in_months",
    "get_asq_interval",
    "get_next_asq_interval",
    "is_within_age_window",
    "get_available_intervals",
    "ANSWER_SCORES",
    "score_answer",
    "calculate_domain_score",
    "calculate_max_score",
    "ASQ3_CUTOFF_TABLE",
    "CutoffTable",
    "get_cutoff_score",
    "needs_intervention",
    "needs_monitoring",
    "get_development_status",
    "validate_cutoff_table",
]
