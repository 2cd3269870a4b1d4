"""Intervention video recommendation.

A video targets one domain and a range of questionnaire intervals. It is
recommended for a scored domain when the score falls below the video's
score threshold.
"""

from dataclasses import dataclass
from typing import Optional

from app.scoring.models import Domain
from app.services.screening import DomainScoreResult


@dataclass
class InterventionVideo:
    """Intervention video as configured by an admin."""

    id: str
    title: str
    video_url: str
    domain: Domain
    min_age_interval: int
    max_age_interval: int
    score_threshold: float
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = None  # seconds
    is_active: bool = True

    def matches(self, domain_score: DomainScoreResult, age_interval: int) -> bool:
        """Check if this video applies to a scored domain."""
        return (
            self.is_active
            and self.domain == domain_score.domain
            and self.min_age_interval <= age_interval <= self.max_age_interval
            and domain_score.total_score < self.score_threshold
        )


def recommend_videos(
    videos: list[InterventionVideo],
    domain_scores: list[DomainScoreResult],
    age_interval: int,
) -> dict[Domain, list[InterventionVideo]]:
    """Select videos for each scored domain.

    Args:
        videos: Candidate videos
        domain_scores: Scored domains of one assessment
        age_interval: Interval of the assessment

    Returns:
        Mapping of domain to matching videos, in the order given; domains
        with no matching video are omitted
    """
    recommendations: dict[Domain, list[InterventionVideo]] = {}

    for domain_score in domain_scores:
        matched = [v for v in videos if v.matches(domain_score, age_interval)]
        if matched:
            recommendations[domain_score.domain] = matched

    return recommendations
