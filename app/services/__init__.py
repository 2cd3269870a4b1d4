"""Business logic services."""

from app.services.analytics import build_dashboard_metrics
from app.services.screening import resolve_screening, score_assessment
from app.services.videos import recommend_videos

__all__ = [
    "score_assessment",
    "resolve_screening",
    "recommend_videos",
    "build_dashboard_metrics",
]
