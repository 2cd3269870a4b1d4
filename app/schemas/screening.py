"""Pydantic schemas for ASQ-3 screening operations."""

from datetime import date
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field, model_validator

from app.scoring.models import ASQ_INTERVALS, AnswerValue, DevelopmentStatus, Domain


def _check_interval(value: int) -> int:
    if value not in ASQ_INTERVALS:
        raise ValueError(f"{value} is not an ASQ-3 interval")
    return value


ASQInterval = Annotated[int, AfterValidator(_check_interval)]


class AnswerCreate(BaseModel):
    """A single answered question."""

    question_id: str = Field(..., min_length=1)
    domain: Domain
    answer: AnswerValue
    score: Optional[float] = Field(
        None, ge=0, le=10, description="Explicit score overriding the answer mapping"
    )


class ScoreRequest(BaseModel):
    """Schema for scoring a completed questionnaire."""

    age_interval: ASQInterval
    answers: list[AnswerCreate]


class DomainScoreRead(BaseModel):
    """Schema for a scored domain."""

    domain: Domain
    total_score: float
    max_possible_score: int
    threshold: int
    needs_intervention: bool
    status: DevelopmentStatus

    model_config = {"from_attributes": True}


class ScoreResponse(BaseModel):
    """Schema for a scored questionnaire."""

    age_interval: int
    interval_name: str
    domain_scores: list[DomainScoreRead]
    overall_status: DevelopmentStatus
    used_default_cutoffs: bool
    table_version: str


class ResolveRequest(BaseModel):
    """Schema for resolving a child's questionnaire interval."""

    date_of_birth: date
    as_of: Optional[date] = Field(None, description="Reference date (defaults to today)")


class ResolveResponse(BaseModel):
    """Schema for a resolved questionnaire interval."""

    age_in_months: int
    age_display: str
    asq_interval: int
    interval_name: str
    next_interval: int
    available_intervals: list[int]


class ThresholdRead(BaseModel):
    """Schema for one domain's thresholds."""

    domain: Domain
    display_name: str
    cutoff: float
    monitoring: float


class CutoffsResponse(BaseModel):
    """Schema for the thresholds applied to an interval."""

    age_interval: int
    curated: bool
    table_version: str
    thresholds: list[ThresholdRead]


class DomainRead(BaseModel):
    value: Domain
    display_name: str


class IntervalsResponse(BaseModel):
    """Schema for the fixed ASQ-3 intervals and domains."""

    intervals: list[int]
    domains: list[DomainRead]
    answer_scores: dict[AnswerValue, int]


class VideoCreate(BaseModel):
    """Schema for an intervention video."""

    id: str
    title: str = Field(..., min_length=3)
    description: Optional[str] = None
    video_url: str = Field(..., pattern=r"^https?://")
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)
    domain: Domain
    min_age_interval: int = Field(..., ge=2, le=60)
    max_age_interval: int = Field(..., ge=2, le=60)
    score_threshold: float = Field(..., ge=0, le=60)
    is_active: bool = True

    @model_validator(mode="after")
    def check_interval_range(self) -> "VideoCreate":
        if self.min_age_interval > self.max_age_interval:
            raise ValueError("min_age_interval must not exceed max_age_interval")
        return self


class VideoRead(BaseModel):
    """Schema for reading an intervention video."""

    id: str
    title: str
    video_url: str
    domain: Domain
    score_threshold: float

    model_config = {"from_attributes": True}


class VideoRecommendRequest(BaseModel):
    """Schema for recommending videos for a completed questionnaire."""

    age_interval: ASQInterval
    answers: list[AnswerCreate]
    videos: list[VideoCreate]


class VideoRecommendResponse(BaseModel):
    """Schema for video recommendations keyed by domain."""

    age_interval: int
    recommendations: dict[Domain, list[VideoRead]]
