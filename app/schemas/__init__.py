"""Pydantic schemas for request/response validation."""

from app.schemas.screening import (
    AnswerCreate,
    CutoffsResponse,
    DomainScoreRead,
    IntervalsResponse,
    ResolveRequest,
    ResolveResponse,
    ScoreRequest,
    ScoreResponse,
    VideoCreate,
    VideoRead,
    VideoRecommendRequest,
    VideoRecommendResponse,
)

__all__ = [
    "AnswerCreate",
    "ScoreRequest",
    "ScoreResponse",
    "DomainScoreRead",
    "ResolveRequest",
    "ResolveResponse",
    "CutoffsResponse",
    "IntervalsResponse",
    "VideoCreate",
    "VideoRead",
    "VideoRecommendRequest",
    "VideoRecommendResponse",
]
