"""ASQ-3 screening calculation endpoints.

Stateless: nothing is read from or written to storage. Callers submit a
date of birth or a completed questionnaire and receive the computed
interval, domain scores and statuses.
"""

from fastapi import APIRouter, HTTPException, status

from app.api.deps import CutoffTableDep
from app.schemas.screening import (
    CutoffsResponse,
    DomainRead,
    DomainScoreRead,
    IntervalsResponse,
    ResolveRequest,
    ResolveResponse,
    ScoreRequest,
    ScoreResponse,
    ThresholdRead,
    VideoRead,
    VideoRecommendRequest,
    VideoRecommendResponse,
)
from app.scoring.answers import ANSWER_SCORES
from app.scoring.cutoffs import get_cutoff_score
from app.scoring.formatting import (
    format_age,
    format_interval_name,
    get_all_domains,
    get_domain_display_name,
)
from app.scoring.models import ASQ_INTERVALS
from app.services.screening import AnswerSubmission, resolve_screening, score_assessment
from app.services.videos import InterventionVideo, recommend_videos
from app.utils.time import utc_now

router = APIRouter()


def _to_submissions(request: ScoreRequest | VideoRecommendRequest) -> list[AnswerSubmission]:
    return [
        AnswerSubmission(
            question_id=a.question_id,
            domain=a.domain,
            answer=a.answer,
            score=a.score,
        )
        for a in request.answers
    ]


@router.get(
    "/intervals",
    response_model=IntervalsResponse,
    summary="List ASQ-3 intervals and domains",
)
async def list_intervals() -> IntervalsResponse:
    """Return the fixed intervals, domains and answer scores."""
    return IntervalsResponse(
        intervals=list(ASQ_INTERVALS),
        domains=[
            DomainRead(value=d, display_name=get_domain_display_name(d))
            for d in get_all_domains()
        ],
        answer_scores=dict(ANSWER_SCORES),
    )


@router.post(
    "/resolve",
    response_model=ResolveResponse,
    summary="Resolve questionnaire interval",
    description="Compute a child's age in months and the ASQ-3 interval to administer",
)
async def resolve_interval(request: ResolveRequest) -> ResolveResponse:
    """Resolve the questionnaire interval for a date of birth."""
    as_of = request.as_of or utc_now().date()

    if request.date_of_birth > as_of:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Date of birth cannot be in the future",
        )

    resolution = resolve_screening(request.date_of_birth, as_of)

    return ResolveResponse(
        age_in_months=resolution.age_in_months,
        age_display=format_age(resolution.age_in_months),
        asq_interval=resolution.asq_interval,
        interval_name=format_interval_name(resolution.asq_interval),
        next_interval=resolution.next_interval,
        available_intervals=resolution.available_intervals,
    )


@router.post(
    "/score",
    response_model=ScoreResponse,
    summary="Score a completed questionnaire",
)
async def score_questionnaire(
    request: ScoreRequest,
    table: CutoffTableDep,
) -> ScoreResponse:
    """Score answers and classify each answered domain."""
    result = score_assessment(request.age_interval, _to_submissions(request), table)

    return ScoreResponse(
        age_interval=result.age_interval,
        interval_name=format_interval_name(result.age_interval),
        domain_scores=[DomainScoreRead.model_validate(s) for s in result.domain_scores],
        overall_status=result.overall_status,
        used_default_cutoffs=result.used_default_cutoffs,
        table_version=result.table_version,
    )


@router.get(
    "/cutoffs/{age_interval}",
    response_model=CutoffsResponse,
    summary="Get thresholds for an interval",
)
async def get_cutoffs(age_interval: int, table: CutoffTableDep) -> CutoffsResponse:
    """Return the cutoff and monitoring thresholds applied to an interval."""
    if age_interval not in ASQ_INTERVALS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{age_interval} is not an ASQ-3 interval",
        )

    thresholds = []
    for domain in get_all_domains():
        pair = get_cutoff_score(age_interval, domain, table)
        thresholds.append(
            ThresholdRead(
                domain=domain,
                display_name=get_domain_display_name(domain),
                cutoff=pair.cutoff,
                monitoring=pair.monitoring,
            )
        )

    return CutoffsResponse(
        age_interval=age_interval,
        curated=table.is_curated(age_interval),
        table_version=table.version,
        thresholds=thresholds,
    )


@router.post(
    "/videos/recommend",
    response_model=VideoRecommendResponse,
    summary="Recommend intervention videos",
)
async def recommend_intervention_videos(
    request: VideoRecommendRequest,
    table: CutoffTableDep,
) -> VideoRecommendResponse:
    """Score a questionnaire and pick matching videos per domain."""
    result = score_assessment(request.age_interval, _to_submissions(request), table)
    videos = [InterventionVideo(**v.model_dump()) for v in request.videos]

    recommendations = recommend_videos(videos, result.domain_scores, request.age_interval)

    return VideoRecommendResponse(
        age_interval=request.age_interval,
        recommendations={
            domain: [VideoRead.model_validate(v) for v in matched]
            for domain, matched in recommendations.items()
        },
    )
