from fastapi import APIRouter

from signalpage.config import get_settings
from signalpage.models.response import (
    RankedJob, RankResponse, RecalculateResponse, ScoreResponse, SkillGroupsResponse
)
from signalpage.models.schemas import RankRequest, RecalculateRequest, ScoreRequest
from signalpage.services.matching import SKILL_GROUPS, calculate_match_score
from signalpage.services.presentation import score_band, score_bg_color, score_color, score_label
from signalpage.utils.exceptions import ExceptionContext, ValidationError
from signalpage.utils.logging_config import PerformanceMonitor, get_logger

router = APIRouter(prefix="/match", tags=["match"])
logger = get_logger(__name__)


@router.post("/score", response_model=ScoreResponse)
async def score_profile(payload: ScoreRequest):
    """Score a parsed resume against parsed job requirements"""
    result = calculate_match_score(payload.profile, payload.requirements)
    logger.debug(
        f"Scored profile: {result.score} "
        f"({result.breakdown.total_matched_skills}/{result.breakdown.total_required_skills} skills)"
    )
    return ScoreResponse(
        match_score=result.score,
        match_breakdown=result.breakdown,
        band=score_band(result.score),
        label=score_label(result.score),
        color=score_color(result.score),
        bg_color=score_bg_color(result.score),
    )


@router.post("/recalculate", response_model=RecalculateResponse)
async def recalculate_score(payload: RecalculateRequest):
    """Recompute the match score of a stored page from its resume and job data"""
    if not payload.page_id.strip():
        raise ValidationError("Page ID is required", field="page_id")
    if payload.resume is None:
        raise ValidationError("Resume not found", field="resume")
    if payload.job_requirements is None:
        raise ValidationError("Job requirements not parsed", field="job_requirements")

    result = calculate_match_score(payload.resume, payload.job_requirements)
    logger.info(f"Recalculated score for page {payload.page_id}: {result.score}")
    return RecalculateResponse(
        page_id=payload.page_id,
        match_score=result.score,
        match_breakdown=result.breakdown,
    )


@router.post("/rank", response_model=RankResponse)
async def rank_jobs(payload: RankRequest):
    """Score one profile against several jobs, best fit first"""
    max_jobs = get_settings().max_rank_jobs

    if not payload.jobs:
        raise ValidationError("At least one job is required", field="jobs")
    if len(payload.jobs) > max_jobs:
        raise ValidationError(
            f"Too many jobs: {len(payload.jobs)} (max {max_jobs})",
            field="jobs",
            value=len(payload.jobs),
        )

    seen = set()
    for job in payload.jobs:
        if job.job_id in seen:
            raise ValidationError(f"Duplicate job_id: {job.job_id}", field="job_id", value=job.job_id)
        seen.add(job.job_id)

    scored = []
    with PerformanceMonitor(f"rank {len(payload.jobs)} jobs", logger=logger, threshold_ms=500):
        for job in payload.jobs:
            with ExceptionContext("score job", logger=logger, job_id=job.job_id):
                scored.append((job.job_id, calculate_match_score(payload.profile, job.requirements)))

    # stable sort: ties keep request order
    ranked = sorted(scored, key=lambda item: -item[1].score)

    return RankResponse(
        count=len(ranked),
        results=[
            RankedJob(
                job_id=job_id,
                rank=i,
                match_score=result.score,
                match_breakdown=result.breakdown,
                band=score_band(result.score),
                label=score_label(result.score),
            )
            for i, (job_id, result) in enumerate(ranked, start=1)
        ],
    )


@router.get("/skill-groups", response_model=SkillGroupsResponse)
async def list_skill_groups():
    """Canonical skill names and the aliases treated as equivalent"""
    return SkillGroupsResponse(groups={k: list(v) for k, v in SKILL_GROUPS.items()})
