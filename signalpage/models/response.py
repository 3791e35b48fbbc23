# models/response.py
from pydantic import BaseModel
from typing import Dict, List

from signalpage.models.models import MatchBreakdown
from signalpage.services.presentation import ScoreBand


class ScoreResponse(BaseModel):
    match_score: int
    match_breakdown: MatchBreakdown
    band: ScoreBand
    label: str
    color: str
    bg_color: str


class RecalculateResponse(BaseModel):
    page_id: str
    match_score: int
    match_breakdown: MatchBreakdown


class RankedJob(BaseModel):
    job_id: str
    rank: int
    match_score: int
    match_breakdown: MatchBreakdown
    band: ScoreBand
    label: str


class RankResponse(BaseModel):
    count: int
    results: List[RankedJob]


class SkillGroupsResponse(BaseModel):
    groups: Dict[str, List[str]]
