from pydantic import BaseModel, Field
from typing import List, Optional

from signalpage.models.models import CandidateProfile, RequirementSet

# -------- Scoring --------
class ScoreRequest(BaseModel):
    profile: CandidateProfile
    requirements: RequirementSet

# -------- Recalculation of a stored page --------
class RecalculateRequest(BaseModel):
    page_id: str
    resume: Optional[CandidateProfile] = None            # the user's primary parsed resume
    job_requirements: Optional[RequirementSet] = None    # None when the job was never parsed

# -------- Ranking --------
class JobRequirements(BaseModel):
    job_id: str
    requirements: RequirementSet

class RankRequest(BaseModel):
    profile: CandidateProfile
    jobs: List[JobRequirements] = Field(default_factory=list)
