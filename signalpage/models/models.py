from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional, Tuple


def _coerce_text_list(v: Any) -> List[str]:
    # parser output may carry null lists or null entries
    if isinstance(v, str):
        return [v]
    return _coerce_list(v)


def _coerce_list(v: Any) -> list:
    # anything other than a list or tuple (null, scalar, mapping) is treated as empty
    if not isinstance(v, (list, tuple)):
        return []
    return [x for x in v if x is not None]


class Experience(BaseModel):
    company: Optional[str] = None
    title: Optional[str] = None
    description: str = ""
    achievements: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def _description_or_empty(cls, v):
        return "" if v is None else v

    @field_validator("achievements", "technologies", mode="before")
    @classmethod
    def _lists_or_empty(cls, v):
        return _coerce_text_list(v)


class Project(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    highlights: List[str] = Field(default_factory=list)

    @field_validator("technologies", "highlights", mode="before")
    @classmethod
    def _lists_or_empty(cls, v):
        return _coerce_text_list(v)


class CandidateProfile(BaseModel):
    """Parsed resume as consumed by the fit scorer.

    Extra keys produced by the resume parser (education, certifications, ...)
    are ignored.
    """
    summary: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experiences: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _skills_or_empty(cls, v):
        return _coerce_text_list(v)

    @field_validator("experiences", "projects", mode="before")
    @classmethod
    def _records_or_empty(cls, v):
        return _coerce_list(v)


class RequirementSet(BaseModel):
    """Parsed job requirements as consumed by the fit scorer."""
    required_skills: List[str] = Field(default_factory=list)
    preferred_skills: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    business_problems: List[str] = Field(default_factory=list)
    company_context: Optional[str] = None
    role_context: Optional[str] = None

    @field_validator(
        "required_skills", "preferred_skills", "responsibilities", "business_problems",
        mode="before",
    )
    @classmethod
    def _lists_or_empty(cls, v):
        return _coerce_text_list(v)


class MatchBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills_match: int
    experience_match: int
    requirements_match: int
    matched_skills: Tuple[str, ...] = ()
    missing_skills: Tuple[str, ...] = ()
    total_required_skills: int
    total_matched_skills: int


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    breakdown: MatchBreakdown
