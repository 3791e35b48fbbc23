import math
from types import MappingProxyType
from typing import Iterable, List, Mapping, Set, Tuple

from signalpage.models.models import CandidateProfile, MatchBreakdown, MatchResult, RequirementSet

SKILLS_WEIGHT = 0.4
EXPERIENCE_WEIGHT = 0.35
REQUIREMENTS_WEIGHT = 0.25

# sub-score used when the job posting gives nothing to compare against
NEUTRAL_SUBSCORE = 75.0
MIN_KEYWORD_LENGTH = 5

SKILL_GROUPS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "javascript": ("js", "ecmascript"),
    "typescript": ("ts",),
    "python": ("py",),
    "react": ("reactjs", "react.js"),
    "node": ("nodejs", "node.js"),
    "postgres": ("postgresql", "psql"),
    "mongodb": ("mongo",),
    "kubernetes": ("k8s",),
    "aws": ("amazon web services",),
    "gcp": ("google cloud", "google cloud platform"),
    "azure": ("microsoft azure",),
    "ml": ("machine learning",),
    "ai": ("artificial intelligence",),
    "ci/cd": ("cicd", "continuous integration", "continuous deployment"),
    "docker": ("containers", "containerization"),
})

_GROUP_MEMBERS: Tuple[frozenset, ...] = tuple(
    frozenset((canonical,) + aliases) for canonical, aliases in SKILL_GROUPS.items()
)


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def normalize_skill(skill: str) -> str:
    return skill.lower().strip()


def _normalized(skills: Iterable[str]) -> List[str]:
    """Normalized skills with blanks dropped.

    Stored scores from the earlier scorer kept blank skills, where a blank
    candidate skill matched every job skill and a blank job skill counted
    toward the total. Scores for such inputs differ from those stored values.
    """
    out = []
    for s in skills:
        n = normalize_skill(s)
        if n:
            out.append(n)
    return out


def candidate_skill_set(profile: CandidateProfile) -> Set[str]:
    """Explicit skills plus every technology tag from experiences and projects."""
    skills = set(_normalized(profile.skills))
    for exp in profile.experiences:
        skills.update(_normalized(exp.technologies))
    for proj in profile.projects:
        skills.update(_normalized(proj.technologies))
    return skills


def job_skill_list(requirements: RequirementSet) -> List[str]:
    """Required then preferred skills, deduplicated, first occurrence wins."""
    combined = _normalized(requirements.required_skills) + _normalized(requirements.preferred_skills)
    return list(dict.fromkeys(combined))


def skills_similar(skill1: str, skill2: str) -> bool:
    for members in _GROUP_MEMBERS:
        if skill1 in members and skill2 in members:
            return True
        if any(m in skill1 for m in members) and any(m in skill2 for m in members):
            return True
    return False


def skill_matches(job_skill: str, candidate_skills: Iterable[str]) -> bool:
    return any(
        cs in job_skill or job_skill in cs or skills_similar(cs, job_skill)
        for cs in candidate_skills
    )


def keywords(phrase: str) -> List[str]:
    return [w for w in phrase.lower().split() if len(w) >= MIN_KEYWORD_LENGTH]


def keyword_coverage(phrases: List[str], text: str) -> float:
    """Percentage of phrases sharing at least one keyword with text.

    Returns the neutral sub-score when there are no phrases.
    """
    if not phrases:
        return NEUTRAL_SUBSCORE

    matched = sum(1 for p in phrases if any(k in text for k in keywords(p)))
    return matched / len(phrases) * 100


def calculate_skills_match(
    profile: CandidateProfile, requirements: RequirementSet
) -> Tuple[float, List[str], List[str]]:
    candidate = candidate_skill_set(profile)
    job_skills = job_skill_list(requirements)

    matched: List[str] = []
    missing: List[str] = []
    for js in job_skills:
        if skill_matches(js, candidate):
            matched.append(js)
        else:
            missing.append(js)

    percent = len(matched) / len(job_skills) * 100 if job_skills else 100.0
    return percent, matched, missing


def calculate_experience_match(profile: CandidateProfile, requirements: RequirementSet) -> float:
    experience_text = " ".join(
        f"{exp.description} {' '.join(exp.achievements)}" for exp in profile.experiences
    ).lower()
    return keyword_coverage(requirements.responsibilities, experience_text)


def calculate_requirements_match(profile: CandidateProfile, requirements: RequirementSet) -> float:
    achievements = [a for exp in profile.experiences for a in exp.achievements]
    highlights = [h for proj in profile.projects for h in proj.highlights]
    achievements_text = " ".join(achievements + highlights).lower()
    return keyword_coverage(requirements.business_problems, achievements_text)


def calculate_match_score(profile: CandidateProfile, requirements: RequirementSet) -> MatchResult:
    """Weighted 0-100 fit of a parsed resume against parsed job requirements.

    Skills 40%, experience 35%, requirements 25%. Pure and deterministic.
    """
    skills_pct, matched, missing = calculate_skills_match(profile, requirements)
    experience_pct = calculate_experience_match(profile, requirements)
    requirements_pct = calculate_requirements_match(profile, requirements)

    total = round_half_up(
        (skills_pct * SKILLS_WEIGHT)
        + (experience_pct * EXPERIENCE_WEIGHT)
        + (requirements_pct * REQUIREMENTS_WEIGHT)
    )

    return MatchResult(
        score=min(100, max(0, total)),
        breakdown=MatchBreakdown(
            skills_match=round_half_up(skills_pct),
            experience_match=round_half_up(experience_pct),
            requirements_match=round_half_up(requirements_pct),
            matched_skills=tuple(matched),
            missing_skills=tuple(missing),
            total_required_skills=len(matched) + len(missing),
            total_matched_skills=len(matched),
        ),
    )
