"""
Tests for the fit scorer.
"""
import pytest
from pydantic import ValidationError as PydanticValidationError

from signalpage.models.models import CandidateProfile, Experience, Project, RequirementSet
from signalpage.services.matching import (
    SKILL_GROUPS,
    calculate_match_score,
    candidate_skill_set,
    job_skill_list,
    keywords,
    round_half_up,
    skills_similar,
)


def _profile(**kwargs) -> CandidateProfile:
    return CandidateProfile(**kwargs)


def _requirements(**kwargs) -> RequirementSet:
    return RequirementSet(**kwargs)


class TestSkillsMatch:
    """Skill normalization, containment and synonym matching."""

    def test_partial_skill_coverage(self):
        """Two of three required skills present."""
        result = calculate_match_score(
            _profile(skills=["Python", "AWS"]),
            _requirements(required_skills=["python", "aws", "docker"]),
        )
        b = result.breakdown
        assert b.skills_match == 67
        assert b.experience_match == 75
        assert b.requirements_match == 75
        assert b.total_matched_skills == 2
        assert b.total_required_skills == 3
        assert b.matched_skills == ("python", "aws")
        assert b.missing_skills == ("docker",)
        assert result.score == 72

    def test_no_job_skills_scores_full(self):
        result = calculate_match_score(_profile(skills=["Python"]), _requirements())
        assert result.breakdown.skills_match == 100
        assert result.breakdown.total_required_skills == 0
        assert result.breakdown.matched_skills == ()

    def test_matching_is_case_insensitive(self):
        upper = calculate_match_score(
            _profile(skills=["Python"]), _requirements(required_skills=["python"])
        )
        lower = calculate_match_score(
            _profile(skills=["python"]), _requirements(required_skills=["python"])
        )
        assert upper.breakdown.matched_skills == lower.breakdown.matched_skills == ("python",)
        assert upper.breakdown.missing_skills == lower.breakdown.missing_skills == ()

    def test_whitespace_is_trimmed(self):
        result = calculate_match_score(
            _profile(skills=["  Docker "]), _requirements(required_skills=[" DOCKER"])
        )
        assert result.breakdown.matched_skills == ("docker",)

    def test_synonym_k8s_matches_kubernetes(self):
        result = calculate_match_score(
            _profile(skills=["k8s"]), _requirements(required_skills=["kubernetes"])
        )
        assert result.breakdown.matched_skills == ("kubernetes",)

    def test_substring_reactjs_matches_react(self):
        result = calculate_match_score(
            _profile(skills=["react"]), _requirements(required_skills=["reactjs"])
        )
        assert result.breakdown.matched_skills == ("reactjs",)

    def test_unrelated_skill_is_missing(self):
        result = calculate_match_score(
            _profile(skills=["ruby"]), _requirements(required_skills=["docker"])
        )
        assert result.breakdown.missing_skills == ("docker",)
        assert result.breakdown.skills_match == 0

    def test_required_and_preferred_deduplicated(self):
        reqs = _requirements(required_skills=["Python", "python "], preferred_skills=["PYTHON", "SQL"])
        assert job_skill_list(reqs) == ["python", "sql"]

        result = calculate_match_score(_profile(skills=["python"]), reqs)
        assert result.breakdown.total_required_skills == 2
        assert result.breakdown.missing_skills == ("sql",)

    def test_technologies_count_as_skills(self):
        profile = _profile(
            experiences=[Experience(description="", technologies=["Docker"])],
            projects=[Project(technologies=["Kubernetes"])],
        )
        assert candidate_skill_set(profile) == {"docker", "kubernetes"}

        result = calculate_match_score(profile, _requirements(required_skills=["docker", "kubernetes"]))
        assert result.breakdown.skills_match == 100

    def test_blank_skills_are_ignored(self):
        result = calculate_match_score(
            _profile(skills=["   "]), _requirements(required_skills=["", "docker"])
        )
        assert result.breakdown.total_required_skills == 1
        assert result.breakdown.missing_skills == ("docker",)

    def test_skills_match_rounds_half_up(self):
        """5 of 8 skills is 62.5%, reported as 63."""
        result = calculate_match_score(
            _profile(skills=["python", "django", "redis", "graphql", "terraform"]),
            _requirements(required_skills=[
                "python", "django", "redis", "graphql", "terraform", "rust", "scala", "elixir"
            ]),
        )
        assert result.breakdown.total_matched_skills == 5
        assert result.breakdown.skills_match == 63


class TestSkillsSimilar:
    """Canonical skill group equivalence."""

    @pytest.mark.parametrize("a,b", [
        ("k8s", "kubernetes"),
        ("js", "javascript"),
        ("psql", "postgres"),
        ("google cloud platform", "gcp"),
        ("mongo", "mongodb"),
    ])
    def test_group_members_are_similar(self, a, b):
        assert skills_similar(a, b)
        assert skills_similar(b, a)

    def test_members_contained_in_longer_skill(self):
        assert skills_similar("ci/cd pipelines", "continuous integration")

    def test_different_groups_not_similar(self):
        assert not skills_similar("azure", "docker")

    def test_skill_groups_are_read_only(self):
        with pytest.raises(TypeError):
            SKILL_GROUPS["rust"] = ("rs",)


class TestExperienceMatch:
    """Responsibility keywords against experience text."""

    def test_no_responsibilities_is_neutral(self):
        result = calculate_match_score(_profile(), _requirements(required_skills=["python"]))
        assert result.breakdown.experience_match == 75

    def test_single_keyword_is_enough(self):
        profile = _profile(experiences=[Experience(description="Led cross-functional initiatives")])
        result = calculate_match_score(
            profile, _requirements(responsibilities=["manage large cross-functional teams"])
        )
        assert result.breakdown.experience_match == 100

    def test_short_words_are_not_keywords(self):
        assert keywords("Own the API and SDKs") == []
        profile = _profile(experiences=[Experience(description="own the api and sdks")])
        result = calculate_match_score(profile, _requirements(responsibilities=["Own the API and SDKs"]))
        assert result.breakdown.experience_match == 0

    def test_achievements_count_as_experience(self):
        profile = _profile(experiences=[Experience(achievements=["Mentored four engineers"])])
        result = calculate_match_score(profile, _requirements(responsibilities=["Mentor engineers"]))
        assert result.breakdown.experience_match == 100


class TestRequirementsMatch:
    """Business problem keywords against achievements and highlights."""

    def test_no_business_problems_is_neutral(self):
        result = calculate_match_score(_profile(), _requirements(responsibilities=["ship features"]))
        assert result.breakdown.requirements_match == 75

    def test_project_highlights_count(self):
        profile = _profile(projects=[Project(highlights=["Redesigned onboarding flow"])])
        result = calculate_match_score(profile, _requirements(business_problems=["improve onboarding"]))
        assert result.breakdown.requirements_match == 100

    def test_description_does_not_count(self):
        profile = _profile(experiences=[Experience(description="Scaled onboarding")])
        result = calculate_match_score(profile, _requirements(business_problems=["improve onboarding"]))
        assert result.breakdown.requirements_match == 0


class TestMatchScore:
    """Aggregated fit score."""

    def test_empty_requirements_score(self, profile):
        result = calculate_match_score(profile, _requirements())
        assert result.score == 85

    def test_empty_profile_and_requirements(self):
        result = calculate_match_score(_profile(), _requirements())
        assert result.score == 85
        assert result.breakdown.skills_match == 100

    def test_weighted_score(self, profile, requirements):
        result = calculate_match_score(profile, requirements)
        b = result.breakdown
        assert b.skills_match == 50
        assert b.matched_skills == ("python", "postgres")
        assert b.missing_skills == ("go", "k8s")
        assert b.experience_match == 50
        assert b.requirements_match == 33
        # 50*0.4 + 50*0.35 + 33.33*0.25 = 45.83
        assert result.score == 46

    def test_nothing_matches(self):
        result = calculate_match_score(
            _profile(skills=["ruby"]),
            _requirements(
                required_skills=["docker"],
                responsibilities=["Negotiate vendor contracts"],
                business_problems=["Reduce churn"],
            ),
        )
        assert result.score == 0

    def test_score_is_bounded_integer(self, profile, requirements):
        cases = [
            (profile, requirements),
            (profile, _requirements()),
            (_profile(), requirements),
            (_profile(skills=["python"]), _requirements(required_skills=["python"])),
        ]
        for p, r in cases:
            score = calculate_match_score(p, r).score
            assert isinstance(score, int)
            assert 0 <= score <= 100

    def test_idempotent(self, profile, requirements):
        first = calculate_match_score(profile, requirements)
        second = calculate_match_score(profile, requirements)
        assert first == second

    def test_result_is_immutable(self, profile, requirements):
        result = calculate_match_score(profile, requirements)
        with pytest.raises(PydanticValidationError):
            result.score = 99

    def test_skill_lists_are_immutable(self, profile, requirements):
        result = calculate_match_score(profile, requirements)
        with pytest.raises(AttributeError):
            result.breakdown.matched_skills.append("rust")
        assert result.breakdown.missing_skills == ("go", "k8s")


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(71.666) == 72
    assert round_half_up(45.2) == 45
