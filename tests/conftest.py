"""
Pytest configuration and shared fixtures.
"""
import os

os.environ["ENVIRONMENT"] = "testing"

import pytest
from typing import Dict, Any

from signalpage.models.models import CandidateProfile, RequirementSet


@pytest.fixture
def resume_data() -> Dict[str, Any]:
    """Parsed resume as stored by the resume parser."""
    return {
        "summary": "Backend engineer focused on data platforms",
        "skills": ["Python", "PostgreSQL"],
        "education": [{"institution": "State University", "degree": "BSc"}],
        "experiences": [
            {
                "company": "Acme",
                "title": "Senior Engineer",
                "start_date": "2020-01",
                "is_current": True,
                "description": "Built scalable services",
                "achievements": ["Shipped billing APIs"],
            }
        ],
    }


@pytest.fixture
def requirements_data() -> Dict[str, Any]:
    """Parsed job requirements as stored by the job parser."""
    return {
        "required_skills": ["python", "postgres", "go"],
        "preferred_skills": ["k8s"],
        "responsibilities": ["Design scalable APIs", "Mentor junior engineers"],
        "business_problems": ["reduce billing errors", "expand internationally", "improve uptime"],
        "company_context": "Series B fintech",
    }


@pytest.fixture
def profile(resume_data) -> CandidateProfile:
    return CandidateProfile.model_validate(resume_data)


@pytest.fixture
def requirements(requirements_data) -> RequirementSet:
    return RequirementSet.model_validate(requirements_data)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from signalpage.main import app

    return TestClient(app)
