"""
Shared test fixtures for the jobmatch test suite.

Sets environment variables before any jobmatch imports so tests never
write log files, then provides factory fixtures for candidate profiles
and job postings.
"""

import os

# === Set environment BEFORE any jobmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

from typing import Any, Optional

import pytest
from loguru import logger

from jobmatch.core.matching.matching_engine import MatchingEngine
from jobmatch.data.models import CandidateProfile, JobPosting
from jobmatch.utils.config import MatchingSettings


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build CandidateProfile models."""

    def _factory(
        skills: Any = None,
        experience_years: Any = None,
        location: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> CandidateProfile:
        if skills is None:
            skills = ["python", "django", "postgresql"]
        return CandidateProfile(
            skills=skills,
            experience_years=experience_years,
            location=location,
            bio=bio,
        )

    return _factory


@pytest.fixture
def make_job():
    """Factory that returns a callable to build JobPosting models."""

    def _factory(
        id: Any = 1,
        title: str = "Backend Engineer",
        description: str = "Build APIs with python and django",
        requirements: str = "",
        location: Optional[str] = None,
        required_skills: Optional[list[str]] = None,
        **kwargs,
    ) -> JobPosting:
        return JobPosting(
            id=id,
            title=title,
            description=description,
            requirements=requirements,
            location=location,
            required_skills=required_skills or [],
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_jobs(make_job):
    return [
        make_job(id=1, title="Frontend Developer", description="React and TypeScript UI work"),
        make_job(id=2, title="Backend Engineer", description="Python services on PostgreSQL"),
        make_job(id=3, title="Accountant", description="Bookkeeping, payroll, tax filing"),
        make_job(id=4, title="Full Stack Engineer", description="React frontend, Python backend, PostgreSQL"),
    ]


# ---------------------------------------------------------------------------
# Matching engine fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_engine():
    """MatchingEngine with default weights, independent of the environment."""
    return MatchingEngine(settings=MatchingSettings())


# ---------------------------------------------------------------------------
# Logging fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def audit_messages():
    """Collect the messages of audit entries written during a test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        filter=lambda record: "audit_type" in record["extra"],
        level="INFO",
    )
    yield messages
    logger.remove(handler_id)
