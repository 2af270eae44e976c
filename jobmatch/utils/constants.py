"""
Application-wide constants for jobmatch.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "jobmatch"
APP_DISPLAY_NAME: Final[str] = "Job Board Skill Matching"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Skill Vocabularies
# =============================================================================

# Keywords recognised by free-text skill extraction (order matters: results
# are reported in vocabulary order)
SKILL_KEYWORDS: Final[tuple[str, ...]] = (
    "javascript", "react", "node.js", "python", "java", "c++", "c#", "php",
    "html", "css", "typescript", "angular", "vue", "django", "flask",
    "mongodb", "postgresql", "mysql", "redis", "aws", "azure", "docker",
    "kubernetes", "git", "agile", "scrum", "leadership", "management",
    "ui/ux", "design", "testing", "devops", "machine learning", "ai",
    "data science", "analytics", "blockchain", "web3", "solidity",
)

# Skills weighted double when scoring a skill list against a job's skills
HIGH_PRIORITY_SKILLS: Final[frozenset[str]] = frozenset({
    "javascript", "typescript", "python", "java", "react", "vue", "angular",
    "node.js", "express", "django", "spring", "aws", "azure", "docker",
    "kubernetes",
})

# Skill suggestions keyed by a role keyword looked up in the job title
SKILL_RECOMMENDATIONS: Final[dict[str, list[str]]] = {
    "frontend": ["React", "Vue.js", "Angular", "TypeScript", "Tailwind CSS", "Next.js"],
    "backend": ["Node.js", "Express.js", "Django", "PostgreSQL", "MongoDB", "Redis"],
    "fullstack": ["React", "Node.js", "TypeScript", "PostgreSQL", "AWS", "Docker"],
    "mobile": ["React Native", "Flutter", "Swift", "Kotlin", "Firebase"],
    "devops": ["Docker", "Kubernetes", "AWS", "Jenkins", "Terraform", "Prometheus"],
    "data": ["Python", "Pandas", "NumPy", "SQL", "Tableau", "Machine Learning"],
}

POPULAR_SKILLS: Final[list[str]] = [
    "JavaScript", "Python", "React", "Node.js", "SQL", "Git", "AWS", "Docker",
]

EDUCATION_KEYWORDS: Final[tuple[str, ...]] = (
    "bachelor", "master", "phd", "degree", "university", "college",
)


# =============================================================================
# Scoring Constants
# =============================================================================

SKILL_MATCH_WEIGHT: Final[int] = 10
EXPERIENCE_BONUS: Final[int] = 5
LOCATION_BONUS: Final[int] = 5

# Experience brackets: (keyword in job text, min years, max years)
EXPERIENCE_BRACKETS: Final[tuple[tuple[str, int, int | None], ...]] = (
    ("junior", 0, 2),
    ("mid", 2, 5),
    ("senior", 5, None),
)

# Single-job description score split
DESCRIPTION_SKILL_POINTS: Final[float] = 70.0
DESCRIPTION_BIO_POINTS_PER_MATCH: Final[int] = 5
DESCRIPTION_BIO_POINTS_MAX: Final[int] = 30

# Result sizes
AI_JOBS_LIMIT: Final[int] = 20
SUGGESTIONS_LIMIT: Final[int] = 10
RECOMMENDATIONS_LIMIT: Final[int] = 10
EXTRACTION_LIMIT: Final[int] = 10
SKILL_SUGGESTIONS_LIMIT: Final[int] = 8

# Minimum percentages for the suggestion/recommendation paths
SUGGESTION_THRESHOLD: Final[int] = 20
RECOMMENDATION_THRESHOLD: Final[int] = 20

# Relevance percentage thresholds
SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "excellent": 85,
    "good": 70,
    "fair": 50,
    "poor": 30,
}

SUCCESSFUL_APPLICATION_STATUSES: Final[frozenset[str]] = frozenset({"ACCEPTED", "INTERVIEWED"})


# =============================================================================
# Enums
# =============================================================================


class MatchScoreLevel(Enum):
    """Categorical levels for relevance percentages."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a 0-100 relevance percentage to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.POOR


class SkillsAssessment(str, Enum):
    """Coarse rating of how many skills a profile lists."""

    LIMITED = "Limited"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @classmethod
    def from_count(cls, count: int) -> "SkillsAssessment":
        if count < 5:
            return cls.LIMITED
        elif count < 10:
            return cls.GOOD
        return cls.EXCELLENT


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    JOBS_RANKED = "jobs_ranked"
    JOB_SCORED = "job_scored"
    JOBS_SUGGESTED = "jobs_suggested"
    JOBS_RECOMMENDED = "jobs_recommended"
    SKILLS_EXTRACTED = "skills_extracted"
    RESUME_ANALYZED = "resume_analyzed"
    PROFILE_ANALYZED = "profile_analyzed"
