"""Job-candidate matching engine module."""

from .matching_engine import (
    DescriptionScore,
    InvalidInputShape,
    JobRecommendation,
    JobSuggestion,
    MatchingEngine,
    MatchResult,
    SkillOverlap,
    get_matching_engine,
)

__all__ = [
    "DescriptionScore",
    "InvalidInputShape",
    "JobRecommendation",
    "JobSuggestion",
    "MatchingEngine",
    "MatchResult",
    "SkillOverlap",
    "get_matching_engine",
]
