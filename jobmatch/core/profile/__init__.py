"""Skill suggestions and profile analysis for job seekers."""

from .profile_advisor import (
    ProfileAnalysis,
    Recommendation,
    analyze_profile,
    suggest_skills,
)

__all__ = [
    "ProfileAnalysis",
    "Recommendation",
    "analyze_profile",
    "suggest_skills",
]
