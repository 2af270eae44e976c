"""
Text processing for jobmatch.

Provides the normalization helpers used by the matching engine, and
vocabulary-based skill extraction and resume analysis.
"""

from .text import (
    clean_text,
    matches_any_word,
    normalize_skills,
    round_half_up,
    strings_overlap,
    tokenize,
)
from .skill_extractor import SkillExtractor, extract_skills
from .resume_analyzer import (
    ResumeAnalysis,
    ResumeAnalyzer,
    analyze_resume,
    get_resume_analyzer,
)

__all__ = [
    # Text helpers
    "clean_text",
    "matches_any_word",
    "normalize_skills",
    "round_half_up",
    "strings_overlap",
    "tokenize",
    # Extraction
    "SkillExtractor",
    "extract_skills",
    # Resume analysis
    "ResumeAnalysis",
    "ResumeAnalyzer",
    "analyze_resume",
    "get_resume_analyzer",
]
