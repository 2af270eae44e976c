"""
Lightweight resume analysis.

Pulls a handful of signals out of plain resume text: vocabulary skills,
claimed years of experience and whether any education is mentioned.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from jobmatch.nlp.skill_extractor import SkillExtractor
from jobmatch.utils.constants import EDUCATION_KEYWORDS, AuditAction
from jobmatch.utils.logger import audit_log, get_logger

logger = get_logger(__name__)

# "5 years of experience", "3+ yrs experience"
EXPERIENCE_PATTERN = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?experience",
    re.IGNORECASE,
)

ANALYSIS_CONFIDENCE = 0.8


@dataclass
class ResumeAnalysis:
    """Signals extracted from a resume."""

    skills: list[str] = field(default_factory=list)
    experience_years: int = 0
    has_education: bool = False
    confidence: float = ANALYSIS_CONFIDENCE

    def to_dict(self) -> dict:
        return {
            "skills": self.skills,
            "experience": self.experience_years,
            "education": self.has_education,
            "confidence": self.confidence,
        }


class ResumeAnalyzer:
    """Analyze plain-text resumes."""

    def __init__(self, extractor: Optional[SkillExtractor] = None):
        self.extractor = extractor or SkillExtractor()

    def analyze(self, resume_text: str) -> ResumeAnalysis:
        """
        Analyze resume text.

        Args:
            resume_text: Plain text of the resume

        Returns:
            ResumeAnalysis with skills, years of experience and education flag

        Raises:
            ValueError: If the text is empty
        """
        if not isinstance(resume_text, str) or not resume_text.strip():
            raise ValueError("Resume text is required")

        match = EXPERIENCE_PATTERN.search(resume_text)
        text_lower = resume_text.lower()

        analysis = ResumeAnalysis(
            skills=self.extractor.extract(resume_text),
            experience_years=int(match.group(1)) if match else 0,
            has_education=any(k in text_lower for k in EDUCATION_KEYWORDS),
        )

        logger.debug(
            f"Resume analyzed: {len(analysis.skills)} skills, "
            f"{analysis.experience_years} years"
        )
        audit_log(
            AuditAction.RESUME_ANALYZED.value,
            {
                "skills_found": len(analysis.skills),
                "experience_years": analysis.experience_years,
                "has_education": analysis.has_education,
            },
        )
        return analysis


# Singleton instance
_resume_analyzer: Optional[ResumeAnalyzer] = None


def get_resume_analyzer() -> ResumeAnalyzer:
    """Get the resume analyzer singleton instance."""
    global _resume_analyzer
    if _resume_analyzer is None:
        _resume_analyzer = ResumeAnalyzer()
    return _resume_analyzer


def analyze_resume(resume_text: str) -> ResumeAnalysis:
    """Analyze resume text with the shared analyzer."""
    return get_resume_analyzer().analyze(resume_text)
