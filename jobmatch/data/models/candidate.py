"""
Candidate profile model.

Holds the profile signals used for scoring: skills, years of experience,
location and bio. Malformed values degrade to "contributes nothing"
instead of failing validation.
"""

import math
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from jobmatch.nlp.text import normalize_skills

from .base import EmbeddedModel


class CandidateProfile(EmbeddedModel):
    """Normalized candidate data used as the basis for scoring."""

    model_config = ConfigDict(extra="ignore")

    skills: list[str] = Field(default_factory=list)
    experience_years: Optional[int] = None
    location: Optional[str] = None
    bio: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skill_list(cls, v: Any) -> list[str]:
        """Normalize skills from a comma separated string or a sequence."""
        return normalize_skills(v)

    @field_validator("experience_years", mode="before")
    @classmethod
    def coerce_experience(cls, v: Any) -> Optional[int]:
        """Read experience as a non-negative integer, or drop it."""
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, str):
            v = v.strip()
            # isdigit() also accepts superscripts that int() rejects
            if not v.isdecimal():
                return None
            return int(v)
        if isinstance(v, float) and not math.isfinite(v):
            return None
        if isinstance(v, (int, float)):
            return int(v) if v >= 0 else None
        return None

    @field_validator("location", "bio", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        """Keep non-blank strings only."""
        if isinstance(v, str) and v.strip():
            return v.strip()
        return None

    @property
    def skill_count(self) -> int:
        return len(self.skills)

    @property
    def has_skills(self) -> bool:
        return bool(self.skills)
