"""
Job posting model.

Exposes the free-text fields that keyword matching searches. Unknown
fields are kept so a posting passes through matching unmodified.
"""

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import (
    AliasChoices,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
    model_validator,
)

from jobmatch.nlp.text import normalize_skills

from .base import EmbeddedModel


class JobPosting(EmbeddedModel):
    """A job record exposing free-text fields used for keyword search."""

    model_config = ConfigDict(extra="allow")

    id: Any = None
    title: str = ""
    description: str = ""
    requirements: str = Field(
        default="",
        validation_alias=AliasChoices("requirements", "requirementsText", "requirements_text"),
    )
    location: Optional[str] = None
    company: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("company", "company_name", "companyName"),
    )
    required_skills: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("required_skills", "requiredSkills", "skills_required"),
    )

    # Record exactly as supplied, returned unchanged by to_source_dict()
    _source: Optional[dict[str, Any]] = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def keep_source(cls, data: Any, handler: Any) -> "JobPosting":
        job = handler(data)
        if isinstance(data, Mapping):
            job._source = dict(data)
        return job

    @field_validator("title", "description", "requirements", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Missing or non-string text fields become empty strings."""
        return v if isinstance(v, str) else ""

    @field_validator("location", "company", mode="before")
    @classmethod
    def coerce_optional_text(cls, v: Any) -> Optional[str]:
        if isinstance(v, str) and v.strip():
            return v.strip()
        return None

    @field_validator("required_skills", mode="before")
    @classmethod
    def coerce_required_skills(cls, v: Any) -> list[str]:
        """Keep the original spelling; only drop blanks and non-strings."""
        if isinstance(v, str):
            v = v.split(",")
        if not isinstance(v, (list, tuple)):
            return []
        return [s.strip() for s in v if isinstance(s, str) and s.strip()]

    @property
    def combined_text(self) -> str:
        """Lowercased title, description and requirements for substring search."""
        return f"{self.title} {self.description} {self.requirements}".lower()

    def to_source_dict(self) -> dict[str, Any]:
        """
        Return the record with the keys and values it was loaded from.

        Aliased keys such as ``company_name`` or ``skills_required`` keep
        their spelling and absent fields are not filled in. Jobs built
        without a source mapping fall back to the fields that were set.
        """
        if self._source is not None:
            return dict(self._source)
        return self.model_dump(by_alias=True, exclude_unset=True)

    @property
    def normalized_required_skills(self) -> list[str]:
        return normalize_skills(self.required_skills)
