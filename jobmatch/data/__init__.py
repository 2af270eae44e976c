"""
Data layer for jobmatch.

Submodules:
- models: Pydantic records for candidate profiles and job postings
"""

from .models import CandidateProfile, EmbeddedModel, JobPosting

__all__ = [
    "CandidateProfile",
    "EmbeddedModel",
    "JobPosting",
]
