"""
Pydantic data models for jobmatch.

The matching engine consumes these plain records; persisting them is the
host application's concern.
"""

from .base import EmbeddedModel
from .candidate import CandidateProfile
from .job import JobPosting

__all__ = [
    "EmbeddedModel",
    "CandidateProfile",
    "JobPosting",
]
