"""
Profile advice for job seekers.

Suggests skills worth adding for a target role and summarizes how
complete a profile is and how its applications have fared.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from jobmatch.data.models import CandidateProfile
from jobmatch.nlp.text import normalize_skills, round_half_up
from jobmatch.utils.constants import (
    POPULAR_SKILLS,
    SKILL_RECOMMENDATIONS,
    SKILL_SUGGESTIONS_LIMIT,
    SUCCESSFUL_APPLICATION_STATUSES,
    AuditAction,
    SkillsAssessment,
)
from jobmatch.utils.logger import audit_log, get_logger

logger = get_logger(__name__)

# Profile fields counted towards completeness
PROFILE_FIELDS = ("skills", "experience_years", "location")

COMPLETENESS_TARGET = 80
MIN_SKILLS = 5
SKILLS_FOR_NO_SUGGESTIONS = 10
LOW_SUCCESS_RATE = 20
MIN_APPLICATIONS_FOR_RATE = 3


@dataclass
class Recommendation:
    """A single piece of advice for the profile owner."""

    type: str
    priority: str
    message: str


@dataclass
class ProfileAnalysis:
    """Summary of a candidate profile."""

    profile_completeness: int = 0
    application_success_rate: int = 0
    skills_count: int = 0
    skills_assessment: SkillsAssessment = SkillsAssessment.LIMITED
    skill_suggestions: list[str] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "profileCompleteness": self.profile_completeness,
            "applicationSuccessRate": self.application_success_rate,
            "skillsAnalysis": {
                "count": self.skills_count,
                "assessment": self.skills_assessment.value,
                "suggestions": list(self.skill_suggestions),
            },
            "recommendations": [
                {"type": r.type, "priority": r.priority, "message": r.message}
                for r in self.recommendations
            ],
        }


def suggest_skills(
    current_skills: Any,
    job_title: str = "",
    limit: int = SKILL_SUGGESTIONS_LIMIT,
) -> list[str]:
    """
    Suggest skills for a target role that the candidate does not list yet.

    The first role keyword (frontend, backend, ...) found in the job title
    picks the list; popular skills are used when no role matches or the
    candidate already has every skill of the role.
    """
    have = set(normalize_skills(current_skills))
    title = job_title.lower() if isinstance(job_title, str) else ""

    suggestions: list[str] = []
    for role, skills in SKILL_RECOMMENDATIONS.items():
        if role in title:
            suggestions = [s for s in skills if s.lower() not in have]
            break

    if not suggestions:
        suggestions = [s for s in POPULAR_SKILLS if s.lower() not in have]

    return suggestions[:limit]


def analyze_profile(
    candidate: CandidateProfile | Mapping[str, Any],
    application_statuses: Optional[Iterable[str]] = None,
) -> ProfileAnalysis:
    """
    Analyze a candidate profile and its recent application outcomes.

    Args:
        candidate: Candidate profile (model or raw mapping)
        application_statuses: Status of each application, e.g. "ACCEPTED"

    Returns:
        ProfileAnalysis with completeness, success rate and recommendations
    """
    if not isinstance(candidate, CandidateProfile):
        candidate = CandidateProfile.model_validate(dict(candidate or {}))

    completed = [name for name in PROFILE_FIELDS if getattr(candidate, name)]
    statuses = [str(s).upper() for s in (application_statuses or [])]
    successful = sum(1 for s in statuses if s in SUCCESSFUL_APPLICATION_STATUSES)

    analysis = ProfileAnalysis(
        profile_completeness=round_half_up(len(completed) / len(PROFILE_FIELDS) * 100),
        application_success_rate=round_half_up(successful / len(statuses) * 100) if statuses else 0,
        skills_count=candidate.skill_count,
        skills_assessment=SkillsAssessment.from_count(candidate.skill_count),
    )
    if candidate.skill_count < SKILLS_FOR_NO_SUGGESTIONS:
        analysis.skill_suggestions = suggest_skills(candidate.skills)

    if analysis.profile_completeness < COMPLETENESS_TARGET:
        analysis.recommendations.append(Recommendation(
            type="profile",
            priority="high",
            message="Complete your profile to increase visibility to recruiters",
        ))
    if candidate.skill_count < MIN_SKILLS:
        analysis.recommendations.append(Recommendation(
            type="skills",
            priority="high",
            message="Add more skills to improve job matching",
        ))
    if (
        analysis.application_success_rate < LOW_SUCCESS_RATE
        and len(statuses) > MIN_APPLICATIONS_FOR_RATE
    ):
        analysis.recommendations.append(Recommendation(
            type="applications",
            priority="medium",
            message="Consider improving your application approach or targeting different roles",
        ))

    logger.debug(
        f"Profile analyzed: {analysis.profile_completeness}% complete, "
        f"{analysis.skills_count} skills"
    )
    audit_log(
        AuditAction.PROFILE_ANALYZED.value,
        {
            "profile_completeness": analysis.profile_completeness,
            "skills_count": analysis.skills_count,
        },
    )
    return analysis
