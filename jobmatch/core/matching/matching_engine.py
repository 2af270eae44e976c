"""
Job-candidate matching engine.

Scores job postings against a candidate profile with keyword overlap:
each candidate skill found in a job's text adds a fixed weight, and
experience-bracket and location hits add small bonuses. Results are
filtered, stably sorted and truncated for the different entry points
(full "AI jobs" ranking, suggestions, recommendations).

The engine is stateless apart from its configuration, so one instance
can be shared across threads and requests.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from jobmatch.data.models import CandidateProfile, JobPosting
from jobmatch.nlp.text import (
    clean_text,
    matches_any_word,
    normalize_skills,
    round_half_up,
    tokenize,
)
from jobmatch.utils.config import MatchingSettings, get_settings
from jobmatch.utils.constants import (
    DESCRIPTION_BIO_POINTS_MAX,
    DESCRIPTION_BIO_POINTS_PER_MATCH,
    DESCRIPTION_SKILL_POINTS,
    EXPERIENCE_BRACKETS,
    HIGH_PRIORITY_SKILLS,
    AuditAction,
    MatchScoreLevel,
)
from jobmatch.utils.logger import LoggerMixin, audit_log


class InvalidInputShape(TypeError):
    """Raised when a caller passes a structurally wrong argument."""


@dataclass
class MatchResult:
    """Score of one job against one candidate profile."""

    job: JobPosting
    match_score: int = 0
    matching_skills: list[str] = field(default_factory=list)
    relevance_percentage: int = 0

    # Breakdown
    skill_score: int = 0
    experience_bonus: int = 0
    location_bonus: int = 0

    @property
    def score_level(self) -> MatchScoreLevel:
        return MatchScoreLevel.from_score(self.relevance_percentage)

    def to_dict(self) -> dict[str, Any]:
        """The job record as supplied plus score fields, as served to the job board frontend."""
        data = self.job.to_source_dict()
        data.update(
            matchScore=self.match_score,
            matchingSkills=list(self.matching_skills),
            relevancePercentage=self.relevance_percentage,
        )
        return data


@dataclass
class DescriptionScore:
    """Score of a single job description against explicit skills and bio."""

    score: int = 0
    skill_matches: int = 0
    bio_matches: int = 0
    skill_score: float = 0.0
    bio_score: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "score": self.score,
            "skillMatches": self.skill_matches,
            "bioMatches": self.bio_matches,
        }


@dataclass
class SkillOverlap:
    """Exact overlap between a candidate's skills and a job's required skills."""

    score: int = 0
    matched_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)


@dataclass
class JobSuggestion:
    """A job suggested from word overlap with the candidate's skills."""

    job: JobPosting
    match_score: int = 0
    matched_skills: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = self.job.to_source_dict()
        data["matchScore"] = self.match_score
        return data


@dataclass
class JobRecommendation:
    """A job recommended from exact required-skill overlap."""

    job: JobPosting
    overlap: SkillOverlap

    @property
    def match_score(self) -> int:
        return self.overlap.score

    def to_dict(self) -> dict[str, Any]:
        data = self.job.to_source_dict()
        data.update(
            matchScore=self.overlap.score,
            matchedSkills=list(self.overlap.matched_skills),
            missingSkills=list(self.overlap.missing_skills),
        )
        return data


class MatchingEngine(LoggerMixin):
    """
    Engine for scoring jobs against candidate profiles.

    Entry points:
    - rank_jobs_for_candidate: full catalog ranking ("AI jobs")
    - score_job_description_against_skills: one description, one score
    - suggest_jobs: word-overlap percentage ranking ("suggestions")
    - recommend_jobs: required-skill overlap ranking
    """

    def __init__(self, settings: Optional[MatchingSettings] = None):
        """
        Initialize the matching engine.

        Args:
            settings: Optional matching settings; defaults to the app configuration
        """
        self.settings = settings or get_settings().matching

    # ------------------------------------------------------------------
    # Single job vs candidate
    # ------------------------------------------------------------------

    def score_job_for_candidate(
        self,
        job: JobPosting | Mapping[str, Any],
        candidate: CandidateProfile | Mapping[str, Any],
    ) -> MatchResult:
        """
        Score one job posting against a candidate profile.

        Args:
            job: Job posting (model or raw mapping)
            candidate: Candidate profile (model or raw mapping)

        Returns:
            MatchResult with score, matched skills and relevance percentage
        """
        job = self._as_job(job)
        candidate = self._as_candidate(candidate)

        text = job.combined_text
        words = tokenize(text)

        result = MatchResult(job=job)
        for skill in candidate.skills:
            if skill in text or matches_any_word(skill, words):
                result.matching_skills.append(skill)
        result.skill_score = len(result.matching_skills) * self.settings.skill_weight

        result.experience_bonus = self._experience_bonus(text, candidate.experience_years)
        result.location_bonus = self._location_bonus(job.location, candidate.location)

        result.match_score = result.skill_score + result.experience_bonus + result.location_bonus
        result.relevance_percentage = self.relevance_percentage(
            result.match_score, candidate.skill_count
        )
        return result

    def _experience_bonus(self, text: str, years: Optional[int]) -> int:
        """Add a bonus for every experience bracket the job text mentions and the years fit."""
        if years is None:
            return 0

        bonus = 0
        for keyword, min_years, max_years in EXPERIENCE_BRACKETS:
            if keyword not in text or years < min_years:
                continue
            if max_years is not None and years > max_years:
                continue
            bonus += self.settings.experience_bonus
        return bonus

    def _location_bonus(
        self, job_location: Optional[str], candidate_location: Optional[str]
    ) -> int:
        if not job_location or not candidate_location:
            return 0
        if job_location.lower() in candidate_location.lower():
            return self.settings.location_bonus
        return 0

    @staticmethod
    def relevance_percentage(match_score: int, skill_count: int) -> int:
        """
        Scale a raw match score to a 0-100 display value.

        Ten points per unit of score per candidate skill, capped at 100. This
        is not a share of skills matched: bonuses count too, and candidates
        with few skills saturate quickly.
        """
        return min(round_half_up(match_score / max(skill_count, 1) * 10), 100)

    # ------------------------------------------------------------------
    # Catalog ranking
    # ------------------------------------------------------------------

    def rank_jobs_for_candidate(
        self,
        jobs: Iterable[JobPosting | Mapping[str, Any]],
        candidate: CandidateProfile | Mapping[str, Any],
        limit: Optional[int] = None,
    ) -> list[MatchResult]:
        """
        Rank jobs for a candidate.

        Jobs without any score are dropped; the rest are sorted by match
        score (highest first, ties keep input order) and truncated.

        Args:
            jobs: Collection of job postings
            candidate: Candidate profile
            limit: Maximum results; defaults to the configured AI jobs limit

        Returns:
            Ranked match results

        Raises:
            InvalidInputShape: If ``jobs`` is not a collection of job records
        """
        postings = self._as_jobs(jobs)
        candidate = self._as_candidate(candidate)
        limit = self._resolve_limit(limit, self.settings.ai_jobs_limit)

        if not candidate.has_skills:
            self.logger.debug("Candidate has no skills, nothing to rank")
            return []

        results = [self.score_job_for_candidate(job, candidate) for job in postings]
        ranked = sorted(
            (r for r in results if r.match_score > 0),
            key=lambda r: r.match_score,
            reverse=True,
        )[:limit]

        self.logger.debug(
            f"Ranked {len(postings)} jobs for {candidate.skill_count} skills: "
            f"{len(ranked)} matches returned"
        )
        audit_log(
            AuditAction.JOBS_RANKED.value,
            {
                "jobs_evaluated": len(postings),
                "matches_returned": len(ranked),
                "top_score": ranked[0].match_score if ranked else 0,
            },
        )
        return ranked

    # ------------------------------------------------------------------
    # Single description score
    # ------------------------------------------------------------------

    def score_job_description_against_skills(
        self,
        job_description: str,
        candidate_skills: Any,
        candidate_bio: Optional[str] = None,
    ) -> DescriptionScore:
        """
        Score one job description against an explicit skill list and bio.

        Skills are worth up to 70 points in proportion to how many match a
        description word; each bio word that matches a description word is
        worth 5 points, up to 30.

        Args:
            job_description: Job description text
            candidate_skills: Skills as a sequence or comma separated string
            candidate_bio: Optional free-text bio

        Returns:
            DescriptionScore with the 0-100 score and match counts
        """
        job_words = tokenize(job_description)
        skills = normalize_skills(candidate_skills)

        result = DescriptionScore()
        result.skill_matches = sum(1 for skill in skills if matches_any_word(skill, job_words))
        if skills:
            result.skill_score = result.skill_matches / len(skills) * DESCRIPTION_SKILL_POINTS

        bio_words = tokenize(clean_text(candidate_bio))
        result.bio_matches = sum(1 for word in bio_words if matches_any_word(word, job_words))
        result.bio_score = min(
            result.bio_matches * DESCRIPTION_BIO_POINTS_PER_MATCH, DESCRIPTION_BIO_POINTS_MAX
        )

        result.score = min(round_half_up(result.skill_score + result.bio_score), 100)

        audit_log(
            AuditAction.JOB_SCORED.value,
            {"score": result.score, "skill_matches": result.skill_matches},
        )
        return result

    # ------------------------------------------------------------------
    # Suggestions and recommendations
    # ------------------------------------------------------------------

    def suggest_jobs(
        self,
        jobs: Iterable[JobPosting | Mapping[str, Any]],
        candidate_skills: Any,
        limit: Optional[int] = None,
    ) -> list[JobSuggestion]:
        """
        Suggest jobs whose description or required skills cover the candidate's skills.

        Each job scores the percentage of candidate skills overlapping a word
        of its description or required skills; only jobs above the
        suggestion threshold are kept.
        """
        postings = self._as_jobs(jobs)
        skills = normalize_skills(candidate_skills)
        limit = self._resolve_limit(limit, self.settings.suggestions_limit)

        suggestions = []
        for job in postings:
            job_words = tokenize(f"{job.description} {' '.join(job.required_skills)}")
            matched = [skill for skill in skills if matches_any_word(skill, job_words)]
            percentage = round_half_up(len(matched) / len(skills) * 100) if skills else 0
            if percentage > self.settings.suggestion_threshold:
                suggestions.append(JobSuggestion(job=job, match_score=percentage, matched_skills=matched))

        suggestions.sort(key=lambda s: s.match_score, reverse=True)
        suggestions = suggestions[:limit]

        audit_log(
            AuditAction.JOBS_SUGGESTED.value,
            {"jobs_evaluated": len(postings), "suggestions": len(suggestions)},
        )
        return suggestions

    def score_skill_overlap(self, user_skills: Any, job_skills: Any) -> SkillOverlap:
        """
        Score exact overlap between a candidate's skills and a job's required skills.

        High-priority skills (core languages, frameworks and platforms) count
        double. Matched and missing skills keep the job's spelling.
        """
        user = set(normalize_skills(user_skills))
        if isinstance(job_skills, str):
            job_skills = job_skills.split(",")
        if not isinstance(job_skills, (list, tuple)):
            job_skills = []
        required = [s.strip() for s in job_skills if isinstance(s, str) and s.strip()]

        overlap = SkillOverlap()
        total_weight = 0
        matched_weight = 0
        for skill in required:
            key = skill.strip().lower()
            weight = 2 if key in HIGH_PRIORITY_SKILLS else 1
            total_weight += weight
            if key in user:
                matched_weight += weight
                overlap.matched_skills.append(skill)
            else:
                overlap.missing_skills.append(skill)

        if user and total_weight:
            overlap.score = round_half_up(matched_weight / total_weight * 100)
        return overlap

    def recommend_jobs(
        self,
        candidate: CandidateProfile | Mapping[str, Any],
        jobs: Iterable[JobPosting | Mapping[str, Any]],
        limit: Optional[int] = None,
    ) -> list[JobRecommendation]:
        """Recommend jobs by required-skill overlap with the candidate."""
        postings = self._as_jobs(jobs)
        candidate = self._as_candidate(candidate)
        limit = self._resolve_limit(limit, self.settings.recommendations_limit)

        if not candidate.has_skills:
            return []

        recommendations = [
            JobRecommendation(job=job, overlap=self.score_skill_overlap(candidate.skills, job.required_skills))
            for job in postings
        ]
        recommendations = sorted(
            (r for r in recommendations if r.match_score >= self.settings.recommendation_threshold),
            key=lambda r: r.match_score,
            reverse=True,
        )[:limit]

        audit_log(
            AuditAction.JOBS_RECOMMENDED.value,
            {"jobs_evaluated": len(postings), "recommendations": len(recommendations)},
        )
        return recommendations

    # ------------------------------------------------------------------
    # Input coercion
    # ------------------------------------------------------------------

    @staticmethod
    def _as_job(job: Any) -> JobPosting:
        if isinstance(job, JobPosting):
            return job
        if isinstance(job, Mapping):
            return JobPosting.model_validate(dict(job))
        raise InvalidInputShape(f"Expected a job posting or mapping, got {type(job).__name__}")

    @staticmethod
    def _as_candidate(candidate: Any) -> CandidateProfile:
        if isinstance(candidate, CandidateProfile):
            return candidate
        if candidate is None:
            return CandidateProfile()
        if isinstance(candidate, Mapping):
            return CandidateProfile.model_validate(dict(candidate))
        raise InvalidInputShape(
            f"Expected a candidate profile or mapping, got {type(candidate).__name__}"
        )

    def _as_jobs(self, jobs: Any) -> list[JobPosting]:
        if isinstance(jobs, (str, bytes, Mapping)) or not isinstance(jobs, Iterable):
            raise InvalidInputShape(
                f"jobs must be a collection of job postings, got {type(jobs).__name__}"
            )
        return [self._as_job(job) for job in jobs]

    @staticmethod
    def _resolve_limit(limit: Optional[int], default: int) -> int:
        if limit is None:
            return default
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise InvalidInputShape(f"limit must be a non-negative integer, got {limit!r}")
        return limit


# Singleton instance
_matching_engine: Optional[MatchingEngine] = None


def get_matching_engine() -> MatchingEngine:
    """Get the matching engine singleton instance."""
    global _matching_engine
    if _matching_engine is None:
        _matching_engine = MatchingEngine()
    return _matching_engine
