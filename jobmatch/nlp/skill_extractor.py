"""
Vocabulary-based skill extraction.

Finds which keywords of a configurable skill vocabulary occur in free
text, using the same loose word overlap the matching engine relies on.
"""

from collections.abc import Sequence
from typing import Optional

from jobmatch.nlp.text import matches_any_word, normalize_skills, tokenize
from jobmatch.utils.config import get_settings
from jobmatch.utils.constants import AuditAction
from jobmatch.utils.logger import audit_log, get_logger

logger = get_logger(__name__)


class SkillExtractor:
    """Extract vocabulary skills from job descriptions or resumes."""

    def __init__(
        self,
        vocabulary: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ):
        """
        Initialize the extractor.

        Args:
            vocabulary: Keywords to look for; defaults to the configured vocabulary
            limit: Maximum number of skills returned; defaults to the configured limit
        """
        matching = get_settings().matching
        if vocabulary is None:
            vocabulary = matching.skill_vocabulary
        self.vocabulary = normalize_skills(vocabulary)
        self.limit = matching.extraction_limit if limit is None else limit

    def extract(self, text: str) -> list[str]:
        """
        Return vocabulary skills found in ``text``, in vocabulary order.

        A keyword is found when it contains, or is contained in, any
        whitespace-delimited word of the text.
        """
        words = tokenize(text)
        if not words:
            return []

        found = [skill for skill in self.vocabulary if matches_any_word(skill, words)][: self.limit]

        logger.debug(f"Extracted {len(found)} skills from {len(words)} words")
        audit_log(
            AuditAction.SKILLS_EXTRACTED.value,
            {"word_count": len(words), "skills": found},
        )
        return found


def extract_skills(
    text: str,
    vocabulary: Optional[Sequence[str]] = None,
    limit: Optional[int] = None,
) -> list[str]:
    """Convenience wrapper around ``SkillExtractor.extract``."""
    return SkillExtractor(vocabulary=vocabulary, limit=limit).extract(text)
