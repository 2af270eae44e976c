"""
Text normalization helpers shared by the matching and extraction code.

Everything here is pure and tolerant of bad input: malformed values
degrade to empty results instead of raising.
"""

import math
from collections.abc import Iterable
from typing import Any


SKILL_DELIMITER = ","

# Container types whose elements are read as individual skills
_SKILL_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def normalize_skills(raw_skills: Any) -> list[str]:
    """
    Normalize a raw skills value into lowercase, trimmed, unique tokens.

    Accepts a comma separated string or a list/tuple/set of values. Order
    of first occurrence is preserved. Any other type yields an empty list.

    Args:
        raw_skills: Skills as stored on a profile or sent by a client

    Returns:
        Deduplicated list of normalized skills
    """
    if raw_skills is None:
        return []

    if isinstance(raw_skills, str):
        tokens: Iterable[str] = raw_skills.split(SKILL_DELIMITER)
    elif isinstance(raw_skills, _SKILL_SEQUENCE_TYPES):
        tokens = (str(item) for item in raw_skills if item is not None)
    else:
        return []

    cleaned = (token.strip().lower() for token in tokens)
    return list(dict.fromkeys(token for token in cleaned if token))


def strings_overlap(a: str, b: str) -> bool:
    """
    Check bidirectional substring containment, case-insensitively.

    ``a`` matches ``b`` when either contains the other. Empty strings
    never match.
    """
    if not a or not b:
        return False
    a, b = a.lower(), b.lower()
    return a in b or b in a


def tokenize(text: Any) -> list[str]:
    """Split text into lowercase whitespace-delimited words."""
    if not isinstance(text, str):
        return []
    return text.lower().split()


def matches_any_word(term: str, words: Iterable[str]) -> bool:
    """Check whether ``term`` overlaps any of ``words``."""
    return any(strings_overlap(term, word) for word in words)


def clean_text(value: Any) -> str:
    """Return ``value`` stripped if it is a string, otherwise an empty string."""
    return value.strip() if isinstance(value, str) else ""


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (52.5 -> 53).

    Python's ``round`` rounds halves to even, which would turn 52.5 into 52.
    """
    return int(math.floor(value + 0.5))
