"""
Tests for jobmatch.nlp.text — skill normalization and overlap helpers.
"""

import pytest

from jobmatch.nlp.text import (
    clean_text,
    matches_any_word,
    normalize_skills,
    round_half_up,
    strings_overlap,
    tokenize,
)


# ── normalize_skills ─────────────────────────────────────────────────────────


class TestNormalizeSkills:
    def test_comma_string(self):
        assert normalize_skills("React, Node.js ,  PostgreSQL") == ["react", "node.js", "postgresql"]

    def test_list(self):
        assert normalize_skills(["Python", " Django "]) == ["python", "django"]

    def test_tuple(self):
        assert normalize_skills(("AWS", "Docker")) == ["aws", "docker"]

    def test_non_string_elements_stringified(self):
        assert normalize_skills([3, "Go"]) == ["3", "go"]

    def test_none_elements_skipped(self):
        assert normalize_skills(["python", None]) == ["python"]

    def test_duplicates_collapse_first_wins(self):
        assert normalize_skills(["React", "python", "react", "PYTHON"]) == ["react", "python"]

    def test_empties_dropped(self):
        assert normalize_skills("python,, ,django,") == ["python", "django"]

    def test_none(self):
        assert normalize_skills(None) == []

    def test_empty_string(self):
        assert normalize_skills("") == []

    @pytest.mark.parametrize("raw", [42, 3.5, {"python": 1}, object(), b"python"])
    def test_unsupported_types_degrade_to_empty(self, raw):
        assert normalize_skills(raw) == []

    def test_idempotent(self):
        once = normalize_skills(" Java, javascript ,JAVA, , Node.js")
        assert normalize_skills(once) == once

    def test_idempotent_through_comma_join(self):
        once = normalize_skills(["C++", "C#", "Rust"])
        assert normalize_skills(",".join(once)) == once


# ── strings_overlap ──────────────────────────────────────────────────────────


class TestStringsOverlap:
    def test_a_contains_b(self):
        assert strings_overlap("javascript", "java") is True

    def test_b_contains_a(self):
        assert strings_overlap("java", "javascript") is True

    def test_case_insensitive(self):
        assert strings_overlap("React", "REACT") is True

    def test_no_overlap(self):
        assert strings_overlap("python", "rust") is False

    def test_empty_never_overlaps(self):
        assert strings_overlap("", "python") is False
        assert strings_overlap("python", "") is False


class TestMatchesAnyWord:
    def test_match(self):
        assert matches_any_word("node", ["we", "use", "node.js"]) is True

    def test_no_words(self):
        assert matches_any_word("node", []) is False


# ── tokenize / clean_text ────────────────────────────────────────────────────


class TestTokenize:
    def test_lowercase_whitespace_split(self):
        assert tokenize("React  Developer\n\tNode.js") == ["react", "developer", "node.js"]

    def test_empty(self):
        assert tokenize("") == []

    def test_non_string(self):
        assert tokenize(None) == []
        assert tokenize(12) == []


class TestCleanText:
    def test_strips(self):
        assert clean_text("  hi ") == "hi"

    def test_non_string(self):
        assert clean_text(None) == ""


# ── round_half_up ────────────────────────────────────────────────────────────


class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(52.5) == 53

    def test_differs_from_bankers_rounding(self):
        assert round(52.5) == 52
        assert round_half_up(52.5) == 53

    def test_below_half(self):
        assert round_half_up(52.49) == 52

    def test_zero(self):
        assert round_half_up(0.0) == 0

    def test_integer_value(self):
        assert round_half_up(100.0) == 100
