"""
Tests for Pydantic data models in jobmatch.data.models.
"""

import pytest

from jobmatch.data.models import CandidateProfile, JobPosting


# ── CandidateProfile ─────────────────────────────────────────────────────────


class TestCandidateProfile:
    def test_defaults(self):
        c = CandidateProfile()
        assert c.skills == []
        assert c.experience_years is None
        assert c.location is None
        assert c.bio is None
        assert c.has_skills is False

    def test_skills_from_comma_string(self):
        c = CandidateProfile(skills="React, Node.js, react")
        assert c.skills == ["react", "node.js"]
        assert c.skill_count == 2

    def test_skills_unsupported_type(self):
        c = CandidateProfile(skills=42)
        assert c.skills == []

    def test_camel_case_alias(self):
        c = CandidateProfile.model_validate({"skills": ["go"], "experienceYears": 4})
        assert c.experience_years == 4

    def test_snake_case_name(self):
        c = CandidateProfile.model_validate({"experience_years": 4})
        assert c.experience_years == 4

    def test_experience_from_digit_string(self):
        assert CandidateProfile(experience_years="3").experience_years == 3

    @pytest.mark.parametrize("value", ["abc", "-2", -1, -0.5, "\u00b2", "\u2460", True, float("nan"), [3]])
    def test_malformed_experience_dropped(self, value):
        assert CandidateProfile(experience_years=value).experience_years is None

    def test_non_ascii_decimal_digits_accepted(self):
        assert CandidateProfile(experience_years="\u0663").experience_years == 3

    def test_float_experience_truncated(self):
        assert CandidateProfile(experience_years=4.7).experience_years == 4

    def test_zero_experience_kept(self):
        assert CandidateProfile(experience_years=0).experience_years == 0

    def test_blank_location_dropped(self):
        assert CandidateProfile(location="   ").location is None

    def test_non_string_bio_dropped(self):
        assert CandidateProfile(bio=123).bio is None

    def test_extra_fields_ignored(self):
        c = CandidateProfile.model_validate({"id": 7, "role": "job_seeker", "skills": "python"})
        assert c.skills == ["python"]
        assert not hasattr(c, "role")


# ── JobPosting ───────────────────────────────────────────────────────────────


class TestJobPosting:
    def test_combined_text(self):
        job = JobPosting(title="React Dev", description="Build UIs", requirements="Senior level")
        assert job.combined_text == "react dev build uis senior level"

    def test_missing_fields_empty(self):
        job = JobPosting()
        assert job.title == ""
        assert job.description == ""
        assert job.requirements == ""
        assert job.combined_text == "  "

    def test_non_string_text_degrades(self):
        job = JobPosting(title=None, description=42)
        assert job.title == ""
        assert job.description == ""

    def test_requirements_text_alias(self):
        job = JobPosting.model_validate({"requirementsText": "5 years python"})
        assert job.requirements == "5 years python"

    def test_skills_required_alias(self):
        job = JobPosting.model_validate({"skills_required": ["React", " ", "AWS"]})
        assert job.required_skills == ["React", "AWS"]

    def test_required_skills_keep_spelling(self):
        job = JobPosting(required_skills=["Node.js", "PostgreSQL"])
        assert job.required_skills == ["Node.js", "PostgreSQL"]
        assert job.normalized_required_skills == ["node.js", "postgresql"]

    def test_company_name_alias(self):
        job = JobPosting.model_validate({"company_name": "Acme"})
        assert job.company == "Acme"

    def test_extra_fields_pass_through(self):
        job = JobPosting.model_validate({"id": "j-1", "title": "Dev", "salary": 100000})
        dumped = job.model_dump(by_alias=True)
        assert dumped["id"] == "j-1"
        assert dumped["salary"] == 100000

    def test_source_dict_keeps_backend_keys(self):
        record = {"id": 3, "company_name": "Acme", "skills_required": "React, AWS", "requirementsText": "5 years"}
        job = JobPosting.model_validate(record)
        assert job.to_source_dict() == record

    def test_source_dict_is_a_copy(self):
        record = {"id": 3, "title": "Dev"}
        job = JobPosting.model_validate(record)
        job.to_source_dict()["title"] = "Changed"
        assert job.to_source_dict() == record

    def test_source_dict_from_keyword_arguments(self):
        job = JobPosting(id=4, title="Dev")
        assert job.to_source_dict() == {"id": 4, "title": "Dev"}

    def test_blank_location_dropped(self):
        assert JobPosting(location="").location is None
