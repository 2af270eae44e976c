"""
Tests for jobmatch.core.profile — skill suggestions and profile analysis.
"""

from jobmatch.core.profile import analyze_profile, suggest_skills
from jobmatch.data.models import CandidateProfile
from jobmatch.utils.constants import POPULAR_SKILLS, SkillsAssessment


# ── suggest_skills ───────────────────────────────────────────────────────────


class TestSuggestSkills:
    def test_role_from_title(self):
        assert suggest_skills(["react"], "Senior Frontend Engineer") == [
            "Vue.js", "Angular", "TypeScript", "Tailwind CSS", "Next.js",
        ]

    def test_first_role_wins(self):
        assert suggest_skills([], "Backend Data Engineer")[0] == "Node.js"

    def test_no_title_uses_popular(self):
        assert suggest_skills([], "") == POPULAR_SKILLS

    def test_popular_excludes_current(self):
        suggestions = suggest_skills("Python, git")
        assert "Python" not in suggestions
        assert "Git" not in suggestions

    def test_role_fully_covered_falls_back_to_popular(self):
        have = ["React Native", "Flutter", "Swift", "Kotlin", "Firebase"]
        assert suggest_skills(have, "Mobile Developer") == POPULAR_SKILLS

    def test_limit(self):
        assert len(suggest_skills([], "", limit=3)) == 3

    def test_non_string_title(self):
        assert suggest_skills([], None) == POPULAR_SKILLS


# ── analyze_profile ──────────────────────────────────────────────────────────


class TestAnalyzeProfile:
    def test_complete_profile(self):
        candidate = CandidateProfile(
            skills=[f"skill{i}" for i in range(10)],
            experience_years=3,
            location="Berlin",
        )
        analysis = analyze_profile(candidate)
        assert analysis.profile_completeness == 100
        assert analysis.skills_assessment == SkillsAssessment.EXCELLENT
        assert analysis.skill_suggestions == []
        assert analysis.recommendations == []

    def test_empty_profile(self):
        analysis = analyze_profile({})
        assert analysis.profile_completeness == 0
        assert analysis.skills_assessment == SkillsAssessment.LIMITED
        assert analysis.skill_suggestions == POPULAR_SKILLS
        assert [r.type for r in analysis.recommendations] == ["profile", "skills"]

    def test_partial_completeness_rounded(self):
        analysis = analyze_profile({"skills": "python"})
        assert analysis.profile_completeness == 33

    def test_good_skill_count(self):
        analysis = analyze_profile({"skills": "a1,a2,a3,a4,a5,a6"})
        assert analysis.skills_assessment == SkillsAssessment.GOOD

    def test_application_success_rate(self):
        analysis = analyze_profile({}, ["ACCEPTED", "rejected", "interviewed", "PENDING"])
        assert analysis.application_success_rate == 50

    def test_low_success_rate_recommendation(self):
        analysis = analyze_profile({}, ["REJECTED"] * 4)
        assert analysis.application_success_rate == 0
        assert analysis.recommendations[-1].type == "applications"
        assert analysis.recommendations[-1].priority == "medium"

    def test_few_applications_no_rate_recommendation(self):
        analysis = analyze_profile({}, ["REJECTED"] * 3)
        assert "applications" not in [r.type for r in analysis.recommendations]

    def test_to_dict(self):
        data = analyze_profile({"skills": "python"}).to_dict()
        assert data["profileCompleteness"] == 33
        assert data["skillsAnalysis"]["assessment"] == "Limited"
        assert data["skillsAnalysis"]["count"] == 1
        assert data["recommendations"][0]["type"] == "profile"
