"""Tests for match labels and posting summaries."""

import pytest

from internship_matcher.insights import (
    analyze_candidate_skills,
    analyze_requirements,
    filter_by_preferences,
    match_label,
    meets_minimum_requirements,
    trending_skills,
)
from internship_matcher.models import (
    CandidateProfile,
    CandidateSkill,
    DurationRange,
    InternshipType,
    SkillProficiency,
)

from conftest import make_posting


@pytest.mark.parametrize(
    "score, label",
    [
        (100, "Excellent Match"),
        (80, "Excellent Match"),
        (75, "Good Match"),
        (60, "Fair Match"),
        (40, "Low Match"),
        (39, "Poor Match"),
        (0, "Poor Match"),
    ],
)
def test_match_label(score, label):
    assert match_label(score) == label


def test_trending_skills_by_frequency():
    postings = [
        make_posting(skills=["Python", "sql"]),
        make_posting(skills=["react", "python"]),
        make_posting(skills=["SQL", "python", "go"]),
    ]

    assert trending_skills(postings, limit=3) == ["python", "sql", "react"]
    assert trending_skills([]) == []


def test_analyze_requirements(posting):
    summary = analyze_requirements(posting)

    assert summary["total"] == 3
    assert [s.skill for s in summary["required_skills"]] == ["react"]
    assert [s.skill for s in summary["preferred_skills"]] == ["Node.js", "python"]


class TestMinimumRequirements:
    def test_only_required_level_counts(self, candidate, posting):
        assert meets_minimum_requirements(candidate, posting) is True

    def test_missing_required_skill(self, posting):
        candidate = CandidateProfile(skills=[CandidateSkill("python")])

        assert meets_minimum_requirements(candidate, posting) is False

    def test_no_skills_on_either_side(self, candidate, posting):
        assert meets_minimum_requirements(CandidateProfile(), posting) is False
        assert meets_minimum_requirements(candidate, make_posting(skills=[])) is False


def test_filter_by_preferences():
    candidate = CandidateProfile(
        preferred_locations=["Remote"],
        preferred_duration=DurationRange(min=2, max=4),
        preferred_types=[InternshipType.REMOTE],
    )
    postings = [
        make_posting("ok", location="Remote - EU", duration=3, internship_type=InternshipType.REMOTE),
        make_posting("far", location="Paris", duration=3, internship_type=InternshipType.REMOTE),
        make_posting("long", location="Remote", duration=9, internship_type=InternshipType.REMOTE),
        make_posting("onsite", location="Remote", duration=3, internship_type=InternshipType.ONSITE),
        make_posting("unknown-length", location="Remote", internship_type=InternshipType.REMOTE),
    ]

    kept = filter_by_preferences(postings, candidate)

    assert [p.posting_id for p in kept] == ["ok", "unknown-length"]
    assert filter_by_preferences(postings, CandidateProfile()) == postings


def test_filter_by_preferences_matches_location_one_way():
    candidate = CandidateProfile(preferred_locations=["Berlin, Germany"])
    postings = [
        make_posting("city", location="Berlin"),
        make_posting("full", location="Berlin, Germany (hybrid)"),
    ]

    assert [p.posting_id for p in filter_by_preferences(postings, candidate)] == ["full"]


class TestAnalyzeCandidateSkills:
    def test_groups_and_ranks_by_proficiency(self):
        candidate = CandidateProfile(
            skills=[
                CandidateSkill("excel", SkillProficiency.BEGINNER, category="business"),
                CandidateSkill("python", SkillProficiency.EXPERT, category="programming"),
                CandidateSkill("figma", SkillProficiency.ADVANCED, category="design"),
                CandidateSkill("sql", SkillProficiency.INTERMEDIATE, category="programming"),
                CandidateSkill("go", SkillProficiency.EXPERT, category="programming"),
                CandidateSkill("public speaking", SkillProficiency.ADVANCED),
            ]
        )

        summary = analyze_candidate_skills(candidate)

        assert summary["total"] == 6
        assert {k: [s.name for s in v] for k, v in summary["by_category"].items()} == {
            "business": ["excel"],
            "programming": ["python", "sql", "go"],
            "design": ["figma"],
            "other": ["public speaking"],
        }
        assert [s.name for s in summary["top_skills"]] == [
            "python", "go", "figma", "public speaking", "sql",
        ]

    def test_empty_profile(self):
        assert analyze_candidate_skills(CandidateProfile()) == {
            "total": 0,
            "by_category": {},
            "top_skills": [],
        }
