"""Tests for the command line interface."""

import json
from unittest.mock import patch

import pytest

from internship_matcher import main as cli


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level=None: None)


def test_score_prints_breakdown(write_json, student_document, internship_document, capsys):
    profile = write_json("student.json", student_document)
    posting = write_json("internship.json", internship_document)

    exit_code = cli.main(["score", "--profile", str(profile), "--posting", str(posting)])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "skills": 67,
        "location": 100,
        "duration": 100,
        "type": 100,
        "total": 87,
    }


def test_rank_json_output(write_json, student_document, internship_document, capsys):
    other = dict(internship_document, _id="other", location="Paris", internshipType="onsite")
    profile = write_json("student.json", student_document)
    postings = write_json("internships.json", [other, internship_document])

    exit_code = cli.main(
        ["rank", "--profile", str(profile), "--postings", str(postings), "--json"]
    )

    assert exit_code == 0
    ranked = json.loads(capsys.readouterr().out)
    assert [r["posting_id"] for r in ranked] == ["64b0000000000000000000a1", "other"]
    assert ranked[1]["breakdown"]["total"] == 47


def test_rank_table_output(write_json, student_document, internship_document, capsys):
    profile = write_json("student.json", student_document)
    postings = write_json("internships.json", [internship_document])

    assert cli.main(["rank", "--profile", str(profile), "--postings", str(postings)]) == 0
    assert "Frontend Intern" in capsys.readouterr().out


def test_invalid_document_exit_code(write_json, internship_document):
    profile = write_json("student.json", {"preferredInternshipTypes": ["teleport"]})
    postings = write_json("internships.json", [internship_document])

    exit_code = cli.main(["rank", "--profile", str(profile), "--postings", str(postings)])

    assert exit_code == cli.EXIT_INVALID_INPUT


def test_profile_file_must_hold_one_document(write_json, student_document, internship_document):
    profile = write_json("students.json", [student_document, student_document])
    posting = write_json("internship.json", internship_document)

    exit_code = cli.main(["score", "--profile", str(profile), "--posting", str(posting)])

    assert exit_code == cli.EXIT_INVALID_INPUT


def test_recommend_failure_exit_code(capsys):
    with patch(
        "internship_matcher.ranker.recommend_for_student",
        side_effect=RuntimeError("MongoDB connection failed"),
    ):
        exit_code = cli.main(["recommend", "--student-id", "s1"])

    assert exit_code == cli.EXIT_FAILURE


def test_candidates_prints_table(capsys, student_document):
    from internship_matcher.documents import candidate_from_document
    from internship_matcher.models import MatchBreakdown, RankedCandidate

    ranked = [
        RankedCandidate(
            candidate=candidate_from_document(student_document),
            breakdown=MatchBreakdown(skills=100, location=100, duration=100, type=100, total=100),
        )
    ]
    with patch("internship_matcher.ranker.candidates_for_internship", return_value=ranked):
        exit_code = cli.main(["candidates", "--internship-id", "i1"])

    assert exit_code == 0
    assert "Ada Lovelace" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out
