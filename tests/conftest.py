"""
Test fixtures for the internship matcher tests
"""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from internship_matcher.models import (
    CandidateProfile,
    CandidateSkill,
    DurationRange,
    InternshipType,
    PostingRequirements,
    RequiredSkill,
    RequirementLevel,
)


def make_posting(
    posting_id="p",
    skills=(),
    location="",
    duration=None,
    internship_type=None,
    **kwargs,
) -> PostingRequirements:
    return PostingRequirements(
        posting_id=posting_id,
        required_skills=[RequiredSkill(skill=s) for s in skills],
        location=location,
        duration_months=duration,
        internship_type=internship_type,
        **kwargs,
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def candidate():
    return CandidateProfile(
        candidate_id="s1",
        name="Ada Lovelace",
        skills=[CandidateSkill(name=" React "), CandidateSkill(name="python")],
        preferred_locations=["Remote", "Berlin"],
        preferred_duration=DurationRange(min=1, max=6),
        preferred_types=[InternshipType.REMOTE, InternshipType.HYBRID],
    )


@pytest.fixture
def posting():
    return PostingRequirements(
        posting_id="i1",
        title="Frontend Intern",
        company_name="Acme",
        required_skills=[
            RequiredSkill(skill="react"),
            RequiredSkill(skill="Node.js", proficiency=RequirementLevel.PREFERRED),
            RequiredSkill(skill="python", proficiency=RequirementLevel.NICE_TO_HAVE),
        ],
        location="Remote - US",
        duration_months=3,
        internship_type=InternshipType.REMOTE,
    )


@pytest.fixture
def student_document():
    return {
        "_id": "64b000000000000000000001",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "skills": [
            {
                "name": "react",
                "proficiency": "advanced",
                "yearsOfExperience": 2,
                "category": "programming",
            },
            {"name": "python", "proficiency": "expert"},
        ],
        "preferredLocations": ["Remote"],
        "preferredInternshipTypes": ["remote", "hybrid"],
        "preferredDuration": {"min": 1, "max": 6},
    }


@pytest.fixture
def internship_document():
    return {
        "_id": "64b0000000000000000000a1",
        "title": "Frontend Intern",
        "companyName": "Acme",
        "location": "Remote - US",
        "internshipType": "remote",
        "duration": {"value": 3, "unit": "months"},
        "requiredSkills": [
            {"skill": "react", "proficiency": "required", "importance": 8},
            {"skill": "node.js", "proficiency": "preferred"},
            {"skill": "python", "proficiency": "nice-to-have"},
        ],
        "status": "active",
        "createdAt": "2024-03-01T12:00:00Z",
    }


@pytest.fixture
def write_json(temp_dir):
    """Write data to a JSON file in the temp dir and return its path"""

    def _write(name, data):
        path = temp_dir / name
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        return path

    return _write
