# documents.py
"""Conversion of stored student / internship documents into typed records.

Documents use the camelCase keys written by the web backend. Anything that
breaks the input contract raises ``ValidationError`` here, before scoring.
"""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import (
    DEFAULT_MIN_DURATION_MONTHS,
    DEFAULT_MAX_DURATION_MONTHS,
    WEEKS_PER_MONTH,
)
from .models import (
    CandidateProfile,
    CandidateSkill,
    DurationRange,
    InternshipType,
    PostingRequirements,
    RequiredSkill,
    RequirementLevel,
    SkillProficiency,
    ValidationError,
    check_months,
    coerce_enum,
)

logger = logging.getLogger(__name__)


# ---------- Field Helpers ----------
def _list_field(doc: Dict, key: str) -> List:
    value = doc.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"{key}: expected a list, got {type(value).__name__}")
    return value


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _document_id(doc: Dict) -> str:
    return _text(doc.get("_id") or doc.get("id"))


def _timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"createdAt: not an ISO timestamp: {value!r}") from None


# ---------- Student ----------
def _candidate_skill(item: Any, index: int) -> CandidateSkill:
    if isinstance(item, str):
        return CandidateSkill(name=item)
    if not isinstance(item, dict):
        raise ValidationError(f"skills[{index}]: expected an object, got {item!r}")

    proficiency = item.get("proficiency")
    return CandidateSkill(
        name=_text(item.get("name")),
        proficiency=(
            coerce_enum(SkillProficiency, proficiency, f"skills[{index}].proficiency")
            if proficiency
            else SkillProficiency.INTERMEDIATE
        ),
        category=_text(item.get("category")),
    )


def _duration_range(value: Any) -> Optional[DurationRange]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValidationError(f"preferredDuration: expected an object, got {value!r}")
    if value.get("min") is None and value.get("max") is None:
        return None

    low = value.get("min")
    high = value.get("max")
    return DurationRange(
        min=DEFAULT_MIN_DURATION_MONTHS if low is None else check_months(low, "preferredDuration.min"),
        max=DEFAULT_MAX_DURATION_MONTHS if high is None else check_months(high, "preferredDuration.max"),
    )


def candidate_from_document(doc: Dict) -> CandidateProfile:
    if not isinstance(doc, dict):
        raise ValidationError(f"student document must be an object, got {type(doc).__name__}")

    name = " ".join(
        part for part in (_text(doc.get("firstName")), _text(doc.get("lastName"))) if part
    ) or _text(doc.get("name"))

    return CandidateProfile(
        candidate_id=_document_id(doc),
        name=name,
        skills=[_candidate_skill(s, i) for i, s in enumerate(_list_field(doc, "skills"))],
        preferred_locations=[_text(loc) for loc in _list_field(doc, "preferredLocations")],
        preferred_duration=_duration_range(doc.get("preferredDuration")),
        preferred_types=[
            coerce_enum(InternshipType, t, f"preferredInternshipTypes[{i}]")
            for i, t in enumerate(_list_field(doc, "preferredInternshipTypes"))
        ],
    )


# ---------- Internship ----------
def _required_skill(item: Any, index: int) -> RequiredSkill:
    if isinstance(item, str):
        return RequiredSkill(skill=item)
    if not isinstance(item, dict):
        raise ValidationError(f"requiredSkills[{index}]: expected an object, got {item!r}")

    proficiency = item.get("proficiency")
    return RequiredSkill(
        skill=_text(item.get("skill")),
        proficiency=(
            coerce_enum(RequirementLevel, proficiency, f"requiredSkills[{index}].proficiency")
            if proficiency
            else RequirementLevel.REQUIRED
        ),
    )


def _duration_months(value: Any) -> Optional[float]:
    if value is None:
        return None
    if not isinstance(value, dict):
        return check_months(value, "duration")
    if value.get("value") is None:
        return None

    months = check_months(value["value"], "duration.value")
    unit = _text(value.get("unit") or "months").lower()
    if unit == "weeks":
        return months / WEEKS_PER_MONTH
    if unit != "months":
        raise ValidationError(f"duration.unit: invalid value {unit!r} (expected weeks or months)")
    return months


def posting_from_document(doc: Dict) -> PostingRequirements:
    if not isinstance(doc, dict):
        raise ValidationError(f"internship document must be an object, got {type(doc).__name__}")

    internship_type = doc.get("internshipType")
    return PostingRequirements(
        posting_id=_document_id(doc),
        title=_text(doc.get("title")),
        company_name=_text(doc.get("companyName")),
        required_skills=[
            _required_skill(s, i) for i, s in enumerate(_list_field(doc, "requiredSkills"))
        ],
        location=_text(doc.get("location")),
        duration_months=_duration_months(doc.get("duration")),
        internship_type=(
            coerce_enum(InternshipType, internship_type, "internshipType")
            if internship_type
            else None
        ),
        created_at=_timestamp(doc.get("createdAt")),
    )


# ---------- Files ----------
def load_json_documents(path: Path) -> List[Dict]:
    """Read one document or a list of documents from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    documents = data if isinstance(data, list) else [data]
    logger.info("Loaded %d document(s) from %s", len(documents), path)
    return documents
