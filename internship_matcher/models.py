# models.py
import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar


class ValidationError(ValueError):
    """Raised when a profile or posting violates the input contract."""


class SkillProficiency(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class RequirementLevel(Enum):
    REQUIRED = "required"
    PREFERRED = "preferred"
    NICE_TO_HAVE = "nice-to-have"


class InternshipType(Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


E = TypeVar("E", bound=Enum)


# ---------- Field Checks ----------
def coerce_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    """Return ``value`` as a member of ``enum_cls``, accepting its string value."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(
            f"{field_name}: invalid value {value!r} (expected one of: {allowed})"
        ) from None


def check_months(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name}: expected a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{field_name}: must be a finite number, got {value}")
    if value < 0:
        raise ValidationError(f"{field_name}: must be non-negative, got {value}")
    return value


@dataclass
class CandidateSkill:
    name: str
    proficiency: SkillProficiency = SkillProficiency.INTERMEDIATE
    category: str = ""

    def __post_init__(self) -> None:
        self.proficiency = coerce_enum(SkillProficiency, self.proficiency, "proficiency")


@dataclass
class DurationRange:
    """Preferred internship length in months, inclusive on both ends."""

    min: float
    max: float

    def __post_init__(self) -> None:
        check_months(self.min, "preferred duration min")
        check_months(self.max, "preferred duration max")
        if self.min > self.max:
            raise ValidationError(
                f"preferred duration min ({self.min}) is greater than max ({self.max})"
            )


@dataclass
class CandidateProfile:
    candidate_id: str = ""
    name: str = ""
    skills: List[CandidateSkill] = field(default_factory=list)
    preferred_locations: List[str] = field(default_factory=list)
    preferred_duration: Optional[DurationRange] = None
    preferred_types: List[InternshipType] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.preferred_duration is not None and not isinstance(
            self.preferred_duration, DurationRange
        ):
            raise ValidationError(
                f"preferred_duration: expected a DurationRange, got {self.preferred_duration!r}"
            )
        self.preferred_types = [
            coerce_enum(InternshipType, t, f"preferred_types[{i}]")
            for i, t in enumerate(self.preferred_types or [])
        ]


@dataclass
class RequiredSkill:
    skill: str
    proficiency: RequirementLevel = RequirementLevel.REQUIRED

    def __post_init__(self) -> None:
        self.proficiency = coerce_enum(RequirementLevel, self.proficiency, "proficiency")


@dataclass
class PostingRequirements:
    posting_id: str = ""
    title: str = ""
    company_name: str = ""
    required_skills: List[RequiredSkill] = field(default_factory=list)
    location: str = ""
    duration_months: Optional[float] = None
    internship_type: Optional[InternshipType] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.duration_months is not None:
            check_months(self.duration_months, "posting duration")
        if self.internship_type is not None:
            self.internship_type = coerce_enum(
                InternshipType, self.internship_type, "internship_type"
            )


@dataclass
class MatchBreakdown:
    """Per-dimension sub-scores and weighted total, all integers in [0, 100]."""

    skills: int = 0
    location: int = 0
    duration: int = 0
    type: int = 0
    total: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "skills": self.skills,
            "location": self.location,
            "duration": self.duration,
            "type": self.type,
            "total": self.total,
        }


@dataclass
class RankedPosting:
    posting: PostingRequirements
    breakdown: MatchBreakdown


@dataclass
class RankedCandidate:
    candidate: CandidateProfile
    breakdown: MatchBreakdown
