# normalizer.py
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

from .models import (
    CandidateProfile,
    DurationRange,
    InternshipType,
    PostingRequirements,
)


@dataclass(frozen=True)
class NormalizedCandidate:
    """Canonical, comparable view of a candidate profile."""

    skills: FrozenSet[str] = frozenset()
    locations: Tuple[str, ...] = ()
    duration: Optional[DurationRange] = None
    types: FrozenSet[InternshipType] = field(default_factory=frozenset)


def canonical_name(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def _canonical_set(values: Iterable[Optional[str]]) -> FrozenSet[str]:
    return frozenset(n for n in (canonical_name(v) for v in values) if n)


# ---------- Candidate ----------
def normalize_candidate(profile: CandidateProfile) -> NormalizedCandidate:
    skills = _canonical_set(s.name for s in profile.skills or [])

    # keep the caller's ordering, drop blanks and repeats
    locations = tuple(
        dict.fromkeys(
            loc for loc in (canonical_name(v) for v in profile.preferred_locations or []) if loc
        )
    )

    return NormalizedCandidate(
        skills=skills,
        locations=locations,
        duration=profile.preferred_duration,
        types=frozenset(profile.preferred_types or []),
    )


# ---------- Posting ----------
def normalize_required_skills(posting: PostingRequirements) -> FrozenSet[str]:
    return _canonical_set(s.skill for s in posting.required_skills or [])
