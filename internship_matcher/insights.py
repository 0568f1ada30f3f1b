# insights.py
"""Helpers for presenting match results and summarising postings."""
from collections import Counter
from typing import Dict, List, Sequence

from .models import (
    CandidateProfile,
    CandidateSkill,
    PostingRequirements,
    RequiredSkill,
    RequirementLevel,
    SkillProficiency,
)
from .normalizer import canonical_name, normalize_candidate

# (minimum total, label), checked top down
MATCH_LABELS = [
    (80, "Excellent Match"),
    (70, "Good Match"),
    (60, "Fair Match"),
    (40, "Low Match"),
]
POOR_MATCH_LABEL = "Poor Match"

PROFICIENCY_RANK = {
    SkillProficiency.BEGINNER: 1,
    SkillProficiency.INTERMEDIATE: 2,
    SkillProficiency.ADVANCED: 3,
    SkillProficiency.EXPERT: 4,
}
UNCATEGORIZED = "other"


def match_label(score: int) -> str:
    for threshold, label in MATCH_LABELS:
        if score >= threshold:
            return label
    return POOR_MATCH_LABEL


def trending_skills(
    postings: Sequence[PostingRequirements],
    limit: int = 10,
) -> List[str]:
    """Most requested skill names across postings, most frequent first."""
    counts: Counter = Counter()
    for posting in postings:
        for item in posting.required_skills:
            name = canonical_name(item.skill)
            if name:
                counts[name] += 1
    # Counter.most_common keeps first-seen order for equal counts
    return [name for name, _ in counts.most_common(limit)]


def analyze_requirements(posting: PostingRequirements) -> Dict:
    by_level: Dict[str, List[RequiredSkill]] = {level.value: [] for level in RequirementLevel}
    for item in posting.required_skills:
        by_level[item.proficiency.value].append(item)

    return {
        "total": len(posting.required_skills),
        "by_level": by_level,
        "required_skills": by_level[RequirementLevel.REQUIRED.value],
        "preferred_skills": (
            by_level[RequirementLevel.PREFERRED.value]
            + by_level[RequirementLevel.NICE_TO_HAVE.value]
        ),
    }


def analyze_candidate_skills(candidate: CandidateProfile, top: int = 5) -> Dict:
    """Count a candidate's skills, group them by category and pick the strongest."""
    by_category: Dict[str, List[CandidateSkill]] = {}
    for skill in candidate.skills:
        by_category.setdefault(skill.category or UNCATEGORIZED, []).append(skill)

    # sorted() is stable, so equal levels keep profile order
    strongest = sorted(
        candidate.skills,
        key=lambda s: PROFICIENCY_RANK[s.proficiency],
        reverse=True,
    )

    return {
        "total": len(candidate.skills),
        "by_category": by_category,
        "top_skills": strongest[:top],
    }


def meets_minimum_requirements(
    candidate: CandidateProfile,
    posting: PostingRequirements,
) -> bool:
    if not candidate.skills or not posting.required_skills:
        return False

    mandatory = {
        canonical_name(s.skill)
        for s in posting.required_skills
        if s.proficiency is RequirementLevel.REQUIRED
    }
    return mandatory <= normalize_candidate(candidate).skills


def filter_by_preferences(
    postings: Sequence[PostingRequirements],
    candidate: CandidateProfile,
) -> List[PostingRequirements]:
    """Keep postings that satisfy every preference the candidate states.

    Location only matches one way here: a preferred location must appear
    inside the posting location. This is stricter than ``location_score``,
    which also accepts the posting location inside a preference.
    """
    normalized = normalize_candidate(candidate)
    kept = []
    for posting in postings:
        location = canonical_name(posting.location)
        if normalized.locations and not any(loc in location for loc in normalized.locations):
            continue
        if normalized.types and posting.internship_type not in normalized.types:
            continue
        if normalized.duration and posting.duration_months is not None:
            if not normalized.duration.min <= posting.duration_months <= normalized.duration.max:
                continue
        kept.append(posting)
    return kept
