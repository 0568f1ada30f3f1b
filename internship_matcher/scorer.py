# scorer.py
from .aggregator import DEFAULT_WEIGHTS, MatchWeights, aggregate
from .config import (
    DURATION_IN_RANGE_SCORE,
    DURATION_TOO_SHORT_SCORE,
    DURATION_TOO_LONG_SCORE,
)
from .models import CandidateProfile, MatchBreakdown, PostingRequirements
from .normalizer import (
    NormalizedCandidate,
    canonical_name,
    normalize_candidate,
    normalize_required_skills,
)

FULL_MATCH = 100
NO_MATCH = 0


# ---------- Skill Score ----------
def skill_score(
    candidate: NormalizedCandidate,
    posting: PostingRequirements,
) -> int:
    """Share of the posting's skills the candidate has, as 0-100.

    A posting that lists no skills gives no signal and scores 0.
    """
    required = normalize_required_skills(posting)
    if not required:
        return NO_MATCH

    matched = len(required & candidate.skills)
    total = len(required)
    # round(100 * matched / total) with halves rounded up, in integers
    return (200 * matched + total) // (2 * total)


# ---------- Location Score ----------
def location_score(
    candidate: NormalizedCandidate,
    posting: PostingRequirements,
) -> int:
    posting_location = canonical_name(posting.location)
    if not posting_location or not candidate.locations:
        return NO_MATCH

    for preferred in candidate.locations:
        if preferred in posting_location or posting_location in preferred:
            return FULL_MATCH
    return NO_MATCH


# ---------- Duration Score ----------
def duration_score(
    candidate: NormalizedCandidate,
    posting: PostingRequirements,
) -> int:
    preference = candidate.duration
    months = posting.duration_months
    if preference is None or months is None:
        return NO_MATCH

    if preference.min <= months <= preference.max:
        return DURATION_IN_RANGE_SCORE
    if months < preference.min:
        return DURATION_TOO_SHORT_SCORE
    return DURATION_TOO_LONG_SCORE


# ---------- Type Score ----------
def type_score(
    candidate: NormalizedCandidate,
    posting: PostingRequirements,
) -> int:
    if posting.internship_type is None or not candidate.types:
        return NO_MATCH
    return FULL_MATCH if posting.internship_type in candidate.types else NO_MATCH


# ---------- Match ----------
def score_normalized(
    candidate: NormalizedCandidate,
    posting: PostingRequirements,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> MatchBreakdown:
    return aggregate(
        skill_score(candidate, posting),
        location_score(candidate, posting),
        duration_score(candidate, posting),
        type_score(candidate, posting),
        weights,
    )


def score_match(
    candidate: CandidateProfile,
    posting: PostingRequirements,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> MatchBreakdown:
    """Score one posting for one candidate and return the full breakdown."""
    return score_normalized(normalize_candidate(candidate), posting, weights)
