# ranker.py
import logging
from typing import List, Optional, Sequence

from tabulate import tabulate

from .aggregator import DEFAULT_WEIGHTS, MatchWeights
from .config import (
    STUDENT_MATCH_LIMIT,
    STUDENT_MIN_MATCH_SCORE,
    CANDIDATE_MATCH_LIMIT,
    CANDIDATE_MIN_MATCH_SCORE,
)
from .insights import match_label
from .models import (
    CandidateProfile,
    PostingRequirements,
    RankedCandidate,
    RankedPosting,
    ValidationError,
)
from .normalizer import normalize_candidate
from .scorer import score_normalized

logger = logging.getLogger(__name__)


# ---------- Postings for a Candidate ----------
def rank_postings(
    candidate: CandidateProfile,
    postings: Sequence[PostingRequirements],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> List[RankedPosting]:
    """Score every posting and order them by total, best first.

    The sort is stable: postings with equal totals keep their input order,
    so callers that pass postings newest first get recency as tie-break.
    """
    normalized = normalize_candidate(candidate)

    ranked = [
        RankedPosting(posting=p, breakdown=score_normalized(normalized, p, weights))
        for p in postings
    ]
    ranked.sort(key=lambda r: r.breakdown.total, reverse=True)

    logger.debug(
        "Ranked %d postings for candidate %s", len(ranked), candidate.candidate_id or "<anonymous>"
    )
    return ranked


def top_matches(
    candidate: CandidateProfile,
    postings: Sequence[PostingRequirements],
    limit: Optional[int] = STUDENT_MATCH_LIMIT,
    min_score: int = STUDENT_MIN_MATCH_SCORE,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> List[RankedPosting]:
    ranked = [
        r for r in rank_postings(candidate, postings, weights)
        if r.breakdown.total >= min_score
    ]
    return ranked if limit is None else ranked[:limit]


# ---------- Candidates for a Posting ----------
def rank_candidates(
    posting: PostingRequirements,
    candidates: Sequence[CandidateProfile],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> List[RankedCandidate]:
    ranked = [
        RankedCandidate(
            candidate=c,
            breakdown=score_normalized(normalize_candidate(c), posting, weights),
        )
        for c in candidates
    ]
    ranked.sort(key=lambda r: r.breakdown.total, reverse=True)

    logger.debug(
        "Ranked %d candidates for posting %s", len(ranked), posting.posting_id or "<anonymous>"
    )
    return ranked


def top_candidates(
    posting: PostingRequirements,
    candidates: Sequence[CandidateProfile],
    limit: Optional[int] = CANDIDATE_MATCH_LIMIT,
    min_score: int = CANDIDATE_MIN_MATCH_SCORE,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> List[RankedCandidate]:
    ranked = [
        r for r in rank_candidates(posting, candidates, weights)
        if r.breakdown.total >= min_score
    ]
    return ranked if limit is None else ranked[:limit]


# ---------- Display ----------
SCORE_HEADERS = ["Total", "Skills", "Loc", "Duration", "Type", "Label"]


def _score_columns(breakdown) -> list:
    return [
        breakdown.total,
        breakdown.skills,
        breakdown.location,
        breakdown.duration,
        breakdown.type,
        match_label(breakdown.total),
    ]


def format_rankings(ranked: Sequence[RankedPosting]) -> str:
    table = [
        [idx + 1, r.posting.title, r.posting.company_name, r.posting.location]
        + _score_columns(r.breakdown)
        for idx, r in enumerate(ranked)
    ]
    return tabulate(
        table,
        headers=["Rank", "Title", "Company", "Location"] + SCORE_HEADERS,
        tablefmt="github",
    )


def format_candidate_rankings(ranked: Sequence[RankedCandidate]) -> str:
    table = [
        [idx + 1, r.candidate.name, r.candidate.candidate_id] + _score_columns(r.breakdown)
        for idx, r in enumerate(ranked)
    ]
    return tabulate(
        table,
        headers=["Rank", "Name", "Student ID"] + SCORE_HEADERS,
        tablefmt="github",
    )


# ---------- Stored Profiles ----------
def _parse_stored(documents, parse, db, kind: str) -> list:
    """Parse stored documents, skipping and recording any that fail validation."""
    parsed = []
    for doc in documents:
        try:
            parsed.append(parse(doc))
        except ValidationError as exc:
            logger.warning("Skipping invalid %s %s: %s", kind, doc.get("_id"), exc)
            db.log(
                level="WARNING",
                module="ranker",
                message=f"Invalid {kind} document",
                kind=kind,
                document_id=str(doc.get("_id")),
                meta={"error": str(exc)},
            )
    return parsed


def recommend_for_student(
    student_id: str,
    limit: Optional[int] = STUDENT_MATCH_LIMIT,
    min_score: int = STUDENT_MIN_MATCH_SCORE,
    db=None,
) -> List[RankedPosting]:
    """Rank active internships for a stored student and record the result."""
    from .db import MongoDBManager
    from .documents import candidate_from_document, posting_from_document

    db = db or MongoDBManager()

    student_doc = db.get_student(student_id)
    if not student_doc:
        raise ValueError(f"Student ID not found: {student_id}")

    candidate = candidate_from_document(student_doc)
    postings = _parse_stored(db.get_active_internships(), posting_from_document, db, "internship")
    if not postings:
        logger.info("No active internships to rank for student %s", student_id)
        return []

    matches = top_matches(candidate, postings, limit=limit, min_score=min_score)

    db.insert_ranking(
        {
            "student_id": student_id,
            "matches": [
                {"internship_id": m.posting.posting_id, **m.breakdown.to_dict()}
                for m in matches
            ],
        }
    )
    logger.info(
        "Stored %d of %d internship matches for student %s",
        len(matches), len(postings), student_id,
    )
    return matches


def candidates_for_internship(
    internship_id: str,
    limit: Optional[int] = CANDIDATE_MATCH_LIMIT,
    min_score: int = CANDIDATE_MIN_MATCH_SCORE,
    db=None,
) -> List[RankedCandidate]:
    from .db import MongoDBManager
    from .documents import candidate_from_document, posting_from_document

    db = db or MongoDBManager()

    internship_doc = db.get_internship(internship_id)
    if not internship_doc:
        raise ValueError(f"Internship ID not found: {internship_id}")

    posting = posting_from_document(internship_doc)
    candidates = _parse_stored(db.get_complete_students(), candidate_from_document, db, "student")

    matches = top_candidates(posting, candidates, limit=limit, min_score=min_score)
    logger.info(
        "Found %d of %d candidates for internship %s",
        len(matches), len(candidates), internship_id,
    )
    return matches
