# main.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    LOG_DIR,
    LOG_FILE,
    STUDENT_MATCH_LIMIT,
    STUDENT_MIN_MATCH_SCORE,
    CANDIDATE_MATCH_LIMIT,
    CANDIDATE_MIN_MATCH_SCORE,
)
from .models import ValidationError

# Database modules are imported lazily inside CLI branches

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


# ---------- Logging Setup ----------
def setup_logging(level: int = logging.INFO) -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.FileHandler(LOG_FILE),
            logging.StreamHandler(),
        ],
    )


# ---------- CLI ----------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score and rank internship postings for students"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # ---- rank ----
    rank_parser = subparsers.add_parser(
        "rank", help="Rank postings from JSON files for one student profile"
    )
    rank_parser.add_argument("--profile", required=True, help="Student profile JSON file")
    rank_parser.add_argument("--postings", required=True, help="Internship postings JSON file")
    rank_parser.add_argument(
        "--top", type=int, default=None, help="Only show the top N postings"
    )
    rank_parser.add_argument(
        "--min-score", type=int, default=0, help="Hide postings scoring below this total"
    )
    rank_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    # ---- score ----
    score_parser = subparsers.add_parser(
        "score", help="Print the match breakdown for one profile and one posting"
    )
    score_parser.add_argument("--profile", required=True, help="Student profile JSON file")
    score_parser.add_argument("--posting", required=True, help="Internship posting JSON file")

    # ---- recommend ----
    recommend_parser = subparsers.add_parser(
        "recommend", help="Rank active internships for a stored student"
    )
    recommend_parser.add_argument("--student-id", required=True, help="Student document ID")
    recommend_parser.add_argument(
        "--top", type=int, default=STUDENT_MATCH_LIMIT,
        help=f"How many matches to show (default {STUDENT_MATCH_LIMIT})",
    )
    recommend_parser.add_argument(
        "--min-score", type=int, default=STUDENT_MIN_MATCH_SCORE,
        help=f"Minimum total score (default {STUDENT_MIN_MATCH_SCORE})",
    )

    # ---- candidates ----
    candidates_parser = subparsers.add_parser(
        "candidates", help="Rank stored students for one internship"
    )
    candidates_parser.add_argument("--internship-id", required=True, help="Internship document ID")
    candidates_parser.add_argument(
        "--top", type=int, default=CANDIDATE_MATCH_LIMIT,
        help=f"How many candidates to show (default {CANDIDATE_MATCH_LIMIT})",
    )
    candidates_parser.add_argument(
        "--min-score", type=int, default=CANDIDATE_MIN_MATCH_SCORE,
        help=f"Minimum total score (default {CANDIDATE_MIN_MATCH_SCORE})",
    )

    return parser


def _load_single(path: Path) -> dict:
    from .documents import load_json_documents

    documents = load_json_documents(path)
    if len(documents) != 1:
        raise ValidationError(f"{path}: expected exactly one document, found {len(documents)}")
    return documents[0]


def run_rank(args: argparse.Namespace) -> None:
    from .documents import candidate_from_document, load_json_documents, posting_from_document
    from .ranker import format_rankings, top_matches

    candidate = candidate_from_document(_load_single(Path(args.profile)))
    postings = [posting_from_document(d) for d in load_json_documents(Path(args.postings))]

    ranked = top_matches(candidate, postings, limit=args.top, min_score=args.min_score)

    if args.json:
        print(json.dumps(
            [
                {
                    "posting_id": r.posting.posting_id,
                    "title": r.posting.title,
                    "breakdown": r.breakdown.to_dict(),
                }
                for r in ranked
            ],
            indent=2,
        ))
    elif ranked:
        print(format_rankings(ranked))
    else:
        print("No postings matched.")


def run_score(args: argparse.Namespace) -> None:
    from .documents import candidate_from_document, posting_from_document
    from .scorer import score_match

    candidate = candidate_from_document(_load_single(Path(args.profile)))
    posting = posting_from_document(_load_single(Path(args.posting)))

    print(json.dumps(score_match(candidate, posting).to_dict(), indent=2))


def run_recommend(args: argparse.Namespace) -> None:
    from .ranker import format_rankings, recommend_for_student

    ranked = recommend_for_student(args.student_id, limit=args.top, min_score=args.min_score)
    if ranked:
        print(format_rankings(ranked))
    else:
        print("No internships matched.")


def run_candidates(args: argparse.Namespace) -> None:
    from .ranker import candidates_for_internship, format_candidate_rankings

    ranked = candidates_for_internship(
        args.internship_id, limit=args.top, min_score=args.min_score
    )
    if ranked:
        print(format_candidate_rankings(ranked))
    else:
        print("No candidates matched.")


COMMANDS = {
    "rank": run_rank,
    "score": run_score,
    "recommend": run_recommend,
    "candidates": run_candidates,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        handler(args)
    except ValidationError as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_INVALID_INPUT
    except Exception as exc:
        logger.error("Command failed", exc_info=exc)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())
