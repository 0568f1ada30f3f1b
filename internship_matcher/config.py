# config.py
import os
from pathlib import Path

# ---------- Project Paths ----------
BASE_DIR = Path(__file__).resolve().parent
LOG_DIR = Path(os.getenv("LOG_DIR", str(BASE_DIR / "logs")))
LOG_FILE = LOG_DIR / "app.log"

# ---------- MongoDB ----------
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "internship_matcher")

STUDENT_COLLECTION = "students"
INTERNSHIP_COLLECTION = "internships"
RANKING_COLLECTION = "rankings"
LOG_COLLECTION = "logs"

# ---------- Scoring Weights ----------
SKILL_WEIGHT = 0.4
LOCATION_WEIGHT = 0.2
DURATION_WEIGHT = 0.2
TYPE_WEIGHT = 0.2

# ---------- Duration Scores ----------
DURATION_IN_RANGE_SCORE = 100
DURATION_TOO_SHORT_SCORE = 50
DURATION_TOO_LONG_SCORE = 70

# used when a stored preference only has one bound
DEFAULT_MIN_DURATION_MONTHS = 1
DEFAULT_MAX_DURATION_MONTHS = 6
WEEKS_PER_MONTH = 4

# ---------- Ranking ----------
STUDENT_MATCH_LIMIT = 10
STUDENT_MIN_MATCH_SCORE = 40
CANDIDATE_MATCH_LIMIT = 20
CANDIDATE_MIN_MATCH_SCORE = 50

ACTIVE_INTERNSHIP_FETCH_LIMIT = 100
STUDENT_FETCH_LIMIT = 200
