# aggregator.py
import math
from dataclasses import dataclass

import numpy as np

from .config import (
    SKILL_WEIGHT,
    LOCATION_WEIGHT,
    DURATION_WEIGHT,
    TYPE_WEIGHT,
)
from .models import MatchBreakdown, ValidationError

MIN_SCORE = 0
MAX_SCORE = 100


@dataclass(frozen=True)
class MatchWeights:
    """Weights applied to the four sub-scores.

    Defaults are skills 0.4, location 0.2, duration 0.2, type 0.2. Weights
    must be non-negative and sum to 1 so the total stays on the 0-100 scale.
    """

    skills: float = SKILL_WEIGHT
    location: float = LOCATION_WEIGHT
    duration: float = DURATION_WEIGHT
    type: float = TYPE_WEIGHT

    def __post_init__(self) -> None:
        values = self.as_array()
        if np.any(values < 0):
            raise ValidationError(f"match weights must be non-negative: {self}")
        if not math.isclose(float(values.sum()), 1.0, abs_tol=1e-6):
            raise ValidationError(
                f"match weights must sum to 1, got {float(values.sum()):.4f}"
            )

    def as_array(self) -> np.ndarray:
        return np.array(
            [self.skills, self.location, self.duration, self.type], dtype=float
        )


DEFAULT_WEIGHTS = MatchWeights()


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, int(value)))


# ---------- Final Score ----------
def aggregate(
    skills: int,
    location: int,
    duration: int,
    type_: int,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> MatchBreakdown:
    sub_scores = np.array(
        [clamp_score(skills), clamp_score(location), clamp_score(duration), clamp_score(type_)]
    )
    weighted = float(np.dot(weights.as_array(), sub_scores))

    return MatchBreakdown(
        skills=int(sub_scores[0]),
        location=int(sub_scores[1]),
        duration=int(sub_scores[2]),
        type=int(sub_scores[3]),
        total=clamp_score(round_half_up(weighted)),
    )
