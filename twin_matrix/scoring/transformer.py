"""
Score Transformer
twin_matrix/scoring/transformer.py

Pure mappings from a single-byte score s ∈ [0, 255] to display values.
intensity and percentage take an optional max_score for other scales.

    bucket(s)      5 tiers: ≥200, ≥150, ≥100, ≥50, else (lower bound inclusive)
    intensity(s)   max(0.1, s / 255), floored so zero scores stay visible
    percentage(s)  round_half_up(s / 255 × 100)
    hex_byte(s)    "0x" + two upper-case hex digits
    trend(s)       up above 150, down below 100, flat otherwise

Inputs are not range-checked here; see scoring/validation.py for the
boundary policy applied to upstream snapshots.
"""

from decimal import Decimal
from typing import Dict, List, Tuple

from twin_matrix.models.enumerations import ScoreBucket, Trend
from twin_matrix.scoring.utils import round_half_up

MAX_SCORE = 255
MIN_INTENSITY = 0.1

# (lower bound, tier), highest first
BUCKET_THRESHOLDS: List[Tuple[int, ScoreBucket]] = [
    (200, ScoreBucket.EXCELLENT),
    (150, ScoreBucket.HIGH),
    (100, ScoreBucket.MODERATE),
    (50, ScoreBucket.LOW),
]

BUCKET_TAGS: Dict[ScoreBucket, str] = {
    ScoreBucket.EXCELLENT: "bg-green-400",
    ScoreBucket.HIGH: "bg-yellow-400",
    ScoreBucket.MODERATE: "bg-orange-400",
    ScoreBucket.LOW: "bg-red-400",
    ScoreBucket.MINIMAL: "bg-gray-400",
}

TREND_UP_ABOVE = 150
TREND_DOWN_BELOW = 100


def bucket(score: int) -> ScoreBucket:
    """Discrete intensity tier for a score."""
    for lower_bound, tier in BUCKET_THRESHOLDS:
        if score >= lower_bound:
            return tier
    return ScoreBucket.MINIMAL


def bucket_tag(score: int) -> str:
    """Visual tag of the score's tier."""
    return BUCKET_TAGS[bucket(score)]


def intensity(score: int, max_score: int = MAX_SCORE) -> float:
    """Opacity in [0.1, 1.0] for in-range scores."""
    return max(MIN_INTENSITY, score / max_score)


def percentage(score: int, max_score: int = MAX_SCORE) -> int:
    """Score as a whole percentage of the maximum."""
    return round_half_up(Decimal(score) * Decimal(100) / Decimal(max_score))


def hex_byte(score: int) -> str:
    return f"0x{score:02X}"


def trend(score: int) -> Trend:
    if score > TREND_UP_ABOVE:
        return Trend.UP
    if score < TREND_DOWN_BELOW:
        return Trend.DOWN
    return Trend.FLAT
