"""
Boundary Validation
twin_matrix/scoring/validation.py

Applies the out-of-range policy to an upstream snapshot before it enters
the scoring core. The transform functions themselves never range-check.

Policies:
    clamp   scores below 0 → 0, above max → max (warning logged per code)
    reject  first out-of-range score raises ScoreOutOfRangeError
    ignore  snapshot passed through unchanged
"""

from typing import Dict, Mapping

import structlog

from twin_matrix.core.exceptions import ScoreOutOfRangeError
from twin_matrix.scoring.utils import clamp

logger = structlog.get_logger(__name__)

POLICIES = ("clamp", "reject", "ignore")


def validate_score_map(
    score_map: Mapping[str, int],
    policy: str = "clamp",
    max_score: int = 255,
) -> Dict[str, int]:
    """Return a copy of the snapshot with the policy applied."""
    if policy not in POLICIES:
        raise ValueError(f"Unknown out-of-range policy '{policy}', expected one of {POLICIES}")

    snapshot = dict(score_map)
    if policy == "ignore":
        return snapshot

    for code, score in snapshot.items():
        if 0 <= score <= max_score:
            continue
        if policy == "reject":
            raise ScoreOutOfRangeError(code, score, max_score)
        snapshot[code] = clamp(score, 0, max_score)
        logger.warning(
            "score_clamped",
            code=code,
            score=score,
            clamped_to=snapshot[code],
        )
    return snapshot
