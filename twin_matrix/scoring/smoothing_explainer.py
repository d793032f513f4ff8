"""
Smoothing Explainer
twin_matrix/scoring/smoothing_explainer.py

Reconstructs how a final score came out of the upstream exponential
smoothing update.

Formula (upstream):
    final = α × raw + (1 − α) × prior

Only the final score is observed here, so the explainer inverts the
formula with the prior held at the scale midpoint:
    raw   ≈ round_half_up(final / α)
    prior = 128

Fixed parameters (overridable through Settings):
    α     = 0.30  (smoothing coefficient)
    decay = 0.95  (time decay, reported but not applied)

Everything in the resulting trace except final_score is an explanatory
estimate, not recovered history.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

import structlog

from twin_matrix.config import Settings, get_settings
from twin_matrix.core.exceptions import SmoothingParameterError
from twin_matrix.models.enumerations import ExplanationStage, Trend
from twin_matrix.models.trace import ExplanationStep, SmoothingTrace
from twin_matrix.scoring.utils import round_half_up

logger = structlog.get_logger(__name__)

DEFAULT_ALPHA = 0.3
DEFAULT_DECAY = 0.95
DEFAULT_PRIOR = 128
DEFAULT_MAX_SCORE = 255

FORMULA = "final = α × raw + (1 − α) × prior"

# Placeholder tags until the upstream scorer ships real provenance
PLACEHOLDER_META_TAGS: Tuple[str, ...] = ("learning", "achievement", "teamwork")

# (stage, description, confidence) in pipeline order
_STAGES: List[Tuple[ExplanationStage, str, float]] = [
    (ExplanationStage.TAG_EXTRACTION, "Meta-tag extraction", 0.92),
    (ExplanationStage.SEMANTIC_MATCHING, "Semantic matching", 0.85),
    (ExplanationStage.RAW_SCORING, "Raw scoring", 0.88),
    (ExplanationStage.SCORE_SMOOTHING, "Score smoothing", 1.0),
]
_SEMANTIC_SIMILARITY = 0.85


@dataclass(frozen=True)
class SmoothingParameters:
    """Coefficients threaded explicitly into each explanation."""
    alpha: float = DEFAULT_ALPHA
    decay: float = DEFAULT_DECAY
    prior_score: int = DEFAULT_PRIOR
    max_score: int = DEFAULT_MAX_SCORE

    def __post_init__(self):
        if not 0 < self.alpha <= 1:
            raise SmoothingParameterError("alpha", self.alpha)
        if not 0 < self.decay <= 1:
            raise SmoothingParameterError("decay", self.decay)
        if not 0 <= self.prior_score <= self.max_score:
            raise SmoothingParameterError(
                "prior_score", self.prior_score, f"[0, {self.max_score}]"
            )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SmoothingParameters":
        settings = settings or get_settings()
        return cls(
            alpha=settings.SMOOTHING_ALPHA,
            decay=settings.DECAY_FACTOR,
            prior_score=settings.PRIOR_BASELINE,
            max_score=settings.MAX_SCORE,
        )


class SmoothingExplainer:
    """
    Build a SmoothingTrace for one attribute's final score.

    Usage:
        explainer = SmoothingExplainer()
        trace = explainer.explain(150, "0071")
        trace.reconstructed_raw_score   # 500
        [s.stage for s in trace.steps]  # tag_extraction … score_smoothing
    """

    def __init__(self, params: Optional[SmoothingParameters] = None):
        self.params = params or SmoothingParameters()

    def reconstruct_raw_score(self, final_score: int) -> int:
        """Invert the update for the raw input: round_half_up(final / α)."""
        alpha = Decimal(str(self.params.alpha))
        return round_half_up(Decimal(final_score) / alpha)

    def explain(self, final_score: int, code: str) -> SmoothingTrace:
        """
        Reconstruct the smoothing computation behind final_score.

        Args:
            final_score: Observed score for the attribute.
            code: Attribute code, used in the semantic-matching step text.

        Returns:
            SmoothingTrace with exactly four steps in pipeline order.
        """
        alpha = Decimal(str(self.params.alpha))
        one_minus_alpha = Decimal("1") - alpha
        prior = self.params.prior_score
        raw = self.reconstruct_raw_score(final_score)
        delta = final_score - prior

        results = [
            ", ".join(PLACEHOLDER_META_TAGS),
            f"Similarity to dimension {code}: {_SEMANTIC_SIMILARITY}",
            f"Raw score: {raw}",
            f"Final score: {final_score}",
        ]
        steps = [
            ExplanationStep(
                stage=stage,
                description=description,
                result_text=result_text,
                confidence=confidence,
            )
            for (stage, description, confidence), result_text in zip(_STAGES, results)
        ]

        if delta > 0:
            trend_vs_prior = Trend.UP
        elif delta < 0:
            trend_vs_prior = Trend.DOWN
        else:
            trend_vs_prior = Trend.FLAT

        trace = SmoothingTrace(
            code=code,
            final_score=final_score,
            reconstructed_raw_score=raw,
            prior_score=prior,
            smoothing_coefficient=self.params.alpha,
            decay_factor=self.params.decay,
            formula=FORMULA,
            calculation=f"{final_score} = {alpha} × {raw} + {one_minus_alpha} × {prior}",
            meta_tags=PLACEHOLDER_META_TAGS,
            delta_from_prior=delta,
            trend_vs_prior=trend_vs_prior,
            steps=steps,
        )

        logger.info(
            "smoothing_explained",
            code=code,
            final_score=final_score,
            reconstructed_raw_score=raw,
            prior_score=prior,
            alpha=self.params.alpha,
            decay=self.params.decay,
        )
        return trace


def explain(
    final_score: int,
    code: str,
    params: Optional[SmoothingParameters] = None,
) -> SmoothingTrace:
    """Module-level shortcut for SmoothingExplainer(params).explain(...)."""
    return SmoothingExplainer(params).explain(final_score, code)
