# twin_matrix/models/trace.py
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from twin_matrix.models.enumerations import ExplanationStage, Trend

ESTIMATE_DISCLAIMER = (
    "Explanatory estimate: only the final score is observed. Raw score, prior "
    "score, tags and confidences are reconstructed from the smoothing formula "
    "and are not recovered historical values."
)


class ExplanationStep(BaseModel):
    """One stage of the reconstructed scoring pipeline."""
    model_config = ConfigDict(frozen=True)

    stage: ExplanationStage
    description: str
    result_text: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class SmoothingTrace(BaseModel):
    """Reconstructed derivation of a final score. Ephemeral, never persisted."""
    model_config = ConfigDict(frozen=True)

    code: str
    final_score: int
    reconstructed_raw_score: int
    prior_score: int
    smoothing_coefficient: float
    decay_factor: float
    formula: str
    calculation: str
    meta_tags: Tuple[str, ...] = ()
    delta_from_prior: int
    trend_vs_prior: Trend
    steps: List[ExplanationStep] = Field(..., min_length=4, max_length=4)
    is_estimate: bool = True
    disclaimer: str = ESTIMATE_DISCLAIMER
