# tests/test_smoothing_explainer.py
"""
Smoothing Explainer tests - inverse formula, step order, estimate labelling
"""

import pytest
from pydantic import ValidationError

from twin_matrix.config import Settings
from twin_matrix.core.exceptions import SmoothingParameterError
from twin_matrix.models.enumerations import ExplanationStage, Trend
from twin_matrix.scoring.smoothing_explainer import (
    FORMULA,
    SmoothingExplainer,
    SmoothingParameters,
    explain,
)


class TestReconstruction:

    def test_raw_score_for_150(self):
        trace = explain(150, "0071")
        assert trace.reconstructed_raw_score == 500

    def test_rounds_half_up(self):
        # 1 / 0.3 = 3.33, 2 / 0.3 = 6.67
        explainer = SmoothingExplainer()
        assert explainer.reconstruct_raw_score(1) == 3
        assert explainer.reconstruct_raw_score(2) == 7

    def test_zero(self):
        assert explain(0, "0067").reconstructed_raw_score == 0

    def test_fixed_inputs(self):
        trace = explain(150, "0071")
        assert trace.final_score == 150
        assert trace.prior_score == 128
        assert trace.smoothing_coefficient == 0.3
        assert trace.decay_factor == 0.95

    def test_calculation_text(self):
        trace = explain(150, "0071")
        assert trace.formula == FORMULA
        assert trace.calculation == "150 = 0.3 × 500 + 0.7 × 128"

    def test_delta_from_prior(self):
        assert explain(150, "X").delta_from_prior == 22
        assert explain(150, "X").trend_vs_prior == Trend.UP
        assert explain(100, "X").trend_vs_prior == Trend.DOWN
        assert explain(128, "X").trend_vs_prior == Trend.FLAT


class TestSteps:

    def test_four_steps_in_order(self):
        trace = explain(150, "0071")
        assert [s.stage for s in trace.steps] == [
            ExplanationStage.TAG_EXTRACTION,
            ExplanationStage.SEMANTIC_MATCHING,
            ExplanationStage.RAW_SCORING,
            ExplanationStage.SCORE_SMOOTHING,
        ]

    def test_confidences(self):
        trace = explain(150, "0071")
        assert [s.confidence for s in trace.steps] == [0.92, 0.85, 0.88, 1.0]

    def test_step_results_reference_inputs(self):
        trace = explain(150, "0071")
        assert trace.steps[0].result_text == "learning, achievement, teamwork"
        assert "0071" in trace.steps[1].result_text
        assert trace.steps[2].result_text == "Raw score: 500"
        assert trace.steps[3].result_text == "Final score: 150"

    def test_marked_as_estimate(self):
        trace = explain(150, "0071")
        assert trace.is_estimate is True
        assert "estimate" in trace.disclaimer.lower()

    def test_trace_is_frozen(self):
        trace = explain(150, "0071")
        with pytest.raises(ValidationError):
            trace.final_score = 1

    def test_recomputed_each_call(self):
        assert explain(150, "0071") == explain(150, "0071")
        assert explain(150, "0071") is not explain(150, "0071")


class TestParameters:

    def test_custom_alpha(self):
        trace = SmoothingExplainer(SmoothingParameters(alpha=0.5)).explain(100, "A")
        assert trace.reconstructed_raw_score == 200
        assert trace.calculation == "100 = 0.5 × 200 + 0.5 × 128"

    def test_custom_prior(self):
        trace = explain(100, "A", SmoothingParameters(prior_score=64))
        assert trace.prior_score == 64
        assert trace.delta_from_prior == 36

    @pytest.mark.parametrize("alpha", [0, -0.1, 1.5])
    def test_invalid_alpha(self, alpha):
        with pytest.raises(SmoothingParameterError) as exc_info:
            SmoothingParameters(alpha=alpha)
        assert exc_info.value.name == "alpha"

    def test_invalid_decay(self):
        with pytest.raises(SmoothingParameterError):
            SmoothingParameters(decay=0)

    @pytest.mark.parametrize("prior", [-5, 256])
    def test_invalid_prior(self, prior):
        with pytest.raises(SmoothingParameterError) as exc_info:
            SmoothingParameters(prior_score=prior)
        assert exc_info.value.name == "prior_score"
        assert exc_info.value.valid_range == "[0, 255]"

    def test_prior_on_custom_scale(self):
        assert SmoothingParameters(prior_score=500, max_score=1000).prior_score == 500
        with pytest.raises(SmoothingParameterError):
            SmoothingParameters(prior_score=101, max_score=100)

    def test_from_settings_carries_scale(self):
        settings = Settings(MAX_SCORE=1000, PRIOR_BASELINE=500)
        params = SmoothingParameters.from_settings(settings)
        assert params.max_score == 1000
        assert params.prior_score == 500

    def test_from_settings(self):
        settings = Settings(SMOOTHING_ALPHA=0.25, DECAY_FACTOR=0.9, PRIOR_BASELINE=100)
        params = SmoothingParameters.from_settings(settings)
        assert params == SmoothingParameters(alpha=0.25, decay=0.9, prior_score=100)
