"""
services/matrix_view_service.py

One render cycle: score snapshot → MatrixView.

Class: MatrixViewService
Method: build_view(score_map, selected_category, view_mode, selected_code,
                   processing_state) → MatrixView

Pipeline steps:
  1. Copy the snapshot once and apply the out-of-range policy
  2. Summary over the full snapshot (NO_DATA when empty)
  3. Filter by the selected category ("all" = identity)
  4. Rank by descending score in list mode, source order in grid mode
  5. Per-entry display parameters (category, bucket, intensity, percentage)
  6. Smoothing trace for the selected attribute, if any
"""

from typing import List, Mapping, Optional

import structlog

from twin_matrix.config import Settings, get_settings
from twin_matrix.core.exceptions import UnknownAttributeError
from twin_matrix.models.category import ALL_CATEGORIES, UNCATEGORIZED, CategoryRegistry
from twin_matrix.models.enumerations import ProcessingState, ViewMode
from twin_matrix.models.view import LegendEntry, MatrixCell, MatrixView
from twin_matrix.registry.categories import get_category_registry, lookup_category
from twin_matrix.registry.dimensions import DimensionRegistry, get_dimension_registry
from twin_matrix.scoring import transformer
from twin_matrix.scoring.filter_sort import filter_by_category, sort_descending, summary
from twin_matrix.scoring.smoothing_explainer import SmoothingExplainer, SmoothingParameters
from twin_matrix.scoring.validation import validate_score_map

logger = structlog.get_logger(__name__)


class MatrixViewService:
    """Assemble the matrix view model from one upstream snapshot."""

    def __init__(
        self,
        category_registry: Optional[CategoryRegistry] = None,
        dimension_registry: Optional[DimensionRegistry] = None,
        smoothing_params: Optional[SmoothingParameters] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.category_registry = (
            category_registry if category_registry is not None else get_category_registry()
        )
        self.dimension_registry = (
            dimension_registry if dimension_registry is not None else get_dimension_registry()
        )
        self.explainer = SmoothingExplainer(
            smoothing_params or SmoothingParameters.from_settings(self.settings)
        )

    # ------------------------------------------------------------------
    # Main pipeline
    # ------------------------------------------------------------------

    def build_view(
        self,
        score_map: Mapping[str, int],
        selected_category: str = ALL_CATEGORIES,
        view_mode: ViewMode = ViewMode.GRID,
        selected_code: Optional[str] = None,
        processing_state: ProcessingState = ProcessingState.IDLE,
    ) -> MatrixView:
        """
        Build the view model for one render cycle.

        Args:
            score_map: Upstream snapshot of attribute code → score.
            selected_category: Registry key, "uncategorized", or "all".
            view_mode: GRID keeps snapshot order, LIST ranks by score.
            selected_code: Attribute to explain, if any.
            processing_state: Upstream state; only surfaced as is_updating.

        Raises:
            UnknownCategoryError: selected_category is not a known selector.
            UnknownAttributeError: selected_code is not in the snapshot.
            ScoreOutOfRangeError: OUT_OF_RANGE_POLICY is "reject" and a score
                falls outside [0, MAX_SCORE].
        """
        snapshot = validate_score_map(
            score_map,
            policy=self.settings.OUT_OF_RANGE_POLICY,
            max_score=self.settings.MAX_SCORE,
        )

        visible = filter_by_category(snapshot, selected_category, self.category_registry)
        if view_mode == ViewMode.LIST:
            ordered = sort_descending(visible)
        else:
            ordered = list(visible.items())

        explanation = None
        if selected_code is not None:
            if selected_code not in snapshot:
                raise UnknownAttributeError(selected_code)
            explanation = self.explainer.explain(snapshot[selected_code], selected_code)

        view = MatrixView(
            selected_category=selected_category,
            view_mode=view_mode,
            entries=[self.build_cell(code, score) for code, score in ordered],
            summary=summary(snapshot),
            legend=self.legend(),
            is_updating=processing_state == ProcessingState.PROCESSING,
            explanation=explanation,
        )

        logger.info(
            "matrix_view_built",
            total=len(snapshot),
            visible=len(view.entries),
            selected_category=selected_category,
            view_mode=view_mode.value,
            selected_code=selected_code,
        )
        return view

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def build_cell(self, code: str, score: int) -> MatrixCell:
        """Display parameters for a single attribute."""
        category = lookup_category(code, self.category_registry)
        return MatrixCell(
            code=code,
            score=score,
            name=self.dimension_registry.display_name(code),
            category_key=category.key if category else UNCATEGORIZED,
            category_label=category.label if category else "Uncategorized",
            category_tag=(
                category.visual_tag if category else self.category_registry.fallback_visual_tag
            ),
            bucket=transformer.bucket(score),
            bucket_tag=transformer.bucket_tag(score),
            intensity=transformer.intensity(score, self.settings.MAX_SCORE),
            percentage=transformer.percentage(score, self.settings.MAX_SCORE),
            hex_value=transformer.hex_byte(score),
            trend=transformer.trend(score),
        )

    def legend(self) -> List[LegendEntry]:
        return [
            LegendEntry(key=c.key, label=c.label, visual_tag=c.visual_tag)
            for c in self.category_registry.categories
        ]
