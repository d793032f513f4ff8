"""
models/ - Twin Matrix data model

Modules:
    enumerations.py  - ProcessingState, ViewMode, ScoreBucket, Trend, ExplanationStage
    category.py      - Category, CategoryRegistry
    trace.py         - ExplanationStep, SmoothingTrace
    view.py          - ScoreSummary, NoDataSummary, MatrixCell, MatrixView
"""

from typing import Mapping

from twin_matrix.models.category import (
    ALL_CATEGORIES,
    UNCATEGORIZED,
    Category,
    CategoryRegistry,
)
from twin_matrix.models.enumerations import (
    ExplanationStage,
    ProcessingState,
    ScoreBucket,
    Trend,
    ViewMode,
)
from twin_matrix.models.trace import ExplanationStep, SmoothingTrace
from twin_matrix.models.view import (
    NO_DATA,
    LegendEntry,
    MatrixCell,
    MatrixView,
    NoDataSummary,
    ScoreSummary,
    SummaryResult,
)

AttributeCode = str
ScoreMap = Mapping[AttributeCode, int]

__all__ = [
    "ALL_CATEGORIES",
    "UNCATEGORIZED",
    "NO_DATA",
    "AttributeCode",
    "ScoreMap",
    "Category",
    "CategoryRegistry",
    "ExplanationStage",
    "ExplanationStep",
    "LegendEntry",
    "MatrixCell",
    "MatrixView",
    "NoDataSummary",
    "ProcessingState",
    "ScoreBucket",
    "ScoreSummary",
    "SmoothingTrace",
    "SummaryResult",
    "Trend",
    "ViewMode",
]
