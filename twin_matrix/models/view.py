# twin_matrix/models/view.py
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from twin_matrix.models.enumerations import ScoreBucket, Trend, ViewMode
from twin_matrix.models.trace import SmoothingTrace


class ScoreSummary(BaseModel):
    """Snapshot statistics shown above the matrix."""
    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=1)
    max: int
    average: int  # rounded half-up


class NoDataSummary(BaseModel):
    """Explicit result for an empty snapshot."""
    model_config = ConfigDict(frozen=True)

    count: Literal[0] = 0
    reason: str = "no data"


NO_DATA = NoDataSummary()

SummaryResult = Union[ScoreSummary, NoDataSummary]


class MatrixCell(BaseModel):
    """Per-attribute display parameters."""
    model_config = ConfigDict(frozen=True)

    code: str
    score: int
    name: str
    category_key: str
    category_label: str
    category_tag: str
    bucket: ScoreBucket
    bucket_tag: str
    intensity: float
    percentage: int
    hex_value: str
    trend: Trend


class LegendEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    visual_tag: str


class MatrixView(BaseModel):
    """Derived view model for one render cycle."""
    selected_category: str
    view_mode: ViewMode
    entries: List[MatrixCell] = Field(default_factory=list)
    summary: SummaryResult
    legend: List[LegendEntry] = Field(default_factory=list)
    is_updating: bool = False
    explanation: Optional[SmoothingTrace] = None
