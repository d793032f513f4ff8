"""
Filter/Sort Engine
twin_matrix/scoring/filter_sort.py

Produces the visible subset of a score snapshot and its ranked order.

    filter_by_category(scores, "all")      → same entries, same order
    filter_by_category(scores, "social")   → entries classified as social
    sort_descending(entries)               → stable, ties keep source order
    summary(scores)                        → ScoreSummary | NO_DATA
"""

from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import structlog

from twin_matrix.core.exceptions import UnknownCategoryError
from twin_matrix.models.category import ALL_CATEGORIES, UNCATEGORIZED, CategoryRegistry
from twin_matrix.models.view import NO_DATA, ScoreSummary, SummaryResult
from twin_matrix.registry.categories import get_category_registry
from twin_matrix.scoring.classifier import classify
from twin_matrix.scoring.utils import mean_half_up

logger = structlog.get_logger(__name__)

Entry = Tuple[str, int]


def filter_by_category(
    score_map: Mapping[str, int],
    category_key: str = ALL_CATEGORIES,
    registry: Optional[CategoryRegistry] = None,
) -> Dict[str, int]:
    """
    Keep the entries whose code classifies into category_key.

    Args:
        score_map: Snapshot of attribute code → score.
        category_key: A registry key, "uncategorized", or "all" (identity).
        registry: Alternate category table (defaults to the process-wide one).

    Returns:
        New dict, source order preserved.

    Raises:
        UnknownCategoryError: category_key is not a selector the registry knows.
    """
    if category_key == ALL_CATEGORIES:
        return dict(score_map)

    if registry is None:
        registry = get_category_registry()
    if category_key != UNCATEGORIZED and registry.get(category_key) is None:
        raise UnknownCategoryError(category_key)

    return {
        code: score
        for code, score in score_map.items()
        if classify(code, registry) == category_key
    }


def sort_descending(entries: Union[Mapping[str, int], Iterable[Entry]]) -> List[Entry]:
    """Rank by score, highest first. sorted() is stable so ties keep input order."""
    if isinstance(entries, Mapping):
        entries = entries.items()
    return sorted(entries, key=lambda item: item[1], reverse=True)


def summary(score_map: Mapping[str, int]) -> SummaryResult:
    """
    Count, maximum and half-up rounded average of a snapshot.

    Returns NO_DATA for an empty snapshot instead of dividing by zero.
    """
    if not score_map:
        logger.debug("summary_no_data")
        return NO_DATA

    scores = list(score_map.values())
    return ScoreSummary(
        count=len(scores),
        max=max(scores),
        average=mean_half_up(scores),
    )
