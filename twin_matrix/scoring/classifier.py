"""
Classifier
twin_matrix/scoring/classifier.py

Assigns each attribute code to exactly one category key.

Rule: walk the registry in declared order; the first category with a
pattern contained in the code wins. No match → "uncategorized".

    classify("0071")   → "social"
    classify("SP088")  → "spiritual"
    classify("ZZZZ")   → "uncategorized"
"""

from typing import Dict, Mapping, Optional

from twin_matrix.models.category import UNCATEGORIZED, CategoryRegistry
from twin_matrix.registry.categories import get_category_registry, lookup_category


def classify(code: str, registry: Optional[CategoryRegistry] = None) -> str:
    """Category key for the code, or 'uncategorized'."""
    category = lookup_category(code, registry)
    return category.key if category else UNCATEGORIZED


def classify_all(
    score_map: Mapping[str, int],
    registry: Optional[CategoryRegistry] = None,
) -> Dict[str, str]:
    """Category key for every code in the snapshot, in snapshot order."""
    if registry is None:
        registry = get_category_registry()
    return {code: classify(code, registry) for code in score_map}


def category_visual_tag(code: str, registry: Optional[CategoryRegistry] = None) -> str:
    """Visual tag of the code's category, or the registry's fallback tag."""
    if registry is None:
        registry = get_category_registry()
    category = lookup_category(code, registry)
    return category.visual_tag if category else registry.fallback_visual_tag
