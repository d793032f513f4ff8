"""
Category Registry
twin_matrix/registry/categories.py

Loads the ordered category table from JSON configuration and answers
"which category does this attribute code belong to?".

Default table (data/categories.json), in match order:

    key        label       visual tag      example patterns
    ─────────  ──────────  ──────────────  ──────────────────
    physical   Physical    bg-red-500      0010, 0012, 0033
    social     Social      bg-green-500    0040, 0048, 0071
    digital    Digital     bg-blue-500     0081, 00B6, 00BF
    spiritual  Spiritual   bg-purple-500   0067, 0099, SP088

A code belongs to the first category (in the order above) that has a
pattern contained in the code. Codes matching nothing are uncategorized.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import ValidationError

from twin_matrix.config import get_settings
from twin_matrix.core.exceptions import RegistryConfigError
from twin_matrix.models.category import Category, CategoryRegistry

logger = structlog.get_logger(__name__)

DEFAULT_CATEGORIES_PATH = Path(__file__).parent / "data" / "categories.json"


def load_category_registry(path: Union[str, Path]) -> CategoryRegistry:
    """
    Load and validate a category table.

    Args:
        path: JSON file with {"categories": [...], "fallback_visual_tag": ...}.

    Returns:
        CategoryRegistry preserving the file's declared order.

    Raises:
        RegistryConfigError: file unreadable, not JSON, or fails validation
            (empty patterns, duplicate or reserved keys).
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RegistryConfigError(str(path), str(e)) from e

    try:
        registry = CategoryRegistry.model_validate(raw)
    except ValidationError as e:
        raise RegistryConfigError(str(path), str(e)) from e

    logger.info(
        "category_registry_loaded",
        path=str(path),
        categories=list(registry.keys),
    )
    return registry


@lru_cache
def get_category_registry() -> CategoryRegistry:
    """Process-wide category table, loaded once."""
    override = get_settings().CATEGORY_REGISTRY_PATH
    return load_category_registry(override or DEFAULT_CATEGORIES_PATH)


def lookup_category(
    code: str,
    registry: Optional[CategoryRegistry] = None,
) -> Optional[Category]:
    """Return the first declared category matching the code, or None."""
    if registry is None:
        registry = get_category_registry()
    for category in registry.categories:
        if category.matches(code):
            return category
    return None
