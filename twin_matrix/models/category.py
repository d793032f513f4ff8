# twin_matrix/models/category.py
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Selector values that can never be used as category keys
ALL_CATEGORIES = "all"
UNCATEGORIZED = "uncategorized"
RESERVED_KEYS = frozenset({ALL_CATEGORIES, UNCATEGORIZED})


class Category(BaseModel):
    """One row of the category table."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    visual_tag: str = Field(..., min_length=1)
    patterns: Tuple[str, ...] = Field(..., min_length=1)

    @field_validator("patterns")
    @classmethod
    def validate_patterns(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not p for p in v):
            raise ValueError("Category patterns must be non-empty strings")
        return v

    def matches(self, code: str) -> bool:
        """True when any pattern is a substring of the code."""
        return any(pattern in code for pattern in self.patterns)


class CategoryRegistry(BaseModel):
    """
    Ordered category table.

    Order is significant: classification walks the categories in declared
    order and the first match wins.
    """
    model_config = ConfigDict(frozen=True)

    categories: Tuple[Category, ...]
    fallback_visual_tag: str = "bg-gray-500"

    @model_validator(mode="after")
    def validate_keys(self):
        seen = set()
        for category in self.categories:
            if category.key in RESERVED_KEYS:
                raise ValueError(f"Category key '{category.key}' is reserved")
            if category.key in seen:
                raise ValueError(f"Duplicate category key '{category.key}'")
            seen.add(category.key)
        return self

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(c.key for c in self.categories)

    def get(self, key: str) -> Optional[Category]:
        for category in self.categories:
            if category.key == key:
                return category
        return None
