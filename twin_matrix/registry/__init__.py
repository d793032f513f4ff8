"""
registry/ - static lookup tables

Modules:
    categories.py  - Ordered category table + first-match lookup
    dimensions.py  - Attribute code → display name
    data/          - Packaged JSON tables
"""

from twin_matrix.registry.categories import (
    get_category_registry,
    load_category_registry,
    lookup_category,
)
from twin_matrix.registry.dimensions import (
    DimensionRegistry,
    get_dimension_name,
    get_dimension_registry,
    load_dimension_registry,
)

__all__ = [
    "DimensionRegistry",
    "get_category_registry",
    "get_dimension_name",
    "get_dimension_registry",
    "load_category_registry",
    "load_dimension_registry",
    "lookup_category",
]
