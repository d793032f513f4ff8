# tests/conftest.py

"""
Pytest Fixtures - shared registries and score snapshots

SNAPSHOT REFERENCE (default registry):
- physical:  0010
- social:    0071, 0048, 0040
- digital:   0081
- spiritual: 0099, 0156, SP088, 0067
- uncategorized: 0008, 0032, 0203
"""

import pytest

from twin_matrix.config import Settings, get_settings
from twin_matrix.logging_config import configure_logging
from twin_matrix.models.category import Category, CategoryRegistry
from twin_matrix.registry.categories import get_category_registry
from twin_matrix.registry.dimensions import DimensionRegistry, get_dimension_registry


@pytest.fixture(scope="session", autouse=True)
def _console_logging():
    configure_logging(Settings(LOG_FORMAT="console", LOG_LEVEL="WARNING"))


@pytest.fixture(autouse=True)
def _fresh_caches():
    """Registries and settings are process-wide; reset them around each test."""
    get_settings.cache_clear()
    get_category_registry.cache_clear()
    get_dimension_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_category_registry.cache_clear()
    get_dimension_registry.cache_clear()


# =============================================================================
# SCORE SNAPSHOTS
# =============================================================================

@pytest.fixture
def sample_scores():
    """Snapshot covering every default category plus uncategorized codes."""
    return {
        "0071": 210,
        "0048": 150,
        "0008": 128,
        "0032": 99,
        "0099": 180,
        "0156": 45,
        "SP088": 200,
        "0010": 50,
        "0040": 150,
        "0081": 230,
        "0067": 0,
        "0203": 255,
    }


@pytest.fixture
def tied_scores():
    return {"A": 100, "B": 100, "C": 50}


# =============================================================================
# ALTERNATE REGISTRIES
# =============================================================================

@pytest.fixture
def overlapping_registry():
    """Two categories that both match 'AB12'; 'alpha' is declared first."""
    return CategoryRegistry(
        categories=(
            Category(key="alpha", label="Alpha", visual_tag="tag-alpha", patterns=("AB",)),
            Category(key="beta", label="Beta", visual_tag="tag-beta", patterns=("12", "CD")),
        ),
        fallback_visual_tag="tag-none",
    )


@pytest.fixture
def small_dimension_registry():
    return DimensionRegistry({"AB12": "Alpha Beta", "CD34": "Charlie Delta"})
