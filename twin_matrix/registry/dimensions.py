"""
Dimension Registry
twin_matrix/registry/dimensions.py

Human-readable names for attribute codes. Lookup only; codes without an
entry get the synthesized label "Dimension {code}".
"""

import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

import structlog

from twin_matrix.config import get_settings
from twin_matrix.core.exceptions import RegistryConfigError

logger = structlog.get_logger(__name__)

DEFAULT_DIMENSION_NAMES_PATH = Path(__file__).parent / "data" / "dimension_names.json"


def fallback_name(code: str) -> str:
    return f"Dimension {code}"


class DimensionRegistry:
    """Read-only code → display name table."""

    def __init__(self, names: Mapping[str, str]):
        self._names = MappingProxyType(dict(names))

    def lookup(self, code: str) -> Optional[str]:
        """Registered name, or None when the code is unknown."""
        return self._names.get(code)

    def display_name(self, code: str) -> str:
        """Registered name, falling back to 'Dimension {code}'."""
        return self._names.get(code) or fallback_name(code)

    def __contains__(self, code: str) -> bool:
        return code in self._names

    def __len__(self) -> int:
        return len(self._names)


def load_dimension_registry(path: Union[str, Path]) -> DimensionRegistry:
    """
    Load a flat JSON object of {code: name}.

    Raises:
        RegistryConfigError: unreadable file, invalid JSON, or non-string entries.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RegistryConfigError(str(path), str(e)) from e

    if not isinstance(raw, dict):
        raise RegistryConfigError(str(path), "expected a JSON object of code -> name")
    bad = [k for k, v in raw.items() if not isinstance(v, str) or not v.strip()]
    if bad:
        raise RegistryConfigError(str(path), f"empty or non-string names for {bad}")

    logger.info("dimension_registry_loaded", path=str(path), count=len(raw))
    return DimensionRegistry(raw)


@lru_cache
def get_dimension_registry() -> DimensionRegistry:
    """Process-wide dimension-name table, loaded once."""
    override = get_settings().DIMENSION_NAMES_PATH
    return load_dimension_registry(override or DEFAULT_DIMENSION_NAMES_PATH)


def get_dimension_name(code: str, registry: Optional[DimensionRegistry] = None) -> str:
    """Display name for an attribute code ("Dimension {code}" when absent)."""
    if registry is None:
        registry = get_dimension_registry()
    return registry.display_name(code)
