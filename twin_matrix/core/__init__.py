"""
Core Package - Twin Matrix Scoring Core
twin_matrix/core/__init__.py

Core infrastructure: exceptions.
"""

from twin_matrix.core.exceptions import (
    RegistryConfigError,
    ScoreOutOfRangeError,
    SmoothingParameterError,
    TwinMatrixException,
    UnknownAttributeError,
    UnknownCategoryError,
)

__all__ = [
    "RegistryConfigError",
    "ScoreOutOfRangeError",
    "SmoothingParameterError",
    "TwinMatrixException",
    "UnknownAttributeError",
    "UnknownCategoryError",
]
