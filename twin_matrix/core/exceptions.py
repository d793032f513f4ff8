"""
Custom Exceptions - Twin Matrix Scoring Core
twin_matrix/core/exceptions.py

Custom exception classes for registry loading, view selection and
smoothing configuration.
"""


class TwinMatrixException(Exception):
    """Base exception for the scoring core."""

    pass


class RegistryConfigError(TwinMatrixException):
    """Category or dimension-name table is malformed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid registry data in {source}: {reason}")


class UnknownCategoryError(TwinMatrixException):
    """Category selector is neither 'all', 'uncategorized' nor a registry key."""

    def __init__(self, category_key: str):
        self.category_key = category_key
        super().__init__(f"Category '{category_key}' is not defined in the registry")


class UnknownAttributeError(TwinMatrixException):
    """Explanation requested for an attribute code missing from the snapshot."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Attribute {code} is not present in the score snapshot")


class SmoothingParameterError(TwinMatrixException):
    """Smoothing parameter outside its valid range."""

    def __init__(self, name: str, value: float, valid_range: str = "(0, 1]"):
        self.name = name
        self.value = value
        self.valid_range = valid_range
        super().__init__(f"{name} must be in {valid_range}, got {value}")


class ScoreOutOfRangeError(TwinMatrixException):
    """Upstream score outside the single-byte scale."""

    def __init__(self, code: str, score: int, max_score: int = 255):
        self.code = code
        self.score = score
        self.max_score = max_score
        super().__init__(f"Score {score} for attribute {code} is outside [0, {max_score}]")
