from enum import Enum, IntEnum


class ProcessingState(str, Enum):
    IDLE = "idle"              # Upstream scorer waiting for input
    PROCESSING = "processing"  # New snapshot being computed


class ViewMode(str, Enum):
    GRID = "grid"  # Source order
    LIST = "list"  # Ranked by descending score


class ScoreBucket(IntEnum):
    """Five ordered display tiers; higher value = higher score."""
    MINIMAL = 0    # < 50
    LOW = 1        # >= 50
    MODERATE = 2   # >= 100
    HIGH = 3       # >= 150
    EXCELLENT = 4  # >= 200


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class ExplanationStage(str, Enum):
    TAG_EXTRACTION = "tag_extraction"
    SEMANTIC_MATCHING = "semantic_matching"
    RAW_SCORING = "raw_scoring"
    SCORE_SMOOTHING = "score_smoothing"
