import math
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round and clip a score to [low, high]."""
    score = round_half_up(value)
    if not (low <= score <= high):
        logger.warning(f"Score out of range: {score}, clipping to [{low}, {high}]")
        return max(low, min(high, score))
    return score


def normalize_role(role: Any) -> Optional[str]:
    """
    Normalize a role given as an enum member or a string.

    Returns None for empty values so lookups fall through to "unknown role".
    """
    if role is None:
        return None
    value = getattr(role, 'value', role)
    value = str(value).strip()
    return value or None
