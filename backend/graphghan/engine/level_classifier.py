"""
Daily count to intensity level mapping.

    0        -> 0
    1 - 2    -> 1
    3 - 5    -> 2
    6 - 8    -> 3
    9+       -> 4
"""

from graphghan.config import LEVEL_THRESHOLDS, LEVEL_COUNT


def classify(count: int) -> int:
    """Return the intensity level (0-4) for a daily count."""
    for upper, level in LEVEL_THRESHOLDS:
        if count <= upper:
            return level
    return LEVEL_COUNT - 1
