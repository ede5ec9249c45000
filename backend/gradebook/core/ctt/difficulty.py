"""
Item difficulty classification by p-value.
"""
from typing import Optional

from ._constants import (
    EASY_P_VALUE_THRESHOLD,
    HARD_P_VALUE_THRESHOLD,
    DifficultyLabel,
)


def classify_difficulty(p_value: Optional[float]) -> str:
    """
    Map an item p-value to its difficulty label.

    - None: "-"
    - p > 0.70: "Mudah" (easy)
    - p < 0.30: "Sukar" (hard)
    - otherwise: "Sedang" (medium), including exactly 0.30 and 0.70

    Args:
        p_value: Mean fractional score of the item, or None if unanswered.

    Returns:
        Difficulty label string.
    """
    if p_value is None:
        return DifficultyLabel.UNKNOWN.value
    if p_value > EASY_P_VALUE_THRESHOLD:
        return DifficultyLabel.EASY.value
    if p_value < HARD_P_VALUE_THRESHOLD:
        return DifficultyLabel.HARD.value
    return DifficultyLabel.MEDIUM.value
