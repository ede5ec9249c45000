"""
TypedDict definitions for CTT item analysis results.

These describe the plain-dict shapes returned by the calculators so that the
HTTP layer and spreadsheet exporters can consume them without importing numpy.
"""

from typing import List, Optional, TypedDict


class ItemStatistic(TypedDict):
    """
    Per-item statistics produced by compute_item_statistics().

    Fields:
        question: Item key as supplied by the caller (e.g. "Q1").
        weight: Configured item weight (1.0 when unset).
        max_score: Effective maximum score used to normalise raw values.
        n: Number of students with a recorded response for the item.
        n_correct: Number of respondents who earned full credit.
        p_value: Mean fractional score (item difficulty), None if n == 0.
        mean: Same value as p_value, kept under its display name.
        point_biserial: Correlation with the student total, None with fewer
            than three paired observations.
        item_total_corr: Correlation with the rest-score (mean of the other
            items), None with fewer than three paired observations.
        difficulty: "Mudah", "Sedang", "Sukar" or "-".
    """

    question: str
    weight: float
    max_score: float
    n: int
    n_correct: int
    p_value: Optional[float]
    mean: Optional[float]
    point_biserial: Optional[float]
    item_total_corr: Optional[float]
    difficulty: str


class ReliabilityResult(TypedDict):
    """
    Result of compute_reliability().

    cronbach_alpha and sem are both None when there are fewer than two items
    or the total scores have no variance.
    """

    cronbach_alpha: Optional[float]
    sem: Optional[float]
    interpretation: Optional[str]
    num_items: int
    num_students: int


class FlaggedItem(TypedDict):
    """Item whose corrected item-total correlation is below the review threshold."""

    question: str
    correlation: float
    recommendation: str


class CTTAnalysisResult(TypedDict):
    """Combined result returned by run_ctt_analysis()."""

    items: List[ItemStatistic]
    cronbach_alpha: Optional[float]
    sem: Optional[float]
    interpretation: Optional[str]
    flagged_items: List[FlaggedItem]
    num_students: int
    num_items: int
