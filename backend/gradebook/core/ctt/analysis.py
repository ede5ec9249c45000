"""
Entry point for a complete CTT item analysis run.

Builds the fraction matrix once, then runs the item statistics and the
reliability calculation over it and merges the results.
"""
import logging
from typing import Any, List, Mapping, Optional, Sequence

from ._constants import LOW_DISCRIMINATION_THRESHOLD
from ._types import CTTAnalysisResult, FlaggedItem, ItemStatistic
from .item_statistics import compute_item_statistics
from .reliability import compute_reliability
from .response_matrix import RawValue, Student, build_response_matrix

logger = logging.getLogger(__name__)


def get_low_discrimination_items(
    items: Sequence[ItemStatistic],
    threshold: float = LOW_DISCRIMINATION_THRESHOLD,
) -> List[FlaggedItem]:
    """
    Identify items with negative or low corrected item-total correlations.

    Items without a correlation (too few respondents) are not flagged.

    Args:
        items: Item statistics from compute_item_statistics().
        threshold: Correlation below which items are flagged.

    Returns:
        Flagged items sorted by correlation, most negative first.
    """
    flagged: List[FlaggedItem] = []

    for item in items:
        corr = item["item_total_corr"]
        if corr is None or corr >= threshold:
            continue

        if corr < 0:
            recommendation = (
                "Negative correlation: students who score well overall tend to "
                "miss this item. Check the answer key and the wording."
            )
        else:
            recommendation = (
                f"Low correlation ({corr:.3f}): the item barely separates strong "
                "and weak students. Consider revising it."
            )

        flagged.append(
            {
                "question": item["question"],
                "correlation": corr,
                "recommendation": recommendation,
            }
        )

    flagged.sort(key=lambda x: x["correlation"])
    return flagged


def run_ctt_analysis(
    students: Sequence[Student],
    item_keys: Sequence[str],
    raw_answers: Mapping[Any, Mapping[str, RawValue]],
    weights: Optional[Mapping[str, Any]] = None,
    scale: Optional[str] = "binary",
    maxes: Optional[Mapping[str, Any]] = None,
    student_totals: Optional[Sequence[Optional[float]]] = None,
) -> CTTAnalysisResult:
    """
    Run the full item analysis for one assessment.

    Args:
        students: Roster in display order.
        item_keys: Item identifiers in display order.
        raw_answers: Mapping of student id to {item key: raw value}.
        weights: Mapping of item key to weight / max score.
        scale: "binary", "5", "100" or "custom"; picks default max scores.
        maxes: Optional explicit mapping of item key to max score.
        student_totals: Optional external totals for the point-biserial.

    Returns:
        CTTAnalysisResult with per-item statistics, Cronbach's alpha, SEM
        and the items flagged for low discrimination. Empty input yields an
        empty item list and None reliability figures.
    """
    matrix = build_response_matrix(
        students, item_keys, raw_answers, weights=weights, scale=scale, maxes=maxes
    )

    items = compute_item_statistics(matrix, student_totals=student_totals)
    reliability = compute_reliability(matrix)
    flagged = get_low_discrimination_items(items)

    if flagged:
        logger.info(
            f"{len(flagged)} of {matrix.n_items} items flagged for low discrimination: "
            f"{[f['question'] for f in flagged]}"
        )

    return {
        "items": items,
        "cronbach_alpha": reliability["cronbach_alpha"],
        "sem": reliability["sem"],
        "interpretation": reliability["interpretation"],
        "flagged_items": flagged,
        "num_students": matrix.n_students,
        "num_items": matrix.n_items,
    }
