"""
Item statistics for Classical Test Theory analysis.

Metrics calculated per item:
1. Respondent count (n) and full-credit count
2. Difficulty (p-value): mean fractional score of the respondents
3. Point-biserial correlation: item fraction vs. student total
4. Corrected item-total correlation: item fraction vs. the mean of the
   student's other items (rest-score), avoiding part-whole inflation

Absent responses are excluded item by item, so a missing answer on one
item never changes the statistics of another.
"""
import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ._constants import FULL_CREDIT_TOLERANCE, MIN_CORRELATION_PAIRS
from ._types import ItemStatistic
from .difficulty import classify_difficulty
from .response_matrix import FractionMatrix

logger = logging.getLogger(__name__)


def calculate_pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Calculate the Pearson correlation coefficient between two series.

    Uses the formula:
        r = Σ((xi - x̄)(yi - ȳ)) / √(Σ(xi - x̄)² × Σ(yi - ȳ)²)

    which equals the covariance over the product of population standard
    deviations.

    Args:
        x: First series
        y: Second series, paired with x

    Returns:
        Correlation coefficient (-1.0 to 1.0). Returns 0.0 when the series
        are empty or of different lengths, when either has zero variance,
        and when non-finite inputs leave r undefined.
    """
    if len(x) != len(y) or len(x) == 0:
        return 0.0

    n = len(x)
    mean_x = sum(x) / n
    mean_y = sum(y) / n

    covariance = sum((x[i] - mean_x) * (y[i] - mean_y) for i in range(n))
    var_x = sum((xi - mean_x) ** 2 for xi in x)
    var_y = sum((yi - mean_y) ** 2 for yi in y)

    denominator = math.sqrt(var_x) * math.sqrt(var_y)
    if denominator == 0:
        return 0.0

    r = covariance / denominator
    if not math.isfinite(r):
        return 0.0

    # Clamp to valid range (floating point errors may cause slight exceeding)
    return max(-1.0, min(1.0, r))


def compute_student_totals(matrix: FractionMatrix) -> List[Optional[float]]:
    """
    Compute each student's total used for the point-biserial correlation.

    The total is the weighted mean of the student's recorded fractions:
        Σ(fraction_k × weight_k) / Σ(weight_k)
    over the items the student answered. None for a student with no
    recorded response.
    """
    weights = matrix.weights
    totals: List[Optional[float]] = []

    for row in matrix.fractions:
        present = ~np.isnan(row)
        weight_sum = float(weights[present].sum())
        if not present.any() or weight_sum == 0:
            totals.append(None)
            continue
        totals.append(float((row[present] * weights[present]).sum()) / weight_sum)

    return totals


def calculate_rest_scores(
    matrix: FractionMatrix, item_index: int
) -> Tuple[List[float], List[float]]:
    """
    Pair an item's fractions with each respondent's rest-score.

    The rest-score is the unweighted mean of the student's recorded fractions
    on every other item. Students who answered no other item are skipped.

    Returns:
        (item_values, rest_scores) of equal length.
    """
    item_values: List[float] = []
    rest_scores: List[float] = []

    for row in matrix.fractions:
        fraction = row[item_index]
        if np.isnan(fraction):
            continue
        others = np.delete(row, item_index)
        others = others[~np.isnan(others)]
        if others.size == 0:
            continue
        item_values.append(float(fraction))
        rest_scores.append(float(others.mean()))

    return item_values, rest_scores


def compute_item_statistics(
    matrix: FractionMatrix,
    student_totals: Optional[Sequence[Optional[float]]] = None,
) -> List[ItemStatistic]:
    """
    Calculate CTT statistics for every item in the matrix.

    Args:
        matrix: Fraction matrix from build_response_matrix().
        student_totals: Optional per-student totals (roster order) to use for
            the point-biserial correlation instead of the weighted mean of
            fractions, e.g. the student's final grade. None, NaN and
            infinite totals are treated as missing.

    Returns:
        List of ItemStatistic dicts in item order. Statistics that lack data
        are None; nothing is raised for sparse input.
    """
    if student_totals is not None and len(student_totals) != matrix.n_students:
        logger.warning(
            f"Ignoring {len(student_totals)} supplied student totals for a roster "
            f"of {matrix.n_students}; using weighted fraction means instead"
        )
        student_totals = None
    totals = (
        list(student_totals)
        if student_totals is not None
        else compute_student_totals(matrix)
    )

    results: List[ItemStatistic] = []

    for idx, item in enumerate(matrix.items):
        column = matrix.fractions[:, idx]
        present = ~np.isnan(column)
        values = column[present]
        n = int(values.size)

        mean: Optional[float] = float(values.mean()) if n > 0 else None
        n_correct = int((values >= 1 - FULL_CREDIT_TOLERANCE).sum())

        # Point-biserial: pair fractions with totals where both exist
        pb_x: List[float] = []
        pb_y: List[float] = []
        for row_idx in np.flatnonzero(present):
            total = totals[row_idx]
            if total is not None and math.isfinite(total):
                pb_x.append(float(column[row_idx]))
                pb_y.append(float(total))

        point_biserial: Optional[float] = None
        if len(pb_x) >= MIN_CORRELATION_PAIRS:
            point_biserial = calculate_pearson_correlation(pb_x, pb_y)

        # Corrected item-total: pair fractions with the rest-score
        itc_x, itc_y = calculate_rest_scores(matrix, idx)
        item_total_corr: Optional[float] = None
        if len(itc_x) >= MIN_CORRELATION_PAIRS:
            item_total_corr = calculate_pearson_correlation(itc_x, itc_y)

        results.append(
            {
                "question": item.key,
                "weight": item.weight,
                "max_score": item.max_score,
                "n": n,
                "n_correct": n_correct,
                "p_value": mean,
                "mean": mean,
                "point_biserial": point_biserial,
                "item_total_corr": item_total_corr,
                "difficulty": classify_difficulty(mean),
            }
        )

    return results
