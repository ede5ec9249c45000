r"""
Cronbach's alpha and standard error of measurement for one assessment.

Formula:
    α = (k / (k-1)) × (1 - Σσ²ᵢ / σ²ₜ)
    SEM = σₜ × √(1 - α)

Where:
    k = number of items
    σ²ᵢ = population variance of item i
    σ²ₜ = population variance of the students' total scores

Unlike the item statistics, which skip absent responses, alpha needs a
complete matrix: absent responses are scored as 0 for this calculation only.
Alpha is reported as computed and may be negative for incoherent item sets.
"""
import logging
import math
from typing import Optional

import numpy as np

from ._constants import ALPHA_THRESHOLDS
from ._types import ReliabilityResult
from .response_matrix import FractionMatrix

logger = logging.getLogger(__name__)


def get_alpha_interpretation(alpha: Optional[float]) -> Optional[str]:
    """
    Get interpretation string for a Cronbach's alpha value.

    Returns:
        "excellent", "good", "acceptable", "questionable", "poor",
        "unacceptable", or None when alpha is None
    """
    if alpha is None:
        return None
    if alpha >= ALPHA_THRESHOLDS["excellent"]:
        return "excellent"
    elif alpha >= ALPHA_THRESHOLDS["good"]:
        return "good"
    elif alpha >= ALPHA_THRESHOLDS["acceptable"]:
        return "acceptable"
    elif alpha >= ALPHA_THRESHOLDS["questionable"]:
        return "questionable"
    elif alpha >= ALPHA_THRESHOLDS["poor"]:
        return "poor"
    else:
        return "unacceptable"


def compute_reliability(matrix: FractionMatrix) -> ReliabilityResult:
    """
    Calculate Cronbach's alpha and SEM from a fraction matrix.

    Args:
        matrix: Fraction matrix from build_response_matrix().

    Returns:
        ReliabilityResult. cronbach_alpha, sem and interpretation are None
        when there are fewer than two items, no students, or the total
        scores have zero variance.
    """
    k = matrix.n_items
    n = matrix.n_students

    result: ReliabilityResult = {
        "cronbach_alpha": None,
        "sem": None,
        "interpretation": None,
        "num_items": k,
        "num_students": n,
    }

    if k <= 1 or n == 0:
        logger.debug(f"Cronbach's alpha skipped: {k} items, {n} students")
        return result

    scores = np.nan_to_num(matrix.fractions, nan=0.0)

    item_variances = scores.var(axis=0)
    total_scores = scores.sum(axis=1)
    total_variance = float(total_scores.var())

    if total_variance == 0:
        logger.debug("Cronbach's alpha skipped: zero variance in total scores")
        return result

    sum_item_variances = float(item_variances.sum())
    alpha = (k / (k - 1)) * (1 - sum_item_variances / total_variance)

    # alpha cannot exceed 1, but rounding can leave 1 - alpha a hair below 0
    sem = math.sqrt(total_variance) * math.sqrt(max(0.0, 1 - alpha))

    result["cronbach_alpha"] = alpha
    result["sem"] = sem
    result["interpretation"] = get_alpha_interpretation(alpha)

    logger.info(
        f"Cronbach's alpha calculated: α = {alpha:.4f} ({result['interpretation']}), "
        f"SEM = {sem:.4f} from {n} students and {k} items"
    )

    return result
