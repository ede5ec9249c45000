"""
Shared constants for Classical Test Theory (CTT) item analysis.

This module contains scale defaults, classification thresholds and minimum
data requirements used across the CTT submodules.
"""

from enum import Enum
from typing import Dict, Literal


# =============================================================================
# RESPONSE SCALES
# =============================================================================
# Scale token selected in the grading spreadsheet. The scale only decides the
# default maximum score of an item whose own maximum is not configured.

ScaleLiteral = Literal["binary", "5", "100", "custom"]

SCALE_DEFAULT_MAX: Dict[str, float] = {
    "binary": 1.0,  # right / wrong
    "5": 5.0,  # five-point rubric
    "100": 100.0,  # percentage grade
    "custom": 4.0,  # teacher edits per question; 4 is the starting value
}

# Maximum used for unrecognised scale tokens
FALLBACK_SCALE_MAX = 1.0


# =============================================================================
# DIFFICULTY CLASSIFICATION (p-value bands)
# =============================================================================
# Comparisons are strict: p = 0.70 and p = 0.30 are both "Sedang".


class DifficultyLabel(str, Enum):
    """Indonesian difficulty labels shown in the grade report."""

    EASY = "Mudah"  # p > 0.70
    MEDIUM = "Sedang"  # 0.30 <= p <= 0.70
    HARD = "Sukar"  # p < 0.30
    UNKNOWN = "-"  # no respondents


EASY_P_VALUE_THRESHOLD = 0.70
HARD_P_VALUE_THRESHOLD = 0.30


# =============================================================================
# CORRELATION REQUIREMENTS
# =============================================================================

# Point-biserial and corrected item-total correlations are reported only when
# at least this many paired observations exist.
MIN_CORRELATION_PAIRS = 3

# A respondent whose fraction reaches this value counts as fully correct.
FULL_CREDIT_TOLERANCE = 1e-9


# =============================================================================
# RELIABILITY INTERPRETATION (Cronbach's alpha)
# =============================================================================

ALPHA_THRESHOLDS = {
    "excellent": 0.90,  # α ≥ 0.90
    "good": 0.80,  # α ≥ 0.80
    "acceptable": 0.70,  # α ≥ 0.70
    "questionable": 0.60,  # α ≥ 0.60
    "poor": 0.50,  # α ≥ 0.50
    # α < 0.50: unacceptable
}


# =============================================================================
# ITEM QUALITY
# =============================================================================

# Corrected item-total correlations below this value are flagged for review.
# 0.20 is the usual lower bound for an item that discriminates adequately.
LOW_DISCRIMINATION_THRESHOLD = 0.20
