r"""
Classical Test Theory (CTT) item analysis for teacher-entered grade grids.

This package analyses one assessment at a time:
- Response matrix: raw scores normalised to fractions of each item's maximum
- Item statistics: respondent count, p-value, point-biserial and corrected
  item-total correlation
- Reliability: Cronbach's alpha and the standard error of measurement (SEM)
- Difficulty labels: "Mudah" / "Sedang" / "Sukar"

Every run is a pure function of its inputs. Statistics without enough data
come back as None instead of raising, so an interactive grading session is
never interrupted.

Usage Example
-------------
    from gradebook.core.ctt import Student, run_ctt_analysis

    students = [Student(id="s1", name="Ani"), Student(id="s2", name="Budi")]
    answers = {"s1": {"Q1": "1", "Q2": "0"}, "s2": {"Q1": 1, "Q2": ""}}

    result = run_ctt_analysis(students, ["Q1", "Q2"], answers, scale="binary")

    for item in result["items"]:
        print(item["question"], item["p_value"], item["difficulty"])

    if result["cronbach_alpha"] is None:
        print("Alpha: insufficient data")
    else:
        print(f"Alpha: {result['cronbach_alpha']:.3f} ({result['interpretation']})")
"""

# Constants and labels
from ._constants import (
    ALPHA_THRESHOLDS,
    EASY_P_VALUE_THRESHOLD,
    HARD_P_VALUE_THRESHOLD,
    LOW_DISCRIMINATION_THRESHOLD,
    MIN_CORRELATION_PAIRS,
    SCALE_DEFAULT_MAX,
    DifficultyLabel,
    ScaleLiteral,
)
from ._types import (
    CTTAnalysisResult,
    FlaggedItem,
    ItemStatistic,
    ReliabilityResult,
)

# Response matrix
from .response_matrix import (
    FractionMatrix,
    ItemConfig,
    Student,
    build_item_configs,
    build_response_matrix,
    get_fraction_matrix_stats,
    get_scale_default_max,
    parse_raw_value,
)

# Item statistics
from .item_statistics import (
    calculate_pearson_correlation,
    calculate_rest_scores,
    compute_item_statistics,
    compute_student_totals,
)

# Reliability
from .reliability import compute_reliability, get_alpha_interpretation

# Difficulty
from .difficulty import classify_difficulty

# Full run
from .analysis import get_low_discrimination_items, run_ctt_analysis

__all__ = [
    # Constants
    "ALPHA_THRESHOLDS",
    "EASY_P_VALUE_THRESHOLD",
    "HARD_P_VALUE_THRESHOLD",
    "LOW_DISCRIMINATION_THRESHOLD",
    "MIN_CORRELATION_PAIRS",
    "SCALE_DEFAULT_MAX",
    "DifficultyLabel",
    "ScaleLiteral",
    # Types
    "CTTAnalysisResult",
    "FlaggedItem",
    "ItemStatistic",
    "ReliabilityResult",
    # Response matrix
    "FractionMatrix",
    "ItemConfig",
    "Student",
    "build_item_configs",
    "build_response_matrix",
    "get_fraction_matrix_stats",
    "get_scale_default_max",
    "parse_raw_value",
    # Item statistics
    "calculate_pearson_correlation",
    "calculate_rest_scores",
    "compute_item_statistics",
    "compute_student_totals",
    # Reliability
    "compute_reliability",
    "get_alpha_interpretation",
    # Difficulty
    "classify_difficulty",
    # Full run
    "get_low_discrimination_items",
    "run_ctt_analysis",
]
