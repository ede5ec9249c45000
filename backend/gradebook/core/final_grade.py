"""
Final grade (Nilai Akhir) calculation for the grade recap.

A student's final grade combines the average of the learning-objective
assessments (TP1, TP2, ...) with the end-of-term exam (UAS):

    final = TP average × 0.7 + UAS × 0.3

When only one side has been graded the available side is used on its own.
The result is then compared against the minimum passing grade (KKM).
"""
from typing import Any, Optional, Sequence

from gradebook.core.config import settings
from gradebook.core.ctt.response_matrix import parse_raw_value

KKM_PASSED = "tuntas"
KKM_NEAR = "mendekati"
KKM_NOT_PASSED = "belum_tuntas"


def calculate_final_grade(
    tp_scores: Sequence[Any],
    exam_score: Any = None,
    tp_weight: Optional[float] = None,
    exam_weight: Optional[float] = None,
) -> Optional[float]:
    """
    Calculate a student's final grade.

    Args:
        tp_scores: Grades of the TP assessments; blank or non-numeric
            entries are ignored.
        exam_score: UAS grade, or None when not yet graded.
        tp_weight: Weight of the TP average (defaults to settings).
        exam_weight: Weight of the UAS grade (defaults to settings).

    Returns:
        Final grade, or None when neither TP nor UAS grades exist.
    """
    if tp_weight is None:
        tp_weight = settings.FINAL_GRADE_TP_WEIGHT
    if exam_weight is None:
        exam_weight = settings.FINAL_GRADE_EXAM_WEIGHT

    tp_values = [v for v in (parse_raw_value(s) for s in tp_scores) if v is not None]
    tp_average = sum(tp_values) / len(tp_values) if tp_values else None
    exam = parse_raw_value(exam_score)

    if tp_average is not None and exam is not None:
        return tp_average * tp_weight + exam * exam_weight
    if tp_average is not None:
        return tp_average
    return exam


def get_kkm_status(
    grade: Optional[float],
    kkm: Optional[float] = None,
    warning_margin: Optional[float] = None,
) -> Optional[str]:
    """
    Compare a final grade against the KKM.

    Returns:
        "tuntas" when grade >= KKM, "mendekati" when within the warning
        margin below KKM, "belum_tuntas" otherwise, None without a grade.
    """
    if grade is None:
        return None
    if kkm is None:
        kkm = settings.FINAL_GRADE_KKM
    if warning_margin is None:
        warning_margin = settings.KKM_WARNING_MARGIN

    if grade >= kkm:
        return KKM_PASSED
    if grade >= max(0.0, kkm - warning_margin):
        return KKM_NEAR
    return KKM_NOT_PASSED
