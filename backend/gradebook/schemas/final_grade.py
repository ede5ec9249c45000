"""
Pydantic schemas for the final grade (Nilai Akhir) endpoint.
"""
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field


class KKMStatus(str, Enum):
    """Final grade compared with the minimum passing grade (KKM)."""

    TUNTAS = "tuntas"  # grade >= KKM
    MENDEKATI = "mendekati"  # within the warning margin below KKM
    BELUM_TUNTAS = "belum_tuntas"  # below the warning margin


class FinalGradeRow(BaseModel):
    """Grades of one student in the recap table."""

    student_id: Union[int, str]
    tp_scores: List[Any] = Field(
        default_factory=list, description="TP grades; blanks are ignored"
    )
    exam_score: Any = Field(None, description="UAS grade, if graded")


class FinalGradeRequest(BaseModel):
    rows: List[FinalGradeRow]
    kkm: Optional[float] = Field(
        None, ge=0.0, le=100.0, description="Override of the configured KKM"
    )


class FinalGradeResult(BaseModel):
    student_id: Union[int, str]
    final_grade: Optional[float] = None
    status: Optional[KKMStatus] = None


class FinalGradeResponse(BaseModel):
    results: List[FinalGradeResult]
    kkm: float
