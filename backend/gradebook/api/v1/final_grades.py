"""
Final grade (Nilai Akhir) endpoint for the grade recap table.
"""
from fastapi import APIRouter

from gradebook.core.config import settings
from gradebook.core.final_grade import calculate_final_grade, get_kkm_status
from gradebook.schemas.final_grade import (
    FinalGradeRequest,
    FinalGradeResponse,
    FinalGradeResult,
)

router = APIRouter()


@router.post("/final-grades", response_model=FinalGradeResponse)
async def compute_final_grades(request: FinalGradeRequest) -> FinalGradeResponse:
    """
    Compute final grades (70% TP average + 30% UAS) and KKM status per student.

    Students with neither TP nor UAS grades get a null grade and status.
    """
    kkm = request.kkm if request.kkm is not None else settings.FINAL_GRADE_KKM

    results = []
    for row in request.rows:
        grade = calculate_final_grade(row.tp_scores, row.exam_score)
        results.append(
            FinalGradeResult(
                student_id=row.student_id,
                final_grade=grade,
                status=get_kkm_status(grade, kkm=kkm),
            )
        )

    return FinalGradeResponse(results=results, kkm=kkm)
