"""
Item analysis endpoint.

Runs a Classical Test Theory analysis over a grade grid posted by the
grading front end and returns per-item statistics plus Cronbach's alpha and
SEM. Nothing is persisted; each request is independent.
"""
import logging

from fastapi import APIRouter

from gradebook.core.config import settings
from gradebook.core.ctt import Student, run_ctt_analysis
from gradebook.core.error_responses import (
    ErrorMessages,
    raise_bad_request,
    raise_payload_too_large,
)
from gradebook.schemas.item_analysis import ItemAnalysisRequest, ItemAnalysisResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/item-analysis",
    response_model=ItemAnalysisResponse,
    responses={
        400: {"description": "Duplicate item keys or student ids"},
        413: {"description": "Grid exceeds MAX_ANALYSIS_CELLS"},
    },
)
async def analyze_items(request: ItemAnalysisRequest) -> ItemAnalysisResponse:
    """
    Run CTT item analysis over a grade grid.

    Returns for each item:
    - **n**: number of students with a recorded response
    - **p_value** / **mean**: mean fraction of the item's max score
    - **point_biserial**: correlation with the student total
    - **item_total_corr**: correlation with the mean of the other items
    - **difficulty**: Mudah (p > 0.70), Sedang, Sukar (p < 0.30), or "-"

    and for the whole assessment **cronbachAlpha** and **sem**.

    Statistics without enough data are null; blank or non-numeric grid
    values are treated as absent responses.
    """
    cells = len(request.students) * len(request.item_keys)
    if cells > settings.MAX_ANALYSIS_CELLS:
        raise_payload_too_large(
            ErrorMessages.analysis_too_large(
                cells=cells, limit=settings.MAX_ANALYSIS_CELLS
            )
        )

    if len(set(request.item_keys)) != len(request.item_keys):
        raise_bad_request(ErrorMessages.DUPLICATE_ITEM_KEYS)

    student_ids = [str(s.id) for s in request.students]
    if len(set(student_ids)) != len(student_ids):
        raise_bad_request(ErrorMessages.DUPLICATE_STUDENT_IDS)

    result = run_ctt_analysis(
        students=[Student(id=s.id, name=s.name) for s in request.students],
        item_keys=request.item_keys,
        raw_answers=request.answers,
        weights=request.weights,
        scale=request.scale,
        maxes=request.maxes,
        student_totals=request.student_totals,
    )

    logger.info(
        f"Item analysis completed: {result['num_students']} students, "
        f"{result['num_items']} items, alpha={result['cronbach_alpha']}"
    )

    return ItemAnalysisResponse.model_validate(result)
