"""
Pydantic schemas for request/response validation.
"""
from .item_analysis import (
    DifficultyLabelSchema,
    FlaggedItemResponse,
    ItemAnalysisRequest,
    ItemAnalysisResponse,
    ItemStatisticResponse,
    ReliabilityInterpretation,
    StudentSchema,
)
from .final_grade import (
    FinalGradeRequest,
    FinalGradeResponse,
    FinalGradeResult,
    FinalGradeRow,
    KKMStatus,
)

__all__ = [
    "DifficultyLabelSchema",
    "FlaggedItemResponse",
    "ItemAnalysisRequest",
    "ItemAnalysisResponse",
    "ItemStatisticResponse",
    "ReliabilityInterpretation",
    "StudentSchema",
    "FinalGradeRequest",
    "FinalGradeResponse",
    "FinalGradeResult",
    "FinalGradeRow",
    "KKMStatus",
]
