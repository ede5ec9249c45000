"""
Pydantic schemas for the item analysis endpoint.

The request mirrors the grading spreadsheet: a roster, the ordered item
keys, the raw grid keyed by student id, and the per-item weight / maximum
configuration. Grid values are left loosely typed on purpose: blank strings,
numbers and numeric strings all arrive from the editable grid, and anything
that does not parse is an absent response rather than a validation error.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from gradebook.core.ctt import ScaleLiteral


class DifficultyLabelSchema(str, Enum):
    """Difficulty label of an item, by p-value band."""

    MUDAH = "Mudah"  # p > 0.70
    SEDANG = "Sedang"  # 0.30 <= p <= 0.70
    SUKAR = "Sukar"  # p < 0.30
    UNKNOWN = "-"  # no respondents


class ReliabilityInterpretation(str, Enum):
    """Interpretation of a Cronbach's alpha value."""

    EXCELLENT = "excellent"  # >= 0.90
    GOOD = "good"  # >= 0.80
    ACCEPTABLE = "acceptable"  # >= 0.70
    QUESTIONABLE = "questionable"  # >= 0.60
    POOR = "poor"  # >= 0.50
    UNACCEPTABLE = "unacceptable"  # < 0.50


# =============================================================================
# Request
# =============================================================================


class StudentSchema(BaseModel):
    """Roster entry."""

    id: Union[int, str] = Field(..., description="Student identifier")
    name: str = Field(default="", description="Display name")


class ItemAnalysisRequest(BaseModel):
    """Input for one CTT item analysis run."""

    students: List[StudentSchema] = Field(
        default_factory=list, description="Roster in display order"
    )
    item_keys: List[str] = Field(
        default_factory=list, description="Item identifiers in display order"
    )
    answers: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Raw grid: student id -> {item key -> value}. Blank or "
        "non-numeric values are treated as absent.",
    )
    weights: Dict[str, Any] = Field(
        default_factory=dict,
        description="Item key -> weight. Also used as the max score when no "
        "explicit max is given.",
    )
    maxes: Optional[Dict[str, Any]] = Field(
        None, description="Optional item key -> max score"
    )
    scale: ScaleLiteral = Field(
        "binary",
        description="Response scale; picks the default max score (binary=1, "
        "5=5, 100=100, custom=4)",
    )
    student_totals: Optional[List[Optional[float]]] = Field(
        None,
        description="Optional per-student totals (roster order) to correlate "
        "against for the point-biserial instead of the weighted mean fraction",
    )


# =============================================================================
# Response
# =============================================================================


class ItemStatisticResponse(BaseModel):
    """Statistics for a single item."""

    question: str
    weight: float
    max_score: float
    n: int = Field(..., ge=0, description="Number of respondents")
    n_correct: int = Field(..., ge=0, description="Respondents with full credit")
    p_value: Optional[float] = Field(
        None, description="Mean fractional score. None if no respondents."
    )
    mean: Optional[float] = Field(None, description="Same value as p_value")
    point_biserial: Optional[float] = Field(
        None,
        ge=-1.0,
        le=1.0,
        description="Correlation with the student total. None with fewer than "
        "three paired observations.",
    )
    item_total_corr: Optional[float] = Field(
        None,
        ge=-1.0,
        le=1.0,
        description="Corrected item-total correlation (item vs. rest-score)",
    )
    difficulty: DifficultyLabelSchema


class FlaggedItemResponse(BaseModel):
    """Item flagged for low discrimination."""

    question: str
    correlation: float
    recommendation: str


class ItemAnalysisResponse(BaseModel):
    """Result of one CTT item analysis run."""

    model_config = ConfigDict(populate_by_name=True)

    items: List[ItemStatisticResponse]
    cronbach_alpha: Optional[float] = Field(
        None,
        alias="cronbachAlpha",
        description="Cronbach's alpha. None with fewer than two items or zero "
        "total-score variance. Not clamped; may be negative.",
    )
    sem: Optional[float] = Field(
        None, description="Standard error of measurement. None when alpha is None."
    )
    interpretation: Optional[ReliabilityInterpretation] = None
    flagged_items: List[FlaggedItemResponse] = Field(default_factory=list)
    num_students: int = Field(..., ge=0)
    num_items: int = Field(..., ge=0)
