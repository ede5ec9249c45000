"""
Response matrix builder for CTT item analysis.

Turns the editable grade grid (student -> item -> raw value) into a dense
students × items matrix of normalised fractions:

- Rows follow the roster order, columns follow the item key order
- Each cell holds raw / max_score for the item
- Absent responses are stored as NaN and never count as zero here

The matrix is built once per analysis run and is read-only afterwards, so a
UI that keeps the same object across runs cannot alias stale state into a
later calculation.
"""
import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from ._constants import FALLBACK_SCALE_MAX, SCALE_DEFAULT_MAX

logger = logging.getLogger(__name__)

StudentId = Union[str, int]
RawValue = Union[str, int, float, None]


@dataclass(frozen=True)
class Student:
    """A roster entry. Only the id is used for lookups; name is for display."""

    id: StudentId
    name: str = ""


@dataclass(frozen=True)
class ItemConfig:
    """
    Scoring configuration for a single item.

    Attributes:
        key: Item identifier (e.g. "Q1", "TP3").
        max_score: Maximum attainable raw score, used as the normalising
            denominator. A non-positive value marks the item as unscorable.
        weight: Weight of the item in the student total.
    """

    key: str
    max_score: float
    weight: float = 1.0

    @property
    def is_scorable(self) -> bool:
        return self.max_score > 0


def get_scale_default_max(scale: Optional[str]) -> float:
    """Default maximum score for a scale token ("binary", "5", "100", "custom")."""
    if scale is None:
        return FALLBACK_SCALE_MAX
    return SCALE_DEFAULT_MAX.get(str(scale), FALLBACK_SCALE_MAX)


def parse_raw_value(value: Any) -> Optional[float]:
    """
    Parse a raw grid value into a float.

    Returns None (absent) for None, blank strings, strings that are not
    numbers, and non-finite numbers. Booleans are read as 1/0.
    """
    if value is None:
        return None

    if isinstance(value, bool):
        return 1.0 if value else 0.0

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except (ValueError, OverflowError):
            return None
    elif isinstance(value, Real):
        # ints beyond float range overflow instead of becoming inf
        try:
            number = float(value)
        except (ValueError, OverflowError):
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def _config_number(mapping: Optional[Mapping[str, Any]], key: str) -> Optional[float]:
    """Read a numeric configuration value, treating junk as unset."""
    if not mapping or key not in mapping:
        return None
    return parse_raw_value(mapping[key])


def build_item_configs(
    item_keys: Sequence[str],
    weights: Optional[Mapping[str, Any]] = None,
    scale: Optional[str] = "binary",
    maxes: Optional[Mapping[str, Any]] = None,
) -> List[ItemConfig]:
    """
    Resolve the scoring configuration of every item.

    The grading spreadsheet stores an item's maximum score in its weight
    column, so the maximum is taken from ``maxes`` first, then ``weights``,
    then the scale default.

    Args:
        item_keys: Ordered item identifiers.
        weights: Mapping of item key to weight (and, by default, max score).
        scale: Scale token used for items without a configured maximum.
        maxes: Optional explicit mapping of item key to max score.

    Returns:
        One ItemConfig per key, in input order.
    """
    default_max = get_scale_default_max(scale)
    configs: List[ItemConfig] = []

    for key in item_keys:
        weight = _config_number(weights, key)
        max_score = _config_number(maxes, key)
        if max_score is None:
            max_score = weight if weight is not None else default_max

        configs.append(
            ItemConfig(
                key=key,
                max_score=max_score,
                weight=weight if weight is not None else 1.0,
            )
        )

    return configs


@dataclass(frozen=True)
class FractionMatrix:
    """
    Normalised response matrix for one analysis run.

    Attributes:
        fractions: Read-only 2D float array of shape (n_students, n_items).
            Each value is raw / max_score, or NaN when the response is absent.
        student_ids: Student ids in row order.
        items: Item configurations in column order.
    """

    fractions: "NDArray[np.float64]"
    student_ids: Tuple[StudentId, ...]
    items: Tuple[ItemConfig, ...]

    @property
    def n_students(self) -> int:
        """Number of students (rows) in the matrix."""
        return self.fractions.shape[0]

    @property
    def n_items(self) -> int:
        """Number of items (columns) in the matrix."""
        return self.fractions.shape[1]

    @property
    def item_keys(self) -> List[str]:
        return [item.key for item in self.items]

    @property
    def weights(self) -> "NDArray[np.float64]":
        return np.array([item.weight for item in self.items], dtype=np.float64)

    def column(self, key: str) -> "NDArray[np.float64]":
        """Fractions for one item, NaN where absent."""
        return self.fractions[:, self.item_keys.index(key)]

    def is_present(self) -> "NDArray[np.bool_]":
        """Boolean mask of recorded responses."""
        return ~np.isnan(self.fractions)


def _lookup_row(
    raw_answers: Mapping[Any, Mapping[str, RawValue]], student_id: StudentId
) -> Mapping[str, RawValue]:
    # JSON payloads always key objects by string, rosters may carry ints
    row = raw_answers.get(student_id)
    if row is None:
        row = raw_answers.get(str(student_id))
    return row or {}


def build_response_matrix(
    students: Sequence[Student],
    item_keys: Sequence[str],
    raw_answers: Mapping[Any, Mapping[str, RawValue]],
    weights: Optional[Mapping[str, Any]] = None,
    scale: Optional[str] = "binary",
    maxes: Optional[Mapping[str, Any]] = None,
) -> FractionMatrix:
    """
    Build the fraction matrix (students × items) for CTT analysis.

    Args:
        students: Roster in display order.
        item_keys: Item identifiers in display order.
        raw_answers: Mapping of student id to {item key: raw value}. Missing
            students and missing keys are absent responses.
        weights: Mapping of item key to weight / max score.
        scale: Scale token supplying the default max score.
        maxes: Optional explicit mapping of item key to max score.

    Returns:
        FractionMatrix with NaN marking absent responses. Items whose
        effective max score is not positive are entirely absent, and a
        quotient that overflows to infinity is absent too.
    """
    items = build_item_configs(item_keys, weights, scale, maxes)
    fractions = np.full((len(students), len(items)), np.nan, dtype=np.float64)

    for row_idx, student in enumerate(students):
        row = _lookup_row(raw_answers, student.id)
        for col_idx, item in enumerate(items):
            if not item.is_scorable:
                continue
            raw = parse_raw_value(row.get(item.key))
            if raw is None:
                continue
            fraction = raw / item.max_score
            # a subnormal max can push the quotient to inf
            if math.isfinite(fraction):
                fractions[row_idx, col_idx] = fraction

    fractions.setflags(write=False)

    matrix = FractionMatrix(
        fractions=fractions,
        student_ids=tuple(s.id for s in students),
        items=tuple(items),
    )

    if logger.isEnabledFor(logging.DEBUG):
        unscorable = [item.key for item in items if not item.is_scorable]
        logger.debug(
            f"Built fraction matrix: {matrix.n_students} students × "
            f"{matrix.n_items} items, {int(np.isnan(fractions).sum())} absent cells, "
            f"scale={scale}, unscorable items={unscorable}"
        )

    return matrix


def get_fraction_matrix_stats(matrix: FractionMatrix) -> Dict[str, Any]:
    """
    Get coverage statistics for a fraction matrix.

    Returns:
        Dictionary with:
        - n_students / n_items: Matrix shape
        - total_cells: n_students * n_items
        - present_cells / absent_cells: Recorded vs. missing responses
        - completeness: present_cells / total_cells (None for an empty matrix)
        - respondents_per_item: Mapping of item key to respondent count
    """
    present = matrix.is_present()
    total_cells = int(present.size)
    present_cells = int(present.sum())

    return {
        "n_students": matrix.n_students,
        "n_items": matrix.n_items,
        "total_cells": total_cells,
        "present_cells": present_cells,
        "absent_cells": total_cells - present_cells,
        "completeness": (present_cells / total_cells) if total_cells else None,
        "respondents_per_item": {
            key: int(present[:, idx].sum()) for idx, key in enumerate(matrix.item_keys)
        },
    }
