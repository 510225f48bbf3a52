"""Weighted aggregation and letter grading.

Weights are Decimals so that they sum to exactly 1 and the half-up rounding
of the overall score never depends on binary floating point error
(87.5 must round to 88, not 87).
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Final

# Dimension order is also the feedback order.
DIMENSIONS: Final[tuple[str, ...]] = (
    "measurability",
    "specificity",
    "achievability",
    "relevance",
    "time_bound",
)

WEIGHTS: Final[Mapping[str, Decimal]] = MappingProxyType(
    {
        "measurability": Decimal("0.30"),
        "specificity": Decimal("0.25"),
        "achievability": Decimal("0.20"),
        "relevance": Decimal("0.15"),
        "time_bound": Decimal("0.10"),
    }
)

# Evaluated top to bottom; the first threshold met wins.
GRADE_THRESHOLDS: Final[tuple[tuple[int, str], ...]] = (
    (97, "A+"),
    (93, "A"),
    (90, "A-"),
    (87, "B+"),
    (83, "B"),
    (80, "B-"),
    (77, "C+"),
    (73, "C"),
    (70, "C-"),
    (60, "D"),
    (0, "F"),
)

LOWEST_GRADE: Final = GRADE_THRESHOLDS[-1][1]


def round_half_up(value: Decimal) -> int:
    """Integer rounding with .5 away from zero."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def weighted_overall(scores: Mapping[str, int]) -> int:
    """round_half_up(sum(score * weight)) over the five dimensions."""
    total = sum((Decimal(int(scores[name])) * WEIGHTS[name] for name in DIMENSIONS), Decimal(0))
    return round_half_up(total)


def grade_for(score: int | float, table: tuple[tuple[float, str], ...] = GRADE_THRESHOLDS) -> str:
    """Walk an ordered (threshold, label) table and return the first label met.

    Scores below every threshold get the table's last label.
    """
    for threshold, label in table:
        if score >= threshold:
            return label
    return table[-1][1]
