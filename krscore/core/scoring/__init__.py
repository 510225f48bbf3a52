"""Key Result and Objective Scoring - Five-Dimensional Quality Evaluation.

Deterministic, pattern-based scoring of OKR key results and objectives.
Pure domain logic (zero I/O, no learned model).

Key Result dimensions:
1. Measurability (30%)
2. Specificity (25%)
3. Achievability (20%)
4. Relevance (15%)
5. Time-Bound (10%)

Objective dimensions:
1. Outcome orientation (30%)
2. Inspirational (20%)
3. Clarity (15%)
4. Strategic (15%)
5. Ambition (20%)
"""

from krscore.core.scoring.calculator import KRScorer, score_key_result
from krscore.core.scoring.grading import GRADE_THRESHOLDS, WEIGHTS, grade_for, weighted_overall
from krscore.core.scoring.objective import (
    OBJECTIVE_GRADE_THRESHOLDS,
    OBJECTIVE_WEIGHTS,
    ObjectiveScorer,
    score_objective,
    validate_against_rubric_examples,
)

__all__ = [
    "KRScorer",
    "score_key_result",
    "GRADE_THRESHOLDS",
    "WEIGHTS",
    "grade_for",
    "weighted_overall",
    "ObjectiveScorer",
    "score_objective",
    "validate_against_rubric_examples",
    "OBJECTIVE_GRADE_THRESHOLDS",
    "OBJECTIVE_WEIGHTS",
]
