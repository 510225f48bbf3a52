"""Agent quality report: weighted roll-up of evaluation-suite results.

Each suite writes a JSON list of result records to ``results_dir``. Pass/fail
suites are scored by pass rate; the conversation-endurance suite is
metric-based and scored from per-run retention, quality and degradation.
Suites whose results file is missing are skipped and the remaining weights
are renormalised.
"""

import json
import logging
from pathlib import Path
from typing import Any, Final

import numpy as np

from krscore.contracts.report import QualityReport, SuiteScore, TestSuite
from krscore.core.errors import ReportError
from krscore.core.observability import trace_performance
from krscore.core.scoring.grading import grade_for

logger = logging.getLogger(__name__)

SCORING_ACCURACY: Final = "Scoring Accuracy"
CONVERSATION_ENDURANCE: Final = "Conversation Endurance"

TEST_SUITES: Final[tuple[TestSuite, ...]] = (
    TestSuite(
        name="Edge Case Handling",
        results_file="test-edge-case-results.json",
        weight=0.15,
        description="Handling of edge cases, special inputs, and error conditions",
    ),
    TestSuite(
        name="Persona Coaching",
        results_file="test-persona-results.json",
        weight=0.25,
        description="Ability to coach different personas and correct anti-patterns",
    ),
    TestSuite(
        name=SCORING_ACCURACY,
        results_file="test-scoring-accuracy-results.json",
        weight=0.10,
        description="Accuracy of internal quality scoring mechanisms",
    ),
    TestSuite(
        name="Backward Navigation",
        results_file="test-backward-navigation-results.json",
        weight=0.20,
        description="Handling of user mind-changing and conversation pivots",
    ),
    TestSuite(
        name="Multi-KR Validation",
        results_file="test-multi-kr-validation-results.json",
        weight=0.20,
        description="Evaluation of multiple Key Results as a coherent set",
    ),
    TestSuite(
        name=CONVERSATION_ENDURANCE,
        results_file="test-conversation-endurance-results.json",
        weight=0.10,
        description="Quality maintenance over long conversations (15-20 turns)",
        metric_based=True,
    ),
)

# Evaluated top to bottom; the first threshold met wins.
REPORT_GRADE_THRESHOLDS: Final[tuple[tuple[float, str], ...]] = (
    (90, "A+ (Excellent)"),
    (85, "A (Very Good)"),
    (80, "B+ (Good)"),
    (75, "B (Above Average)"),
    (70, "C+ (Average)"),
    (65, "C (Below Average)"),
    (0, "D (Needs Improvement)"),
)

STRENGTH_THRESHOLD: Final = 90.0
IMPROVEMENT_THRESHOLD: Final = 70.0
ENDURANCE_RECOMMENDATION_THRESHOLD: Final = 75.0
DEFAULT_PASS_THRESHOLD: Final = 70.0

# Endurance targets: 70% context retention, quality 80, 15% degradation
RETENTION_TARGET: Final = 70.0
QUALITY_TARGET: Final = 80.0
DEGRADATION_LIMIT: Final = 15.0


def load_results(path: Path) -> list[dict[str, Any]] | None:
    """Read one suite's result records.

    Returns None when the file does not exist. Raises ReportError when it
    exists but is not a JSON list of objects.
    """
    if not path.exists():
        logger.warning("Results file not found: %s", path.name)
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ReportError(f"invalid JSON ({e.msg} at line {e.lineno})", path=str(path)) from e
    except OSError as e:
        raise ReportError(f"cannot read results ({e})", path=str(path)) from e

    if not isinstance(data, list):
        raise ReportError(f"expected a list of results, got {type(data).__name__}", path=str(path))

    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ReportError(f"result #{index} is not an object", path=str(path))

    return data


def pass_rate(results: list[dict[str, Any]]) -> tuple[int, int, float]:
    """(passed, total, percentage); only a literal ``true`` counts as passed."""
    total = len(results)
    passed = sum(1 for record in results if record.get("passed") is True)
    percentage = passed / total * 100 if total else 0.0
    return passed, total, percentage


def _metric_column(results: list[dict[str, Any]], key: str) -> np.ndarray:
    values = []
    for index, record in enumerate(results):
        details = record.get("details")
        raw = (details.get(key) if isinstance(details, dict) else None) or 0
        try:
            values.append(float(raw))
        except (TypeError, ValueError) as e:
            raise ReportError(f"result #{index}: {key} is not a number ({raw!r})") from e
    return np.asarray(values, dtype=float)


def endurance_score(results: list[dict[str, Any]]) -> float:
    """Mean endurance score over runs, each out of 100.

    Per run: up to 40 points for context retention, up to 40 for average
    quality, and 20 minus a penalty proportional to quality degradation.
    """
    if not results:
        return 0.0

    retention = _metric_column(results, "contextRetention")
    quality = _metric_column(results, "averageQuality")
    degradation = np.abs(_metric_column(results, "qualityDegradation"))

    per_run = (
        np.minimum(retention / RETENTION_TARGET * 40, 40)
        + np.minimum(quality / QUALITY_TARGET * 40, 40)
        + np.maximum(20 - degradation / DEGRADATION_LIMIT * 20, 0)
    )
    return float(np.clip(np.mean(per_run).item(), 0.0, 100.0))


def analyze_suite(suite: TestSuite, results_dir: Path) -> SuiteScore | None:
    """Score one suite, or None when its results file is absent."""
    path = results_dir / suite.results_file
    results = load_results(path)
    if results is None:
        return None

    if suite.metric_based:
        try:
            percentage = endurance_score(results)
        except ReportError as e:
            raise ReportError(str(e), path=str(path)) from e
        return SuiteScore(
            dimension=suite.name,
            score=percentage,
            max_score=100.0,
            percentage=percentage,
            weight=suite.weight,
            details="Maintains context and quality over extended conversations",
            metric_based=True,
        )

    passed_count, total, percentage = pass_rate(results)
    return SuiteScore(
        dimension=suite.name,
        score=passed_count,
        max_score=total,
        percentage=percentage,
        weight=suite.weight,
        details=suite.description,
    )


def _recommendations(scores: list[SuiteScore], strengths: list[str]) -> list[str]:
    by_name = {score.dimension: score for score in scores}
    recommendations = []

    scoring = by_name.get(SCORING_ACCURACY)
    if scoring is not None and scoring.percentage < IMPROVEMENT_THRESHOLD:
        recommendations.append(
            "Improve score inference algorithm - consider training on more examples "
            "or accepting qualitative validation"
        )

    endurance = by_name.get(CONVERSATION_ENDURANCE)
    if endurance is not None and endurance.percentage < ENDURANCE_RECOMMENDATION_THRESHOLD:
        recommendations.append(
            "Enhance context retention for very long conversations (15-20 turns)"
        )
        recommendations.append(
            "Consider implementing conversation summarization to maintain quality"
        )

    if len(strengths) >= 4:
        recommendations.append(
            "Continue maintaining excellence in core competencies "
            "(edge cases, navigation, coaching)"
        )

    return recommendations


@trace_performance
def build_report(
    results_dir: str | Path, suites: tuple[TestSuite, ...] = TEST_SUITES
) -> QualityReport:
    """Aggregate every suite found in ``results_dir`` into a QualityReport.

    The overall percentage is the weight-normalised mean of the loaded
    suites' percentages. With nothing loaded it is 0 and the grade is the
    lowest tier.
    """
    results_dir = Path(results_dir)
    scores: list[SuiteScore] = []
    missing: list[str] = []

    for suite in suites:
        score = analyze_suite(suite, results_dir)
        if score is None:
            missing.append(suite.name)
            continue
        scores.append(score)

    total_weight = sum(score.weight for score in scores)
    weighted = sum(score.percentage / 100 * score.weight for score in scores)
    percentage = weighted / total_weight * 100 if total_weight else 0.0

    strengths = [
        f"{score.dimension}: {score.percentage:.1f}% - Excellent performance"
        for score in scores
        if score.percentage >= STRENGTH_THRESHOLD
    ]
    areas = [
        f"{score.dimension}: {score.percentage:.1f}% - Needs improvement"
        for score in scores
        if score.percentage < IMPROVEMENT_THRESHOLD
    ]

    report = QualityReport(
        total_score=percentage,
        percentage=percentage,
        grade=grade_for(percentage, REPORT_GRADE_THRESHOLDS),
        dimension_scores=scores,
        strengths=strengths,
        areas_for_improvement=areas,
        recommendations=_recommendations(scores, strengths),
        missing_suites=missing,
    )

    logger.info(
        "Quality report built: %.1f%% (%s) from %d/%d suites",
        report.percentage,
        report.grade,
        len(scores),
        len(suites),
    )
    return report


def write_report(report: QualityReport, path: str | Path) -> Path:
    """Write the report as indented camelCase JSON and return the path."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(report.model_dump(mode="json", by_alias=True), indent=2) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        raise ReportError(f"cannot write report ({e})", path=str(path)) from e
    return path


def passed(report: QualityReport, threshold: float = DEFAULT_PASS_THRESHOLD) -> bool:
    return report.percentage >= threshold


def format_report(report: QualityReport) -> str:
    """Plain-text rendering for terminals."""
    rule = "-" * 80
    lines = [
        "=" * 80,
        "OKR AGENT - QUALITY ASSESSMENT REPORT",
        "=" * 80,
        f"Score: {report.percentage:.1f}% / 100%",
        f"Grade: {report.grade}",
        "",
        f"{'Test Suite':<35} {'Pass Rate':<15} {'Score':<15} {'Weight':<10}",
        rule,
    ]
    for score in report.dimension_scores:
        lines.append(
            f"{score.dimension:<35} {f'{score.percentage:.1f}%':<15} "
            f"{score.pass_label:<15} {f'{score.weight * 100:.0f}%':<10}"
        )
    lines.append("")

    for score in report.dimension_scores:
        filled = min(int(score.percentage // 5), 20)
        lines.append(f"{score.dimension}:")
        lines.append(f"   {'█' * filled}{'░' * (20 - filled)} {score.percentage:.1f}%")
        lines.append(f"   {score.details}")

    sections = (
        ("STRENGTHS", report.strengths),
        ("AREAS FOR IMPROVEMENT", report.areas_for_improvement),
        ("MISSING SUITES", report.missing_suites),
    )
    for title, items in sections:
        if items:
            lines.extend(["", title, rule])
            lines.extend(f"   - {item}" for item in items)

    if report.recommendations:
        lines.extend(["", "RECOMMENDATIONS", rule])
        lines.extend(f"   {i}. {text}" for i, text in enumerate(report.recommendations, 1))

    lines.append("=" * 80)
    return "\n".join(lines)
