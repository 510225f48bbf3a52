"""Agent quality report aggregation."""

from krscore.core.reporting.aggregator import (
    REPORT_GRADE_THRESHOLDS,
    TEST_SUITES,
    build_report,
    endurance_score,
    format_report,
    load_results,
    pass_rate,
    passed,
    write_report,
)

__all__ = [
    "REPORT_GRADE_THRESHOLDS",
    "TEST_SUITES",
    "build_report",
    "endurance_score",
    "format_report",
    "load_results",
    "pass_rate",
    "passed",
    "write_report",
]
