#!/usr/bin/env python3
"""Aggregate evaluation-suite results into the agent quality report.

Reads the per-suite ``test-*-results.json`` files, prints the weighted
report and writes it as JSON.

Usage:
  python scripts/generate_quality_report.py --results-dir server/test-utils \
      --output okr-agent-quality-report.json --threshold 70

Exit codes: 0 when the overall score meets the threshold, 1 when it does
not, 2 when a results file is malformed or the report cannot be written.
"""

from __future__ import annotations

import argparse
import logging

from krscore.config.settings import get_settings
from krscore.core.errors import KRScoreError
from krscore.core.observability import configure_logging, trace_entrypoint
from krscore.core.reporting import build_report, format_report, passed, write_report

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


@trace_entrypoint
def run(results_dir: str, output: str, threshold: float) -> int:
    report = build_report(results_dir)
    print(format_report(report))

    path = write_report(report, output)
    print(f"Detailed JSON report saved to: {path}")

    return EXIT_PASSED if passed(report, threshold) else EXIT_FAILED


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="OKR agent quality report")
    parser.add_argument(
        "--results-dir", default=settings.results_dir, help="Directory holding suite results"
    )
    parser.add_argument("--output", default=settings.report_path, help="Report JSON path")
    parser.add_argument(
        "--threshold",
        type=float,
        default=settings.report_pass_threshold,
        help="Minimum overall percentage to pass",
    )
    args = parser.parse_args(argv)

    configure_logging(settings.effective_log_level, json_output=settings.log_json or None)

    try:
        return run(args.results_dir, args.output, args.threshold)
    except KRScoreError as e:
        logger.error("Quality report failed: %s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
