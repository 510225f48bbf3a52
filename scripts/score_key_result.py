#!/usr/bin/env python3
"""Score a single Key Result from the command line.

Usage:
  python scripts/score_key_result.py "Increase NPS score from 40 to 65 by Q2 2024" \
      --objective "Improve customer satisfaction and NPS score across all touchpoints"

  python scripts/score_key_result.py "Improve team morale" --json
"""

from __future__ import annotations

import argparse
import json

from krscore.config.settings import get_settings
from krscore.contracts.kr_score import KRScoreResult
from krscore.core.observability import configure_logging, trace_entrypoint
from krscore.core.scoring import KRScorer


def render(result: KRScoreResult) -> str:
    lines = [f"Overall: {result.overall}/100  Grade: {result.grade.value}", ""]
    for name, score in result.breakdown.as_dict().items():
        lines.append(f"  {name.replace('_', ' ').title():<15} {score:>3}")
    if result.feedback:
        lines.append("")
        lines.append("Feedback:")
        lines.extend(f"  - {message}" for message in result.feedback)
    if result.improvements:
        lines.append("")
        lines.append("Improvements:")
        lines.extend(f"  - {message}" for message in result.improvements)
    return "\n".join(lines)


@trace_entrypoint
def run(key_result: str, objective: str | None) -> KRScoreResult:
    return KRScorer().score(key_result, objective)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Deterministic Key Result quality score")
    parser.add_argument("key_result", help="Key Result text")
    parser.add_argument("--objective", default=None, help="Objective the KR belongs to")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.effective_log_level, json_output=settings.log_json or None)

    result = run(args.key_result, args.objective)

    if args.json:
        print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    else:
        print(render(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
