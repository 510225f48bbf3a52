"""Deadline validation for objectives and key results.

Acceptable formats:
- Quarterly: "by Q1 2026", "by end of Q2 2026"
- Monthly: "by March 2026", "by end of January 2027"
- Half-year: "by H1 2026", "by end of H2 2027"

Unlike the Time-Bound dimension of the scorer, this check reads the calendar
(a deadline that already passed is invalid), so it is kept out of the
deterministic score and takes ``today`` explicitly.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Final, Literal

TimeframeFormat = Literal["quarterly", "monthly", "half_year"]

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_QUARTER_RE = re.compile(r"by\s+(end\s+of\s+)?Q([1-4])\s+(\d{4})", re.IGNORECASE)
_MONTH_RE = re.compile(
    r"by\s+(end\s+of\s+)?(" + "|".join(MONTH_NAMES) + r")\s+(\d{4})", re.IGNORECASE
)
_HALF_RE = re.compile(r"by\s+(end\s+of\s+)?H([12])\s+(\d{4})", re.IGNORECASE)

# Vague terms first, then relative periods that lack a year
_VAGUE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"\b(soon|eventually|sometime|later)\b", re.IGNORECASE),
    re.compile(r"\b(next quarter|this quarter|this year)\b", re.IGNORECASE),
)

PAST_DATE_ISSUE: Final = "Date appears to be in the past"
NO_TIMEFRAME_ISSUE: Final = "No timeframe detected"


@dataclass
class TimeframeValidation:
    """Result of a deadline check."""

    is_valid: bool = False
    format: TimeframeFormat | None = None
    year: int | None = None
    quarter: int | None = None
    month: int | None = None
    half: int | None = None
    issues: list[str] = field(default_factory=list)

    def describe(self) -> str:
        """Render as "Q2 2026", "March 2026" or "H1 2026"; the issues when invalid."""
        if not self.is_valid:
            return ", ".join(self.issues)

        if self.format == "quarterly":
            return f"Q{self.quarter} {self.year}"
        if self.format == "monthly" and self.month:
            return f"{MONTH_NAMES[self.month - 1]} {self.year}"
        if self.format == "half_year":
            return f"H{self.half} {self.year}"
        return "Unknown timeframe"


def _is_current_or_future(kind: TimeframeFormat, period: int, year: int, today: date) -> bool:
    """True when (period, year) is today's period or later."""
    if year != today.year:
        return year > today.year

    if kind == "quarterly":
        return period >= (today.month - 1) // 3 + 1
    if kind == "monthly":
        return period >= today.month
    return period >= (1 if today.month <= 6 else 2)


def validate_timeframe(text: str | None, today: date | None = None) -> TimeframeValidation:
    """Check ``text`` for a concrete, not-yet-passed deadline.

    Formats are tried in order quarterly → monthly → half-year; the first
    current-or-future match wins. A past match records an issue and the
    search continues; that issue is kept even when a later match is valid.
    Vague phrasing is reported only when nothing valid was found.
    """
    text = text or ""
    today = today or date.today()
    result = TimeframeValidation()

    quarter = _QUARTER_RE.search(text)
    if quarter:
        period, year = int(quarter.group(2)), int(quarter.group(3))
        if _is_current_or_future("quarterly", period, year, today):
            result.is_valid, result.format = True, "quarterly"
            result.year, result.quarter = year, period
            return result
        result.issues.append(PAST_DATE_ISSUE)

    month = _MONTH_RE.search(text)
    if month:
        period = MONTH_NAMES.index(month.group(2).capitalize()) + 1
        year = int(month.group(3))
        if _is_current_or_future("monthly", period, year, today):
            result.is_valid, result.format = True, "monthly"
            result.year, result.month = year, period
            return result
        result.issues.append(PAST_DATE_ISSUE)

    half = _HALF_RE.search(text)
    if half:
        period, year = int(half.group(2)), int(half.group(3))
        if _is_current_or_future("half_year", period, year, today):
            result.is_valid, result.format = True, "half_year"
            result.year, result.half = year, period
            return result
        result.issues.append(PAST_DATE_ISSUE)

    for pattern in _VAGUE_PATTERNS:
        match = pattern.search(text)
        if match:
            result.issues.append(f'Vague timeframe detected: "{match.group(0)}"')

    if not result.issues:
        result.issues.append(NO_TIMEFRAME_ISSUE)

    return result
