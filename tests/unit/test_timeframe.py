"""Unit tests for deadline validation.

``today`` is always pinned so results do not depend on the clock.
"""

from datetime import date

import pytest

from krscore.core.validation import TimeframeValidation, validate_timeframe
from krscore.core.validation.timeframe import NO_TIMEFRAME_ISSUE, PAST_DATE_ISSUE

TODAY = date(2025, 5, 15)  # Q2, H1


class TestValidFormats:
    @pytest.mark.parametrize(
        "text,fmt,fields,described",
        [
            ("Launch by Q2 2025", "quarterly", {"quarter": 2, "year": 2025}, "Q2 2025"),
            ("Launch by end of Q4 2025", "quarterly", {"quarter": 4, "year": 2025}, "Q4 2025"),
            ("Launch by May 2025", "monthly", {"month": 5, "year": 2025}, "May 2025"),
            ("by end of march 2026", "monthly", {"month": 3, "year": 2026}, "March 2026"),
            ("Launch by H1 2025", "half_year", {"half": 1, "year": 2025}, "H1 2025"),
            ("Launch by end of H2 2027", "half_year", {"half": 2, "year": 2027}, "H2 2027"),
        ],
    )
    def test_current_or_future(self, text: str, fmt: str, fields: dict, described: str) -> None:
        result = validate_timeframe(text, today=TODAY)

        assert result.is_valid
        assert result.format == fmt
        for name, value in fields.items():
            assert getattr(result, name) == value
        assert result.issues == []
        assert result.describe() == described

    def test_current_period_is_still_valid(self) -> None:
        """BOUNDARY: the period containing today has not passed yet."""
        assert validate_timeframe("by Q2 2025", today=date(2025, 6, 30)).is_valid
        assert not validate_timeframe("by Q2 2025", today=date(2025, 7, 1)).is_valid


class TestInvalid:
    @pytest.mark.parametrize(
        "text", ["by Q1 2025", "by April 2025", "by H2 2024", "by Q4 2019"]
    )
    def test_past_dates(self, text: str) -> None:
        result = validate_timeframe(text, today=TODAY)

        assert not result.is_valid
        assert result.issues == [PAST_DATE_ISSUE]

    def test_later_valid_match_wins_over_past_one(self) -> None:
        result = validate_timeframe("by Q1 2025, extended to by June 2025", today=TODAY)

        assert result.is_valid
        assert result.format == "monthly"
        assert result.month == 6
        assert result.issues == [PAST_DATE_ISSUE]
        assert result.describe() == "June 2025"

    def test_vague_terms(self) -> None:
        result = validate_timeframe("ship it soon, ideally this quarter", today=TODAY)

        assert not result.is_valid
        assert result.issues == [
            'Vague timeframe detected: "soon"',
            'Vague timeframe detected: "this quarter"',
        ]
        assert result.describe() == ", ".join(result.issues)

    @pytest.mark.parametrize("text", ["", None, "Grow revenue"])
    def test_no_timeframe(self, text: str | None) -> None:
        result = validate_timeframe(text, today=TODAY)

        assert result == TimeframeValidation(issues=[NO_TIMEFRAME_ISSUE])
