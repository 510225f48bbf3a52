"""Compiled pattern tables shared by the dimension analyzers.

Everything here is module-level and read-only. Patterns are compiled once at
import time; the analyzers never build regexes per call.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

_I = re.IGNORECASE

_CURRENCY = r"[\$£€¥]"
_MONTHS = (
    r"January|February|March|April|May|June|July|August|"
    r"September|October|November|December"
)

# =============================================================================
# Measurability
# =============================================================================

METRIC_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"\b\d+%"),  # 25%
    re.compile(r"\$\d+([,.]\d+)?[KMB]?"),  # $2M, $500K
    re.compile(r"#\d+"),  # #100
    re.compile(
        r"\b\d+([,.]\d+)?\s*(users?|customers?|leads?|sales?|points?|days?|hours?|minutes?)", _I
    ),
    re.compile(r"\b\d+:\d+"),  # 5:1
    re.compile(r"\b\d+([,.]\d+)?\s*(seconds?|minutes?|hours?|days?|weeks?|months?)", _I),
    re.compile(r"\b(NPS|CSAT|CES|uptime|availability|conversion|retention|churn)\b", _I),
)

VAGUE_METRIC_WORDS: Final[tuple[str, ...]] = (
    "better",
    "more",
    "less",
    "improved",
    "enhanced",
    "optimized",
    "significant",
    "substantial",
    "major",
    "minor",
    "some",
    "many",
    "few",
    "several",
    "various",
    "good",
    "great",
    "excellent",
)
VAGUE_METRIC_PATTERN: Final = re.compile(r"\b(" + "|".join(VAGUE_METRIC_WORDS) + r")\b", _I)

BASELINE_PHRASE: Final = re.compile(rf"\b(from|currently|baseline|starting)\s+{_CURRENCY}?\d+", _I)
TARGET_PHRASE: Final = re.compile(rf"\b(to|target|goal|reach|achieve)\s+{_CURRENCY}?\d+", _I)
EXPLICIT_FROM_TO: Final = re.compile(
    rf"\bfrom\s+{_CURRENCY}?\d+([,.]\d+)?[KMB%]?\s+to\s+{_CURRENCY}?\d+([,.]\d+)?[KMB%]?", _I
)
# Looser than TARGET_PHRASE: "of 40" counts as a target when no baseline exists.
TARGET_ONLY_PHRASE: Final = re.compile(rf"\b(to|target|goal|reach|achieve|of)\s+{_CURRENCY}?\d+", _I)
BARE_PERCENTAGE: Final = re.compile(r"\b\d+%")

# =============================================================================
# Specificity
# =============================================================================

UNIT_WORDS: Final[tuple[str, ...]] = (
    "percent",
    "percentage",
    "dollars",
    "revenue",
    "MRR",
    "ARR",
    "users",
    "customers",
    "accounts",
    "leads",
    "days",
    "hours",
    "minutes",
    "seconds",
    "weeks",
    "months",
    "points",
    "score",
    "rating",
    "index",
    "rate",
    "ratio",
    "count",
    "number",
)
# Symbols have no word boundary of their own, so they are matched literally.
UNIT_SYMBOLS: Final[tuple[str, ...]] = ("%", "$")

UNIT_WORD_PATTERN: Final = re.compile(r"\b(" + "|".join(UNIT_WORDS) + r")\b", _I)
NUMBER_WITH_UNIT_SYMBOL: Final = re.compile(r"\b\d+\s*[%$€£¥KMB](?!\w)", _I)

CADENCE_PATTERN: Final = re.compile(
    r"\b(monthly|quarterly|weekly|daily|annual|per\s+(month|quarter|week|year))\b", _I
)

SOURCE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(
        r"\(([^)]*?)(survey|analytics|data|dashboard|report|system|tool|platform|tracking)\)", _I
    ),
    re.compile(r"\b(measured\s+by|tracked\s+by|via|using|through)\s+\w+", _I),
)

# =============================================================================
# Achievability
# =============================================================================

# Groups: 1 baseline number, 2 baseline suffix, 3 target number, 4 target suffix.
# A suffix must not run into a following word ("65 by Q2" is not 65 billion).
FROM_TO_PAIR: Final = re.compile(
    rf"\bfrom\s+{_CURRENCY}?(\d+(?:[,.]\d+)*)\s*([KMB%]?)(?!\w)"
    rf"\s+to\s+{_CURRENCY}?(\d+(?:[,.]\d+)*)\s*([KMB%]?)(?!\w)",
    _I,
)
REDUCTION_PATTERN: Final = re.compile(r"\b(reduce|decrease|lower|minimize)\b", _I)

SUFFIX_MULTIPLIERS: Final[Mapping[str, float]] = MappingProxyType(
    {
        "K": 1_000.0,
        "M": 1_000_000.0,
        "B": 1_000_000_000.0,
    }
)

# =============================================================================
# Relevance
# =============================================================================

MIN_TOKEN_LENGTH: Final = 4
STOP_WORDS: Final = frozenset(
    {"the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by", "from"}
)

# Ordered: the first shared domain wins when reporting which one matched.
DOMAIN_PATTERNS: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    ("revenue", re.compile(r"\b(revenue|sales|MRR|ARR|income|profit|price|pricing)\b", _I)),
    ("users", re.compile(r"\b(users?|customers?|accounts?|MAU|DAU|WAU|subscribers?|members?)\b", _I)),
    (
        "engagement",
        re.compile(r"\b(engagement|active|usage|retention|churn|adoption|activation)\b", _I),
    ),
    (
        "quality",
        re.compile(
            r"\b(quality|NPS|CSAT|satisfaction|rating|score|uptime|availability|reliability)\b", _I
        ),
    ),
    ("performance", re.compile(r"\b(performance|speed|time|latency|response|load|throughput)\b", _I)),
    ("growth", re.compile(r"\b(growth|increase|expand|scale|acquisition|conversion)\b", _I)),
)

# =============================================================================
# Time-bound
# =============================================================================

DEADLINE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(rf"\b(by|before|until)\s+(end\s+of\s+)?(Q[1-4]|{_MONTHS})\s+\d{{4}}", _I),
    re.compile(r"\b(by|before|until)\s+(end\s+of|mid-)?\s*(Q[1-4]|H[12])\s+\d{4}", _I),
)
CADENCE_WINDOW_PATTERN: Final = re.compile(
    r"\b(monthly|quarterly|weekly|daily|annual)\s+(throughout|during|in)\s+(Q[1-4]|H[12]|\d{4})",
    _I,
)
QUARTER_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"\b(during|in|for)\s+Q[1-4]\s+\d{4}", _I),
    re.compile(r"\bQ[1-4]\s+\d{4}\b", _I),
)
VAGUE_TIMEFRAME_PATTERN: Final = re.compile(
    r"\b(soon|next\s+quarter|this\s+quarter|this\s+year|next\s+year|eventually|later)\b", _I
)
