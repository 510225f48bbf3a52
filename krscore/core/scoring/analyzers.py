"""Dimension analyzers - pure functions from text to a discrete tier.

Each analyzer reads the raw Key Result text (Relevance also reads the
objective) and returns exactly one member of its tier enum. No analyzer
depends on another, none raises on malformed input, and none touches I/O.

Dimensions:
1. Measurability (30%) - metric, baseline, target
2. Specificity (25%) - units, cadence, measurement source
3. Achievability (20%) - baseline→target improvement ratio
4. Relevance (15%) - overlap with the objective
5. Time-Bound (10%) - deadline or cadence
"""

from krscore.contracts.tiers import (
    AchievabilityTier,
    MeasurabilityTier,
    RelevanceTier,
    SpecificityTier,
    TimeBoundTier,
)
from krscore.core.scoring.patterns import (
    BARE_PERCENTAGE,
    BASELINE_PHRASE,
    CADENCE_PATTERN,
    CADENCE_WINDOW_PATTERN,
    DEADLINE_PATTERNS,
    DOMAIN_PATTERNS,
    EXPLICIT_FROM_TO,
    FROM_TO_PAIR,
    METRIC_PATTERNS,
    MIN_TOKEN_LENGTH,
    NUMBER_WITH_UNIT_SYMBOL,
    QUARTER_PATTERNS,
    REDUCTION_PATTERN,
    SOURCE_PATTERNS,
    STOP_WORDS,
    SUFFIX_MULTIPLIERS,
    TARGET_ONLY_PHRASE,
    TARGET_PHRASE,
    UNIT_SYMBOLS,
    UNIT_WORD_PATTERN,
    VAGUE_METRIC_PATTERN,
    VAGUE_TIMEFRAME_PATTERN,
)

# =============================================================================
# Measurability
# =============================================================================


def has_metric(kr: str) -> bool:
    """True when any quantifiable metric pattern appears in the text."""
    return any(pattern.search(kr) for pattern in METRIC_PATTERNS)


def score_measurability(kr: str) -> MeasurabilityTier:
    """Score Measurability (30%).

    - 100: metric + baseline + target ("Increase NPS from 40 to 65")
    - 75: metric + target, or a bare percentage
    - 50: metric only
    - 25: no metric, but vague quantity language ("better", "several")
    - 0: no metric at all
    """
    if not has_metric(kr):
        if VAGUE_METRIC_PATTERN.search(kr):
            return MeasurabilityTier.VAGUE_METRIC
        return MeasurabilityTier.NO_METRIC

    has_baseline_and_target = bool(BASELINE_PHRASE.search(kr)) and bool(TARGET_PHRASE.search(kr))
    if has_baseline_and_target or EXPLICIT_FROM_TO.search(kr):
        return MeasurabilityTier.METRIC_BASELINE_TARGET

    if TARGET_ONLY_PHRASE.search(kr) or BARE_PERCENTAGE.search(kr):
        return MeasurabilityTier.METRIC_WITH_TARGET

    return MeasurabilityTier.METRIC_ONLY


# =============================================================================
# Specificity
# =============================================================================


def has_units(kr: str) -> bool:
    """Unit vocabulary, a literal unit symbol, or a number glued to a unit symbol."""
    if UNIT_WORD_PATTERN.search(kr):
        return True
    if any(symbol in kr for symbol in UNIT_SYMBOLS):
        return True
    return bool(NUMBER_WITH_UNIT_SYMBOL.search(kr))


def has_cadence(kr: str) -> bool:
    return bool(CADENCE_PATTERN.search(kr))


def has_measurement_source(kr: str) -> bool:
    return any(pattern.search(kr) for pattern in SOURCE_PATTERNS)


def score_specificity(kr: str) -> SpecificityTier:
    """Score Specificity (25%).

    Units gate everything: cadence and source never count without them.

    - 100: units + cadence + source
    - 85: units + source
    - 75: units + cadence
    - 50: units only
    - 0: no units
    """
    if not has_units(kr):
        return SpecificityTier.NO_UNITS

    cadence = has_cadence(kr)
    source = has_measurement_source(kr)

    if cadence and source:
        return SpecificityTier.UNITS_CADENCE_SOURCE
    if source:
        return SpecificityTier.UNITS_SOURCE
    if cadence:
        return SpecificityTier.UNITS_CADENCE
    return SpecificityTier.UNITS


# =============================================================================
# Achievability
# =============================================================================


def parse_amount(number: str, suffix: str = "") -> float | None:
    """Parse "1,500" / "2.5" with an optional K/M/B/% suffix.

    Commas are thousands separators. K/M/B scale the value; "%" does not.
    Returns None for anything float() rejects (e.g. "1.2.3").
    """
    try:
        value = float(number.replace(",", ""))
    except ValueError:
        return None
    return value * SUFFIX_MULTIPLIERS.get(suffix.upper(), 1.0)


def extract_baseline_target(kr: str) -> tuple[float, float] | None:
    """Return (baseline, target) from a "from A to B" construction, if any."""
    match = FROM_TO_PAIR.search(kr)
    if not match:
        return None

    baseline = parse_amount(match.group(1), match.group(2))
    target = parse_amount(match.group(3), match.group(4))
    if baseline is None or target is None:
        return None
    return baseline, target


def improvement_ratio(kr: str) -> float | None:
    """Improvement ratio oriented so that >1 means progress.

    Reduction goals ("reduce churn from 5% to 3%") invert the ratio.
    None when no pair was found or either side is zero.
    """
    pair = extract_baseline_target(kr)
    if pair is None:
        return None

    baseline, target = pair
    if baseline == 0 or target == 0:
        return None

    if REDUCTION_PATTERN.search(kr):
        return baseline / target
    return target / baseline


def tier_for_ratio(ratio: float) -> AchievabilityTier:
    """Map an improvement ratio to its band.

    The stretch band is 1.5x-3x inclusive; both ends of the scale are
    penalised, and inverted progress is a hard 0.
    """
    if ratio < 1:
        return AchievabilityTier.UNREALISTIC
    if 1.5 <= ratio <= 3:
        return AchievabilityTier.STRETCH
    if 1.2 <= ratio < 1.5:
        return AchievabilityTier.MODERATE
    if 3 < ratio <= 5:
        return AchievabilityTier.VERY_AMBITIOUS
    if 1.05 <= ratio < 1.2:
        return AchievabilityTier.NOT_AMBITIOUS
    if ratio > 5:
        return AchievabilityTier.UNREALISTIC
    # 1.0 <= ratio < 1.05: flat target, treated as moderate
    return AchievabilityTier.MODERATE


def score_achievability(kr: str) -> AchievabilityTier:
    """Score Achievability (20%); 75 whenever the ratio cannot be computed."""
    ratio = improvement_ratio(kr)
    if ratio is None:
        return AchievabilityTier.MODERATE
    return tier_for_ratio(ratio)


# =============================================================================
# Relevance
# =============================================================================


def content_tokens(text: str) -> list[str]:
    """Lower-cased whitespace tokens longer than 3 chars, stop words removed."""
    return [
        token
        for token in text.lower().split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]


def overlap_ratio(kr: str, objective: str) -> tuple[int, float]:
    """Count KR tokens related (substring either way) to an objective token.

    Returns (overlap_count, overlap_count / max(len(kr_tokens), 1)).
    """
    kr_tokens = content_tokens(kr)
    objective_tokens = content_tokens(objective)

    overlap = sum(
        1
        for word in kr_tokens
        if any(word in other or other in word for other in objective_tokens)
    )
    return overlap, overlap / max(len(kr_tokens), 1)


def classify_domains(text: str) -> list[str]:
    """Topical domains whose keyword pattern appears in the text, in table order."""
    return [name for name, pattern in DOMAIN_PATTERNS if pattern.search(text)]


def shared_domain(kr: str, objective: str) -> str | None:
    """First domain matched by both texts, or None."""
    for name, pattern in DOMAIN_PATTERNS:
        if pattern.search(kr) and pattern.search(objective):
            return name
    return None


def score_relevance(kr: str, objective: str | None = None) -> RelevanceTier:
    """Score Relevance (15%).

    - 100: overlap >= 30%, or both texts share a topical domain
    - 75: overlap >= 15%
    - 50: overlap >= 5%
    - 25: some overlap
    - 0: nothing in common
    Without an objective there is nothing to compare, so the neutral 75.
    """
    if not objective:
        return RelevanceTier.INDIRECT

    overlap, ratio = overlap_ratio(kr, objective)

    if ratio >= 0.30 or shared_domain(kr, objective) is not None:
        return RelevanceTier.DIRECT
    if ratio >= 0.15:
        return RelevanceTier.INDIRECT
    if ratio >= 0.05:
        return RelevanceTier.WEAK
    if overlap > 0:
        return RelevanceTier.QUESTIONABLE
    return RelevanceTier.UNRELATED


# =============================================================================
# Time-bound
# =============================================================================


def score_time_bound(kr: str) -> TimeBoundTier:
    """Score Time-Bound (10%).

    - 100: explicit deadline ("by Q2 2024", "before March 2025") or a cadence
      window ("monthly throughout Q1 2024")
    - 75: quarter named without deadline framing ("in Q3 2024")
    - 50: vague timeframe ("soon", "next quarter")
    - 0: nothing
    """
    if any(pattern.search(kr) for pattern in DEADLINE_PATTERNS):
        return TimeBoundTier.DEADLINE

    if CADENCE_WINDOW_PATTERN.search(kr):
        return TimeBoundTier.DEADLINE

    if any(pattern.search(kr) for pattern in QUARTER_PATTERNS):
        return TimeBoundTier.QUARTER_ONLY

    if VAGUE_TIMEFRAME_PATTERN.search(kr):
        return TimeBoundTier.VAGUE_TIMEFRAME

    return TimeBoundTier.NO_TIMEFRAME
