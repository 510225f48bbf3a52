"""Deterministic quality scoring for OKR Key Results."""

from krscore.core.scoring import KRScorer, score_key_result

__all__ = ["KRScorer", "score_key_result"]

__version__ = "0.1.0"
