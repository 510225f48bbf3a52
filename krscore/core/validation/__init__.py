"""Validation utilities for key result text."""

from .timeframe import TimeframeValidation, validate_timeframe

__all__ = [
    "TimeframeValidation",
    "validate_timeframe",
]
