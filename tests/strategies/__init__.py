"""Hypothesis strategies for dateformatter property-based testing.

- patterns: valid and malformed format patterns, calendar dates

Usage:
    from tests.strategies import valid_patterns, calendar_dates

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - valid_patterns, malformed_patterns
"""

from .patterns import (
    DAY_TOKENS,
    MONTH_TOKENS,
    SEPARATORS,
    YEAR_TOKENS,
    calendar_dates,
    malformed_patterns,
    pattern_parts,
    valid_patterns,
)

__all__ = [
    "DAY_TOKENS",
    "MONTH_TOKENS",
    "SEPARATORS",
    "YEAR_TOKENS",
    "calendar_dates",
    "malformed_patterns",
    "pattern_parts",
    "valid_patterns",
]
