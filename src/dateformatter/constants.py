"""Shared constants for dateformatter.

Centralized configuration constants used by the pattern compiler, the
name tables, and the renderer. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

from .enums import Separator

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar
    "SEPARATORS",
    "PART_COUNT",
    # Names
    "NAMES_LOCALE",
    "ABBREVIATION_LENGTH",
    # Cache limits
    "MAX_PATTERN_CACHE_SIZE",
]

# ============================================================================
# GRAMMAR
# ============================================================================

# Characters allowed between pattern parts, see enums.Separator.
SEPARATORS: frozenset[str] = frozenset(Separator)

# A pattern is always year, month and day; nothing more, nothing less.
PART_COUNT: int = 3

# ============================================================================
# NAMES
# ============================================================================

# Month and weekday names come from the CLDR Gregorian calendar of this
# locale. There is no locale switch: the tables are fixed for the process.
NAMES_LOCALE: str = "en"

# Width of "mmm" and "ddd": leading characters of the full name.
ABBREVIATION_LENGTH: int = 3

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum compiled patterns kept by compile_pattern().
# Applications use a handful of patterns, usually from a settings screen.
MAX_PATTERN_CACHE_SIZE: int = 256
