"""Enumerations for dateformatter type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Family(StrEnum):
    """Date component a token renders.

    StrEnum provides automatic string conversion: str(Family.YEAR) == "year"
    """

    YEAR = "year"
    """Year tokens: yy, yyyy"""

    MONTH = "month"
    """Month tokens: m, mm, mmm, mmmm"""

    DAY = "day"
    """Day tokens: d, dd, ddd, dddd"""


class Style(StrEnum):
    """How a token renders its component.

    StrEnum provides automatic string conversion: str(Style.PADDED) == "padded"
    """

    NUMERIC = "numeric"
    """Plain number, no padding: m -> 3"""

    PADDED = "padded"
    """Zero-padded number: mm -> 03, yyyy -> 0987"""

    SHORT = "short"
    """Truncated year or abbreviated name: yy -> 24, mmm -> Mar"""

    LONG = "long"
    """Full name: mmmm -> March, dddd -> Sunday"""


class Separator(StrEnum):
    """Characters allowed between pattern parts.

    StrEnum provides automatic string conversion: str(Separator.SLASH) == "/"
    """

    SLASH = "/"
    """Oblique stroke: m/d/yy"""

    PERIOD = "."
    """Full stop: dd.mm.yyyy"""

    HYPHEN = "-"
    """Hyphen: yyyy-mm-dd"""

    SPACE = " "
    """Space: dd mmmm yyyy"""


__all__ = [
    "Family",
    "Separator",
    "Style",
]
