"""Month and weekday name tables.

Names are taken once from the Unicode CLDR Gregorian calendar
(format context, wide width) through Babel and frozen into tuples.
Index 0 is January / Monday, matching date.month - 1 and date.weekday().

Thread-safe: the tables are immutable after import.

Python 3.13+. Uses Babel for CLDR data.
"""

from babel import Locale

from .constants import ABBREVIATION_LENGTH, NAMES_LOCALE

__all__ = [
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "month_abbreviation",
    "month_name",
    "weekday_abbreviation",
    "weekday_name",
]


def _load_names(locale_code: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Read wide month and weekday names from CLDR.

    Babel keys months 1-12 and weekdays 0-6 (Monday first).
    Capitalization is normalized to "First letter upper, rest lower".
    """
    locale = Locale.parse(locale_code)
    months = locale.months["format"]["wide"]
    days = locale.days["format"]["wide"]
    return (
        tuple(months[number].capitalize() for number in range(1, 13)),
        tuple(days[number].capitalize() for number in range(7)),
    )


MONTH_NAMES, WEEKDAY_NAMES = _load_names(NAMES_LOCALE)


def month_name(month: int) -> str:
    """Full month name for month number 1-12."""
    return MONTH_NAMES[month - 1]


def month_abbreviation(month: int) -> str:
    """First three letters of the month name: 3 -> 'Mar'."""
    return month_name(month)[:ABBREVIATION_LENGTH]


def weekday_name(weekday: int) -> str:
    """Full weekday name for date.weekday() value 0-6 (Monday = 0)."""
    return WEEKDAY_NAMES[weekday]


def weekday_abbreviation(weekday: int) -> str:
    """First three letters of the weekday name: 4 -> 'Fri'."""
    return weekday_name(weekday)[:ABBREVIATION_LENGTH]
