"""Date formatting entry point.

Python 3.13+.
"""

from datetime import date

from .pattern import compile_pattern

__all__ = ["format_date"]


def format_date(value: date, pattern: str) -> str:
    """Render a date according to a format pattern.

    The pattern is three tokens joined by one separator character
    ("/", ".", "-" or " "), one token each for year, month and day:

        yy    24        m     3        d     17
        yyyy  2024      mm    03       dd    17
                        mmm   Mar      ddd   Sun
                        mmmm  March    dddd  Sunday

    Args:
        value: Date to render (a datetime is accepted; time and tzinfo are ignored)
        pattern: Format pattern, e.g. "dd mmmm yyyy"

    Returns:
        Rendered parts joined by the pattern's separator, in pattern order

    Raises:
        InvalidFormatError: Pattern does not conform to the grammar
        TypeError: value is not a date

    Examples:
        >>> format_date(date(2024, 3, 17), "dd mmmm yyyy")
        '17 March 2024'
        >>> format_date(date(2024, 3, 17), "dddd mmm yy")
        'Sunday Mar 24'
        >>> format_date(date(2024, 1, 5), "m/d/yy")
        '1/5/24'

    Thread Safety:
        Thread-safe. Reads only its arguments and immutable name tables.
    """
    if not isinstance(value, date):
        msg = f"Expected date or datetime, got {type(value).__name__}"  # type: ignore[unreachable]
        raise TypeError(msg)
    return compile_pattern(pattern).render(value)
