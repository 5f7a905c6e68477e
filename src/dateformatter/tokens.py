"""Date pattern token vocabulary.

Each token is a tagged variant: the date component it renders (Family)
plus how it renders it (Style). Classification is an exact,
case-sensitive match on the token text.

    Token   Family  Style    2024-03-17
    yy      year    short    24
    yyyy    year    padded   2024
    m       month   numeric  3
    mm      month   padded   03
    mmm     month   short    Mar
    mmmm    month   long     March
    d       day     numeric  17
    dd      day     padded   17
    ddd     day     short    Sun
    dddd    day     long     Sunday

Python 3.13+.
"""

from datetime import date
from enum import Enum

from .enums import Family, Style
from .names import month_abbreviation, month_name, weekday_abbreviation, weekday_name

__all__ = ["Token", "classify", "token_texts"]


class Token(Enum):
    """The ten pattern tokens."""

    YY = ("yy", Family.YEAR, Style.SHORT)
    YYYY = ("yyyy", Family.YEAR, Style.PADDED)
    M = ("m", Family.MONTH, Style.NUMERIC)
    MM = ("mm", Family.MONTH, Style.PADDED)
    MMM = ("mmm", Family.MONTH, Style.SHORT)
    MMMM = ("mmmm", Family.MONTH, Style.LONG)
    D = ("d", Family.DAY, Style.NUMERIC)
    DD = ("dd", Family.DAY, Style.PADDED)
    DDD = ("ddd", Family.DAY, Style.SHORT)
    DDDD = ("dddd", Family.DAY, Style.LONG)

    def __init__(self, text: str, family: Family, style: Style) -> None:
        self.text = text
        self.family = family
        self.style = style

    def render(self, value: date) -> str:
        """Render this token against a date.

        Args:
            value: Date to read the component from

        Returns:
            Rendered component text
        """
        match self.family, self.style:
            case Family.YEAR, Style.SHORT:
                return f"{value.year % 100:02d}"
            case Family.YEAR, _:
                return f"{value.year:04d}"
            case Family.MONTH, Style.NUMERIC:
                return str(value.month)
            case Family.MONTH, Style.PADDED:
                return f"{value.month:02d}"
            case Family.MONTH, Style.SHORT:
                return month_abbreviation(value.month)
            case Family.MONTH, _:
                return month_name(value.month)
            case Family.DAY, Style.NUMERIC:
                return str(value.day)
            case Family.DAY, Style.PADDED:
                return f"{value.day:02d}"
            case Family.DAY, Style.SHORT:
                return weekday_abbreviation(value.weekday())
            case _:
                return weekday_name(value.weekday())


_BY_TEXT: dict[str, Token] = {token.text: token for token in Token}


def classify(text: str) -> Token | None:
    """Look up the token spelled exactly as ``text``.

    Example:
        >>> classify("mmm")
        <Token.MMM: ('mmm', <Family.MONTH: 'month'>, <Style.SHORT: 'short'>)>
        >>> classify("MMM") is None
        True
    """
    return _BY_TEXT.get(text)


def token_texts() -> tuple[str, ...]:
    """All token spellings in declaration order."""
    return tuple(_BY_TEXT)
