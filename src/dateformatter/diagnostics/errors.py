"""Date formatting exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DateFormatError(Exception):
    """Base exception for all dateformatter errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidFormatError(DateFormatError):
    """Format pattern does not conform to the pattern grammar.

    Raised for every structural or vocabulary failure: wrong separator
    count, a split other than three parts, unknown token, duplicate or
    missing family, mixed separators, wrong case. Nothing is rendered
    for a rejected pattern.

    Attributes:
        pattern: The offending pattern, for diagnostic display

    Example:
        >>> try:
        ...     format_date(date(2024, 3, 17), "yyyy-mm")
        ... except InvalidFormatError as e:
        ...     print(e.pattern, e.diagnostic.code.name)
        yyyy-mm SEPARATOR_TOO_FEW
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        """Initialize InvalidFormatError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The pattern that failed validation
        """
        super().__init__(message)
        self.pattern = pattern
