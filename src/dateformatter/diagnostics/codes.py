"""Diagnostic codes and data structures.

Defines error codes, pattern spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Structural errors (separators, part count)
        2000-2999: Vocabulary errors (tokens, families)
    """

    # Structural errors (1000-1999)
    PATTERN_NOT_STRING = 1001
    SEPARATOR_MISSING = 1002
    SEPARATOR_TOO_FEW = 1003
    PART_COUNT_INVALID = 1004
    PART_EMPTY = 1005
    SEPARATOR_MIXED = 1006

    # Vocabulary errors (2000-2999)
    TOKEN_UNKNOWN = 2001
    TOKEN_WRONG_CASE = 2002
    FAMILY_DUPLICATE = 2003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a format pattern.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Offending region of the pattern (None when not applicable)
        hint: Suggestion for fixing the error
        pattern: The pattern that was rejected
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    pattern: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[TOKEN_UNKNOWN]: Unknown token 'yyy' in date pattern
              --> yyy-mm-dd
                  ^^^
              = help: Valid tokens: yy, yyyy, m, mm, mmm, mmmm, d, dd, ddd, dddd

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
