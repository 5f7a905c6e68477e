"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

_VALID_SEPARATORS = "'/', '.', '-', ' '"
_VALID_TOKENS = "yy, yyyy, m, mm, mmm, mmmm, d, dd, ddd, dddd"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def pattern_not_string(type_name: str) -> Diagnostic:
        """Pattern argument is not a string.

        Args:
            type_name: Name of the type that was passed

        Returns:
            Diagnostic for PATTERN_NOT_STRING
        """
        msg = f"Date pattern must be a string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NOT_STRING,
            message=msg,
            hint="Pass the pattern as text, e.g. 'yyyy-mm-dd'",
        )

    @staticmethod
    def separator_missing(pattern: str) -> Diagnostic:
        """Pattern contains no separator character.

        Args:
            pattern: The rejected pattern

        Returns:
            Diagnostic for SEPARATOR_MISSING
        """
        msg = f"Date pattern '{pattern}' has no separator"
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_MISSING,
            message=msg,
            span=SourceSpan(0, len(pattern)),
            hint=f"Join year, month and day with one of {_VALID_SEPARATORS}",
            pattern=pattern,
        )

    @staticmethod
    def separator_too_few(pattern: str, separator: str, position: int) -> Diagnostic:
        """Separator occurs fewer than two times.

        Args:
            pattern: The rejected pattern
            separator: The first separator found
            position: Offset of that separator

        Returns:
            Diagnostic for SEPARATOR_TOO_FEW
        """
        msg = f"Date pattern '{pattern}' needs two '{separator}' separators, found one"
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_TOO_FEW,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint="A pattern has exactly three parts: year, month and day",
            pattern=pattern,
        )

    @staticmethod
    def part_count_invalid(pattern: str, count: int, span: SourceSpan) -> Diagnostic:
        """Pattern splits into more than three parts.

        Args:
            pattern: The rejected pattern
            count: Number of parts found
            span: Region from the first extra separator to the end

        Returns:
            Diagnostic for PART_COUNT_INVALID
        """
        msg = f"Date pattern '{pattern}' has {count} parts, expected 3"
        return Diagnostic(
            code=DiagnosticCode.PART_COUNT_INVALID,
            message=msg,
            span=span,
            hint="A pattern has exactly three parts: year, month and day",
            pattern=pattern,
        )

    @staticmethod
    def part_empty(pattern: str, index: int, position: int) -> Diagnostic:
        """A part between separators is empty.

        Args:
            pattern: The rejected pattern
            index: Zero-based part index
            position: Offset where the empty part sits

        Returns:
            Diagnostic for PART_EMPTY
        """
        msg = f"Date pattern '{pattern}' has an empty part at position {index + 1}"
        return Diagnostic(
            code=DiagnosticCode.PART_EMPTY,
            message=msg,
            span=SourceSpan(position, position),
            hint="Separators must not be doubled or placed at either end",
            pattern=pattern,
        )

    @staticmethod
    def separator_mixed(
        pattern: str, separator: str, other: str, position: int
    ) -> Diagnostic:
        """Two different separator characters are used.

        Args:
            pattern: The rejected pattern
            separator: The first separator found
            other: The conflicting separator
            position: Offset of the conflicting separator

        Returns:
            Diagnostic for SEPARATOR_MIXED
        """
        msg = (
            f"Date pattern '{pattern}' mixes separators '{separator}' and '{other}'"
        )
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_MIXED,
            message=msg,
            span=SourceSpan(position, position + 1),
            hint=f"Use '{separator}' for both gaps",
            pattern=pattern,
        )

    @staticmethod
    def token_unknown(pattern: str, text: str, span: SourceSpan) -> Diagnostic:
        """A part is not a defined token.

        Args:
            pattern: The rejected pattern
            text: The unrecognized part
            span: Location of the part

        Returns:
            Diagnostic for TOKEN_UNKNOWN
        """
        msg = f"Unknown token '{text}' in date pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_UNKNOWN,
            message=msg,
            span=span,
            hint=f"Valid tokens: {_VALID_TOKENS}",
            pattern=pattern,
        )

    @staticmethod
    def token_wrong_case(
        pattern: str, text: str, expected: str, span: SourceSpan
    ) -> Diagnostic:
        """A part matches a token only when lowercased.

        Args:
            pattern: The rejected pattern
            text: The part as written
            expected: The lowercase token it resembles
            span: Location of the part

        Returns:
            Diagnostic for TOKEN_WRONG_CASE
        """
        msg = f"Token '{text}' in date pattern '{pattern}' must be lowercase"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_WRONG_CASE,
            message=msg,
            span=span,
            hint=f"Did you mean '{expected}'?",
            pattern=pattern,
        )

    @staticmethod
    def family_duplicate(
        pattern: str, family: str, text: str, missing: str, span: SourceSpan
    ) -> Diagnostic:
        """Two parts render the same date component.

        Args:
            pattern: The rejected pattern
            family: The repeated family (year, month, day)
            text: The second token of that family
            missing: The family left uncovered
            span: Location of the second token

        Returns:
            Diagnostic for FAMILY_DUPLICATE
        """
        msg = f"Date pattern '{pattern}' has more than one {family} token ('{text}')"
        return Diagnostic(
            code=DiagnosticCode.FAMILY_DUPLICATE,
            message=msg,
            span=span,
            hint=f"Replace '{text}' with a {missing} token",
            pattern=pattern,
        )
