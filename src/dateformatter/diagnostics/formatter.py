"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def _escape_control(text: str) -> str:
    """Replace control characters so a pattern cannot forge log lines."""
    return "".join(
        char if char.isprintable() else repr(char)[1:-1] for char in text
    )


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.separator_missing("yyyymmdd")
        >>> print(formatter.format(diagnostic))
        error[SEPARATOR_MISSING]: Date pattern 'yyyymmdd' has no separator
          --> yyyymmdd
              ^^^^^^^^
          = help: Join year, month and day with one of '/', '.', '-', ' '

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        SEPARATOR_MISSING: Date pattern 'yyyymmdd' has no separator
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[TOKEN_UNKNOWN]: Unknown token 'yyy' in date pattern 'yyy-mm-dd'
              --> yyy-mm-dd
                  ^^^
              = help: Valid tokens: yy, yyyy, m, mm, mmm, mmmm, d, dd, ddd, dddd
        """
        severity = "\033[1;31merror\033[0m" if self.color else "error"
        message = _escape_control(diagnostic.message)
        parts = [f"{severity}[{diagnostic.code.name}]: {message}"]

        if diagnostic.pattern is not None:
            pattern = _escape_control(diagnostic.pattern)
            parts.append(f"  --> {pattern}")
            # Underline is only exact when escaping left the pattern unchanged
            if diagnostic.span is not None and pattern == diagnostic.pattern:
                width = max(diagnostic.span.end - diagnostic.span.start, 1)
                parts.append("      " + " " * diagnostic.span.start + "^" * width)

        if diagnostic.hint:
            parts.append(f"  = help: {_escape_control(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            TOKEN_UNKNOWN: Unknown token 'yyy' in date pattern 'yyy-mm-dd'
        """
        return f"{diagnostic.code.name}: {_escape_control(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "TOKEN_UNKNOWN", "code_value": 2001, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
        }

        if diagnostic.pattern is not None:
            data["pattern"] = diagnostic.pattern

        if diagnostic.span:
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)
