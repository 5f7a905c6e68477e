"""Diagnostic system for date pattern errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import DateFormatError, InvalidFormatError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidFormatError",
    "OutputFormat",
    "SourceSpan",
]
