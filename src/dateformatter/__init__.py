"""dateformatter - render dates through a small pattern language.

Formats a date with a three-part pattern such as "dd mmmm yyyy" or
"m/d/yy". Month and weekday names are English, taken from the Unicode
CLDR via Babel.

Public API:
    format_date - Render a date according to a pattern
    compile_pattern - Validate a pattern once, render it many times
    FormatPattern - Compiled pattern (separator + tokens)
    Token - The ten pattern tokens

Exceptions:
    DateFormatError - Base exception class
    InvalidFormatError - Pattern does not conform to the grammar

Submodules:
    dateformatter.diagnostics - Diagnostic codes, templates and formatter
    dateformatter.names - Month and weekday name tables
    dateformatter.cli - Command line front end
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import DateFormatError, InvalidFormatError
from .engine import format_date
from .pattern import FormatPattern, clear_pattern_cache, compile_pattern
from .tokens import Token

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("dateformatter")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateFormatError",
    "FormatPattern",
    "InvalidFormatError",
    "Token",
    "__version__",
    "clear_pattern_cache",
    "compile_pattern",
    "format_date",
]
