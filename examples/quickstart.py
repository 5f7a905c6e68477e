"""Quickstart example for dateformatter.

This example demonstrates formatting dates with patterns, reusing a
compiled pattern, and inspecting diagnostics for rejected patterns.
"""

from datetime import date, datetime

from dateformatter import InvalidFormatError, compile_pattern, format_date
from dateformatter.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Simple formatting
print("=" * 50)
print("Example 1: Simple Formatting")
print("=" * 50)

sunday = date(2024, 3, 17)
print(format_date(sunday, "dd mmmm yyyy"))
# Output: 17 March 2024

print(format_date(date(2024, 1, 5), "m/d/yy"))
# Output: 1/5/24

print(format_date(sunday, "dddd mmm yy"))
# Output: Sunday Mar 24

# Example 2: Separators
print("\n" + "=" * 50)
print("Example 2: Separators")
print("=" * 50)

for pattern in ("mmm yyyy dd", "mmm/yyyy/dd", "mmm.yyyy.dd", "mmm-yyyy-dd"):
    print(f"{pattern!r:16} -> {format_date(sunday, pattern)}")
# Output: Mar 2024 17, Mar/2024/17, Mar.2024.17, Mar-2024-17

# Example 3: Compile once, render many
print("\n" + "=" * 50)
print("Example 3: Compiled Pattern")
print("=" * 50)

european = compile_pattern("dd.mm.yyyy")
for day in (1, 15, 31):
    print(european.render(date(2024, 12, day)))
# Output: 01.12.2024, 15.12.2024, 31.12.2024

# datetime works too; the time part is ignored
print(european.render(datetime(2024, 12, 24, 18, 30)))
# Output: 24.12.2024

# Example 4: Diagnostics
print("\n" + "=" * 50)
print("Example 4: Rejected Patterns")
print("=" * 50)

for pattern in ("yyyy-mm", "yyy-mm-dd", "YYYY-MM-DD", "yyyy-yyyy-dd", "yyyy-mm/dd"):
    try:
        format_date(sunday, pattern)
    except InvalidFormatError as e:
        print(e)
        print()

simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
try:
    format_date(sunday, "yyyy_mm_dd")
except InvalidFormatError as e:
    if e.diagnostic is not None:
        print(simple.format(e.diagnostic))
# Output: SEPARATOR_MISSING: Date pattern 'yyyy_mm_dd' has no separator
