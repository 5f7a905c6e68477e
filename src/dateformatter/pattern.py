"""Format pattern compiler.

Turns a pattern string such as "dd mmmm yyyy" into an immutable
FormatPattern, or rejects it with InvalidFormatError. Grammar:

    pattern   := part SEP part SEP part
    SEP       := one of "/" "." "-" " " (same character in both gaps)
    part      := token
    token     := yy | yyyy | m | mm | mmm | mmmm | d | dd | ddd | dddd

One token from each family (year, month, day), in any order. Tokens are
matched exactly and case-sensitively.

Compiled patterns are cached per pattern string. Rejections are not
cached; an invalid pattern raises on every call.

Thread-safe. Python 3.13+.
"""

import functools
import logging
from dataclasses import dataclass
from datetime import date

from .constants import MAX_PATTERN_CACHE_SIZE, PART_COUNT, SEPARATORS
from .diagnostics import Diagnostic, ErrorTemplate, InvalidFormatError, SourceSpan
from .enums import Family, Separator
from .tokens import Token, classify

__all__ = ["FormatPattern", "clear_pattern_cache", "compile_pattern"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatPattern:
    """A validated format pattern.

    Attributes:
        source: Pattern string as given
        separator: Character joining the parts
        tokens: Tokens in positional order
    """

    source: str
    separator: Separator
    tokens: tuple[Token, ...]

    def render(self, value: date) -> str:
        """Render each token against ``value`` and join with the separator."""
        return self.separator.join(token.render(value) for token in self.tokens)


def _invalid(pattern: str, diagnostic: Diagnostic) -> InvalidFormatError:
    logger.debug("Rejected date pattern %r: %s", pattern, diagnostic.code.name)
    return InvalidFormatError(diagnostic, pattern=pattern)


def _find_separator(pattern: str) -> tuple[Separator, int]:
    """Return the first separator character and its offset.

    Raises:
        InvalidFormatError: No separator, or a second kind of separator
    """
    position = next(
        (index for index, char in enumerate(pattern) if char in SEPARATORS), None
    )
    if position is None:
        raise _invalid(pattern, ErrorTemplate.separator_missing(pattern))

    separator = Separator(pattern[position])
    for index in range(position + 1, len(pattern)):
        char = pattern[index]
        if char in SEPARATORS and char != separator:
            diagnostic = ErrorTemplate.separator_mixed(pattern, separator, char, index)
            raise _invalid(pattern, diagnostic)
    return separator, position


def _split(pattern: str, separator: Separator, position: int) -> list[tuple[str, int]]:
    """Split into (segment, offset) pairs, enforcing three non-empty parts."""
    segments: list[tuple[str, int]] = []
    offset = 0
    for text in pattern.split(separator):
        segments.append((text, offset))
        offset += len(text) + 1

    if len(segments) < PART_COUNT:
        diagnostic = ErrorTemplate.separator_too_few(pattern, separator, position)
        raise _invalid(pattern, diagnostic)
    if len(segments) > PART_COUNT:
        # Span starts at the separator that opens the first extra part
        extra_start = segments[PART_COUNT][1] - 1
        span = SourceSpan(extra_start, len(pattern))
        diagnostic = ErrorTemplate.part_count_invalid(pattern, len(segments), span)
        raise _invalid(pattern, diagnostic)

    for index, (text, offset) in enumerate(segments):
        if not text:
            raise _invalid(pattern, ErrorTemplate.part_empty(pattern, index, offset))
    return segments


def _classify_segment(pattern: str, text: str, offset: int) -> Token:
    token = classify(text)
    if token is not None:
        return token

    span = SourceSpan(offset, offset + len(text))
    lowered = text.lower()
    if classify(lowered) is not None:
        diagnostic = ErrorTemplate.token_wrong_case(pattern, text, lowered, span)
    else:
        diagnostic = ErrorTemplate.token_unknown(pattern, text, span)
    raise _invalid(pattern, diagnostic)


def _check_families(
    pattern: str, tokens: tuple[Token, ...], segments: list[tuple[str, int]]
) -> None:
    """Require one token per family."""
    covered = {token.family for token in tokens}
    seen: set[Family] = set()
    for token, (text, offset) in zip(tokens, segments, strict=True):
        if token.family in seen:
            missing = next(family for family in Family if family not in covered)
            span = SourceSpan(offset, offset + len(text))
            diagnostic = ErrorTemplate.family_duplicate(
                pattern, token.family, text, missing, span
            )
            raise _invalid(pattern, diagnostic)
        seen.add(token.family)


@functools.lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def _compile(pattern: str) -> FormatPattern:
    separator, position = _find_separator(pattern)
    segments = _split(pattern, separator, position)
    tokens = tuple(_classify_segment(pattern, text, offset) for text, offset in segments)
    _check_families(pattern, tokens, segments)

    logger.debug(
        "Compiled date pattern %r: %s",
        pattern,
        " ".join(token.name for token in tokens),
    )
    return FormatPattern(source=pattern, separator=separator, tokens=tokens)


def compile_pattern(pattern: str) -> FormatPattern:
    """Parse and validate a format pattern.

    Args:
        pattern: Pattern string, e.g. "yyyy-mm-dd" or "dddd mmm yy"

    Returns:
        Compiled FormatPattern (cached per pattern string)

    Raises:
        InvalidFormatError: Pattern does not conform to the grammar

    Example:
        >>> compiled = compile_pattern("m/d/yy")
        >>> compiled.separator
        <Separator.SLASH: '/'>
        >>> compiled.render(date(2024, 1, 5))
        '1/5/24'
    """
    # Runtime defense for untyped callers; also keeps unhashables out of the cache
    if not isinstance(pattern, str):
        type_name = type(pattern).__name__  # type: ignore[unreachable]
        diagnostic = ErrorTemplate.pattern_not_string(type_name)
        raise InvalidFormatError(diagnostic, pattern=str(pattern))
    return _compile(pattern)


def clear_pattern_cache() -> None:
    """Drop all compiled patterns."""
    _compile.cache_clear()
