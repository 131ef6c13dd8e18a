"""Decimal format pattern parsing.

A pattern is split into three parts: a literal prefix, a numeric body made
of ``0``, ``#``, ``,`` and ``.``, and a literal suffix. The result is an
immutable ``PatternSpec`` describing digit counts, grouping and scaling.

The body starts at the first unescaped ``0``, ``#``, ``,`` or ``.``, so a
prefix containing ``.`` or ``,`` must escape them: ``"Rs\\.#,##0"``.
Everything after the body is suffix text.

Pattern characters:
    0   mandatory digit
    #   optional digit
    ,   grouping separator (integer part only)
    .   decimal point
    %   suffix marker, multiply by 100
    ‰   suffix marker, multiply by 1000
    \\   escape the next character as a literal

Example:
    >>> spec = parse_pattern("#,##0.00")
    >>> spec.grouping_size, spec.fraction_min_digits
    (3, 2)
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import NamedTuple

from decimalfmt.exceptions import PatternSyntaxError

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "#,##0.###"
DEFAULT_GROUPING_SIZE = 3

ESCAPE = "\\"
MANDATORY_DIGIT = "0"
OPTIONAL_DIGIT = "#"
GROUPING_SEPARATOR = ","
DECIMAL_SEPARATOR = "."
PERCENT = "%"
PER_MILLE = "‰"
PLUS_SIGN = "+"

_BODY_CHARS = frozenset((MANDATORY_DIGIT, OPTIONAL_DIGIT, GROUPING_SEPARATOR, DECIMAL_SEPARATOR))
_SCALE_MARKERS = {PERCENT: 100, PER_MILLE: 1000}

MULTIPLE_DECIMAL_SEPARATORS = "Multiple decimal separators in pattern"
MALFORMED_PATTERN = "Malformed pattern"
UNEXPECTED_ZERO = f"Unexpected '{MANDATORY_DIGIT}' in pattern"


@dataclass(frozen=True)
class PatternSpec:
    """Parsed, immutable form of a decimal format pattern.

    Attributes:
        pattern: Source pattern string.
        prefix: Literal text before the number, escapes resolved.
        suffix: Literal text after the number, escapes resolved.
        integer_min_digits: Number of mandatory integer digits.
        grouping_enabled: Whether grouping separators are inserted.
        grouping_size: Digits per group, counted from the right.
        fraction_min_digits: Mandatory fraction digits.
        fraction_max_digits: Maximum fraction digits kept after rounding.
        scale: Multiplier applied before formatting (1, 100 or 1000).
        sign_slot: Index of an unescaped ``+`` in ``prefix``, if any.
    """

    pattern: str
    prefix: str = ""
    suffix: str = ""
    integer_min_digits: int = 1
    grouping_enabled: bool = False
    grouping_size: int = DEFAULT_GROUPING_SIZE
    fraction_min_digits: int = 0
    fraction_max_digits: int = 0
    scale: int = 1
    sign_slot: int | None = None

    def __post_init__(self) -> None:
        if self.integer_min_digits < 0:
            raise ValueError("integer_min_digits must be non-negative")
        if self.grouping_size <= 0:
            raise ValueError("grouping_size must be positive")
        if not 0 <= self.fraction_min_digits <= self.fraction_max_digits:
            raise ValueError("fraction digits must satisfy 0 <= min <= max")
        if self.scale not in (1, 100, 1000):
            raise ValueError("scale must be 1, 100 or 1000")
        if self.sign_slot is not None and self.prefix[self.sign_slot : self.sign_slot + 1] != PLUS_SIGN:
            raise ValueError("sign_slot must point at a '+' in prefix")


class _Token(NamedTuple):
    char: str
    escaped: bool
    position: int

    @property
    def is_body(self) -> bool:
        return not self.escaped and self.char in _BODY_CHARS


def _tokenize(pattern: str) -> list[_Token]:
    tokens = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == ESCAPE:
            if i + 1 >= len(pattern):
                raise PatternSyntaxError(MALFORMED_PATTERN, pattern, i)
            tokens.append(_Token(pattern[i + 1], True, i))
            i += 2
        else:
            tokens.append(_Token(char, False, i))
            i += 1
    return tokens


def _parse_integer(tokens: list[_Token], pattern: str) -> tuple[int, bool, int]:
    """Return (min digits, grouping enabled, grouping size) for the integer part."""
    mandatory = 0
    run = 0
    groups: list[int] = []

    for token in tokens:
        if token.char == GROUPING_SEPARATOR:
            if run == 0:
                raise PatternSyntaxError(MALFORMED_PATTERN, pattern, token.position)
            groups.append(run)
            run = 0
        elif token.char == OPTIONAL_DIGIT:
            if mandatory:
                raise PatternSyntaxError(UNEXPECTED_ZERO, pattern, token.position)
            run += 1
        else:
            mandatory += 1
            run += 1

    if not groups:
        return mandatory, False, DEFAULT_GROUPING_SIZE

    if run == 0:
        raise PatternSyntaxError(MALFORMED_PATTERN, pattern, tokens[-1].position)
    # The leading group may be short; interior groups must match the last one.
    if any(size != run for size in groups[1:]):
        raise PatternSyntaxError(MALFORMED_PATTERN, pattern, tokens[0].position)
    return mandatory, True, run


def _parse_fraction(tokens: list[_Token], pattern: str) -> tuple[int, int]:
    """Return (min digits, max digits) for the fraction part."""
    mandatory = 0
    optional = 0
    for token in tokens:
        if token.char == GROUPING_SEPARATOR:
            raise PatternSyntaxError(MALFORMED_PATTERN, pattern, token.position)
        if token.char == MANDATORY_DIGIT:
            if optional:
                raise PatternSyntaxError(UNEXPECTED_ZERO, pattern, token.position)
            mandatory += 1
        else:
            optional += 1
    return mandatory, mandatory + optional


def _parse_suffix(tokens: list[_Token], pattern: str) -> int:
    scale = 1
    for token in tokens:
        if token.escaped or token.char not in _SCALE_MARKERS:
            continue
        if scale != 1:
            raise PatternSyntaxError(MALFORMED_PATTERN, pattern, token.position)
        scale = _SCALE_MARKERS[token.char]
    return scale


@functools.lru_cache(maxsize=256)
def parse_pattern(pattern: str) -> PatternSpec:
    """Parse a decimal format pattern.

    Args:
        pattern: Pattern string such as ``"#,##0.00"``.

    Returns:
        The parsed PatternSpec.

    Raises:
        PatternSyntaxError: If the pattern violates the grammar.
    """
    tokens = _tokenize(pattern)

    start = next((i for i, token in enumerate(tokens) if token.is_body), None)
    if start is None:
        raise PatternSyntaxError(MALFORMED_PATTERN, pattern, 0)
    end = start
    while end < len(tokens) and tokens[end].is_body:
        end += 1

    prefix_tokens = tokens[:start]
    body = tokens[start:end]
    suffix_tokens = tokens[end:]

    if not any(token.char in (MANDATORY_DIGIT, OPTIONAL_DIGIT) for token in body):
        raise PatternSyntaxError(MALFORMED_PATTERN, pattern, body[0].position)

    points = [i for i, token in enumerate(body) if token.char == DECIMAL_SEPARATOR]
    if len(points) > 1:
        raise PatternSyntaxError(MULTIPLE_DECIMAL_SEPARATORS, pattern, body[points[1]].position)

    if points:
        integer_tokens, fraction_tokens = body[: points[0]], body[points[0] + 1 :]
    else:
        integer_tokens, fraction_tokens = body, []

    integer_min, grouping_enabled, grouping_size = _parse_integer(integer_tokens, pattern)
    fraction_min, fraction_max = _parse_fraction(fraction_tokens, pattern)
    scale = _parse_suffix(suffix_tokens, pattern)

    sign_slot = next(
        (i for i, token in enumerate(prefix_tokens) if not token.escaped and token.char == PLUS_SIGN),
        None,
    )

    spec = PatternSpec(
        pattern=pattern,
        prefix="".join(token.char for token in prefix_tokens),
        suffix="".join(token.char for token in suffix_tokens),
        integer_min_digits=integer_min,
        grouping_enabled=grouping_enabled,
        grouping_size=grouping_size,
        fraction_min_digits=fraction_min,
        fraction_max_digits=fraction_max,
        scale=scale,
        sign_slot=sign_slot,
    )
    logger.debug(f"Parsed pattern {pattern!r}: {spec}")
    return spec
