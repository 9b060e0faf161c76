"""
Range Spec Compiler

Compiles character-alternative specifications such as "A-Za-z0-9" or "!-~"
into membership predicates over the byte domain.

Syntax, applied left to right:
- Literal characters match themselves
- "x-y" matches every code from x to y inclusive
- "]" as the first character is a literal
- "-" as the first or last character, or right after a completed range, is a literal
- "^" is always a literal; a leading "^" does not negate the spec

Negation is expressed by compiling a separate exclude spec and subtracting it,
never by a leading marker.
"""

from typing import Optional

import structlog

from rangepass.core.domain.errors import EmptyAllowedSetError, InvalidSpecError
from rangepass.core.domain.models import (
    BYTE_DOMAIN,
    AllowedSet,
    CharacterRange,
    CharacterRangeSpec,
)

logger = structlog.get_logger()

RANGE_OPERATOR = "-"
MAX_CODE = BYTE_DOMAIN[-1]


def _check_domain(spec: str, position: int) -> str:
    char = spec[position]
    if ord(char) > MAX_CODE:
        raise InvalidSpecError(
            f"Character {char!r} is outside the byte range 0-{MAX_CODE}",
            spec=spec,
            position=position,
        )
    return char


def parse_range_spec(spec: str) -> CharacterRangeSpec:
    """
    Parse a specification string into literals and ranges.

    Args:
        spec: Character-alternative specification

    Returns:
        CharacterRangeSpec with items in source order

    Raises:
        InvalidSpecError: If the spec is empty, a range is descending, or a
            character falls outside the byte domain
    """
    if not spec:
        raise InvalidSpecError("Character specification is empty", spec=spec)

    items: list[CharacterRange] = []
    # True while the last item is a literal that may open a range
    can_start_range = False
    last = len(spec) - 1
    i = 0
    while i <= last:
        char = _check_domain(spec, i)

        if char == RANGE_OPERATOR and 0 < i < last and can_start_range:
            start = items.pop().start
            end = _check_domain(spec, i + 1)
            if ord(end) < ord(start):
                raise InvalidSpecError(
                    f"Range {start}-{end} is out of order",
                    spec=spec,
                    position=i - 1,
                )
            items.append(CharacterRange(start, end))
            can_start_range = False
            i += 2
            continue

        items.append(CharacterRange(char, char))
        can_start_range = True
        i += 1

    return CharacterRangeSpec(source=spec, items=tuple(items))


def compile_range_spec(spec: str) -> AllowedSet:
    """Compile a spec string into a membership predicate over the byte domain."""
    return AllowedSet(parse_range_spec(spec).codes())


def resolve_allowed_set(include: str, exclude: Optional[str] = None) -> AllowedSet:
    """
    Resolve include minus exclude into the final allowed set.

    An exclude spec of exactly "^" removes the literal caret only. An empty
    or missing exclude spec removes nothing.

    Raises:
        InvalidSpecError: If either spec is malformed
        EmptyAllowedSetError: If no character survives the exclusion
    """
    codes = compile_range_spec(include).codes
    if exclude:
        codes = codes - compile_range_spec(exclude).codes

    allowed = AllowedSet(codes)
    if allowed.is_empty:
        logger.warning("allowed_set.empty", include=include, exclude=exclude)
        raise EmptyAllowedSetError(include, exclude)

    logger.debug(
        "allowed_set.resolved",
        include=include,
        exclude=exclude,
        size=len(allowed),
    )
    return allowed
