"""Parse one scene line into a Building or an Antenna.

Line grammar (tokens separated by any run of spaces or tabs):

    building ID X Y W H
    antenna ID X Y R

Validation stops at the first failure, in order: keyword, token count,
identifier, x, y, then the positive dimensions (W then H, or R).
"""

from __future__ import annotations

import re
from collections.abc import Callable

from kover.errors import (
    InvalidIdentifierError,
    InvalidIntegerError,
    InvalidPositiveIntegerError,
    InvalidTokenError,
    MalformedLineError,
    UnrecognizedLineError,
)
from kover.models.elements import Antenna, Building
from kover.validators.lexical import (
    is_valid_identifier,
    is_valid_integer,
    is_valid_positive_integer,
)

BUILDING_KEYWORD = "building"
ANTENNA_KEYWORD = "antenna"

_BLANKS = re.compile(r"[ \t]+")


def tokenize(line: str) -> list[str]:
    """Split on runs of blanks, ignoring leading and trailing blanks."""
    stripped = line.strip(" \t")
    if not stripped:
        return []
    return _BLANKS.split(stripped)


def _to_int(
    token: str,
    valid: Callable[[str], bool],
    error: type[InvalidTokenError],
    line_num: int,
) -> int:
    """Check a numeric token and convert it."""
    if not valid(token):
        raise error(token, line_num)
    try:
        return int(token)
    except ValueError:
        # digit strings beyond the interpreter's int conversion limit
        raise error(token, line_num) from None


def _parse_fields(
    tokens: list[str],
    kind: str,
    positive_count: int,
    line_num: int,
) -> tuple[str, list[int]]:
    """Validate `kind ID X Y` followed by `positive_count` positive integers.

    Returns the identifier and the converted numbers, in line order.
    """
    if len(tokens) != 4 + positive_count:
        raise MalformedLineError(kind, line_num)
    _, element_id, x, y, *dims = tokens
    if not is_valid_identifier(element_id):
        raise InvalidIdentifierError(element_id, line_num)
    coords = [_to_int(c, is_valid_integer, InvalidIntegerError, line_num) for c in (x, y)]
    sizes = [
        _to_int(d, is_valid_positive_integer, InvalidPositiveIntegerError, line_num)
        for d in dims
    ]
    return element_id, coords + sizes


def parse_building(tokens: list[str], line_num: int) -> Building:
    """Build a Building from the tokens of a `building` line."""
    element_id, (x, y, w, h) = _parse_fields(tokens, BUILDING_KEYWORD, 2, line_num)
    return Building(id=element_id, x=x, y=y, w=w, h=h)


def parse_antenna(tokens: list[str], line_num: int) -> Antenna:
    """Build an Antenna from the tokens of an `antenna` line."""
    element_id, (x, y, r) = _parse_fields(tokens, ANTENNA_KEYWORD, 1, line_num)
    return Antenna(id=element_id, x=x, y=y, r=r)


def parse_line(line: str, line_num: int) -> Building | Antenna:
    """Parse an interior scene line.

    Args:
        line: Raw line content, newline already stripped.
        line_num: 1-based position in the stream, used in error messages.

    Returns:
        The typed record described by the line.

    Raises:
        UnrecognizedLineError: first token is neither keyword (or the line is blank).
        MalformedLineError: wrong number of tokens for the keyword.
        InvalidTokenError: a token fails its lexical rule.
    """
    tokens = tokenize(line)
    keyword = tokens[0] if tokens else ""
    if keyword == BUILDING_KEYWORD:
        return parse_building(tokens, line_num)
    if keyword == ANTENNA_KEYWORD:
        return parse_antenna(tokens, line_num)
    raise UnrecognizedLineError(line_num)
