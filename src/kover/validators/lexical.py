"""Lexical validation of scene tokens.

Pure predicates on strings. Only ASCII letters and digits are accepted,
so tokens like "٣" (Arabic-Indic three) are rejected even though
str.isdigit() would say otherwise.
"""

from __future__ import annotations

import re

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
# "0" alone, or an optional minus followed by digits without a leading zero.
# "-0" is not a valid spelling of zero.
_INTEGER = re.compile(r"0|-?[1-9][0-9]*")
_POSITIVE_INTEGER = re.compile(r"[1-9][0-9]*")


def is_valid_identifier(token: str) -> bool:
    """Letter or underscore first, then letters, digits or underscores."""
    return _IDENTIFIER.fullmatch(token) is not None


def is_valid_integer(token: str) -> bool:
    """Signed decimal integer without leading zeros."""
    return _INTEGER.fullmatch(token) is not None


def is_valid_positive_integer(token: str) -> bool:
    """Unsigned decimal integer >= 1 without leading zeros."""
    return _POSITIVE_INTEGER.fullmatch(token) is not None
