"""Scene text parsing.

- line: one interior line → Building or Antenna
- reader: begin/end framing over a line stream → Scene
"""

from kover.parser.line import parse_antenna, parse_building, parse_line, tokenize
from kover.parser.reader import BEGIN_MARKER, END_MARKER, parse_scene, read_scene

__all__ = [
    "parse_antenna",
    "parse_building",
    "parse_line",
    "tokenize",
    "BEGIN_MARKER",
    "END_MARKER",
    "parse_scene",
    "read_scene",
]
