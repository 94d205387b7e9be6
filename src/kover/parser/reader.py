"""Read a framed scene from a stream of lines.

    begin scene
    building b1 0 0 2 1
    antenna a1 5 5 3
    end scene

The stream is consumed once, top to bottom. Reading stops at the end
marker; anything after it is left unread.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable

from kover.errors import (
    LineTooLongError,
    MissingEndMarkerError,
    MissingStartMarkerError,
    SceneError,
)
from kover.models.scene import Scene, SceneBuilder
from kover.parser.line import parse_line

logger = logging.getLogger(__name__)

BEGIN_MARKER = "begin scene"
END_MARKER = "end scene"


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def read_scene(lines: Iterable[str], max_line_length: int | None = None) -> Scene:
    """Read and validate a complete scene.

    Args:
        lines: Line source, e.g. an open text file or sys.stdin. A trailing
            newline on each line is ignored.
        max_line_length: Reject lines whose content is longer than this.
            None means no limit.

    Returns:
        The validated, frozen Scene.

    Raises:
        SceneError: on the first framing, syntax or consistency violation.
            Builder errors are tagged with the offending line number.
    """
    it = iter(lines)
    first = next(it, None)
    if first is None or _strip_newline(first) != BEGIN_MARKER:
        raise MissingStartMarkerError(BEGIN_MARKER)

    builder = SceneBuilder()
    line_num = 1
    for raw in it:
        line_num += 1
        line = _strip_newline(raw)
        if max_line_length is not None and len(line) > max_line_length:
            raise LineTooLongError(max_line_length, line_num)
        if line == END_MARKER:
            scene = builder.build()
            logger.debug(
                "Read scene with %d buildings and %d antennas over %d lines",
                len(scene.buildings), len(scene.antennas), line_num,
            )
            return scene
        record = parse_line(line, line_num)
        try:
            builder.add(record)
        except SceneError as e:
            if e.line_num is None:
                e.line_num = line_num
            raise

    raise MissingEndMarkerError(END_MARKER)


def parse_scene(text: str, max_line_length: int | None = None) -> Scene:
    """Read a scene from a string."""
    return read_scene(io.StringIO(text), max_line_length=max_line_length)
