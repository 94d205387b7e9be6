"""Scene reading errors.

Every failure raised while reading a scene derives from SceneError, a
ValueError subclass. The first error aborts the read; nothing is retried
or collected. Structured fields (line number, offending token, ids) live
on the exception so callers can render them without parsing messages.
"""

from __future__ import annotations


class SceneError(ValueError):
    """Base class for scene syntax and consistency errors."""

    def __init__(self, message: str, line_num: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_num = line_num

    def __str__(self) -> str:
        return self.message


# ── Framing ──────────────────────────────────────────────────────────


class MissingStartMarkerError(SceneError):
    def __init__(self, marker: str) -> None:
        super().__init__(f"first line must be exactly '{marker}'", line_num=1)


class MissingEndMarkerError(SceneError):
    def __init__(self, marker: str) -> None:
        super().__init__(f"last line must be exactly '{marker}'")


class LineTooLongError(SceneError):
    def __init__(self, limit: int, line_num: int) -> None:
        super().__init__(
            f"line exceeds {limit} characters (line #{line_num})", line_num
        )
        self.limit = limit


# ── Line syntax ──────────────────────────────────────────────────────


class UnrecognizedLineError(SceneError):
    def __init__(self, line_num: int) -> None:
        super().__init__(f"unrecognized line (line #{line_num})", line_num)


class MalformedLineError(SceneError):
    """Recognized keyword followed by the wrong number of tokens."""

    def __init__(self, kind: str, line_num: int) -> None:
        super().__init__(
            f"{kind} line has wrong number of arguments (line #{line_num})",
            line_num,
        )
        self.kind = kind


class InvalidTokenError(SceneError):
    """A token failed lexical validation."""

    label = "token"

    def __init__(self, token: str, line_num: int) -> None:
        super().__init__(f'invalid {self.label} "{token}" (line #{line_num})', line_num)
        self.token = token


class InvalidIdentifierError(InvalidTokenError):
    label = "identifier"


class InvalidIntegerError(InvalidTokenError):
    label = "integer"


class InvalidPositiveIntegerError(InvalidTokenError):
    label = "positive integer"


# ── Scene consistency ────────────────────────────────────────────────


class DuplicateIdError(SceneError):
    def __init__(self, kind: str, element_id: str) -> None:
        super().__init__(f"{kind} identifier {element_id} is non unique")
        self.kind = kind
        self.element_id = element_id


class OverlapError(SceneError):
    """Two buildings overlap. ids are (earlier, later)."""

    def __init__(self, first_id: str, second_id: str) -> None:
        super().__init__(f"buildings {first_id} and {second_id} are overlapping")
        self.ids = (first_id, second_id)


class SamePositionError(SceneError):
    """Two antennas are collocated. ids are (earlier, later)."""

    def __init__(self, first_id: str, second_id: str) -> None:
        super().__init__(
            f"antennas {first_id} and {second_id} have the same position"
        )
        self.ids = (first_id, second_id)
