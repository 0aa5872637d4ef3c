"""Exceptions raised at the JSON text boundary.

The core operations (normalize, compare, reduce_stats) never raise these; they
come from decoding text into the value model.  A decode failure is always
reported as an error and never turned into a null value.
"""

from __future__ import annotations

__all__ = [
    "InputTooLargeError",
    "InvalidJSONError",
    "JsonNormDiffError",
    "NestingTooDeepError",
]


class JsonNormDiffError(Exception):
    """Base class for all errors raised by json-normdiff."""


class InvalidJSONError(JsonNormDiffError, ValueError):
    """The input text is not valid JSON.

    Attributes:
        reason: The decoder's diagnostic message.
        side:   "left" or "right" when raised by a two-document comparison,
                otherwise None.
        lineno: 1-based line of the failure, when known.
        colno:  1-based column of the failure, when known.
    """

    def __init__(
        self,
        reason: str,
        side: str | None = None,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        self.reason = reason
        self.side = side
        self.lineno = lineno
        self.colno = colno
        prefix = f"invalid {side} JSON" if side else "invalid JSON"
        super().__init__(f"{prefix}: {reason}")


class InputTooLargeError(JsonNormDiffError):
    """The input text exceeds the configured byte budget."""

    def __init__(self, size: int, limit: int, side: str | None = None) -> None:
        self.size = size
        self.limit = limit
        self.side = side
        label = f"{side} input" if side else "input"
        super().__init__(f"{label} is {size} bytes, limit is {limit} bytes")


class NestingTooDeepError(JsonNormDiffError):
    """The decoded document nests deeper than the configured ceiling."""

    def __init__(self, limit: int, side: str | None = None) -> None:
        self.limit = limit
        self.side = side
        label = f"{side} input" if side else "input"
        super().__init__(f"{label} nests deeper than {limit} levels")
