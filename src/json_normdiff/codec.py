"""Text boundary: decoding JSON text into the value model and rendering it back.

Decoding maps every JSON number to ``float`` (``parse_int=float``), so ``1``
and ``1.0`` in the source text decode to the same value and the normalizer
sees a uniform numeric representation.  The non-standard constants ``NaN``,
``Infinity`` and ``-Infinity`` that ``json`` accepts by default are rejected
as invalid JSON.

``DecodeLimits`` puts an explicit ceiling on input size and nesting depth.
Normalization and diffing recurse once per nesting level, so a document that
passes ``loads`` is always shallow enough to be processed without hitting
the interpreter's recursion limit.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from json_normdiff.errors import (
    InputTooLargeError,
    InvalidJSONError,
    NestingTooDeepError,
)
from json_normdiff.model.kinds import ValueKind, kind_of
from json_normdiff.normalize.options import NormalizeOptions

__all__ = ["DecodeLimits", "dumps", "loads", "validate"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecodeLimits:
    """Immutable resource ceilings applied by ``loads``.

    Attributes:
        max_depth: Maximum container nesting depth (a scalar document has
            depth 0, ``[]`` and ``{}`` have depth 1).  Default 256.
        max_bytes: Maximum UTF-8 size of the input text, or None for no
            limit.  Default None.
    """

    max_depth: int = 256
    max_bytes: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.max_bytes is not None and self.max_bytes < 0:
            msg = f"max_bytes must be >= 0 or None, got {self.max_bytes}"
            raise ValueError(msg)


def loads(
    text: str | bytes,
    limits: DecodeLimits | None = None,
    side: str | None = None,
) -> Any:
    """Decode JSON text into the value model.

    Args:
        text:   JSON document as ``str`` or UTF-8 ``bytes``.
        limits: Size and depth ceilings.  Defaults to ``DecodeLimits()``.
        side:   Optional label ("left"/"right") attached to raised errors.

    Returns:
        The decoded value; all numbers are ``float``.

    Raises:
        InvalidJSONError: If the text is not valid JSON.
        InputTooLargeError: If the text exceeds ``limits.max_bytes``.
        NestingTooDeepError: If nesting exceeds ``limits.max_depth``.
    """
    limits = limits if limits is not None else DecodeLimits()

    if limits.max_bytes is not None:
        size = len(text) if isinstance(text, bytes) else len(text.encode("utf-8"))
        if size > limits.max_bytes:
            raise InputTooLargeError(size, limits.max_bytes, side=side)

    def reject_constant(token: str) -> Any:
        logger.debug("JSON decode failed (side=%s): constant %s", side, token)
        raise InvalidJSONError(f"{token} is not a valid JSON value", side=side)

    try:
        value = json.loads(text, parse_int=float, parse_constant=reject_constant)
    except json.JSONDecodeError as exc:
        logger.debug("JSON decode failed (side=%s): %s", side, exc)
        raise InvalidJSONError(
            exc.msg, side=side, lineno=exc.lineno, colno=exc.colno
        ) from exc
    except UnicodeDecodeError as exc:
        logger.debug("JSON decode failed (side=%s): %s", side, exc)
        raise InvalidJSONError(str(exc), side=side) from exc
    except RecursionError as exc:
        logger.debug("JSON decode failed (side=%s): nesting too deep", side)
        raise NestingTooDeepError(limits.max_depth, side=side) from exc

    if _depth_exceeds(value, limits.max_depth):
        raise NestingTooDeepError(limits.max_depth, side=side)

    return value


def _depth_exceeds(value: Any, max_depth: int) -> bool:
    """Return True if ``value`` nests containers deeper than ``max_depth``.

    Iterative so that arbitrarily deep input cannot overflow the stack here.
    """
    stack: list[tuple[Any, int]] = [(value, 0)]
    while stack:
        current, depth = stack.pop()
        kind = kind_of(current)
        if not kind.is_container:
            continue
        depth += 1
        if depth > max_depth:
            return True
        members = current.values() if kind == ValueKind.OBJECT else current
        stack.extend((member, depth) for member in members)
    return False


def dumps(
    value: Any,
    options: NormalizeOptions | None = None,
    indent: int | None = 2,
) -> str:
    """Render a value as JSON text.

    Object keys are emitted in sorted order when ``options.sort_keys`` is set
    (the default), otherwise in insertion order.  Non-ASCII characters are
    written as-is.

    Args:
        value:   Any JSON value.
        options: Normalization settings consulted for key ordering.
        indent:  Indentation width, or None for compact single-line output.
    """
    options = options if options is not None else NormalizeOptions()
    separators = None if indent is not None else (",", ":")
    return json.dumps(
        value,
        indent=indent,
        sort_keys=options.sort_keys,
        ensure_ascii=False,
        separators=separators,
    )


def validate(text: str | bytes, limits: DecodeLimits | None = None) -> str | None:
    """Return None when ``text`` decodes within ``limits``, else the error message."""
    try:
        loads(text, limits=limits)
    except (InvalidJSONError, InputTooLargeError, NestingTooDeepError) as exc:
        return str(exc)
    return None
