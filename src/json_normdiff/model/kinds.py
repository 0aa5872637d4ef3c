"""ValueKind StrEnum and the single dispatcher over decoded JSON values.

Every recursive walk in this package (normalizer, diff engine, path
extractor, codec depth check) classifies values through ``kind_of`` instead of
its own ``isinstance`` chain, so the six JSON shapes are handled in exactly
one place.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = ["CONTAINER_KINDS", "JsonValue", "ValueKind", "kind_of"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """Enumeration of the six JSON value shapes.

    Declaration order is the sort rank used by the total order
    (``NULL`` lowest, ``OBJECT`` highest):

    - NULL    -> "null"
    - BOOL    -> "bool"
    - NUMBER  -> "number"  : both ``int`` and ``float``
    - STRING  -> "string"
    - ARRAY   -> "array"   : Python ``list``
    - OBJECT  -> "object"  : Python ``dict`` with ``str`` keys
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def rank(self) -> int:
        """Position of this kind in the cross-type sort order (0..5)."""
        return _RANKS[self]

    @property
    def is_container(self) -> bool:
        return self in CONTAINER_KINDS


_RANKS: dict[ValueKind, int] = {kind: rank for rank, kind in enumerate(ValueKind)}

CONTAINER_KINDS = frozenset({ValueKind.ARRAY, ValueKind.OBJECT})


def kind_of(value: Any) -> ValueKind:
    """Classify a decoded JSON value.

    Args:
        value: Any value produced by a JSON decoder.

    Returns:
        The matching ``ValueKind``.

    Raises:
        TypeError: If value is not a JSON type.
    """
    if value is None:
        return ValueKind.NULL

    # CRITICAL: bool MUST be checked before int (bool subclasses int in Python)
    if isinstance(value, bool):
        return ValueKind.BOOL

    if isinstance(value, (int, float)):
        return ValueKind.NUMBER

    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, list):
        return ValueKind.ARRAY

    if isinstance(value, dict):
        return ValueKind.OBJECT

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
