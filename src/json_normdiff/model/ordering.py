"""Total order over JSON values, used to sort arrays during normalization.

Values of different kinds compare by kind rank
(null < bool < number < string < array < object).  Values of the same kind
compare naturally: ``False < True``, numeric ``<``, lexicographic strings.
Arrays and objects are tied with every other array/object: the order is
meant to canonicalize position, not to compare content.

NaN is placed after every other number and ties with other NaNs, which keeps
the relation a consistent preorder so stable sorting stays idempotent.
"""

from __future__ import annotations

import math
from typing import Any

from json_normdiff.model.kinds import ValueKind, kind_of

__all__ = ["compare_values", "ordering_key"]


def ordering_key(value: Any) -> tuple[Any, ...]:
    """Return a sort key realizing the total order for ``value``.

    Keys of values with the same kind are always mutually comparable; keys of
    different kinds are decided by their leading rank.
    """
    kind = kind_of(value)

    if kind == ValueKind.BOOL:
        return (kind.rank, value)

    if kind == ValueKind.NUMBER:
        if isinstance(value, float) and math.isnan(value):
            return (kind.rank, 1, 0.0)
        return (kind.rank, 0, value)

    if kind == ValueKind.STRING:
        return (kind.rank, value)

    # NULL, ARRAY and OBJECT carry no comparable payload
    return (kind.rank,)


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison under the total order.

    Returns:
        Negative if ``a`` sorts before ``b``, zero if tied, positive otherwise.
    """
    key_a = ordering_key(a)
    key_b = ordering_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0
