"""Normalizer: rewrites a JSON value into its canonical form for given options.

Recursive dispatch over ``ValueKind``, one case per JSON shape:

- null, bool:  returned unchanged.
- number:      integral finite values collapse to ``int`` when
               ``normalize_numbers`` is set.
- string:      stripped on both sides when ``trim_strings`` is set.
- object:      new dict; null entries dropped when ``null_equals_absent``.
- array:       new list of normalized elements, optionally sorted.

The input is never mutated; every container in the result is freshly built.
``normalize(normalize(v, o), o) == normalize(v, o)`` holds for every value and
options pair: integral ints stay ints, stripped strings stay stripped, and the
array sorts are stable under a consistent preorder, so sorted input is a fixed
point.
"""

from __future__ import annotations

import math
from typing import Any

from json_normdiff.model.kinds import ValueKind, kind_of
from json_normdiff.model.ordering import ordering_key
from json_normdiff.normalize.options import NormalizeOptions

__all__ = ["Normalizer", "normalize"]


class Normalizer:
    """Applies one ``NormalizeOptions`` to any number of JSON values.

    Holds no state besides the (immutable) options, so one instance may be
    shared freely between threads.

    Example::

        normalizer = Normalizer(NormalizeOptions(trim_strings=True))
        normalizer.normalize({"z": 1.0, "a": "  hi  "})
        # {"z": 1, "a": "hi"}
    """

    def __init__(self, options: NormalizeOptions | None = None) -> None:
        self._options = options if options is not None else NormalizeOptions()

    @property
    def options(self) -> NormalizeOptions:
        return self._options

    def normalize(self, value: Any) -> Any:
        """Return the canonical form of ``value``.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
        """
        kind = kind_of(value)

        if kind == ValueKind.OBJECT:
            return self._normalize_object(value)

        if kind == ValueKind.ARRAY:
            return self._normalize_array(value)

        if kind == ValueKind.NUMBER:
            return self._normalize_number(value)

        if kind == ValueKind.STRING:
            return value.strip() if self._options.trim_strings else value

        # NULL and BOOL have nothing to canonicalize
        return value

    # ------------------------------------------------------------------
    # Per-kind helpers
    # ------------------------------------------------------------------

    def _normalize_object(self, obj: dict[str, Any]) -> dict[str, Any]:
        drop_nulls = self._options.null_equals_absent
        return {
            key: self.normalize(val)
            for key, val in obj.items()
            if not (drop_nulls and val is None)
        }

    def _normalize_array(self, arr: list[Any]) -> list[Any]:
        result = [self.normalize(item) for item in arr]

        sort_key = self._options.sort_arrays_by_key
        if sort_key:
            return _sort_by_key(result, sort_key)
        if self._options.sort_arrays:
            return sorted(result, key=ordering_key)
        return result

    def _normalize_number(self, number: int | float) -> int | float:
        if not self._options.normalize_numbers or isinstance(number, int):
            return number
        # Whole floats become ints: 1.0 -> 1.  inf and nan are left alone.
        if math.isfinite(number) and number == math.trunc(number):
            return math.trunc(number)
        return number


def _sort_by_key(items: list[Any], key: str) -> list[Any]:
    """Stable-sort runs of objects by the value stored under ``key``.

    Elements that are not objects, or objects lacking ``key``, stay at their
    index and act as barriers: only the maximal runs of keyed objects between
    them are sorted, so an unkeyed element never changes position relative to
    any other element.
    """
    result: list[Any] = []
    run: list[dict[str, Any]] = []

    for item in items:
        if isinstance(item, dict) and key in item:
            run.append(item)
            continue
        result.extend(sorted(run, key=lambda obj: ordering_key(obj[key])))
        run = []
        result.append(item)

    result.extend(sorted(run, key=lambda obj: ordering_key(obj[key])))
    return result


def normalize(value: Any, options: NormalizeOptions | None = None) -> Any:
    """Return the canonical form of ``value`` under ``options``.

    Args:
        value:   Any decoded JSON value.
        options: Normalization settings.  Defaults to ``NormalizeOptions()``.

    Returns:
        A new value; the input is left untouched.
    """
    return Normalizer(options).normalize(value)
