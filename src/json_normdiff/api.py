"""Public API functions for json-normdiff.

The four core operations (normalize, compare, compare_normalized,
reduce_stats) are pure functions re-exported from their subpackages.  The
convenience functions here (diff, is_equivalent, compare_json) create a fresh
``JsonComparator`` per call to guarantee zero global state between calls.
"""

from __future__ import annotations

from typing import Any

from json_normdiff.codec import DecodeLimits
from json_normdiff.comparator import JsonComparator
from json_normdiff.diff.engine import compare, compare_normalized
from json_normdiff.diff.nodes import DiffKind
from json_normdiff.diff.stats import reduce_stats
from json_normdiff.normalize.normalizer import normalize
from json_normdiff.normalize.options import NormalizeOptions
from json_normdiff.result import DiffResult

__all__ = [
    "compare",
    "compare_json",
    "compare_normalized",
    "diff",
    "is_equivalent",
    "normalize",
    "reduce_stats",
]


def diff(
    left: Any,
    right: Any,
    options: NormalizeOptions | None = None,
) -> DiffResult:
    """Compare two JSON values and return a rich DiffResult.

    Args:
        left:    Left JSON value.
        right:   Right JSON value.
        options: Normalization applied to both sides first.  None compares the
                 values exactly as given.

    Returns:
        A ``DiffResult`` with the diff tree, leaf stats and timing.
    """
    return JsonComparator(options=options).compare(left, right)


def is_equivalent(
    left: Any,
    right: Any,
    options: NormalizeOptions | None = None,
) -> bool:
    """Return True if the two values are equal once normalized.

    Args:
        left:    Left JSON value.
        right:   Right JSON value.
        options: Normalization settings.  Defaults to ``NormalizeOptions()``
                 (unlike ``diff``, which defaults to no normalization).

    Returns:
        True if ``compare_normalized(left, right, options)`` is EQUAL at the root.
    """
    return compare_normalized(left, right, options).kind == DiffKind.EQUAL


def compare_json(
    left_text: str | bytes,
    right_text: str | bytes,
    options: NormalizeOptions | None = None,
    limits: DecodeLimits | None = None,
) -> DiffResult:
    """Decode two JSON documents and compare them.

    Args:
        left_text:  Left document as JSON text.
        right_text: Right document as JSON text.
        options:    Normalization applied after decoding.  None compares the
                    decoded values as-is (numbers are already uniform floats).
        limits:     Decode ceilings.  Defaults to ``DecodeLimits()``.

    Raises:
        InvalidJSONError: If either document is not valid JSON.
        InputTooLargeError, NestingTooDeepError: If a document exceeds limits.
    """
    comparator = JsonComparator(options=options, limits=limits, max_cache_size=2)
    return comparator.compare_text(left_text, right_text)
