"""diff subpackage: the lock-step diff engine and its leaf statistics.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from json_normdiff.diff import compare, reduce_stats

    root = compare([1, 2, 3], [1, 2])
    root.kind                  # DiffKind.CHANGED
    reduce_stats(root)         # DiffStats(added=0, removed=1, changed=0, equal=2)
"""

from __future__ import annotations

from json_normdiff.diff.engine import DiffEngine, compare, compare_normalized
from json_normdiff.diff.nodes import DiffKind, DiffNode
from json_normdiff.diff.stats import DiffStats, reduce_stats

__all__ = [
    "DiffEngine",
    "DiffKind",
    "DiffNode",
    "DiffStats",
    "compare",
    "compare_normalized",
    "reduce_stats",
]
