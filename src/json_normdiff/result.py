"""DiffResult dataclass for comparison output.

This module provides the rich result type returned by ``diff()`` and
``JsonComparator.compare()`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_normdiff.diff.nodes import DiffKind, DiffNode
from json_normdiff.diff.stats import DiffStats

__all__ = ["DiffResult"]


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Rich result of a comparison.

    Attributes:
        root: Root of the diff tree (path "").
        stats: Leaf counts per kind, as produced by ``reduce_stats(root)``.
        computation_time_ms: Wall-clock duration of normalize + diff + reduce
            in milliseconds.  Excludes text decoding.
    """

    root: DiffNode
    stats: DiffStats
    computation_time_ms: float

    @property
    def is_equal(self) -> bool:
        """True when the two documents are equal (after normalization)."""
        return self.root.kind == DiffKind.EQUAL

    def differences(self) -> list[DiffNode]:
        """Return the non-EQUAL leaves in path order."""
        return [leaf for leaf in self.root.leaves() if leaf.kind != DiffKind.EQUAL]

    def to_dict(self) -> dict[str, Any]:
        """Render as ``{"root": ..., "stats": ...}`` plain data."""
        return {"root": self.root.to_dict(), "stats": self.stats.to_dict()}
