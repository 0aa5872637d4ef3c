"""Leaf-level statistics for a diff tree.

Only leaves are counted.  A container node's kind is an aggregate of its
descendants, so counting it as well would count the same difference twice.
An empty-vs-empty container is itself a leaf and therefore counts once.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_normdiff.diff.nodes import DiffKind, DiffNode

__all__ = ["DiffStats", "reduce_stats"]


@dataclass(slots=True)
class DiffStats:
    """Per-kind leaf counters."""

    added: int = 0
    removed: int = 0
    changed: int = 0
    equal: int = 0

    @property
    def total(self) -> int:
        """Number of leaves counted."""
        return self.added + self.removed + self.changed + self.equal

    def record(self, kind: DiffKind) -> None:
        if kind == DiffKind.EQUAL:
            self.equal += 1
        elif kind == DiffKind.ADDED:
            self.added += 1
        elif kind == DiffKind.REMOVED:
            self.removed += 1
        else:
            self.changed += 1

    def to_dict(self) -> dict[str, int]:
        return {
            "added": self.added,
            "removed": self.removed,
            "changed": self.changed,
            "equal": self.equal,
        }


def reduce_stats(tree: DiffNode) -> DiffStats:
    """Count the leaves of ``tree`` by kind.

    Args:
        tree: Root (or any subtree) of a diff tree.

    Returns:
        A fresh ``DiffStats``.
    """
    stats = DiffStats()
    stack: list[DiffNode] = [tree]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            stats.record(node.kind)
        else:
            stack.extend(node.children)
    return stats
