"""DiffEngine: recursive lock-step comparison of two JSON values.

Walks two decoded JSON values together and emits a ``DiffNode`` tree.

Architecture:
- null pairs:      both null -> EQUAL; one null -> ADDED / REMOVED.
- OBJECT pairs:    union of keys, visited in sorted order; one-sided keys
                   become ADDED / REMOVED leaves, shared keys recurse.
- ARRAY pairs:     strictly positional; trailing elements of the longer side
                   become ADDED / REMOVED leaves.  No alignment, no moves.
- kind mismatch:   CHANGED leaf carrying both values.
- scalar pairs:    EQUAL when ``==`` (NaN is equal to NaN), otherwise CHANGED
                   with both values.

Container nodes derive their own kind from their children (EQUAL only if all
children are EQUAL).  Empty-vs-empty containers produce a single EQUAL leaf.

Paths: object members append ``.key``, array elements append ``[index]``;
the root path is "".  Traversal order never depends on dict insertion order,
so output is reproducible regardless of how the inputs were built.
"""

from __future__ import annotations

import math
from typing import Any

from json_normdiff.diff.nodes import DiffKind, DiffNode
from json_normdiff.model.kinds import ValueKind, kind_of
from json_normdiff.normalize.normalizer import Normalizer
from json_normdiff.normalize.options import NormalizeOptions

__all__ = ["DiffEngine", "compare", "compare_normalized"]


class DiffEngine:
    """Stateless structural differ for JSON values.

    Example::

        engine = DiffEngine()
        root = engine.diff({"a": 1, "b": 2}, {"a": 1, "b": 999})
        root.kind                      # DiffKind.CHANGED
        [c.path for c in root.children]  # [".a", ".b"]
    """

    def diff(self, left: Any, right: Any, path: str = "") -> DiffNode:
        """Compare two JSON values and return the diff tree rooted at ``path``.

        Args:
            left:  Left JSON value.
            right: Right JSON value.
            path:  Rendered path of this position.  Defaults to "" (root).

        Raises:
            TypeError: If either side contains a non-JSON value.
        """
        left_kind = kind_of(left)
        right_kind = kind_of(right)

        if left_kind == ValueKind.NULL and right_kind == ValueKind.NULL:
            return DiffNode(path=path, kind=DiffKind.EQUAL)

        if left_kind == ValueKind.NULL:
            return DiffNode(path=path, kind=DiffKind.ADDED, right=right)

        if right_kind == ValueKind.NULL:
            return DiffNode(path=path, kind=DiffKind.REMOVED, left=left)

        if left_kind != right_kind:
            return DiffNode(path=path, kind=DiffKind.CHANGED, left=left, right=right)

        if left_kind == ValueKind.OBJECT:
            return self._diff_objects(left, right, path)

        if left_kind == ValueKind.ARRAY:
            return self._diff_arrays(left, right, path)

        if left == right or _both_nan(left, right):
            return DiffNode(path=path, kind=DiffKind.EQUAL)

        return DiffNode(path=path, kind=DiffKind.CHANGED, left=left, right=right)

    # ------------------------------------------------------------------
    # Container comparison
    # ------------------------------------------------------------------

    def _diff_objects(
        self, left: dict[str, Any], right: dict[str, Any], path: str
    ) -> DiffNode:
        children: list[DiffNode] = []

        for key in sorted(left.keys() | right.keys()):
            child_path = f"{path}.{key}"
            if key not in left:
                children.append(
                    DiffNode(path=child_path, kind=DiffKind.ADDED, right=right[key])
                )
            elif key not in right:
                children.append(
                    DiffNode(path=child_path, kind=DiffKind.REMOVED, left=left[key])
                )
            else:
                children.append(self.diff(left[key], right[key], child_path))

        return _container_node(path, children)

    def _diff_arrays(self, left: list[Any], right: list[Any], path: str) -> DiffNode:
        children: list[DiffNode] = []

        for idx in range(max(len(left), len(right))):
            child_path = f"{path}[{idx}]"
            if idx >= len(left):
                children.append(
                    DiffNode(path=child_path, kind=DiffKind.ADDED, right=right[idx])
                )
            elif idx >= len(right):
                children.append(
                    DiffNode(path=child_path, kind=DiffKind.REMOVED, left=left[idx])
                )
            else:
                children.append(self.diff(left[idx], right[idx], child_path))

        return _container_node(path, children)


def _container_node(path: str, children: list[DiffNode]) -> DiffNode:
    """Build a container node whose kind is aggregated from its children."""
    if all(child.kind == DiffKind.EQUAL for child in children):
        kind = DiffKind.EQUAL
    else:
        kind = DiffKind.CHANGED
    return DiffNode(path=path, kind=kind, children=tuple(children))



def _both_nan(left: Any, right: Any) -> bool:
    return (
        isinstance(left, float)
        and isinstance(right, float)
        and math.isnan(left)
        and math.isnan(right)
    )


# Module-level engine (stateless, safe to share)
_engine = DiffEngine()


def compare(left: Any, right: Any) -> DiffNode:
    """Compare two JSON values as-is and return the diff tree."""
    return _engine.diff(left, right)


def compare_normalized(
    left: Any,
    right: Any,
    options: NormalizeOptions | None = None,
) -> DiffNode:
    """Normalize both sides independently, then compare them.

    Args:
        left:    Left JSON value.
        right:   Right JSON value.
        options: Normalization settings.  Defaults to ``NormalizeOptions()``.
    """
    normalizer = Normalizer(options)
    return _engine.diff(normalizer.normalize(left), normalizer.normalize(right))
