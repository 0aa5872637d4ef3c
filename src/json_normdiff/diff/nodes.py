"""DiffNode dataclass and DiffKind StrEnum for the diff tree representation.

Provides the output types of the diff engine: one ``DiffNode`` per compared
position, each labelled with the ``DiffKind`` of the difference found there.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["DiffKind", "DiffNode"]


class DiffKind(StrEnum):
    """Classification of a diff tree node.

    StrEnum values are the lowercased member names:
    - EQUAL    -> "equal"   : same value on both sides
    - ADDED    -> "added"   : present on the right only
    - REMOVED  -> "removed" : present on the left only
    - CHANGED  -> "changed" : present on both sides with different values
    """

    EQUAL = auto()
    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()

    @property
    def carries_left(self) -> bool:
        return self in (DiffKind.REMOVED, DiffKind.CHANGED)

    @property
    def carries_right(self) -> bool:
        return self in (DiffKind.ADDED, DiffKind.CHANGED)


@dataclass(frozen=True, slots=True)
class DiffNode:
    """A node in the diff tree.

    Attributes:
        path:      Rendered location, e.g. ".users[0].name".  The root is "".
        kind:      Which kind of difference this node records (see DiffKind).
        left:      Left-side value for REMOVED and CHANGED nodes.
        right:     Right-side value for ADDED and CHANGED nodes.
        children:  Child nodes for object/array pairs that were compared
                   member by member.  Empty for leaves.

    Which of ``left``/``right`` is meaningful is decided by ``kind``, not by
    the attribute being ``None``: a REMOVED node whose left value was JSON
    null legitimately has ``left=None``.  EQUAL nodes carry neither side.

    A node with children is EQUAL only when every child is EQUAL.
    """

    path: str
    kind: DiffKind
    left: Any = None
    right: Any = None
    children: tuple[DiffNode, ...] = ()

    @property
    def is_leaf(self) -> bool:
        """True when this node has no children (the unit counted by stats)."""
        return not self.children

    def leaves(self) -> list[DiffNode]:
        """Return every leaf beneath (or at) this node in path order."""
        leaves: list[DiffNode] = []
        stack: list[DiffNode] = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                leaves.append(node)
            else:
                stack.extend(reversed(node.children))
        return leaves

    def to_dict(self) -> dict[str, Any]:
        """Render this subtree as plain JSON-compatible data.

        Absent sides and empty child lists are omitted, so EQUAL leaves render
        as just ``{"path": ..., "type": "equal"}``.
        """
        data: dict[str, Any] = {"path": self.path, "type": str(self.kind)}
        if self.kind.carries_left:
            data["left"] = self.left
        if self.kind.carries_right:
            data["right"] = self.right
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data
