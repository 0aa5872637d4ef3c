"""Path extraction: the distinct key-paths of a JSON document and their counts.

Uses the same path rendering as the diff engine for object members
(``.key``), but collapses every array index to ``[]`` so that repeated
structures (arrays of records) share one path:

    {"users": [{"name": "A"}, {"name": "B"}]}  ->  ".users[].name"  (count 2)

Leaves are scalars.  Empty objects and arrays contain no leaves and only
show up when ``include_containers`` is requested, which also records every
non-root object/array under its own path.  A path that holds scalars in
some places and containers in others (``[1, [2]]``) is reported once, as a
leaf path with its leaf count.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from json_normdiff.model.kinds import ValueKind, kind_of

__all__ = ["PathInfo", "PathResult", "extract_paths"]


@dataclass(frozen=True, slots=True)
class PathInfo:
    """One distinct path and how many times it occurs."""

    path: str
    count: int
    is_container: bool = False


@dataclass(slots=True)
class PathResult:
    """Result of ``extract_paths``.

    Attributes:
        paths:        Distinct paths, sorted lexicographically.
        total_paths:  Number of distinct paths.
        total_leaves: Sum of the counts of leaf paths (containers excluded).
    """

    paths: list[PathInfo] = field(default_factory=list)
    total_paths: int = 0
    total_leaves: int = 0

    def counts(self) -> dict[str, int]:
        """Return ``{path: count}`` for every extracted path."""
        return {info.path: info.count for info in self.paths}


def extract_paths(value: Any, include_containers: bool = False) -> PathResult:
    """Walk ``value`` and count occurrences of every distinct path.

    Args:
        value:              Any decoded JSON value.
        include_containers: Also count non-root object/array nodes.

    Returns:
        A ``PathResult`` with paths sorted by path string.
    """
    leaf_counts: Counter[str] = Counter()
    container_counts: Counter[str] = Counter()
    _walk("", value, leaf_counts, container_counts, include_containers, is_root=True)

    infos = [PathInfo(path, count) for path, count in leaf_counts.items()]
    infos.extend(
        PathInfo(path, count, is_container=True)
        for path, count in container_counts.items()
        if path not in leaf_counts
    )
    infos.sort(key=lambda info: info.path)

    return PathResult(
        paths=infos,
        total_paths=len(infos),
        total_leaves=sum(leaf_counts.values()),
    )


def _walk(
    prefix: str,
    value: Any,
    leaf_counts: Counter[str],
    container_counts: Counter[str],
    include_containers: bool,
    is_root: bool = False,
) -> None:
    kind = kind_of(value)

    if not kind.is_container:
        leaf_counts[prefix] += 1
        return

    if include_containers and not is_root:
        container_counts[prefix] += 1

    if kind == ValueKind.OBJECT:
        for key, member in value.items():
            _walk(f"{prefix}.{key}", member, leaf_counts, container_counts, include_containers)
    else:
        for item in value:
            _walk(f"{prefix}[]", item, leaf_counts, container_counts, include_containers)
