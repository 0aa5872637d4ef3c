"""json-normdiff - semantic diffing of JSON documents with configurable normalization."""

from __future__ import annotations

import logging

from json_normdiff.api import (
    compare,
    compare_json,
    compare_normalized,
    diff,
    is_equivalent,
    normalize,
    reduce_stats,
)
from json_normdiff.codec import DecodeLimits, dumps, loads, validate
from json_normdiff.comparator import JsonComparator
from json_normdiff.diff import DiffKind, DiffNode, DiffStats
from json_normdiff.errors import (
    InputTooLargeError,
    InvalidJSONError,
    JsonNormDiffError,
    NestingTooDeepError,
)
from json_normdiff.normalize import NormalizeOptions
from json_normdiff.paths import PathInfo, PathResult, extract_paths
from json_normdiff.result import DiffResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "DecodeLimits",
    "DiffKind",
    "DiffNode",
    "DiffResult",
    "DiffStats",
    "InputTooLargeError",
    "InvalidJSONError",
    "JsonComparator",
    "JsonNormDiffError",
    "NestingTooDeepError",
    "NormalizeOptions",
    "PathInfo",
    "PathResult",
    "compare",
    "compare_json",
    "compare_normalized",
    "diff",
    "dumps",
    "extract_paths",
    "is_equivalent",
    "loads",
    "normalize",
    "reduce_stats",
    "validate",
]
