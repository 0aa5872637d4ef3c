"""JsonComparator: orchestrator that wires Normalizer + DiffEngine + reduce_stats.

This is the central wiring layer between the pure core operations and the
public API.  It turns a bare diff tree into a rich DiffResult with leaf
statistics and timing data, and adds a text entry point that decodes both
documents first.

Architecture:
- compare() starts a wall-clock timer, normalizes both values (when options
  were given), delegates to DiffEngine.diff(), reduces the tree to stats and
  returns a DiffResult.
- compare_text() decodes each side via a per-instance DocumentCache, so a
  baseline text compared against many candidates is decoded and normalized
  once.  Decode failures are raised with the offending side named.
- options=None means "compare exactly as given"; pass
  ``NormalizeOptions()`` for the default normalization.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_normdiff.cache import DocumentCache
from json_normdiff.codec import DecodeLimits
from json_normdiff.diff.engine import DiffEngine
from json_normdiff.diff.stats import reduce_stats
from json_normdiff.normalize.normalizer import Normalizer
from json_normdiff.normalize.options import NormalizeOptions
from json_normdiff.result import DiffResult

__all__ = ["JsonComparator"]

logger = logging.getLogger(__name__)


class JsonComparator:
    """Orchestrator for semantic JSON comparison.

    Wires ``Normalizer``, ``DiffEngine`` and ``reduce_stats`` together into a
    single ``compare()`` call that returns a ``DiffResult`` with the diff
    tree, leaf statistics and wall-clock timing.

    Two separate ``JsonComparator`` instances never share cache state; each
    instance maintains its own ``DocumentCache``.

    Example::

        from json_normdiff.comparator import JsonComparator
        from json_normdiff.normalize import NormalizeOptions

        cmp = JsonComparator(NormalizeOptions(null_equals_absent=True))
        result = cmp.compare({"a": 1, "b": None}, {"a": 1.0})
        print(result.is_equal)   # True
        print(result.stats)      # DiffStats(added=0, removed=0, changed=0, equal=1)
    """

    def __init__(
        self,
        options: NormalizeOptions | None = None,
        limits: DecodeLimits | None = None,
        max_cache_size: int = 128,
    ) -> None:
        """Initialise the comparator.

        Args:
            options: Normalization applied to both sides before diffing.  None
                (the default) compares values exactly as given.
            limits:  Decode ceilings used by ``compare_text``.  Defaults to
                ``DecodeLimits()``.
            max_cache_size: Maximum number of decoded documents held in the
                per-instance LRU cache used by ``compare_text``.  Defaults to
                128.  This is an infrastructure parameter; it is NOT part of
                ``NormalizeOptions`` (which governs comparison semantics only).
        """
        self._options = options
        self._normalizer = Normalizer(options) if options is not None else None
        self._engine = DiffEngine()
        self._documents = DocumentCache(
            self._normalizer, limits=limits, max_size=max_cache_size
        )

    @property
    def options(self) -> NormalizeOptions | None:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any) -> DiffResult:
        """Compare two JSON values and return a rich DiffResult.

        Args:
            left:  Left JSON value (dict, list, str, int, float, bool, None).
            right: Right JSON value.

        Returns:
            A ``DiffResult`` with root, stats and computation_time_ms.
        """
        t0 = time.perf_counter()

        if self._normalizer is not None:
            left = self._normalizer.normalize(left)
            right = self._normalizer.normalize(right)

        return self._finish(left, right, t0)

    def compare_text(self, left_text: str | bytes, right_text: str | bytes) -> DiffResult:
        """Decode two JSON documents and compare them.

        Decoded documents are held in this comparator's cache, and the values
        carried by the returned ``DiffNode`` objects (``left`` / ``right``)
        are those cached objects, not copies.  Treat them as read-only:
        mutating one changes what later ``compare_text`` calls with the same
        text see.

        Args:
            left_text:  Left document as JSON text.
            right_text: Right document as JSON text.

        Raises:
            InvalidJSONError: If either side is not valid JSON; ``side`` names
                which one.
            InputTooLargeError, NestingTooDeepError: If either side exceeds the
                configured ``DecodeLimits``.
        """
        left = self._documents.get(left_text, side="left")
        right = self._documents.get(right_text, side="right")
        # Cached documents are already normalized.
        return self._finish(left, right, time.perf_counter())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _finish(self, left: Any, right: Any, t0: float) -> DiffResult:
        root = self._engine.diff(left, right)
        stats = reduce_stats(root)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "compared documents: kind=%s added=%d removed=%d changed=%d "
            "equal=%d in %.3f ms",
            root.kind,
            stats.added,
            stats.removed,
            stats.changed,
            stats.equal,
            elapsed_ms,
        )

        return DiffResult(root=root, stats=stats, computation_time_ms=elapsed_ms)
