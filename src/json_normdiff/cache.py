"""DocumentCache: LRU memo of decoded + normalized documents keyed by raw text.

When many candidate documents are compared against the same baseline text
(snapshot tests, regression suites), the baseline only needs to be decoded and
normalized once.  Cached strings bypass both steps on subsequent ``get()``
calls.  LRU eviction occurs silently when ``max_size`` is exceeded; no error
is raised.

Each ``DocumentCache`` instance maintains its own ``LRUCache``; there is
no class-level shared state, so two separate instances never interfere
with each other.  A cache is bound to one ``Normalizer`` (and therefore one
``NormalizeOptions``) and one ``DecodeLimits`` for its whole life, so the raw
text alone is a sufficient key.

Cached values are shared between calls and must be treated as read-only,
which is how the normalizer and diff engine already treat every value.

Example::

    from json_normdiff.cache import DocumentCache
    from json_normdiff.normalize import Normalizer

    cache = DocumentCache(Normalizer(), max_size=128)

    # First call decodes and normalizes
    doc = cache.get('{"a": 1.0}')

    # Second call is fully served from memory
    doc_again = cache.get('{"a": 1.0}')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

from json_normdiff.codec import DecodeLimits, loads

if TYPE_CHECKING:
    from json_normdiff.normalize.normalizer import Normalizer


class DocumentCache:
    """LRU-backed memo of ``normalize(loads(text))``.

    Args:
        normalizer: The ``Normalizer`` applied to every decoded document, or
            None to cache decoded documents without normalizing them.
        limits: Decode ceilings forwarded to ``loads``.  Defaults to
            ``DecodeLimits()``.
        max_size: Maximum number of documents to hold in memory.
            Defaults to 128. When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(
        self,
        normalizer: Normalizer | None,
        limits: DecodeLimits | None = None,
        max_size: int = 128,
    ) -> None:
        self._normalizer = normalizer
        self._limits = limits if limits is not None else DecodeLimits()
        self._cache: LRUCache[str | bytes, Any] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, text: str | bytes, side: str | None = None) -> Any:
        """Return the decoded (and normalized) document for ``text``.

        Decode errors propagate and are never cached, so a corrected document
        with different text is decoded normally on the next call.

        Repeated calls return the same object, not a copy.

        Args:
            text: JSON document text.
            side: Optional "left"/"right" label for raised errors.

        Raises:
            InvalidJSONError, InputTooLargeError, NestingTooDeepError: From
                ``loads`` when ``text`` is not an acceptable JSON document.
        """
        if text in self._cache:
            return self._cache[text]

        value = loads(text, limits=self._limits, side=side)
        if self._normalizer is not None:
            value = self._normalizer.normalize(value)
        self._cache[text] = value
        return value

    def clear(self) -> None:
        """Drop every cached document."""
        self._cache.clear()
