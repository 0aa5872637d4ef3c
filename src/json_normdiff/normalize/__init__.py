"""normalize subpackage: canonicalization of JSON values before comparison.

Example::

    from json_normdiff.normalize import NormalizeOptions, normalize

    normalize({"n": 1.0, "s": " x "}, NormalizeOptions(trim_strings=True))
    # {"n": 1, "s": "x"}
"""

from __future__ import annotations

from json_normdiff.normalize.normalizer import Normalizer, normalize
from json_normdiff.normalize.options import NormalizeOptions

__all__ = ["NormalizeOptions", "Normalizer", "normalize"]
