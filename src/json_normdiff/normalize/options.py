"""NormalizeOptions: immutable configuration for the normalizer.

Each field toggles one class of syntactic difference that should be ignored
when two documents are compared.  Options are always passed explicitly into
``normalize`` / ``compare_normalized``; there is no process-wide default
instance to mutate.

The camelCase wire names accepted by ``from_mapping`` and produced by
``to_mapping`` are the ones used by front-ends and JSON config files.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

__all__ = ["NormalizeOptions"]

_WIRE_NAMES: dict[str, str] = {
    "sortKeys": "sort_keys",
    "normalizeNumbers": "normalize_numbers",
    "trimStrings": "trim_strings",
    "nullEqualsAbsent": "null_equals_absent",
    "sortArrays": "sort_arrays",
    "sortArraysByKey": "sort_arrays_by_key",
}


@dataclass(frozen=True, slots=True)
class NormalizeOptions:
    """Immutable normalization settings.

    Attributes:
        sort_keys: Object key order is irrelevant.  Objects are always compared
            as key sets, so this never changes a normalized value; it selects
            sorted-key output when a value is rendered back to text.
            Default True.
        normalize_numbers: Integral numbers (``1.0``, ``1e0``, ``1``) collapse
            to one canonical ``int`` representation.  Default True.
        trim_strings: Strip leading/trailing whitespace from strings.
            Default False.
        null_equals_absent: Drop object entries whose value is null, so
            ``{"a": null}`` normalizes to ``{}``.  Never applies to array
            elements.  Default False.
        sort_arrays: Reorder array elements by the cross-type total order.
            Default False.
        sort_arrays_by_key: When non-empty, sort arrays of objects by the value
            under this key.  Takes precedence over ``sort_arrays``.
            Default "" (disabled).
    """

    sort_keys: bool = True
    normalize_numbers: bool = True
    trim_strings: bool = False
    null_equals_absent: bool = False
    sort_arrays: bool = False
    sort_arrays_by_key: str = ""

    def __post_init__(self) -> None:
        for name in (
            "sort_keys",
            "normalize_numbers",
            "trim_strings",
            "null_equals_absent",
            "sort_arrays",
        ):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be a bool, got {type(value).__name__}"
                raise TypeError(msg)
        if not isinstance(self.sort_arrays_by_key, str):
            msg = (
                "sort_arrays_by_key must be a str, "
                f"got {type(self.sort_arrays_by_key).__name__}"
            )
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # Named constructors
    # ------------------------------------------------------------------

    @classmethod
    def defaults(cls) -> NormalizeOptions:
        """Sensible defaults: ignore key order and integral number formatting."""
        return cls()

    @classmethod
    def none(cls) -> NormalizeOptions:
        """Every normalization disabled, for strict comparison."""
        return cls(sort_keys=False, normalize_numbers=False)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> NormalizeOptions:
        """Build options from a mapping of field names.

        Both the snake_case field names and the camelCase wire names are
        accepted.  Fields not present keep their defaults.

        Raises:
            ValueError: If the mapping contains an unknown option name.
            TypeError: If a value has the wrong type.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for raw_name, value in mapping.items():
            name = _WIRE_NAMES.get(raw_name, raw_name)
            if name not in known:
                msg = f"Unknown normalize option: {raw_name!r}"
                raise ValueError(msg)
            kwargs[name] = value
        return cls(**kwargs)

    def to_mapping(self) -> dict[str, Any]:
        """Return the options keyed by their camelCase wire names."""
        return {wire: getattr(self, name) for wire, name in _WIRE_NAMES.items()}
