"""Tests for the Normalizer across every value kind and option.

Covers:
- Scalars: null/bool untouched, integral number collapse, string trimming
- Objects: null_equals_absent (object level only), key order preserved
- Arrays: sort_arrays total order, sort_arrays_by_key with unkeyed barriers
- Purity: input never mutated, fresh containers returned
- Idempotence across a corpus of values and option combinations
"""

from __future__ import annotations

import copy
import math
from typing import Any

import pytest

from json_normdiff.normalize import NormalizeOptions, Normalizer, normalize

NONE = NormalizeOptions.none()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class TestScalars:
    @pytest.mark.parametrize("value", [None, True, False])
    def test_null_and_bool_unchanged(self, value: Any) -> None:
        assert normalize(value) is value

    @pytest.mark.parametrize("value", [1.0, 1e0, 100.0, -3.0, 0.0])
    def test_integral_float_becomes_int(self, value: float) -> None:
        result = normalize(value)
        assert type(result) is int
        assert result == value

    def test_one_point_zero_and_one_indistinguishable(self) -> None:
        assert repr(normalize(1.0)) == repr(normalize(1))

    def test_negative_zero_collapses(self) -> None:
        assert repr(normalize(-0.0)) == "0"

    @pytest.mark.parametrize("value", [1.5, -0.25, 1.0000001])
    def test_non_integral_unchanged(self, value: float) -> None:
        result = normalize(value)
        assert type(result) is float
        assert result == value

    def test_infinity_unchanged(self) -> None:
        assert normalize(float("inf")) == float("inf")
        assert normalize(float("-inf")) == float("-inf")

    def test_nan_unchanged(self) -> None:
        assert math.isnan(normalize(float("nan")))

    def test_int_stays_int(self) -> None:
        assert normalize(7) == 7
        assert type(normalize(7)) is int

    def test_numbers_untouched_when_disabled(self) -> None:
        result = normalize(1.0, NONE)
        assert type(result) is float

    def test_trim_strings_both_sides(self) -> None:
        options = NormalizeOptions(trim_strings=True)
        assert normalize("  hi  ", options) == "hi"
        assert normalize("\t\nhi\r\n", options) == "hi"

    def test_trim_strings_unicode_whitespace(self) -> None:
        options = NormalizeOptions(trim_strings=True)
        assert normalize("  hi　", options) == "hi"

    def test_trim_keeps_internal_whitespace(self) -> None:
        options = NormalizeOptions(trim_strings=True)
        assert normalize("  a  b  ", options) == "a  b"

    def test_strings_untouched_by_default(self) -> None:
        assert normalize("  hi  ") == "  hi  "


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


class TestObjects:
    def test_values_normalized_recursively(self) -> None:
        assert normalize({"a": {"b": 2.0}}) == {"a": {"b": 2}}
        assert type(normalize({"a": {"b": 2.0}})["a"]["b"]) is int

    def test_null_entries_kept_by_default(self) -> None:
        assert normalize({"a": None}) == {"a": None}

    def test_null_equals_absent_drops_entries(self) -> None:
        options = NormalizeOptions(null_equals_absent=True)
        assert normalize({"a": 1, "b": None}, options) == {"a": 1}

    def test_null_equals_absent_nested(self) -> None:
        options = NormalizeOptions(null_equals_absent=True)
        assert normalize({"a": {"b": None, "c": 1}}, options) == {"a": {"c": 1}}

    def test_null_equals_absent_never_touches_arrays(self) -> None:
        options = NormalizeOptions(null_equals_absent=True)
        assert normalize([None, 1, None], options) == [None, 1, None]
        assert normalize({"a": [None]}, options) == {"a": [None]}

    def test_key_order_preserved(self) -> None:
        result = normalize({"b": 1, "a": 2})
        assert list(result) == ["b", "a"]

    def test_empty_object(self) -> None:
        assert normalize({}) == {}


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


class TestArraySorting:
    def test_unsorted_by_default(self) -> None:
        assert normalize([3, 1, 2]) == [3, 1, 2]

    def test_sort_arrays_numbers(self) -> None:
        options = NormalizeOptions(sort_arrays=True)
        assert normalize([3, 1, 2], options) == [1, 2, 3]

    def test_sort_arrays_mixed_kinds(self) -> None:
        options = NormalizeOptions(sort_arrays=True)
        result = normalize(["b", 2, None, True, "a", 1], options)
        assert result == [None, True, 1, 2, "a", "b"]

    def test_sort_arrays_containers_keep_relative_order(self) -> None:
        options = NormalizeOptions(sort_arrays=True)
        result = normalize([{"z": 1}, [2], {"a": 1}, [1], 0], options)
        assert result == [0, [2], [1], {"z": 1}, {"a": 1}]

    def test_sort_arrays_nested(self) -> None:
        options = NormalizeOptions(sort_arrays=True)
        assert normalize({"a": [[2, 1], [4, 3]]}, options) == {"a": [[1, 2], [3, 4]]}

    def test_sort_by_key(self) -> None:
        options = NormalizeOptions(sort_arrays_by_key="id")
        value = [{"id": 3, "name": "C"}, {"id": 1, "name": "A"}]
        assert normalize(value, options) == [
            {"id": 1, "name": "A"},
            {"id": 3, "name": "C"},
        ]

    def test_sort_by_key_stable_on_ties(self) -> None:
        options = NormalizeOptions(sort_arrays_by_key="g")
        value = [{"g": 2, "n": 1}, {"g": 1, "n": 2}, {"g": 2, "n": 3}, {"g": 1, "n": 4}]
        result = normalize(value, options)
        assert [item["n"] for item in result] == [2, 4, 1, 3]

    def test_sort_by_key_unkeyed_elements_stay_in_place(self) -> None:
        options = NormalizeOptions(sort_arrays_by_key="id")
        value = [{"id": 2}, {"id": 1}, "x", {"other": 0}, {"id": 9}, {"id": 5}]
        assert normalize(value, options) == [
            {"id": 1},
            {"id": 2},
            "x",
            {"other": 0},
            {"id": 5},
            {"id": 9},
        ]

    def test_sort_by_key_mixed_value_kinds(self) -> None:
        options = NormalizeOptions(sort_arrays_by_key="k")
        value = [{"k": "a"}, {"k": 1}, {"k": None}]
        assert normalize(value, options) == [{"k": None}, {"k": 1}, {"k": "a"}]

    def test_sort_by_key_wins_over_sort_arrays(self) -> None:
        options = NormalizeOptions(sort_arrays=True, sort_arrays_by_key="id")
        value = [3, 1, {"id": 2}, {"id": 1}]
        # Scalars are unkeyed: they are not sorted by the total order.
        assert normalize(value, options) == [3, 1, {"id": 1}, {"id": 2}]

    def test_sort_by_key_uses_normalized_values(self) -> None:
        options = NormalizeOptions(sort_arrays_by_key="id", trim_strings=True)
        value = [{"id": " b"}, {"id": "a "}]
        assert normalize(value, options) == [{"id": "a"}, {"id": "b"}]

    def test_sort_by_key_missing_from_null_equals_absent(self) -> None:
        """An id dropped as null makes the object unkeyed."""
        options = NormalizeOptions(sort_arrays_by_key="id", null_equals_absent=True)
        value = [{"id": 2}, {"id": None}, {"id": 1}]
        assert normalize(value, options) == [{"id": 2}, {}, {"id": 1}]


# ---------------------------------------------------------------------------
# Purity
# ---------------------------------------------------------------------------


class TestPurity:
    def test_input_not_mutated(self) -> None:
        value = {"b": [3, 1, {"x": None, "id": 2.0}], "a": "  s  ", "n": None}
        snapshot = copy.deepcopy(value)
        options = NormalizeOptions(
            trim_strings=True, null_equals_absent=True, sort_arrays=True
        )
        normalize(value, options)
        assert value == snapshot

    def test_returns_new_containers(self) -> None:
        value: dict[str, Any] = {"a": [1]}
        result = normalize(value, NONE)
        assert result == value
        assert result is not value
        assert result["a"] is not value["a"]

    def test_normalizer_exposes_options(self) -> None:
        options = NormalizeOptions(trim_strings=True)
        assert Normalizer(options).options is options
        assert Normalizer().options == NormalizeOptions()

    def test_non_json_value_raises(self) -> None:
        with pytest.raises(TypeError):
            normalize({"a": (1, 2)})


# ---------------------------------------------------------------------------
# Idempotence
# ---------------------------------------------------------------------------

_CORPUS: list[Any] = [
    None,
    True,
    1.0,
    2.5,
    float("inf"),
    "  padded  ",
    [],
    {},
    [3, 1.0, "b", None, True, "a", [2, 1], {"z": 1}],
    {"z": 1.0, "a": "  hi  ", "n": None, "arr": [None, 2.0, 1]},
    [{"id": 3, "v": [2, 1]}, "x", {"id": 1.0}, {"id": None}, {"no": 1}, {"id": 2}],
    {"deep": {"deeper": [{"id": "b "}, {"id": " a"}, {"id": 1e0}]}},
]

_OPTIONS: list[NormalizeOptions] = [
    NormalizeOptions.none(),
    NormalizeOptions(),
    NormalizeOptions(trim_strings=True, null_equals_absent=True),
    NormalizeOptions(sort_arrays=True),
    NormalizeOptions(sort_arrays_by_key="id", null_equals_absent=True),
    NormalizeOptions(
        sort_arrays=True,
        sort_arrays_by_key="id",
        trim_strings=True,
        null_equals_absent=True,
    ),
]


class TestIdempotence:
    @pytest.mark.parametrize("options", _OPTIONS)
    @pytest.mark.parametrize("value", _CORPUS)
    def test_normalize_twice_equals_once(
        self, value: Any, options: NormalizeOptions
    ) -> None:
        once = normalize(value, options)
        twice = normalize(once, options)
        assert twice == once
        assert repr(twice) == repr(once)
