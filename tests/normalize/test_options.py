"""Tests for NormalizeOptions frozen dataclass.

Covers:
- Default values and the defaults()/none() constructors
- Immutability (FrozenInstanceError on assignment)
- Type validation in __post_init__
- from_mapping with snake_case and camelCase names, unknown names rejected
- to_mapping round trip through the camelCase wire names
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_normdiff.normalize.options import NormalizeOptions

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestNormalizeOptionsDefaults:
    def test_default_sort_keys(self) -> None:
        assert NormalizeOptions().sort_keys is True

    def test_default_normalize_numbers(self) -> None:
        assert NormalizeOptions().normalize_numbers is True

    def test_default_trim_strings(self) -> None:
        assert NormalizeOptions().trim_strings is False

    def test_default_null_equals_absent(self) -> None:
        assert NormalizeOptions().null_equals_absent is False

    def test_default_sort_arrays(self) -> None:
        assert NormalizeOptions().sort_arrays is False

    def test_default_sort_arrays_by_key_disabled(self) -> None:
        assert NormalizeOptions().sort_arrays_by_key == ""

    def test_defaults_constructor_matches_no_args(self) -> None:
        assert NormalizeOptions.defaults() == NormalizeOptions()

    def test_none_constructor_disables_everything(self) -> None:
        options = NormalizeOptions.none()
        assert options.sort_keys is False
        assert options.normalize_numbers is False
        assert options.trim_strings is False
        assert options.null_equals_absent is False
        assert options.sort_arrays is False
        assert options.sort_arrays_by_key == ""


# ---------------------------------------------------------------------------
# Immutability and validation
# ---------------------------------------------------------------------------


class TestNormalizeOptionsValidation:
    def test_frozen(self) -> None:
        options = NormalizeOptions()
        with pytest.raises(FrozenInstanceError):
            options.trim_strings = True  # type: ignore[misc]

    def test_hashable_and_comparable(self) -> None:
        assert hash(NormalizeOptions()) == hash(NormalizeOptions())
        assert NormalizeOptions(trim_strings=True) != NormalizeOptions()

    @pytest.mark.parametrize(
        "field_name",
        ["sort_keys", "normalize_numbers", "trim_strings", "null_equals_absent", "sort_arrays"],
    )
    def test_non_bool_flag_rejected(self, field_name: str) -> None:
        with pytest.raises(TypeError, match=field_name):
            NormalizeOptions(**{field_name: 1})

    def test_non_str_sort_key_rejected(self) -> None:
        with pytest.raises(TypeError, match="sort_arrays_by_key"):
            NormalizeOptions(sort_arrays_by_key=None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Mapping conversion
# ---------------------------------------------------------------------------


class TestNormalizeOptionsMapping:
    def test_from_mapping_camel_case(self) -> None:
        options = NormalizeOptions.from_mapping(
            {"trimStrings": True, "nullEqualsAbsent": True, "sortArraysByKey": "id"}
        )
        assert options.trim_strings is True
        assert options.null_equals_absent is True
        assert options.sort_arrays_by_key == "id"
        assert options.sort_keys is True  # untouched default

    def test_from_mapping_snake_case(self) -> None:
        options = NormalizeOptions.from_mapping({"sort_arrays": True, "sort_keys": False})
        assert options.sort_arrays is True
        assert options.sort_keys is False

    def test_from_mapping_empty_gives_defaults(self) -> None:
        assert NormalizeOptions.from_mapping({}) == NormalizeOptions()

    def test_from_mapping_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="ignoreCase"):
            NormalizeOptions.from_mapping({"ignoreCase": True})

    def test_from_mapping_wrong_type(self) -> None:
        with pytest.raises(TypeError):
            NormalizeOptions.from_mapping({"sortKeys": "yes"})

    def test_to_mapping_uses_wire_names(self) -> None:
        assert NormalizeOptions().to_mapping() == {
            "sortKeys": True,
            "normalizeNumbers": True,
            "trimStrings": False,
            "nullEqualsAbsent": False,
            "sortArrays": False,
            "sortArraysByKey": "",
        }

    def test_mapping_round_trip(self) -> None:
        options = NormalizeOptions(trim_strings=True, sort_arrays_by_key="name")
        assert NormalizeOptions.from_mapping(options.to_mapping()) == options
