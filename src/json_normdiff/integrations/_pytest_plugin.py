"""pytest plugin for json-normdiff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_normdiff import NormalizeOptions, diff

# Cap on the number of differing paths listed in a failure message
_MAX_REPORTED = 20


@pytest.fixture(scope="session")
def assert_json_equal() -> Any:
    """Fixture that returns a callable JSON equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh JsonComparator per call).

    Usage in tests::

        def test_payload(assert_json_equal):
            assert_json_equal({"id": 1.0, "tags": None}, {"id": 1},
                              options=NormalizeOptions(null_equals_absent=True))

        def test_changed(assert_json_equal):
            with pytest.raises(AssertionError, match=r"\\.id"):
                assert_json_equal({"id": 1}, {"id": 2})

    Returns:
        A callable ``_assert(actual, expected, options=None) -> None`` that
        raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        options: NormalizeOptions | None = None,
    ) -> None:
        """Assert that two JSON documents are equal after normalization.

        Args:
            actual:   The actual JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            options:  Normalization applied to both sides.  Defaults to
                      ``NormalizeOptions()`` (key order and integral number
                      formatting ignored).

        Raises:
            AssertionError: When any leaf differs, with a message listing the
                stats and each differing path with its kind and values.
        """
        options = options if options is not None else NormalizeOptions()
        result = diff(actual, expected, options=options)
        if result.is_equal:
            return

        stats = result.stats
        lines = [
            "JSON documents differ: "
            f"added={stats.added} removed={stats.removed} "
            f"changed={stats.changed} equal={stats.equal}"
        ]
        differences = result.differences()
        for node in differences[:_MAX_REPORTED]:
            path = node.path or "<root>"
            if node.kind.carries_left and node.kind.carries_right:
                lines.append(f"  {node.kind} {path}: {node.left!r} -> {node.right!r}")
            elif node.kind.carries_left:
                lines.append(f"  {node.kind} {path}: {node.left!r}")
            else:
                lines.append(f"  {node.kind} {path}: {node.right!r}")
        if len(differences) > _MAX_REPORTED:
            lines.append(f"  ... {len(differences) - _MAX_REPORTED} more")
        raise AssertionError("\n".join(lines))

    return _assert
