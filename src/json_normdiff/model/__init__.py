"""Value model subpackage: classification and ordering of decoded JSON values.

Re-exports the public API for the model module:
- JsonValue: type alias for any decoded JSON value
- ValueKind: StrEnum of the six JSON shapes, in sort-rank order
- kind_of: the single dispatcher mapping a Python value to its ValueKind
- compare_values / ordering_key: the cross-type total order used for sorting
"""

from json_normdiff.model.kinds import JsonValue, ValueKind, kind_of
from json_normdiff.model.ordering import compare_values, ordering_key

__all__ = ["JsonValue", "ValueKind", "compare_values", "kind_of", "ordering_key"]
