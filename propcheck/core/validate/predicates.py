# propcheck/core/validate/predicates.py
"""
Built-in predicates.

Every predicate takes the property value and returns a bool. Parameterized
predicates take their parameters after the value; use functools.partial or
the factories in propcheck.presets to put them in a validator list.
"""

from __future__ import annotations

import enum
import numbers
from collections.abc import Iterable, Mapping, Sized
from typing import Any, Collection, List

from .subject import MISSING

_NAN = float("nan")

# Types treated as "many values" by is_enum_subset. Strings and bytes are single values.
_MULTI_VALUE_TYPES = (list, tuple, set, frozenset)


def is_truthy(value: Any) -> bool:
    """
    False for None, MISSING, False, numeric zero, NaN and empty str/bytes.
    Everything else is truthy, including empty lists and mappings.
    """
    if value is None or value is MISSING or isinstance(value, bool):
        return value is True
    if isinstance(value, (str, bytes)):
        return len(value) > 0
    if isinstance(value, numbers.Number):
        # NaN != NaN
        return bool(value == value and value != 0)
    return True


def is_not_null(value: Any) -> bool:
    """None fails. MISSING passes: absent is not null."""
    return value is not None


def is_not_undefined(value: Any) -> bool:
    """MISSING fails. None passes: null is not absent."""
    return value is not MISSING


def is_required(value: Any) -> bool:
    """Fails for None, MISSING, '', 0, NaN and False. Empty lists pass."""
    return is_truthy(value)


def is_not_empty(value: Any) -> bool:
    """
    Mapping: at least one key.
    Anything else: truthy and sized with len > 0. Unsized values are empty.
    """
    if isinstance(value, Mapping):
        return len(value) > 0
    if is_truthy(value) and isinstance(value, Sized):
        return len(value) > 0
    return False


def _length(value: Any) -> float:
    # NaN compares False with everything, so empty values and mappings fail both bounds.
    if isinstance(value, Mapping) or not is_not_empty(value):
        return _NAN
    return len(value)


def min_length(value: Any, minimum: int) -> bool:
    return _length(value) >= minimum


def max_length(value: Any, maximum: int) -> bool:
    """
    Note: an empty or absent value FAILS, it does not pass vacuously.
    """
    return _length(value) <= maximum


def _unwrap(value: Any) -> Any:
    return value.value if isinstance(value, enum.Enum) else value


def permitted_values(enum_type: Any) -> List[Any]:
    """
    Normalize an enum-like container to a list of permitted atomic values.

    Accepts an Enum subclass (member values), a Mapping (its values), or any
    other iterable of values.
    """
    if isinstance(enum_type, type) and issubclass(enum_type, enum.Enum):
        return [member.value for member in enum_type]
    if isinstance(enum_type, Mapping):
        return [_unwrap(v) for v in enum_type.values()]
    if isinstance(enum_type, Iterable) and not isinstance(enum_type, (str, bytes)):
        return [_unwrap(v) for v in enum_type]
    raise TypeError(f"Cannot read permitted values from {type(enum_type).__name__}")


def is_enum_subset(values: Any, enum_type: Any) -> bool:
    """
    True iff every value is one of enum_type's values.

    values may be a single value or a list/tuple/set of values; an empty
    collection passes.
    """
    allowed: Collection[Any] = permitted_values(enum_type)
    actual = values if isinstance(values, _MULTI_VALUE_TYPES) else [values]
    return all(_unwrap(v) in allowed for v in actual)


__all__ = [
    "is_truthy",
    "is_not_null",
    "is_not_undefined",
    "is_required",
    "is_not_empty",
    "min_length",
    "max_length",
    "is_enum_subset",
    "permitted_values",
]
