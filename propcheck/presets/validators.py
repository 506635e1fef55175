# propcheck/presets/validators.py
"""
Validator Presets - ready-to-use predicates

Factories that bind the parameters of the built-in parameterized predicates
and return single-argument predicates for validator lists:

    >>> from propcheck import validate, presets
    >>> validate(
    ...     {"name": "Shawty", "roles": ["admin"]},
    ...     {
    ...         "name": presets.required_string(min_len=2, max_len=10),
    ...         "roles": [presets.enum_subset_of(Role)],
    ...     },
    ... )
"""

from typing import Any, Callable, List, Optional

from ..core.validate.predicates import (
    is_enum_subset,
    is_required,
    max_length,
    min_length,
    permitted_values,
)

Predicate = Callable[[Any], bool]


def _named(predicate: Predicate, name: str) -> Predicate:
    predicate.__name__ = name
    predicate.__qualname__ = name
    return predicate


def min_length_of(minimum: int) -> Predicate:
    """Predicate: non-empty and len(value) >= minimum."""
    return _named(lambda value: min_length(value, minimum), f"min_length_of({minimum})")


def max_length_of(maximum: int) -> Predicate:
    """Predicate: non-empty and len(value) <= maximum. Empty values fail."""
    return _named(lambda value: max_length(value, maximum), f"max_length_of({maximum})")


def length_between(minimum: int, maximum: int) -> Predicate:
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) must not exceed maximum ({maximum})")
    return _named(
        lambda value: min_length(value, minimum) and max_length(value, maximum),
        f"length_between({minimum}, {maximum})",
    )


def enum_subset_of(enum_type: Any) -> Predicate:
    """Predicate: every value (one value or a list) is one of enum_type's values."""
    # Fail at declaration time rather than on first use
    permitted_values(enum_type)
    label = getattr(enum_type, "__name__", type(enum_type).__name__)
    return _named(lambda values: is_enum_subset(values, enum_type), f"enum_subset_of({label})")


def required_string(min_len: Optional[int] = None, max_len: Optional[int] = None) -> List[Predicate]:
    """
    Chain for a required string: is_required, then the optional length bounds.

    Returns a new list on every call.
    """
    chain: List[Predicate] = [is_required]
    if min_len is not None:
        chain.append(min_length_of(min_len))
    if max_len is not None:
        chain.append(max_length_of(max_len))
    return chain


__all__ = [
    "min_length_of",
    "max_length_of",
    "length_between",
    "enum_subset_of",
    "required_string",
]
