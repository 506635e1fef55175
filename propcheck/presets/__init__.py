# propcheck/presets/__init__.py
"""
Presets - ready-to-use predicates and predicate chains.
"""

from .validators import (
    min_length_of,
    max_length_of,
    length_between,
    enum_subset_of,
    required_string,
)

__all__ = [
    "min_length_of",
    "max_length_of",
    "length_between",
    "enum_subset_of",
    "required_string",
]
