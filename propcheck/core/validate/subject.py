# propcheck/core/validate/subject.py
"""
Reading properties off a subject.

A subject is either a Mapping (key lookup) or any other object (attribute
lookup). Absent properties are read as MISSING, which is distinct from None.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class _Missing:
    """Sentinel type for a property the subject does not have."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self):
        return (_Missing, ())


MISSING: Any = _Missing()


def read_property(subject: Any, name: str) -> Any:
    """Return subject[name] / subject.name, or MISSING when absent."""
    if isinstance(subject, Mapping):
        return subject.get(name, MISSING)
    return getattr(subject, name, MISSING)
