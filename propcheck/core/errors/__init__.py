# propcheck/core/errors/__init__.py
"""
Core error types for propcheck.

This package defines the components responsible for:
- Representing errors
- Categorizing errors

No side effects on import.
"""

from . import codes
from .exceptions import (
    PropCheckError,
    InvalidValidatorMapError,
    PredicateReturnError,
    SubjectInvalidError,
    ConfigError,
)

__all__ = [
    "codes",
    "PropCheckError",
    "InvalidValidatorMapError",
    "PredicateReturnError",
    "SubjectInvalidError",
    "ConfigError",
]
