# propcheck/core/validate/__init__.py
"""
Validation system.

- engine: runs ordered, short-circuiting predicate chains per property
- predicates: built-in predicates
- report: detailed per-property outcomes
- subject: property reads and the MISSING sentinel
"""

from .subject import MISSING, read_property
from .engine import (
    Predicate,
    ValidatorMap,
    ChainOutcome,
    validate,
    is_valid,
    validate_detailed,
    assert_valid,
    run_chain,
    check_validator_map,
)
from .report import PropertyReport, ValidationReport
from .predicates import (
    is_truthy,
    is_not_null,
    is_not_undefined,
    is_required,
    is_not_empty,
    min_length,
    max_length,
    is_enum_subset,
)

__all__ = [
    "MISSING",
    "read_property",
    "Predicate",
    "ValidatorMap",
    "ChainOutcome",
    "validate",
    "is_valid",
    "validate_detailed",
    "assert_valid",
    "run_chain",
    "check_validator_map",
    "PropertyReport",
    "ValidationReport",
    # built-in predicates
    "is_truthy",
    "is_not_null",
    "is_not_undefined",
    "is_required",
    "is_not_empty",
    "min_length",
    "max_length",
    "is_enum_subset",
]
