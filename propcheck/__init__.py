# propcheck/__init__.py
"""
propcheck - property-level validation with ordered predicate chains

Basic usage:
    >>> from propcheck import validate, is_valid, is_required, min_length_of
    >>> validators = {
    ...     "name": [is_required, min_length_of(3)],
    ...     "age": [lambda age: age >= 18],
    ... }
    >>> validate({"name": "Ada", "age": 36}, validators)
    {'name': True, 'age': True}
    >>> is_valid({"name": "", "age": 36}, validators)
    False

Rules:
- Only properties named in the validator map are checked
- Predicates run in order; the first False stops that property's chain
- A predicate returning None abstains; an empty chain passes
- Absent properties are passed to predicates as MISSING (not None)
- Exceptions raised by predicates propagate to the caller

Detailed reports:
    >>> report = validate_detailed(subject, validators)
    >>> report.get("name").failed_predicate

Configuration:
    >>> from propcheck import load_config
    >>> config = load_config("propcheck.yml")
    >>> validate(subject, validators, config=config)
"""

__version__ = "0.1.0"

from .core.validate import (
    MISSING,
    Predicate,
    ValidatorMap,
    validate,
    is_valid,
    validate_detailed,
    assert_valid,
    run_chain,
    PropertyReport,
    ValidationReport,
    is_truthy,
    is_not_null,
    is_not_undefined,
    is_required,
    is_not_empty,
    min_length,
    max_length,
    is_enum_subset,
)
from . import presets
from .presets import (
    min_length_of,
    max_length_of,
    length_between,
    enum_subset_of,
    required_string,
)
from .config import PropCheckConfig, load_config
from .core.errors import (
    codes,
    PropCheckError,
    InvalidValidatorMapError,
    PredicateReturnError,
    SubjectInvalidError,
    ConfigError,
)

__all__ = [
    # Version
    "__version__",

    # Engine
    "validate",
    "is_valid",
    "validate_detailed",
    "assert_valid",
    "run_chain",
    "MISSING",
    "Predicate",
    "ValidatorMap",
    "PropertyReport",
    "ValidationReport",

    # Built-in predicates
    "is_truthy",
    "is_not_null",
    "is_not_undefined",
    "is_required",
    "is_not_empty",
    "min_length",
    "max_length",
    "is_enum_subset",

    # Presets
    "presets",
    "min_length_of",
    "max_length_of",
    "length_between",
    "enum_subset_of",
    "required_string",

    # Config
    "PropCheckConfig",
    "load_config",

    # Errors
    "codes",
    "PropCheckError",
    "InvalidValidatorMapError",
    "PredicateReturnError",
    "SubjectInvalidError",
    "ConfigError",
]
