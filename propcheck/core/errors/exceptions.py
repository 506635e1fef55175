# propcheck/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Codes we do not define are downgraded to UNKNOWN.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class PropCheckError(Exception):
    """
    Base exception for everything propcheck raises on its own.

    Exceptions raised by predicates are never wrapped in this type.
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_usage_error(self) -> bool:
        return self.error_code in codes.USAGE_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidValidatorMapError(PropCheckError):
    """Validator map is not a mapping of property name -> sequence of callables."""

    def __init__(self, message: str, *, property_name: Optional[str] = None, index: Optional[int] = None):
        details: Dict[str, Any] = {}
        if property_name is not None:
            details["property"] = property_name
        if index is not None:
            details["index"] = index
        super().__init__(message=message, error_code=codes.INVALID_VALIDATOR_MAP, details=details)
        self.property_name = property_name
        self.index = index


class PredicateReturnError(PropCheckError):
    """Strict mode: a predicate returned something other than True, False or None."""

    def __init__(self, property_name: str, index: int, predicate_name: str, returned: Any):
        super().__init__(
            message=(
                f"Predicate '{predicate_name}' (#{index}) for property '{property_name}' "
                f"returned {type(returned).__name__}, expected bool or None"
            ),
            error_code=codes.INVALID_PREDICATE_RESULT,
            details={
                "property": property_name,
                "index": index,
                "predicate": predicate_name,
                "returned_type": type(returned).__name__,
            },
        )
        self.property_name = property_name
        self.index = index
        self.returned = returned


class SubjectInvalidError(PropCheckError):
    """Raised by assert_valid when at least one property fails."""

    def __init__(self, failures: List[str], results: Dict[str, bool]):
        super().__init__(
            message=f"Validation failed for: {', '.join(failures)}",
            error_code=codes.VALIDATION_FAILED,
            details={"failures": list(failures), "results": dict(results)},
        )
        self.failures = list(failures)
        self.results = dict(results)


class ConfigError(PropCheckError):
    """Configuration file could not be read or contains error-level issues."""

    def __init__(self, message: str, *, path: Optional[str] = None, issues: Optional[List[Any]] = None):
        details: Dict[str, Any] = {}
        if path is not None:
            details["path"] = path
        if issues:
            details["issues"] = [_safe_str(i) for i in issues]
        super().__init__(message=message, error_code=codes.INVALID_CONFIG, details=details)
        self.path = path
        self.issues = list(issues or [])
