# propcheck/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"

# validator map / predicates
INVALID_VALIDATOR_MAP: Final[str] = "INVALID_VALIDATOR_MAP"
INVALID_PREDICATE_RESULT: Final[str] = "INVALID_PREDICATE_RESULT"

# subject
VALIDATION_FAILED: Final[str] = "VALIDATION_FAILED"

# config
INVALID_CONFIG: Final[str] = "INVALID_CONFIG"


# ---- semantic groups (internal helpers) ----

# Caller mistakes: the validator map or a predicate is broken, not the subject.
USAGE_CODES: Final[set[str]] = {
    INVALID_ARGUMENT,
    INVALID_VALIDATOR_MAP,
    INVALID_PREDICATE_RESULT,
    INVALID_CONFIG,
}

KNOWN_CODES: Final[set[str]] = USAGE_CODES | {
    UNKNOWN,
    VALIDATION_FAILED,
}
