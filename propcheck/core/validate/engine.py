# propcheck/core/validate/engine.py
"""
Validation engine.

Runs each property's predicate chain against the subject:
- predicates run in declared order
- a predicate returning None abstains (does not fail)
- the first False stops the chain; later predicates are not invoked
- an empty chain passes

Exceptions raised by predicates are not caught. They abort the whole call,
so no partial result is returned.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
import logging

from ...config.loader import PropCheckConfig, default_config
from ..errors import InvalidValidatorMapError, PredicateReturnError, SubjectInvalidError
from .report import PropertyReport, ValidationReport
from .subject import read_property

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], Optional[bool]]
ValidatorMap = Mapping[str, Sequence[Predicate]]


@dataclass(frozen=True)
class ChainOutcome:
    """Result of walking one predicate chain."""
    valid: bool
    executed: int
    total: int
    failed_index: Optional[int] = None


def predicate_name(predicate: Any) -> str:
    name = getattr(predicate, "__name__", None)
    if name:
        return name
    # functools.partial and callable instances
    func = getattr(predicate, "func", None)
    if func is not None:
        return f"partial({predicate_name(func)})"
    return type(predicate).__name__


def check_validator_map(validators: Any) -> None:
    """
    Check the validator map's shape.

    Raises:
        InvalidValidatorMapError: If it is not a Mapping of name -> sequence of callables
    """
    if not isinstance(validators, Mapping):
        raise InvalidValidatorMapError(
            f"Validator map must be a mapping, got {type(validators).__name__}"
        )
    for name, chain in validators.items():
        if not isinstance(chain, Sequence) or isinstance(chain, (str, bytes)):
            raise InvalidValidatorMapError(
                f"Validators for '{name}' must be a list of predicates, got {type(chain).__name__}",
                property_name=str(name),
            )
        for index, predicate in enumerate(chain):
            if not callable(predicate):
                raise InvalidValidatorMapError(
                    f"Validator #{index} for '{name}' is not callable: {predicate!r}",
                    property_name=str(name),
                    index=index,
                )


def run_chain(
    value: Any,
    predicates: Sequence[Predicate],
    *,
    strict: bool = False,
    property_name: str = "<value>",
) -> ChainOutcome:
    """
    Walk one predicate chain over a single value.

    The sequence is iterated forward only and never modified.

    Raises:
        PredicateReturnError: strict is set and a predicate returned a non-bool
    """
    total = len(predicates)
    is_valid = True
    executed = 0

    for index, predicate in enumerate(predicates):
        result = predicate(value)
        executed += 1

        if result is None:
            continue
        if strict and not isinstance(result, bool):
            raise PredicateReturnError(property_name, index, predicate_name(predicate), result)

        is_valid = bool(result)
        if not is_valid:
            logger.debug(
                f"Property '{property_name}' short-circuited at #{index} "
                f"({predicate_name(predicate)}), skipped {total - executed}"
            )
            return ChainOutcome(valid=False, executed=executed, total=total, failed_index=index)

    return ChainOutcome(valid=is_valid, executed=executed, total=total)


def _run_all(subject: Any, validators: ValidatorMap, config: Optional[PropCheckConfig]) -> Dict[str, ChainOutcome]:
    config = config or default_config()
    if config.check_validator_map:
        check_validator_map(validators)

    outcomes: Dict[str, ChainOutcome] = {}
    for name, chain in validators.items():
        outcome = run_chain(
            read_property(subject, name),
            chain,
            strict=config.strict_returns,
            property_name=name,
        )
        if config.log_results:
            logger.debug(f"Property '{name}': valid={outcome.valid} ({outcome.executed}/{outcome.total} ran)")
        outcomes[name] = outcome
    return outcomes


def validate(
    subject: Any,
    validators: ValidatorMap,
    *,
    config: Optional[PropCheckConfig] = None,
) -> Dict[str, bool]:
    """
    Validate the subject's properties.

    Args:
        subject: Mapping or object to read properties from (never modified)
        validators: property name -> ordered list of predicates
        config: Engine configuration (defaults if omitted)

    Returns:
        property name -> bool, one entry per key of validators

    Raises:
        InvalidValidatorMapError: Malformed validators (before any predicate runs)
        PredicateReturnError: Non-bool return with strict_returns enabled
    """
    outcomes = _run_all(subject, validators, config)
    return {name: outcome.valid for name, outcome in outcomes.items()}


def is_valid(
    subject: Any,
    validators: ValidatorMap,
    *,
    config: Optional[PropCheckConfig] = None,
) -> bool:
    """True iff every validated property passes. No validators means True."""
    results = validate(subject, validators, config=config)
    passing = [name for name, ok in results.items() if ok]
    return len(passing) == len(validators)


def validate_detailed(
    subject: Any,
    validators: ValidatorMap,
    *,
    config: Optional[PropCheckConfig] = None,
) -> ValidationReport:
    """Like validate(), but report where each chain stopped."""
    outcomes = _run_all(subject, validators, config)
    reports: List[PropertyReport] = []
    for name, outcome in outcomes.items():
        failed = outcome.failed_index
        reports.append(PropertyReport(
            property=name,
            valid=outcome.valid,
            executed=outcome.executed,
            total=outcome.total,
            failed_index=failed,
            failed_predicate=None if failed is None else predicate_name(validators[name][failed]),
        ))
    return ValidationReport(properties=reports)


def assert_valid(
    subject: Any,
    validators: ValidatorMap,
    *,
    config: Optional[PropCheckConfig] = None,
) -> Dict[str, bool]:
    """
    Validate and raise if anything fails.

    Returns:
        The result map (all True)

    Raises:
        SubjectInvalidError: At least one property failed
    """
    results = validate(subject, validators, config=config)
    failures = [name for name, ok in results.items() if not ok]
    if failures:
        raise SubjectInvalidError(failures, results)
    return results
