# propcheck/config/loader.py
"""
Configuration Loader

Loads engine configuration from a YAML file with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional, explicit path only)
- System works without YAML
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

import yaml

from ..core.errors import ConfigError
from .validator import validate_config, has_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropCheckConfig:
    """
    Engine configuration.

    strict_returns:
        Raise PredicateReturnError when a predicate returns anything other
        than True, False or None. Off by default: returns are coerced with bool().
    check_validator_map:
        Check the validator map's shape before running any predicate.
    log_results:
        Emit a DEBUG log record for every property outcome.
    """

    strict_returns: bool = False
    check_validator_map: bool = True
    log_results: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def with_overrides(self, **overrides: Any) -> "PropCheckConfig":
        return replace(self, **overrides)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PropCheckConfig":
        """
        Build a config from raw data, keeping code defaults for absent keys.

        Raises:
            ConfigError: If the data has error-level issues
        """
        issues = validate_config(data)
        for issue in issues:
            if issue.level == "warn":
                logger.warning(f"Config issue: {issue}")
        if has_errors(issues):
            raise ConfigError("Invalid configuration", issues=issues)
        if not data:
            return cls()

        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_yaml(cls, config_path: Optional[Union[str, Path]] = None) -> "PropCheckConfig":
        """Load configuration from YAML; no path means code defaults."""
        if config_path is None:
            return cls()
        data = _load_yaml(Path(config_path))
        try:
            return cls.from_dict(data)
        except ConfigError as e:
            raise ConfigError(e.message, path=str(config_path), issues=e.issues) from e


def _load_yaml(path: Path) -> Optional[Dict[str, Any]]:
    """Load YAML file. An explicitly given path must exist and parse."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", path=str(path))
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config file {path}: {e}", path=str(path)) from e
    logger.debug(f"Loaded config from {path}")
    return data


_DEFAULT_CONFIG = PropCheckConfig()


def default_config() -> PropCheckConfig:
    return _DEFAULT_CONFIG


def load_config(config_path: Optional[Union[str, Path]] = None) -> PropCheckConfig:
    """
    Load propcheck configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        PropCheckConfig instance (frozen, code defaults for absent keys)

    Raises:
        ConfigError: If the file is missing, unreadable, or has error-level issues
    """
    return PropCheckConfig.from_yaml(config_path)


__all__ = [
    "PropCheckConfig",
    "default_config",
    "load_config",
]
