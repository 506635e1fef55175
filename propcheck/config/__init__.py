# propcheck/config/__init__.py
"""
propcheck Configuration

YAML is input parameters, code has defaults (YAML is optional).
"""

from .loader import PropCheckConfig, default_config, load_config
from .validator import validate_config, ConfigIssue

__all__ = [
    "PropCheckConfig",
    "default_config",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
