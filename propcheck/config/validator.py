# propcheck/config/validator.py
"""
Configuration Validator

Validates raw configuration data before it is turned into PropCheckConfig.
Returns structured issues with level (warn/error), path, message, hint.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Literal


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging and error details.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "strict_returns"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"[{self.level}] {self.path}: {self.message}{hint_str}"


def validate_config(data: Any) -> List[ConfigIssue]:
    """
    Check raw YAML data against the PropCheckConfig fields.

    - Top level that is not a mapping: error
    - Unknown keys: warn (ignored on load)
    - Wrongly typed values: error

    Returns:
        List of issues (warn/error level)
    """
    from .loader import PropCheckConfig

    if data is None:
        return []
    if not isinstance(data, dict):
        return [ConfigIssue(
            level="error",
            path="<root>",
            message=f"expected a mapping, got {type(data).__name__}",
            hint="Write the config as 'key: value' lines",
        )]

    known: Dict[str, type] = {f.name: bool for f in fields(PropCheckConfig)}
    issues: List[ConfigIssue] = []

    for key, value in data.items():
        name = str(key)
        if name not in known:
            issues.append(ConfigIssue(
                level="warn",
                path=name,
                message="unknown key is ignored",
                hint=f"Known keys: {', '.join(sorted(known))}",
            ))
            continue
        expected = known[name]
        if not isinstance(value, expected):
            issues.append(ConfigIssue(
                level="error",
                path=name,
                message=f"expected {expected.__name__}, got {type(value).__name__}",
                hint=f"Use '{name}: true' or '{name}: false'",
            ))

    return issues


def has_errors(issues: List[ConfigIssue]) -> bool:
    return any(i.level == "error" for i in issues)
