# propcheck/core/validate/report.py
"""
Detailed validation report.

validate() returns a plain {property: bool} map. validate_detailed() returns
these models instead, which also say how far each chain got and which
predicate stopped it.
"""

from __future__ import annotations

import builtins
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PropertyReport(BaseModel):
    """Outcome of one property's predicate chain."""
    model_config = ConfigDict(frozen=True)

    property: str = Field(description="Property name from the validator map")
    valid: bool = Field(description="Chain outcome")
    executed: int = Field(ge=0, description="Number of predicates invoked")
    total: int = Field(ge=0, description="Number of predicates declared")
    failed_index: Optional[int] = Field(
        default=None,
        description="Position of the predicate that returned False",
    )
    failed_predicate: Optional[str] = Field(
        default=None,
        description="Name of the predicate that returned False",
    )

    # "property" is a field name here, so the builtin must be spelled out
    @builtins.property
    def short_circuited(self) -> bool:
        """True if the chain stopped before its last predicate."""
        return self.executed < self.total


class ValidationReport(BaseModel):
    """Outcome of a whole validate_detailed() call."""
    model_config = ConfigDict(frozen=True)

    properties: List[PropertyReport] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return all(p.valid for p in self.properties)

    @property
    def results(self) -> Dict[str, bool]:
        """Same shape as validate()'s return value."""
        return {p.property: p.valid for p in self.properties}

    @property
    def failures(self) -> List[str]:
        return [p.property for p in self.properties if not p.valid]

    def get(self, name: str) -> Optional[PropertyReport]:
        for p in self.properties:
            if p.property == name:
                return p
        return None
