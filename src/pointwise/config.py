from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class MatcherName(str, Enum):
    EQ = "eq"
    NE = "ne"
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"


class CheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    pointwise: MatcherName
    actual: list[Any]
    expected: list[Any]
    negate: bool = False
    weight: float = 1.0

    @field_validator("name")
    @classmethod
    def no_commas_in_name(cls, v: str) -> str:
        if "," in v:
            raise ValueError(f"Check name '{v}' must not contain a comma")
        return v

    @field_validator("weight")
    @classmethod
    def weight_must_not_be_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("weight must not be negative")
        return v


class SuiteConfig(BaseModel):
    checks: list[CheckConfig]

    @field_validator("checks")
    @classmethod
    def checks_must_be_unique_and_non_empty(
        cls, v: list[CheckConfig]
    ) -> list[CheckConfig]:
        if not v:
            raise ValueError("checks must not be empty")
        seen: set[str] = set()
        for check in v:
            if check.name in seen:
                raise ValueError(f"Duplicate check name '{check.name}'")
            seen.add(check.name)
        return v


def load_config(path: Path) -> SuiteConfig:
    """Load and validate a check suite from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    return SuiteConfig.model_validate(raw or {})
