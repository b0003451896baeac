from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


def _non_empty(field: str, v: list[Any]) -> list[Any]:
    if not v:
        raise ValueError(f"{field} must not be empty")
    return v


class EqualToSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    equal_to: Any


class OneOfSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    one_of: list[Any]

    @field_validator("one_of")
    @classmethod
    def one_of_must_not_be_empty(cls, v: list[Any]) -> list[Any]:
        return _non_empty("one_of", v)


class EveryItemSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    every_item: MatcherSpec


class AnyItemSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    any_item: MatcherSpec


class ItemSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    item: Any


class ItemInSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    item_in: list[Any]

    @field_validator("item_in")
    @classmethod
    def item_in_must_not_be_empty(cls, v: list[Any]) -> list[Any]:
        return _non_empty("item_in", v)


class ItemsSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    items: list[Any]

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(cls, v: list[Any]) -> list[Any]:
        return _non_empty("items", v)


class SequenceSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sequence: list[Any]

    @field_validator("sequence")
    @classmethod
    def sequence_must_not_be_empty(cls, v: list[Any]) -> list[Any]:
        return _non_empty("sequence", v)


MatcherSpec = (
    EqualToSpec
    | OneOfSpec
    | EveryItemSpec
    | AnyItemSpec
    | ItemSpec
    | ItemInSpec
    | ItemsSpec
    | SequenceSpec
)

EveryItemSpec.model_rebuild()
AnyItemSpec.model_rebuild()


class CheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    actual: Any = None
    actual_file: str | None = None
    matcher: MatcherSpec

    @model_validator(mode="after")
    def exactly_one_actual_source(self) -> CheckConfig:
        has_inline = "actual" in self.model_fields_set
        has_file = self.actual_file is not None
        if has_inline == has_file:
            raise ValueError(
                f"Check '{self.name}' must set exactly one of 'actual' or 'actual_file'"
            )
        return self


class CheckFileConfig(BaseModel):
    checks: list[CheckConfig]

    @field_validator("checks")
    @classmethod
    def checks_must_not_be_empty(cls, v: list[CheckConfig]) -> list[CheckConfig]:
        if not v:
            raise ValueError("checks must not be empty")
        return v

    @model_validator(mode="after")
    def check_names_must_be_unique(self) -> CheckFileConfig:
        seen: set[str] = set()
        for check in self.checks:
            if check.name in seen:
                raise ValueError(f"Duplicate check name '{check.name}'")
            seen.add(check.name)
        return self


def load_config(path: Path) -> CheckFileConfig:
    """Load and validate a check file from YAML."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = CheckFileConfig(**raw)

    # Resolve relative actual_file paths relative to the check file location
    for check in config.checks:
        if check.actual_file is None:
            continue
        actual_path = Path(check.actual_file)
        if not actual_path.is_absolute():
            check.actual_file = str((config_dir / actual_path).resolve())

    return config
