from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class SuiteRef(BaseModel):
    """Where to find a test: ``module:attribute``.

    The attribute is either an ``XCTest`` instance or a zero-argument
    callable returning one. ``name`` wraps the target in a suite of that name.
    """

    model_config = ConfigDict(extra="forbid")
    target: str
    name: str | None = None

    @field_validator("target")
    @classmethod
    def target_must_name_an_attribute(cls, v: str) -> str:
        module, sep, attribute = v.partition(":")
        if not sep or not module.strip() or not attribute.strip():
            raise ValueError(f"target '{v}' must have the form 'module:attribute'")
        return v


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "All tests"
    output_dir: str = "runs"
    suites: list[SuiteRef]

    @field_validator("suites", mode="before")
    @classmethod
    def normalize_suites(cls, v: list) -> list:
        if not isinstance(v, list):
            return v
        result = []
        for item in v:
            if isinstance(item, str):
                result.append(SuiteRef(target=item))
            else:
                result.append(item)
        return result

    @model_validator(mode="after")
    def suites_must_not_be_empty(self) -> RunConfig:
        if not self.suites:
            raise ValueError("suites must not be empty")
        return self


def _expand(value: Any) -> Any:
    """Expand ``${VAR}`` references in every string of a parsed YAML tree."""
    if isinstance(value, str):
        return expandvars(value, nounset=True)
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    return value


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    try:
        raw = _expand(raw)
    except Exception as e:
        raise ValueError(f"{path}: {e}") from e

    config = RunConfig(**raw)

    # Resolve a relative output_dir against the config file location
    output_dir = Path(config.output_dir)
    if not output_dir.is_absolute():
        config.output_dir = str((config_dir / output_dir).resolve())

    return config
