# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for the shop augmentation engine."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .items import ItemRef

DEFAULT_SETTLE_TICKS: Final[int] = 2
CONFIG_FILENAMES: Final[tuple[str, ...]] = ("config.toml", "config.json")


class RawEntry(BaseModel):
    """Declarative rule placing ``amount`` units of ``item`` in ``owner``'s shop."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    owner: str
    item: ItemRef
    amount: int = Field(default=1, gt=0)
    conditions: str | None = None

    @field_validator("conditions")
    @classmethod
    def _blank_conditions_are_absent(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    def __str__(self) -> str:
        suffix = f" if {self.conditions}" if self.conditions else ""
        return f"{self.owner}:{self.item}x{self.amount}{suffix}"


class ItemDefinition(BaseModel):
    """Static item description used by the in-memory item factory."""

    model_config = ConfigDict(validate_assignment=True)

    name: str
    price: int = Field(default=0, ge=0)


class ShopExpanderConfig(BaseModel):
    """Top-level configuration document."""

    model_config = ConfigDict(validate_assignment=True)

    # Entries are validated one by one when the catalog is built.
    objects: list[Any] = Field(default_factory=list)
    items: dict[str, ItemDefinition] = Field(default_factory=dict)


def load_config(path: Path) -> ShopExpanderConfig:
    """Load configuration from a TOML or JSON document.

    Args:
        path: Location of the configuration file. A missing file yields defaults.

    Returns:
        ShopExpanderConfig: Validated configuration model.

    Raises:
        ConfigError: If the file cannot be parsed or fails validation.
    """

    if not path.exists():
        return ShopExpanderConfig()
    try:
        if path.suffix == ".toml":
            with path.open("rb") as handle:
                data: Any = tomllib.load(handle)
        else:
            data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {path} must be a table")
    try:
        return ShopExpanderConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration at {path}: {exc}") from exc


def find_config(directory: Path) -> Path | None:
    """Return the first known configuration file inside ``directory``."""

    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


__all__ = [
    "CONFIG_FILENAMES",
    "DEFAULT_SETTLE_TICKS",
    "ItemDefinition",
    "RawEntry",
    "ShopExpanderConfig",
    "find_config",
    "load_config",
]
