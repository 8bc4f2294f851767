# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by the shop augmentation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import RawEntry


class ShopExpanderError(RuntimeError):
    """Base class for every error raised by :mod:`shopexpander`."""


class ConfigError(ShopExpanderError):
    """Raised when a configuration document cannot be read or validated."""


class ConfigEntryInvalid(ShopExpanderError):
    """Raised when a single catalog entry is rejected during the build."""

    def __init__(self, message: str, *, entry: RawEntry | None = None) -> None:
        """Initialise the error with a message and the offending entry.

        Args:
            message: Human-readable reason for the rejection.
            entry: Raw configuration entry that was rejected.
        """

        super().__init__(message)
        self.entry = entry


class ItemConstructionError(ShopExpanderError):
    """Raised when the host cannot construct an item from a reference."""


class ConditionEvaluationError(ShopExpanderError):
    """Raised when a condition expression cannot be evaluated."""

    def __init__(self, expression: str, cause: BaseException | None = None) -> None:
        super().__init__(f"Condition could not be evaluated: {expression!r}")
        self.expression = expression
        self.cause = cause


__all__ = (
    "ConditionEvaluationError",
    "ConfigEntryInvalid",
    "ConfigError",
    "ItemConstructionError",
    "ShopExpanderError",
)
