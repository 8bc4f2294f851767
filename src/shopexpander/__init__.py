# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Inject configured items into merchant shops and revert them once bought."""

from __future__ import annotations

from .catalog import UNKNOWN_OWNER, CatalogEntry, Registry, build_registry
from .config import RawEntry, ShopExpanderConfig, load_config
from .controller import AugmentationController, SessionState, ShopSession
from .errors import ConditionEvaluationError, ConfigEntryInvalid, ConfigError, ShopExpanderError
from .items import InjectedStack, Item, PlainItem, revert
from .mod import ShopExpanderMod
from .resolver import ShopContext, resolve_owner
from .watcher import RevertWatcher

__all__ = [
    "AugmentationController",
    "CatalogEntry",
    "ConditionEvaluationError",
    "ConfigEntryInvalid",
    "ConfigError",
    "InjectedStack",
    "Item",
    "PlainItem",
    "RawEntry",
    "Registry",
    "RevertWatcher",
    "SessionState",
    "ShopContext",
    "ShopExpanderConfig",
    "ShopExpanderError",
    "ShopExpanderMod",
    "ShopSession",
    "UNKNOWN_OWNER",
    "build_registry",
    "load_config",
    "resolve_owner",
]
