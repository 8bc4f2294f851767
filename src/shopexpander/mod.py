# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Mod entry wiring deferred catalog build, controller and watcher onto a host."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .catalog import Registry, build_registry
from .config import DEFAULT_SETTLE_TICKS, ShopExpanderConfig, load_config
from .controller import AugmentationController
from .errors import ConfigError
from .host import HostServices
from .startup import OneShotTask
from .watcher import RevertWatcher

LOGGER = logging.getLogger(__name__)

ConfigLoader = Callable[[], ShopExpanderConfig]


class ShopExpanderMod:
    """Entry point attaching the shop augmentation engine to a host.

    The catalog is built once, ``settle_ticks`` update ticks after
    :meth:`entry` or as soon as the host signals that its configuration is
    ready. Until then shop interfaces are left untouched.
    """

    def __init__(
        self,
        host: HostServices,
        *,
        config_loader: ConfigLoader,
        settle_ticks: int = DEFAULT_SETTLE_TICKS,
    ) -> None:
        self.host = host
        self.config_loader = config_loader
        self.registry: Registry | None = None
        self.controller: AugmentationController | None = None
        self.startup = OneShotTask(
            self._build_catalog,
            trigger=host.events.update_ticked,
            delay=settle_ticks,
            ready=host.events.config_ready,
            name="catalog build",
        )

    @classmethod
    def from_path(cls, host: HostServices, path: Path, **kwargs: int) -> ShopExpanderMod:
        """Return a mod reading its configuration from ``path`` at build time."""

        return cls(host, config_loader=lambda: load_config(path), **kwargs)

    def entry(self) -> None:
        """Schedule the deferred catalog build."""

        self.startup.schedule()

    def shutdown(self) -> None:
        """Cancel a pending build and detach the controller."""

        self.startup.cancel()
        if self.controller is not None:
            self.controller.detach()

    def _build_catalog(self) -> None:
        try:
            config = self.config_loader()
        except ConfigError as exc:
            LOGGER.error("%s", exc)
            config = ShopExpanderConfig()
        self.registry = build_registry(config.objects, item_factory=self.host.item_factory)
        LOGGER.info(
            "Catalog built: %d entries across %d shops",
            len(self.registry),
            len(self.registry.owners),
        )
        self.controller = AugmentationController(
            self.registry,
            events=self.host.events,
            watcher=RevertWatcher(self.host.holder),
            location=self.host.location,
            condition_evaluator=self.host.condition_evaluator,
        )
        self.controller.attach()


__all__ = ["ShopExpanderMod"]
