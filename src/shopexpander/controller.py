# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Inject catalog entries into shop interfaces as they open."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .catalog import UNKNOWN_OWNER, CatalogEntry, Registry
from .errors import ConditionEvaluationError
from .events import HostEvents
from .interfaces import ConditionEvaluator, LocationProvider, ShopMenu
from .items import UNLIMITED_STOCK, Item
from .logging import trace
from .resolver import ShopContext, resolve_owner
from .watcher import RevertWatcher

LOGGER = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle states of the controller for the current interface."""

    CLOSED = "closed"
    OPEN = "open"
    AUGMENTED = "augmented"


@dataclass(slots=True)
class ShopSession:
    """Transient state covering one open-to-close lifetime of a shop interface."""

    menu: ShopMenu
    owner_id: str
    augmented: bool = False


class AugmentationController:
    """Resolve shop owners and inject their catalog entries on interface open."""

    def __init__(
        self,
        registry: Registry,
        *,
        events: HostEvents,
        watcher: RevertWatcher,
        location: LocationProvider,
        condition_evaluator: ConditionEvaluator,
    ) -> None:
        self.registry = registry
        self.events = events
        self.watcher = watcher
        self.location = location
        self.condition_evaluator = condition_evaluator
        self.session: ShopSession | None = None

    @property
    def state(self) -> SessionState:
        if self.session is None:
            return SessionState.CLOSED
        return SessionState.AUGMENTED if self.session.augmented else SessionState.OPEN

    def attach(self) -> None:
        """Start listening for interface changes."""

        self.events.interface_changed.subscribe(self.on_interface_changed)

    def detach(self) -> None:
        """Stop listening and tear down any open session."""

        self.events.interface_changed.unsubscribe(self.on_interface_changed)
        self._close()

    def on_interface_changed(self, old: Any, new: Any) -> None:
        """Handle the host's interface opened/closed/replaced notification.

        Args:
            old: Interface being closed or replaced, if any.
            new: Interface being opened, if any.
        """

        if self.session is not None and old is self.session.menu:
            self._close()
        if isinstance(new, ShopMenu):
            self.open(new)

    def open(self, menu: ShopMenu) -> ShopSession | None:
        """Open a session for ``menu`` and inject its owner's entries.

        Args:
            menu: Shop interface that was just opened.

        Returns:
            ShopSession | None: The new session, or ``None`` when a session was
            already open and the call was ignored.
        """

        if self.session is not None:
            LOGGER.warning(
                "Shop interface opened while a session for `%s` is still open, ignoring",
                self.session.owner_id,
            )
            return None
        trace(LOGGER, "Shop menu active, checking for expansion")
        context = ShopContext(
            speaker_name=menu.speaker_name,
            greeting=menu.greeting,
            location_name=self.location.current_location_name(),
        )
        owner_id = resolve_owner(context)
        session = ShopSession(menu=menu, owner_id=owner_id)
        self.session = session
        if not self.registry.has_owner(owner_id):
            if owner_id == UNKNOWN_OWNER:
                trace(LOGGER, "The shop owner could not be resolved, skipping shop")
            else:
                trace(LOGGER, "The shop owned by `%s` is not on the list, ignoring it", owner_id)
            return session

        trace(LOGGER, "Shop owned by `%s` gets modified, doing so now", owner_id)
        injected = 0
        for entry in self.registry.entries_for(owner_id):
            if self._inject(menu, entry):
                injected += 1
        if injected:
            session.augmented = True
            self.events.holder_changed.subscribe(self.watcher.on_holder_changed)
        return session

    def close(self) -> None:
        """Discard the current session, unsubscribing the watcher if needed."""

        self._close()

    def _close(self) -> None:
        session = self.session
        if session is None:
            return
        if session.augmented:
            self.events.holder_changed.unsubscribe(self.watcher.on_holder_changed)
        self.session = None

    def _inject(self, menu: ShopMenu, entry: CatalogEntry) -> bool:
        if not self._condition_met(entry):
            trace(LOGGER, "Item(%s){Location=true,Condition=false}", entry.derived_name)
            return False
        item: Item
        if entry.quantity == 1:
            trace(LOGGER, "Item(%s){Location=true,Condition=true,Stack=false}", entry.derived_name)
            item = entry.base
        else:
            trace(LOGGER, "Item(%s){Location=true,Condition=true,Stack=true}", entry.derived_name)
            item = entry.to_stack()
        menu.add_for_sale(item, price=entry.base.sale_price, stock=UNLIMITED_STOCK)
        return True

    def _condition_met(self, entry: CatalogEntry) -> bool:
        if not entry.condition:
            return True
        try:
            return bool(self.condition_evaluator(entry.condition))
        except ConditionEvaluationError as exc:
            LOGGER.warning("%s", exc)
        except Exception as exc:  # pylint: disable=broad-exception-caught -- host evaluator failures never escape
            LOGGER.warning("%s", ConditionEvaluationError(entry.condition, exc))
        return False


__all__ = ["AugmentationController", "SessionState", "ShopSession"]
