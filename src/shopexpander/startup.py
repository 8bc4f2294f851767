# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""One-shot deferred tasks driven by host events."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .events import EventChannel

LOGGER = logging.getLogger(__name__)


class OneShotTask:
    """Run ``action`` once, after ``delay`` events on ``trigger`` or when ``ready`` fires.

    The task unsubscribes itself from every channel before running, so a
    recurring trigger never runs the action twice.
    """

    def __init__(
        self,
        action: Callable[[], None],
        *,
        trigger: EventChannel[[]],
        delay: int = 0,
        ready: EventChannel[[]] | None = None,
        name: str = "deferred task",
    ) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.action = action
        self.trigger = trigger
        self.ready = ready
        self.name = name
        self._remaining = delay
        self._scheduled = False
        self.done = False

    @property
    def scheduled(self) -> bool:
        return self._scheduled

    def schedule(self) -> None:
        """Subscribe to the trigger (and ready) channels."""

        if self.done or self._scheduled:
            return
        self.trigger.subscribe(self._on_trigger)
        if self.ready is not None:
            self.ready.subscribe(self.fire)
        self._scheduled = True

    def cancel(self) -> None:
        """Unsubscribe without running the action."""

        self.trigger.unsubscribe(self._on_trigger)
        if self.ready is not None:
            self.ready.unsubscribe(self.fire)
        self._scheduled = False

    def fire(self) -> None:
        """Run the action now unless it already ran."""

        if self.done:
            return
        self.cancel()
        self.done = True
        LOGGER.debug("Running %s", self.name)
        self.action()

    def _on_trigger(self) -> None:
        if self._remaining > 0:
            self._remaining -= 1
            return
        self.fire()


__all__ = ["OneShotTask"]
