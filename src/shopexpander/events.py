# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host event channels the engine subscribes to."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, ParamSpec

from .interfaces import ShopMenu

P = ParamSpec("P")


class EventChannel(Generic[P]):
    """Ordered list of handlers invoked synchronously on :meth:`emit`."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: list[Callable[P, None]] = []

    def subscribe(self, handler: Callable[P, None]) -> None:
        """Register ``handler``; subscribing twice has no effect."""

        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Callable[P, None]) -> None:
        """Remove ``handler`` when it is registered."""

        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: P.args, **kwargs: P.kwargs) -> None:
        """Invoke every handler registered when the emit started."""

        for handler in tuple(self._handlers):
            handler(*args, **kwargs)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"EventChannel({self.name!r}, handlers={len(self._handlers)})"


@dataclass(slots=True)
class HostEvents:
    """Lifecycle and input events raised by the host."""

    interface_changed: EventChannel[[ShopMenu | Any | None, ShopMenu | Any | None]] = field(
        default_factory=lambda: EventChannel("interface_changed"),
    )
    holder_changed: EventChannel[[bool]] = field(default_factory=lambda: EventChannel("holder_changed"))
    update_ticked: EventChannel[[]] = field(default_factory=lambda: EventChannel("update_ticked"))
    config_ready: EventChannel[[]] = field(default_factory=lambda: EventChannel("config_ready"))


__all__ = ["EventChannel", "HostEvents"]
