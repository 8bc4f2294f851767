# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Collapse bought injected stacks back into plain items."""

from __future__ import annotations

import logging

from .interfaces import Holder
from .items import InjectedStack, revert
from .logging import trace

LOGGER = logging.getLogger(__name__)


class RevertWatcher:
    """Replace injected stacks found in the local holder with their base item."""

    def __init__(self, holder: Holder) -> None:
        self.holder = holder

    def on_holder_changed(self, is_local: bool) -> int:
        """Handle a holder-contents notification.

        Args:
            is_local: ``True`` when the notification concerns the local player.

        Returns:
            int: Number of stacks reverted.
        """

        if not is_local:
            return 0
        slots = self.holder.items
        reverted = 0
        for index, item in enumerate(slots):
            if isinstance(item, InjectedStack):
                trace(LOGGER, "Reverting object: %s:%d", item.base.name, item.quantity)
                slots[index] = revert(item)
                reverted += 1
        return reverted


__all__ = ["RevertWatcher"]
