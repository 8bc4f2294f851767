# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the canonical owner id of an open shop interface.

Default and location-bound merchants do not expose a stable identity, so the
visible greeting and the current location are the only discriminators left.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from .catalog import UNKNOWN_OWNER

CLINT: Final[str] = "Clint"
CLINT_UPGRADE: Final[str] = "ClintUpgrade"
CLINT_UPGRADE_GREETING: Final[str] = (
    "I can upgrade your tools with more power. You'll have to leave them with me for a few days, though."
)

FOREST: Final[str] = "Forest"
HAT_MOUSE: Final[str] = "HatMouse"
HAT_MOUSE_GREETING: Final[str] = "Hiyo, poke. Did you bring coins? Gud. Me sell hats."
TRAVELER: Final[str] = "Traveler"
TRAVELER_GREETINGS: Final[tuple[str, ...]] = (
    "I've got a little bit of everything. Take a look!",
    "I smuggled these goods out of the Gotoro Empire. Why do you think they're so expensive?",
    "I'll have new items every week, so make sure to come back!",
    "Beautiful country you have here. One of my favorite stops. The pig likes it, too.",
)
TRAVELER_GREETING_PREFIX: Final[str] = "Let me see... Oh! I've got just what you need: "

LOCATION_OWNERS: Final = MappingProxyType(
    {
        "Hospital": "Hospital",
        "Club": "MisterQi",
        "JojaMart": "Joja",
    },
)


@dataclass(frozen=True, slots=True)
class ShopContext:
    """Information visible while a shop interface is open."""

    speaker_name: str | None = None
    greeting: str | None = None
    location_name: str | None = None


def resolve_owner(context: ShopContext) -> str:
    """Return the canonical owner id for ``context``.

    Args:
        context: Speaker, greeting and location of the open interface.

    Returns:
        str: Owner id, or :data:`~shopexpander.catalog.UNKNOWN_OWNER` when unresolved.
    """

    if context.speaker_name is not None:
        if context.speaker_name == CLINT and context.greeting == CLINT_UPGRADE_GREETING:
            return CLINT_UPGRADE
        return context.speaker_name
    if context.location_name == FOREST:
        return _resolve_forest(context.greeting)
    if context.location_name is None:
        return UNKNOWN_OWNER
    return LOCATION_OWNERS.get(context.location_name, UNKNOWN_OWNER)


def _resolve_forest(greeting: str | None) -> str:
    """Tell the hat mouse and the travelling merchant apart by greeting."""

    if greeting is None:
        return UNKNOWN_OWNER
    if greeting == HAT_MOUSE_GREETING:
        return HAT_MOUSE
    # Only the last greeting is compared by prefix; the others must match exactly.
    if greeting in TRAVELER_GREETINGS:
        return TRAVELER
    if greeting[: len(TRAVELER_GREETING_PREFIX)] == TRAVELER_GREETING_PREFIX:
        return TRAVELER
    # Custom unowned shops stay unidentified.
    return UNKNOWN_OWNER


__all__ = [
    "CLINT_UPGRADE",
    "HAT_MOUSE",
    "LOCATION_OWNERS",
    "ShopContext",
    "TRAVELER",
    "resolve_owner",
]
