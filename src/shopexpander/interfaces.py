# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the host capabilities consumed by the engine."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Protocol, runtime_checkable

from .items import Item, ItemRef, PlainItem


@runtime_checkable
class ConditionEvaluator(Protocol):
    """Evaluate a host condition expression against the current world state."""

    def __call__(self, expression: str) -> bool:
        """Return ``True`` when ``expression`` holds."""

        raise NotImplementedError


@runtime_checkable
class ItemFactory(Protocol):
    """Construct plain items from a reference id and a quantity."""

    def create(self, ref: ItemRef, quantity: int) -> PlainItem:
        """Return a new item; raise :class:`~shopexpander.errors.ItemConstructionError` on failure."""

        raise NotImplementedError


@runtime_checkable
class ShopMenu(Protocol):
    """Shop interface exposed by the host while it is open."""

    speaker_name: str | None
    greeting: str | None

    def add_for_sale(self, item: Item, *, price: int, stock: int) -> None:
        """Append ``item`` to the sellable list with price and stock metadata."""

        raise NotImplementedError


@runtime_checkable
class Holder(Protocol):
    """Container of item slots belonging to the local player."""

    @property
    def items(self) -> MutableSequence[Item | None]:
        """Return the mutable slot list; empty slots are ``None``."""

        raise NotImplementedError


@runtime_checkable
class LocationProvider(Protocol):
    """Report the name of the location the player currently stands in."""

    def current_location_name(self) -> str | None:
        raise NotImplementedError


__all__ = [
    "ConditionEvaluator",
    "Holder",
    "ItemFactory",
    "LocationProvider",
    "ShopMenu",
]
