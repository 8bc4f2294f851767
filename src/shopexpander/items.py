# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Item variants handled by the engine.

An item is either a :class:`PlainItem`, indistinguishable from one bought
anywhere else, or an :class:`InjectedStack` that only exists while a catalog
entry is displayed in a shop. :func:`revert` collapses the latter into the
former.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeAlias

ItemRef: TypeAlias = int | str

UNLIMITED_STOCK: Final[int] = 2**31 - 1


@dataclass(frozen=True, slots=True)
class PlainItem:
    """Ordinary stack of ``quantity`` units of ``item_id``."""

    item_id: ItemRef
    name: str
    quantity: int
    sale_price: int


@dataclass(frozen=True, slots=True)
class InjectedStack:
    """Stack of a base item tagged with the shop owner and its gating condition."""

    base: PlainItem
    owner_id: str
    condition: str | None = None

    @property
    def quantity(self) -> int:
        return self.base.quantity

    @property
    def sale_price(self) -> int:
        return self.base.sale_price


Item: TypeAlias = PlainItem | InjectedStack


def revert(item: Item) -> PlainItem:
    """Return the plain item underlying ``item``.

    Args:
        item: Plain item or injected stack.

    Returns:
        PlainItem: ``item.base`` for injected stacks, ``item`` itself otherwise.
    """

    if isinstance(item, InjectedStack):
        return item.base
    return item


@dataclass(frozen=True, slots=True)
class ShopListing:
    """Entry appended to a shop's sellable list."""

    item: Item
    price: int
    stock: int = UNLIMITED_STOCK


__all__ = [
    "InjectedStack",
    "Item",
    "ItemRef",
    "PlainItem",
    "ShopListing",
    "UNLIMITED_STOCK",
    "revert",
]
