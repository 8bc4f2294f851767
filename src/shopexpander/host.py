# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory host implementations used by the CLI and tests."""

from __future__ import annotations

from collections.abc import Collection, Mapping, MutableSequence
from dataclasses import dataclass, field

from .config import ItemDefinition
from .errors import ConditionEvaluationError, ItemConstructionError
from .events import HostEvents
from .interfaces import ConditionEvaluator, Holder, ItemFactory, LocationProvider
from .items import Item, ItemRef, PlainItem, ShopListing


@dataclass(slots=True)
class SimpleShopMenu:
    """Shop interface keeping its sellable list in memory."""

    speaker_name: str | None = None
    greeting: str | None = None
    listings: list[ShopListing] = field(default_factory=list)

    def add_for_sale(self, item: Item, *, price: int, stock: int) -> None:
        self.listings.append(ShopListing(item=item, price=price, stock=stock))

    @property
    def for_sale(self) -> list[Item]:
        return [listing.item for listing in self.listings]


@dataclass(slots=True)
class InMemoryHolder:
    """Player holding backed by a plain list of slots."""

    slots: list[Item | None] = field(default_factory=list)

    @property
    def items(self) -> MutableSequence[Item | None]:
        return self.slots


@dataclass(slots=True)
class StaticLocation:
    """Location provider reporting a settable location name."""

    name: str | None = None

    def current_location_name(self) -> str | None:
        return self.name


class StaticItemFactory:
    """Construct items from a static table of item definitions.

    The sale price of a constructed stack is the unit price times the quantity.
    """

    def __init__(self, definitions: Mapping[str, ItemDefinition]) -> None:
        self._definitions = dict(definitions)

    def create(self, ref: ItemRef, quantity: int) -> PlainItem:
        definition = self._definitions.get(str(ref))
        if definition is None:
            raise ItemConstructionError(f"Unknown item reference: {ref}")
        return PlainItem(
            item_id=ref,
            name=definition.name,
            quantity=quantity,
            sale_price=definition.price * quantity,
        )


class FlagConditionEvaluator:
    """Evaluate ``/``-separated flag expressions against a set of active flags.

    Each token must be an active flag; a ``!`` prefix negates it.
    """

    def __init__(self, flags: Collection[str] = ()) -> None:
        self.flags = set(flags)

    def __call__(self, expression: str) -> bool:
        tokens = [token.strip() for token in expression.split("/")]
        if any(not token or token == "!" for token in tokens):
            raise ConditionEvaluationError(expression)
        return all((token[1:] not in self.flags) if token.startswith("!") else (token in self.flags) for token in tokens)


@dataclass(slots=True)
class HostServices:
    """Bundle of host events and capabilities consumed by the engine."""

    item_factory: ItemFactory
    condition_evaluator: ConditionEvaluator
    holder: Holder = field(default_factory=InMemoryHolder)
    location: LocationProvider = field(default_factory=StaticLocation)
    events: HostEvents = field(default_factory=HostEvents)

    @classmethod
    def in_memory(
        cls,
        items: Mapping[str, ItemDefinition],
        *,
        flags: Collection[str] = (),
        location: str | None = None,
    ) -> HostServices:
        """Return services backed entirely by in-memory implementations."""

        return cls(
            item_factory=StaticItemFactory(items),
            condition_evaluator=FlagConditionEvaluator(flags),
            location=StaticLocation(location),
        )


__all__ = [
    "FlagConditionEvaluator",
    "HostServices",
    "InMemoryHolder",
    "SimpleShopMenu",
    "StaticItemFactory",
    "StaticLocation",
]
