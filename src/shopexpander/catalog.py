# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the registry of catalog entries injected into merchant shops."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final

from pydantic import ValidationError

from .config import RawEntry
from .errors import ConfigEntryInvalid
from .interfaces import ItemFactory
from .items import InjectedStack, PlainItem

LOGGER = logging.getLogger(__name__)

UNKNOWN_OWNER: Final[str] = "???"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Validated rule describing an item offered by ``owner_id``."""

    owner_id: str
    base: PlainItem
    condition: str | None
    derived_name: str

    @property
    def quantity(self) -> int:
        return self.base.quantity

    def to_stack(self) -> InjectedStack:
        """Return the injected stack displayed for this entry."""

        return InjectedStack(base=self.base, owner_id=self.owner_id, condition=self.condition)


@dataclass(frozen=True, slots=True)
class Registry:
    """Read-only view over catalog entries keyed by derived name."""

    entries: Mapping[str, CatalogEntry] = field(default_factory=lambda: MappingProxyType({}))
    owners: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries.values())

    def has_owner(self, owner_id: str) -> bool:
        """Return whether any entry targets ``owner_id``."""

        return owner_id in self.owners

    def entries_for(self, owner_id: str) -> tuple[CatalogEntry, ...]:
        """Return entries targeting ``owner_id`` in registration order."""

        return tuple(entry for entry in self.entries.values() if entry.owner_id == owner_id)


def derive_name(item: PlainItem) -> str:
    """Return the registry key derived from a constructed item."""

    return f"{item.name} x{item.quantity}"


def parse_entry(raw: object) -> RawEntry:
    """Validate one declared entry.

    Args:
        raw: Entry model or raw mapping read from configuration.

    Returns:
        RawEntry: Validated entry.

    Raises:
        ConfigEntryInvalid: If the mapping does not describe a valid entry.
    """

    if isinstance(raw, RawEntry):
        return raw
    try:
        return RawEntry.model_validate(raw)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'entry'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigEntryInvalid(f"Invalid catalog entry {raw!r}: {problems}") from exc


def build_entry(raw: RawEntry, *, item_factory: ItemFactory) -> CatalogEntry:
    """Validate ``raw`` and construct its catalog entry.

    Args:
        raw: Configuration entry to validate.
        item_factory: Host capability constructing the base item.

    Returns:
        CatalogEntry: Entry ready to be registered.

    Raises:
        ConfigEntryInvalid: If the owner is the unknown sentinel or the item has no value.
    """

    if raw.owner == UNKNOWN_OWNER:
        raise ConfigEntryInvalid(
            f"Attempt to add an object to a shop owned by `{UNKNOWN_OWNER}`, "
            "which means the owner is unknown",
            entry=raw,
        )
    base = item_factory.create(raw.item, raw.amount)
    if base.sale_price == 0:
        raise ConfigEntryInvalid(f"Unable to add item to shop, it has no value: {raw.item}", entry=raw)
    return CatalogEntry(
        owner_id=raw.owner,
        base=base,
        condition=raw.conditions,
        derived_name=derive_name(base),
    )


def build_registry(raw_entries: Iterable[RawEntry | Mapping[str, Any]], *, item_factory: ItemFactory) -> Registry:
    """Build a :class:`Registry` from raw configuration entries.

    Entries failing validation are logged and skipped; they never abort the
    remaining entries. When two entries derive the same name the first one is
    kept.

    Args:
        raw_entries: Entries declared in configuration, in declaration order.
        item_factory: Host capability constructing base items.

    Returns:
        Registry: Immutable registry of accepted entries.
    """

    entries: dict[str, CatalogEntry] = {}
    owners: list[str] = []
    for raw in raw_entries:
        try:
            entry = build_entry(parse_entry(raw), item_factory=item_factory)
        except ConfigEntryInvalid as exc:
            LOGGER.error("%s", exc)
            continue
        except Exception as exc:  # pylint: disable=broad-exception-caught -- one entry never aborts the build
            LOGGER.error("Object failed to generate: %s (%s)", raw, exc, exc_info=exc)
            continue
        if entry.derived_name in entries:
            LOGGER.debug("Skipping duplicate catalog entry %s", entry.derived_name)
            continue
        if entry.owner_id not in owners:
            owners.append(entry.owner_id)
        entries[entry.derived_name] = entry
    return Registry(entries=MappingProxyType(entries), owners=tuple(owners))


__all__ = (
    "CatalogEntry",
    "Registry",
    "UNKNOWN_OWNER",
    "build_entry",
    "parse_entry",
    "build_registry",
    "derive_name",
)
