# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from shopexpander.config import ItemDefinition
from shopexpander.host import HostServices, StaticItemFactory


@pytest.fixture
def item_table() -> dict[str, ItemDefinition]:
    """Return a small static item table keyed by reference id."""
    return {
        "24": ItemDefinition(name="Parsnip", price=35),
        "388": ItemDefinition(name="Wood", price=2),
        "390": ItemDefinition(name="Stone", price=2),
        "168": ItemDefinition(name="Trash", price=0),
        "472": ItemDefinition(name="Parsnip Seeds", price=20),
    }


@pytest.fixture
def item_factory(item_table: dict[str, ItemDefinition]) -> StaticItemFactory:
    return StaticItemFactory(item_table)


@pytest.fixture
def host(item_table: dict[str, ItemDefinition]) -> HostServices:
    """Return in-memory host services with the ``spring`` flag active."""
    return HostServices.in_memory(item_table, flags={"spring"})
