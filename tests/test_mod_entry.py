# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end tests for the mod entry wiring."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from shopexpander.config import RawEntry, ShopExpanderConfig
from shopexpander.errors import ConfigError
from shopexpander.host import HostServices, SimpleShopMenu
from shopexpander.items import InjectedStack
from shopexpander.mod import ShopExpanderMod


def _config() -> ShopExpanderConfig:
    return ShopExpanderConfig(objects=[RawEntry(owner="Robin", item=388, amount=50)])


def _tick(host: HostServices, count: int) -> None:
    for _ in range(count):
        host.events.update_ticked.emit()


def test_catalog_builds_after_settle_ticks(host: HostServices) -> None:
    loads: list[int] = []

    def loader() -> ShopExpanderConfig:
        loads.append(1)
        return _config()

    mod = ShopExpanderMod(host, config_loader=loader)
    mod.entry()

    menu = SimpleShopMenu(speaker_name="Robin")
    _tick(host, 2)
    host.events.interface_changed.emit(None, menu)
    assert mod.registry is None
    assert menu.listings == []
    host.events.interface_changed.emit(menu, None)

    _tick(host, 10)
    assert loads == [1]
    assert mod.registry is not None and len(mod.registry) == 1


def test_purchase_round_trip(host: HostServices) -> None:
    mod = ShopExpanderMod(host, config_loader=_config)
    mod.entry()
    host.events.config_ready.emit()

    menu = SimpleShopMenu(speaker_name="Robin")
    host.events.interface_changed.emit(None, menu)
    bought = menu.listings[0].item
    assert isinstance(bought, InjectedStack)

    host.holder.items.append(bought)
    host.events.holder_changed.emit(False)
    assert host.holder.items == [bought]
    host.events.holder_changed.emit(True)
    assert host.holder.items == [bought.base]

    host.events.interface_changed.emit(menu, None)
    assert mod.controller is not None and mod.controller.session is None


def test_config_errors_leave_catalog_empty(host: HostServices, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="shopexpander")

    def loader() -> ShopExpanderConfig:
        raise ConfigError("broken config")

    mod = ShopExpanderMod(host, config_loader=loader, settle_ticks=0)
    mod.entry()
    _tick(host, 1)

    assert mod.registry is not None and len(mod.registry) == 0
    assert "broken config" in caplog.text


def test_from_path_reads_json(host: HostServices, tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"objects": [{"owner": "Pierre", "item": 472, "amount": 10}]}), encoding="utf-8")
    mod = ShopExpanderMod.from_path(host, path, settle_ticks=0)
    mod.entry()
    _tick(host, 1)
    assert mod.registry is not None
    assert mod.registry.owners == ("Pierre",)


def test_shutdown_detaches(host: HostServices) -> None:
    mod = ShopExpanderMod(host, config_loader=_config, settle_ticks=0)
    mod.entry()
    _tick(host, 1)
    mod.shutdown()
    assert len(host.events.interface_changed) == 0
    assert len(host.events.update_ticked) == 0


def test_bad_entry_in_file_keeps_the_rest(host: HostServices, tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "objects": [
                    {"owner": "Robin", "item": 388, "amount": 0},
                    {"owner": "Pierre", "item": 472, "amount": 5},
                ],
            },
        ),
        encoding="utf-8",
    )
    mod = ShopExpanderMod.from_path(host, path, settle_ticks=0)
    mod.entry()
    _tick(host, 1)

    assert mod.registry is not None
    assert mod.registry.owners == ("Pierre",)
    menu = SimpleShopMenu(speaker_name="Pierre")
    host.events.interface_changed.emit(None, menu)
    assert len(menu.listings) == 1


@pytest.mark.parametrize(
    ("filename", "payload"),
    [("config.json", b'{"objects": [\xff]}'), ("config.toml", b'objects = ["\xff"]')],
)
def test_undecodable_file_is_contained(
    host: HostServices, tmp_path: Path, caplog: pytest.LogCaptureFixture, filename: str, payload: bytes
) -> None:
    caplog.set_level(logging.ERROR, logger="shopexpander")
    path = tmp_path / filename
    path.write_bytes(payload)
    mod = ShopExpanderMod.from_path(host, path, settle_ticks=0)
    mod.entry()

    _tick(host, 1)

    assert mod.registry is not None and len(mod.registry) == 0
    assert mod.controller is not None
    assert "Unable to read configuration" in caplog.text
