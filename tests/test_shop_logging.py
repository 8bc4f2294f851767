# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for logging helpers."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from shopexpander.logging import TRACE, configure_logging, ok, trace


def test_trace_level_is_registered() -> None:
    assert logging.getLevelName(TRACE) == "TRACE"


def test_trace_respects_logger_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("shopexpander.tests")
    caplog.set_level(logging.DEBUG, logger="shopexpander")
    trace(logger, "hidden %s", "message")
    assert "hidden message" not in caplog.text
    caplog.set_level(TRACE, logger="shopexpander")
    trace(logger, "shown %s", "message")
    assert "shown message" in caplog.text


def test_configure_logging_installs_single_rich_handler() -> None:
    logger = configure_logging("trace", use_color=False)
    configure_logging(logging.WARNING, use_color=False)
    handlers = [handler for handler in logger.handlers if isinstance(handler, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.WARNING
    logger.removeHandler(handlers[0])


def test_ok_prints_message(capsys: pytest.CaptureFixture[str]) -> None:
    ok("catalog ready", use_emoji=False, use_color=False)
    assert "catalog ready" in capsys.readouterr().out
