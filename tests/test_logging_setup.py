# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

from target_locker.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("target_locker.cli.main", logging.INFO, True),
        ("target_locker.targets.reminder_scheduler", logging.INFO, False),
        ("target_locker.targets.reminder_scheduler", logging.WARNING, True),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
        ("plyer", logging.WARNING, False),
        ("plyer", logging.ERROR, True),
    ],
)
def test_console_filter_levels(name: str, level: int, shown: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown
