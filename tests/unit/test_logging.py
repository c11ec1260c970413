from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from seedproof.core.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_verbosity_overrides_configured_level() -> None:
    configure_logging(0, "error")
    assert logging.getLogger().level == logging.ERROR

    configure_logging(1, "error")
    assert logging.getLogger().level == logging.INFO

    configure_logging(3)
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_does_not_stack_handlers() -> None:
    configure_logging(0)
    configure_logging(0)
    rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1


def test_unknown_level_falls_back_to_warning() -> None:
    configure_logging(0, "chatty")
    assert logging.getLogger().level == logging.WARNING
