from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_VERBOSITY_LEVELS = {1: logging.INFO, 2: logging.DEBUG}


def configure_logging(verbosity: int = 0, level: str | None = None) -> None:
    """Route log records through rich on stderr.

    ``verbosity`` comes from repeated ``-v`` flags and overrides ``level``.
    """
    if verbosity > 0:
        resolved = _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)
    else:
        resolved = logging.getLevelName((level or "WARNING").upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(resolved)
