from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from seedproof.core.config import VerifierSettings


@dataclass(slots=True)
class CLIContext:
    settings: VerifierSettings
    console: Console
    debug: bool = False
