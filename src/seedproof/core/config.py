from __future__ import annotations

import os
from dataclasses import dataclass

from seedproof.core.errors import ConfigurationError


@dataclass(frozen=True)
class VerifierSettings:
    strict_bounds: bool
    max_outcome_space: int | None
    log_level: str
    host: str
    port: int


DEFAULT_MAX_OUTCOME_SPACE = 10
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def load_settings() -> VerifierSettings:
    return VerifierSettings(
        strict_bounds=_read_bool_env("SEEDPROOF_STRICT_BOUNDS", True),
        max_outcome_space=_read_limit_env("SEEDPROOF_MAX_OUTCOME_SPACE", DEFAULT_MAX_OUTCOME_SPACE),
        log_level=(os.getenv("SEEDPROOF_LOG_LEVEL") or "WARNING").strip().upper(),
        host=(os.getenv("SEEDPROOF_HOST") or DEFAULT_HOST).strip(),
        port=_read_int_env("SEEDPROOF_PORT", DEFAULT_PORT),
    )


def _read_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _read_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _read_limit_env(name: str, default: int) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    if not raw.strip():
        return None
    value = _read_int_env(name, default)
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {raw!r}")
    # 0 disables the limit
    return value or None
