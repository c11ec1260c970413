from __future__ import annotations

import logging
import re

from seedproof.core.errors import ValidationError
from seedproof.core.hexcodec import is_hex, short_hex
from seedproof.domain.models.verification import VerificationRequest

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_round_config(raw: str | None) -> tuple[int, ...]:
    """Parse a comma-separated row configuration.

    Each token is read up to its first non-digit, so "3.5" is 3 and "4px"
    is 4. Tokens that are blank, have no leading digits, or are below 1 are
    dropped rather than rejected.
    """
    if not raw:
        return ()

    rows: list[int] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        match = _LEADING_INT_RE.match(token)
        if match is None:
            logger.debug("Dropping non-numeric row token %r", token)
            continue
        value = int(match.group(0))
        if value < 1:
            logger.debug("Dropping non-positive row token %r", token)
            continue
        rows.append(value)
    return tuple(rows)


def row_limit_problem(rows: tuple[int, ...], max_outcome_space: int | None) -> str | None:
    if max_outcome_space is not None and any(n > max_outcome_space for n in rows):
        return f"Row configuration must contain numbers between 1 and {max_outcome_space}"
    return None

def normalize(
    raw_hash: str | None,
    raw_seed: str | None,
    raw_config: str | None,
    *,
    max_outcome_space: int | None = None,
) -> VerificationRequest:
    problems: list[str] = []

    seed_hash = _check_hex_field(raw_hash, "Seed hash", problems)
    seed = _check_hex_field(raw_seed, "Revealed seed", problems)

    rows = parse_round_config(raw_config)
    if not rows:
        problems.append("Row configuration is required")
    else:
        limit_problem = row_limit_problem(rows, max_outcome_space)
        if limit_problem:
            problems.append(limit_problem)

    if problems:
        logger.debug("Normalization rejected input: %s", problems)
        raise ValidationError(problems)

    logger.debug(
        "Normalized request seed=%s hash=%s rows=%d",
        short_hex(seed),
        short_hex(seed_hash),
        len(rows),
    )
    return VerificationRequest(commitment_hash=seed_hash.lower(), seed=seed.lower(), round_config=rows)


def _check_hex_field(raw: str | None, label: str, problems: list[str]) -> str:
    value = (raw or "").strip()
    if not value:
        problems.append(f"{label} is required")
    elif not is_hex(value):
        problems.append(f"{label} must be a valid hexadecimal string")
    elif len(value) % 2 != 0:
        problems.append(f"{label} must have an even number of hex digits")
    return value
