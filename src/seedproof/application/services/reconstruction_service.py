from __future__ import annotations

import logging
import math
from typing import Sequence

from seedproof.core.hashing import DEFAULT_HASHER, Hasher
from seedproof.core.hexcodec import short_hex
from seedproof.domain.models.verification import RoundOutcome

logger = logging.getLogger(__name__)

DRAW_HEX_CHARS = 8
DRAW_DIVISOR = 0xFFFFFFFF


def canonical_seed(seed_hex: str) -> str:
    return seed_hex.strip().lower()


def round_message(seed_hex: str, round_index: int) -> bytes:
    return f"{seed_hex}:{round_index}".encode("utf-8")


def derive_round(
    seed_hex: str,
    round_index: int,
    outcome_space: int,
    *,
    strict: bool = True,
    hasher: Hasher | None = None,
) -> RoundOutcome:
    """Derive the selected index for one round.

    The first 32 bits of HMAC-SHA256(seed, "<seed>:<round>") are scaled by
    ``0xFFFFFFFF`` into [0, 1] and multiplied by the outcome space. A draw of
    exactly ``0xFFFFFFFF`` lands on ``outcome_space`` itself; strict mode
    clamps it to the last valid index.
    """
    if outcome_space < 1:
        raise ValueError(f"outcome_space must be >= 1, got {outcome_space}")

    seed_hex = canonical_seed(seed_hex)
    hasher = hasher or DEFAULT_HASHER
    key = seed_hex.encode("utf-8")
    digest_hex = hasher.hmac_digest(key, round_message(seed_hex, round_index)).hex()
    draw = int(digest_hex[:DRAW_HEX_CHARS], 16)
    ratio = draw / DRAW_DIVISOR
    index = math.floor(ratio * outcome_space)

    clamped = False
    if strict and index >= outcome_space:
        index = outcome_space - 1
        clamped = True

    return RoundOutcome(
        round_index=round_index,
        outcome_space=outcome_space,
        index=index,
        draw=draw,
        ratio=ratio,
        clamped=clamped,
    )


def reconstruct_rounds(
    seed_hex: str,
    round_config: Sequence[int],
    *,
    strict: bool = True,
    hasher: Hasher | None = None,
) -> list[RoundOutcome]:
    seed_hex = canonical_seed(seed_hex)
    logger.debug("Reconstructing %d rounds from seed=%s", len(round_config), short_hex(seed_hex))

    rounds: list[RoundOutcome] = []
    for round_index, outcome_space in enumerate(round_config):
        if outcome_space < 1:
            raise ValueError(f"Round {round_index} has non-positive outcome space {outcome_space}")
        try:
            outcome = derive_round(seed_hex, round_index, outcome_space, strict=strict, hasher=hasher)
        except Exception as exc:
            logger.warning(
                "Round %d derivation failed, substituting index 0: %s",
                round_index + 1,
                exc,
            )
            outcome = RoundOutcome(
                round_index=round_index,
                outcome_space=outcome_space,
                index=0,
                draw=0,
                ratio=0.0,
                fallback=True,
            )
        else:
            logger.debug(
                "Round %d: %d outcomes, index %d (%.3f)",
                round_index + 1,
                outcome_space,
                outcome.index,
                outcome.ratio,
            )
        rounds.append(outcome)
    return rounds


def reconstruct(
    seed_hex: str,
    round_config: Sequence[int],
    *,
    strict: bool = True,
    hasher: Hasher | None = None,
) -> list[int]:
    return [r.index for r in reconstruct_rounds(seed_hex, round_config, strict=strict, hasher=hasher)]
