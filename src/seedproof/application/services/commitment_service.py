from __future__ import annotations

import hmac
import logging

from seedproof.core.hashing import Hasher, compute_bytes_digest
from seedproof.core.hexcodec import decode_hex, short_hex

logger = logging.getLogger(__name__)


def compute_commitment(seed_hex: str, *, hasher: Hasher | None = None) -> str:
    """Return the lowercase Keccak-256 hex digest of the decoded seed bytes."""
    return compute_bytes_digest(decode_hex(seed_hex), hasher)


def commitments_match(actual_hex: str, expected_hex: str) -> bool:
    expected = expected_hex.strip().lower()
    return hmac.compare_digest(actual_hex.lower().encode("utf-8"), expected.encode("utf-8"))


def verify_commitment(seed_hex: str, commitment_hex: str, *, hasher: Hasher | None = None) -> bool:
    """Check that ``seed_hex`` hashes to ``commitment_hex``.

    Raises ``DecodingError`` for a malformed seed. A malformed or wrong-length
    commitment is just a mismatch.
    """
    actual = compute_commitment(seed_hex, hasher=hasher)
    is_valid = commitments_match(actual, commitment_hex)

    logger.debug(
        "Commitment check seed=%s expected=%s actual=%s valid=%s",
        short_hex(seed_hex),
        short_hex(commitment_hex),
        short_hex(actual),
        is_valid,
    )
    return is_valid
