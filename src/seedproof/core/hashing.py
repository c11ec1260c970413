from __future__ import annotations

import hashlib
import hmac
from typing import Protocol

from eth_utils import keccak


class Hasher(Protocol):
    def digest(self, data: bytes) -> bytes: ...

    def hmac_digest(self, key: bytes, message: bytes) -> bytes: ...


class KeccakHasher:
    """Keccak-256 commitments with HMAC-SHA256 round derivation.

    Keccak here is the original submission padding used by Ethereum, which
    differs from ``hashlib.sha3_256``.
    """

    digest_size = 32

    def digest(self, data: bytes) -> bytes:
        return keccak(primitive=data)

    def hmac_digest(self, key: bytes, message: bytes) -> bytes:
        return hmac.new(key, message, hashlib.sha256).digest()


DEFAULT_HASHER: Hasher = KeccakHasher()


def compute_bytes_digest(data: bytes, hasher: Hasher | None = None) -> str:
    return (hasher or DEFAULT_HASHER).digest(data).hex()
