from __future__ import annotations

import hashlib

from seedproof.core.hashing import DEFAULT_HASHER, KeccakHasher, compute_bytes_digest

KECCAK_EMPTY = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


def test_compute_bytes_digest_uses_keccak_256() -> None:
    assert compute_bytes_digest(b"") == KECCAK_EMPTY


def test_keccak_differs_from_nist_sha3() -> None:
    assert compute_bytes_digest(b"") != hashlib.sha3_256(b"").hexdigest()


def test_hmac_digest_matches_rfc4231_case_2() -> None:
    digest = KeccakHasher().hmac_digest(b"Jefe", b"what do ya want for nothing?")
    assert digest.hex() == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"


def test_default_hasher_produces_32_byte_digests() -> None:
    assert len(DEFAULT_HASHER.digest(b"seed")) == 32
    assert len(DEFAULT_HASHER.hmac_digest(b"key", b"message")) == 32
