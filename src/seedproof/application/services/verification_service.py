from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from seedproof.application.services.commitment_service import commitments_match, compute_commitment
from seedproof.application.services.normalization_service import normalize
from seedproof.application.services.reconstruction_service import reconstruct_rounds
from seedproof.core.errors import DecodingError
from seedproof.core.hashing import Hasher
from seedproof.domain.models.verification import VerificationRequest, VerificationResult

logger = logging.getLogger(__name__)

VERIFIER_VERSION = "1.0.0"


def now_utc_iso() -> str:
    """Return an ISO timestamp in UTC with seconds precision."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


class VerificationService:
    def __init__(
        self,
        hasher: Hasher | None = None,
        *,
        strict: bool = True,
        clock: Callable[[], str] | None = None,
    ) -> None:
        self.hasher = hasher
        self.strict = strict
        self.clock = clock or now_utc_iso

    def verify(self, request: VerificationRequest) -> VerificationResult:
        computed_hash: str | None
        try:
            computed_hash = compute_commitment(request.seed, hasher=self.hasher)
        except DecodingError as exc:
            logger.warning("Seed could not be decoded, commitment check fails: %s", exc)
            computed_hash = None

        seed_valid = computed_hash is not None and commitments_match(computed_hash, request.commitment_hash)

        # Outcomes are reconstructed even for an invalid seed so callers can
        # show what that seed would have produced.
        rounds = reconstruct_rounds(
            request.seed,
            request.round_config,
            strict=self.strict,
            hasher=self.hasher,
        )

        result = VerificationResult(
            request=request,
            seed_valid=seed_valid,
            computed_hash=computed_hash,
            rounds=tuple(rounds),
            verified_at=self.clock(),
            verifier_version=VERIFIER_VERSION,
        )
        logger.info(
            "Verification %s: %d rounds, %d fallbacks",
            "passed" if seed_valid else "failed",
            result.round_count,
            len(result.fallback_rounds),
        )
        return result

    def verify_raw(
        self,
        raw_hash: str | None,
        raw_seed: str | None,
        raw_config: str | None,
        *,
        max_outcome_space: int | None = None,
    ) -> VerificationResult:
        request = normalize(raw_hash, raw_seed, raw_config, max_outcome_space=max_outcome_space)
        return self.verify(request)


def verify(
    request: VerificationRequest,
    *,
    strict: bool = True,
    hasher: Hasher | None = None,
) -> VerificationResult:
    return VerificationService(hasher, strict=strict).verify(request)


def verify_raw(
    raw_hash: str | None,
    raw_seed: str | None,
    raw_config: str | None,
    *,
    max_outcome_space: int | None = None,
    strict: bool = True,
    hasher: Hasher | None = None,
) -> VerificationResult:
    return VerificationService(hasher, strict=strict).verify_raw(
        raw_hash,
        raw_seed,
        raw_config,
        max_outcome_space=max_outcome_space,
    )
