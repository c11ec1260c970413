"""Independent verifier for commitment-reveal game outcomes."""

from seedproof.application.services.commitment_service import compute_commitment, verify_commitment
from seedproof.application.services.normalization_service import normalize, parse_round_config
from seedproof.application.services.reconstruction_service import reconstruct, reconstruct_rounds
from seedproof.application.services.verification_service import (
    VERIFIER_VERSION,
    VerificationService,
    verify,
    verify_raw,
)
from seedproof.core.errors import DecodingError, SeedproofError, ValidationError
from seedproof.domain.models.verification import RoundOutcome, VerificationRequest, VerificationResult

__version__ = VERIFIER_VERSION

__all__ = [
    "DecodingError",
    "RoundOutcome",
    "SeedproofError",
    "ValidationError",
    "VerificationRequest",
    "VerificationResult",
    "VerificationService",
    "compute_commitment",
    "normalize",
    "parse_round_config",
    "reconstruct",
    "reconstruct_rounds",
    "verify",
    "verify_commitment",
    "verify_raw",
]
