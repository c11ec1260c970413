from __future__ import annotations

from eth_utils import keccak

from seedproof import VerificationRequest, normalize, reconstruct, verify, verify_raw
from seedproof.application.services.verification_service import VERIFIER_VERSION, VerificationService

SEED = "283c27bfec0a6322495488cb61324e8665c81a2054a08e3190f517c69b8d4980"
ROWS = "6,4,2,3,4,3,4,2,3,3,2,3,4,3,2,3,3,3,4,4,3,2,3,3,3"


def _commitment(seed_hex: str) -> str:
    return keccak(bytes.fromhex(seed_hex)).hex()


def test_verify_scenario_with_twenty_five_rows() -> None:
    request = normalize(_commitment(SEED), SEED, ROWS)
    result = verify(request)

    assert result.seed_valid is True
    assert result.computed_hash == _commitment(SEED)
    assert result.round_count == 25
    assert result.total_outcome_space == sum(request.round_config)
    assert len(result.outcome_indices) == 25
    for index, size in zip(result.outcome_indices, request.round_config):
        assert 0 <= index < size
    assert list(result.outcome_indices) == reconstruct(SEED, request.round_config)
    assert result.fallback_rounds == ()
    assert result.verifier_version == VERIFIER_VERSION


def test_invalid_seed_still_reconstructs_outcomes() -> None:
    other_seed = "11" * 32
    request = normalize(_commitment(SEED), other_seed, "6,5,4")
    result = verify(request)

    assert result.seed_valid is False
    assert list(result.outcome_indices) == reconstruct(other_seed, [6, 5, 4])


def test_uppercase_commitment_verifies() -> None:
    result = verify_raw(_commitment(SEED).upper(), SEED.upper(), "6,5")
    assert result.seed_valid is True


def test_undecodable_seed_in_hand_built_request_is_not_fatal() -> None:
    request = VerificationRequest(commitment_hash="ab" * 32, seed="abc", round_config=(3,))
    result = verify(request)
    assert result.seed_valid is False
    assert result.computed_hash is None
    assert len(result.outcome_indices) == 1


def test_service_uses_injected_clock() -> None:
    service = VerificationService(clock=lambda: "2026-10-18T00:00:00+00:00")
    result = service.verify_raw(_commitment(SEED), SEED, "2")
    assert result.verified_at == "2026-10-18T00:00:00+00:00"
    assert result.to_dict()["verification"]["verified_at"] == "2026-10-18T00:00:00+00:00"


def test_uppercase_seed_reconstructs_same_outcomes_as_direct_call() -> None:
    result = verify(normalize(_commitment(SEED), SEED.upper(), ROWS))
    assert list(result.outcome_indices) == reconstruct(SEED.upper(), result.request.round_config)
