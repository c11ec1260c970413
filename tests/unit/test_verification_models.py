from __future__ import annotations

import dataclasses

import pytest

from seedproof.core.errors import ValidationError
from seedproof.domain.models.verification import RoundOutcome, VerificationRequest, VerificationResult


def test_request_create_normalizes_case_and_tuple() -> None:
    request = VerificationRequest.create("ABCD", "EF01", [3, 2])
    assert request.commitment_hash == "abcd"
    assert request.seed == "ef01"
    assert request.round_config == (3, 2)
    assert request.round_count == 2
    assert request.total_outcome_space == 5


def test_request_create_collects_invariant_violations() -> None:
    with pytest.raises(ValidationError) as excinfo:
        VerificationRequest.create("xyz", "abc", [])
    assert excinfo.value.problems == [
        "Seed hash must be a valid hexadecimal string",
        "Revealed seed must have an even number of hex digits",
        "Row configuration is required",
    ]

    with pytest.raises(ValidationError):
        VerificationRequest.create("ab", "cd", [2, 0])


def test_request_create_rejects_trailing_newline_in_hex() -> None:
    with pytest.raises(ValidationError) as excinfo:
        VerificationRequest.create("ab" * 32, "abc\n", [3])
    assert excinfo.value.problems == ["Revealed seed must be a valid hexadecimal string"]


def test_result_is_immutable_and_serializable() -> None:
    request = VerificationRequest.create("ab", "cd", [2, 3])
    rounds = (
        RoundOutcome(round_index=0, outcome_space=2, index=1, draw=3_000_000_000, ratio=0.7),
        RoundOutcome(round_index=1, outcome_space=3, index=0, draw=0, ratio=0.0, fallback=True),
    )
    result = VerificationResult(
        request=request,
        seed_valid=False,
        computed_hash="00" * 32,
        rounds=rounds,
        verified_at="2026-01-01T00:00:00+00:00",
        verifier_version="1.0.0",
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.seed_valid = True  # type: ignore[misc]

    payload = result.to_dict()
    assert payload["request"] == {"seed_hash": "ab", "seed": "cd", "row_config": [2, 3]}
    assert payload["verification"]["outcome_indices"] == [1, 0]
    assert payload["verification"]["fallback_rounds"] == [1]
    assert payload["summary"] == {"round_count": 2, "total_outcome_space": 5}
