from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from seedproof.core.errors import ValidationError
from seedproof.core.hexcodec import is_hex


@dataclass(frozen=True, slots=True)
class VerificationRequest:
    commitment_hash: str
    seed: str
    round_config: tuple[int, ...]

    @classmethod
    def create(cls, commitment_hash: str, seed: str, round_config: Iterable[int]) -> VerificationRequest:
        rows = tuple(round_config)
        problems: list[str] = []
        for label, value in (("Seed hash", commitment_hash), ("Revealed seed", seed)):
            if not is_hex(value):
                problems.append(f"{label} must be a valid hexadecimal string")
            elif len(value) % 2 != 0:
                problems.append(f"{label} must have an even number of hex digits")
        if not rows:
            problems.append("Row configuration is required")
        elif any(not isinstance(n, int) or isinstance(n, bool) or n < 1 for n in rows):
            problems.append("Row configuration must contain positive integers")
        if problems:
            raise ValidationError(problems)
        return cls(commitment_hash=commitment_hash.lower(), seed=seed.lower(), round_config=rows)

    @property
    def round_count(self) -> int:
        return len(self.round_config)

    @property
    def total_outcome_space(self) -> int:
        return sum(self.round_config)


@dataclass(frozen=True, slots=True)
class RoundOutcome:
    round_index: int
    outcome_space: int
    index: int
    draw: int
    ratio: float
    clamped: bool = False
    fallback: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "round": self.round_index,
            "outcome_space": self.outcome_space,
            "index": self.index,
            "draw": self.draw,
            "ratio": self.ratio,
            "clamped": self.clamped,
            "fallback": self.fallback,
        }


@dataclass(frozen=True, slots=True)
class VerificationResult:
    request: VerificationRequest
    seed_valid: bool
    computed_hash: str | None
    rounds: tuple[RoundOutcome, ...]
    verified_at: str
    verifier_version: str

    @property
    def outcome_indices(self) -> tuple[int, ...]:
        return tuple(r.index for r in self.rounds)

    @property
    def fallback_rounds(self) -> tuple[int, ...]:
        return tuple(r.round_index for r in self.rounds if r.fallback)

    @property
    def round_count(self) -> int:
        return self.request.round_count

    @property
    def total_outcome_space(self) -> int:
        return self.request.total_outcome_space

    def to_dict(self) -> dict[str, object]:
        return {
            "request": {
                "seed_hash": self.request.commitment_hash,
                "seed": self.request.seed,
                "row_config": list(self.request.round_config),
            },
            "verification": {
                "seed_valid": self.seed_valid,
                "computed_hash": self.computed_hash,
                "outcome_indices": list(self.outcome_indices),
                "rounds": [r.to_dict() for r in self.rounds],
                "fallback_rounds": list(self.fallback_rounds),
                "verified_at": self.verified_at,
                "verifier_version": self.verifier_version,
            },
            "summary": {
                "round_count": self.round_count,
                "total_outcome_space": self.total_outcome_space,
            },
        }
