from __future__ import annotations


class SeedproofError(Exception):
    """Base error for all user-facing seedproof exceptions."""


class ConfigurationError(SeedproofError):
    """Raised when configuration is invalid or incomplete."""


class ValidationError(SeedproofError):
    """Raised when verification inputs fail validation.

    Carries every problem found so callers can present them all at once.
    """

    def __init__(self, problems: list[str] | str) -> None:
        if isinstance(problems, str):
            problems = [problems]
        self.problems: list[str] = list(problems)
        super().__init__(", ".join(self.problems))


class DecodingError(SeedproofError):
    """Raised when a hex string cannot be decoded into bytes."""
