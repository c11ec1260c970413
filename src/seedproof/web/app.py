from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from seedproof.application.services.normalization_service import parse_round_config, row_limit_problem
from seedproof.application.services.reconstruction_service import reconstruct
from seedproof.application.services.verification_service import VERIFIER_VERSION, VerificationService
from seedproof.core.config import VerifierSettings, load_settings
from seedproof.core.errors import DecodingError, ValidationError
from seedproof.core.hexcodec import decode_hex

logger = logging.getLogger(__name__)


class VerifyRequest(BaseModel):
    seed_hash: str | None = None
    seed: str | None = None
    row_config: str | list[int] | None = None
    strict: bool | None = None


class ReconstructRequest(BaseModel):
    seed: str
    row_config: str | list[int]
    strict: bool | None = None


def _row_config_text(value: str | list[int] | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return ",".join(str(n) for n in value)


def create_app(settings: VerifierSettings | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="seedproof", version=VERIFIER_VERSION)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    def _strict(requested: bool | None) -> bool:
        return settings.strict_bounds if requested is None else requested

    @app.exception_handler(ValidationError)
    async def _validation_error(_request: Any, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"errors": exc.problems})

    @app.get("/api/health")
    def health() -> dict[str, Any]:
        return {"ok": True, "verifier_version": VERIFIER_VERSION}

    @app.post("/api/verify")
    def verify_game(payload: VerifyRequest) -> dict[str, Any]:
        service = VerificationService(strict=_strict(payload.strict))
        result = service.verify_raw(
            payload.seed_hash,
            payload.seed,
            _row_config_text(payload.row_config),
            max_outcome_space=settings.max_outcome_space,
        )
        return result.to_dict()

    @app.post("/api/reconstruct")
    def reconstruct_game(payload: ReconstructRequest) -> dict[str, Any]:
        seed = payload.seed.strip().lower()
        try:
            decode_hex(seed)
        except DecodingError as exc:
            raise ValidationError(f"Revealed seed: {exc}") from exc

        rows = parse_round_config(_row_config_text(payload.row_config))
        if not rows:
            raise ValidationError("Row configuration is required")
        limit_problem = row_limit_problem(rows, settings.max_outcome_space)
        if limit_problem:
            raise ValidationError(limit_problem)

        indices = reconstruct(seed, rows, strict=_strict(payload.strict))
        return {"row_config": list(rows), "outcome_indices": indices}

    return app
