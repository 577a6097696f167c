from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel, Field, StrictInt, StrictStr

from belgian_insz import InszValidationResult, InszValidator, __version__

logger = logging.getLogger(__name__)

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled, no env var configured
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models (JSON API) ───────────────────────────────────────────────


class ValidateRequest(BaseModel):
    insz: StrictStr | StrictInt  # no bool or float coercion


class BatchValidateRequest(BaseModel):
    numbers: list[StrictStr | StrictInt] = Field(max_length=1000)


class InszNumberOut(BaseModel):
    value: str
    formatted: str | None
    is_bis: bool | None
    birth_date: str | None  # ISO date
    birth_year: int | None
    sex: str | None  # M, F or U


class ValidationOut(BaseModel):
    is_valid: bool
    errors: list[str]
    insz_number: InszNumberOut | None


# ── Validator singleton ──────────────────────────────────────────────────────

_validator = InszValidator()


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    logger.info("belgian-insz API %s starting", __version__)
    yield


def _to_out(result: InszValidationResult) -> ValidationOut:
    return ValidationOut.model_validate(result.to_dict())


def _validate(insz: str | int) -> ValidationOut:
    try:
        result = _validator.validate(insz)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _to_out(result)


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="belgian-insz", version=__version__, lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/validate", response_model=ValidationOut, dependencies=[Depends(verify_api_key)]
)
async def validate(request: ValidateRequest) -> ValidationOut:
    return _validate(request.insz)


@app.post(
    "/validate/batch",
    response_model=list[ValidationOut],
    dependencies=[Depends(verify_api_key)],
)
async def validate_batch(request: BatchValidateRequest) -> list[ValidationOut]:
    return [_validate(n) for n in request.numbers]


@app.get(
    "/validate/{insz}",
    response_model=ValidationOut,
    dependencies=[Depends(verify_api_key)],
)
async def validate_path(insz: str) -> ValidationOut:
    return _validate(insz)
