"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from xorshift_mwc.config import DEFAULT_A, DEFAULT_C, DEFAULT_X1, DEFAULT_X2

_UINT64_MAX = 0xFFFFFFFFFFFFFFFF


# --- Parameters ---

class ParamsSchema(BaseModel):
    a: int = Field(DEFAULT_A, ge=0, le=_UINT64_MAX, description="Multiplier")
    c: int = Field(DEFAULT_C, ge=0, le=_UINT64_MAX, description="Initial carry")
    x1: int = Field(DEFAULT_X1, ge=0, le=_UINT64_MAX, description="Initial last-but-two word")
    x2: int = Field(DEFAULT_X2, ge=0, le=_UINT64_MAX, description="Initial last-but-one word")


# --- Bulk / sequence ---

class SamplesResponse(BaseModel):
    seed: int
    params: ParamsSchema
    length: int
    samples: list[float]


class SequenceResponse(BaseModel):
    seed: int
    params: ParamsSchema
    offset: int
    count: int
    samples: list[float]


# --- Server-held engines ---

class EngineCreateRequest(BaseModel):
    seed: int | None = Field(None, description="Omit to derive one from the master seed")
    params: ParamsSchema = Field(default_factory=ParamsSchema)


class EngineSchema(BaseModel):
    engine_id: int
    seed: int
    params: ParamsSchema
    drawn: int = 0


class EngineListResponse(BaseModel):
    engines: list[EngineSchema]


class DrawResponse(BaseModel):
    engine_id: int
    start: int                 # stream position of samples[0]
    samples: list[float]


class DeleteResponse(BaseModel):
    engine_id: int
    status: str


# --- Config ---

class ServiceConfigResponse(BaseModel):
    master_seed: int
    max_samples: int
    max_engines: int
    max_offset: int
    default_params: ParamsSchema
