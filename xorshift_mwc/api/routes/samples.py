"""GET /api/v1/samples and /api/v1/sequence: stateless stream access."""

from __future__ import annotations

from itertools import islice

from fastapi import APIRouter, Depends, HTTPException, Query

from xorshift_mwc.api.dependencies import get_engine_manager
from xorshift_mwc.api.engine_manager import EngineManager
from xorshift_mwc.api.schemas import ParamsSchema, SamplesResponse, SequenceResponse
from xorshift_mwc.config import DEFAULT_A, DEFAULT_C, DEFAULT_X1, DEFAULT_X2
from xorshift_mwc.core.bulk import generate_samples
from xorshift_mwc.core.sequence import sample_sequence

router = APIRouter()

_UINT64_MAX = 0xFFFFFFFFFFFFFFFF


def _params(
    a: int = Query(DEFAULT_A, ge=0, le=_UINT64_MAX, description="Multiplier"),
    c: int = Query(DEFAULT_C, ge=0, le=_UINT64_MAX, description="Initial carry"),
    x1: int = Query(DEFAULT_X1, ge=0, le=_UINT64_MAX, description="Initial X1"),
    x2: int = Query(DEFAULT_X2, ge=0, le=_UINT64_MAX, description="Initial X2"),
) -> ParamsSchema:
    return ParamsSchema(a=a, c=c, x1=x1, x2=x2)


def _check_limit(count: int, manager: EngineManager) -> None:
    limit = manager.config.max_samples
    if count > limit:
        raise HTTPException(status_code=422, detail=f"At most {limit} samples per request.")


@router.get("/samples", response_model=SamplesResponse)
def get_samples(
    length: int = Query(..., description="Number of samples"),
    seed: int = Query(..., description="Generator seed"),
    params: ParamsSchema = Depends(_params),
    manager: EngineManager = Depends(get_engine_manager),
) -> SamplesResponse:
    _check_limit(length, manager)
    samples = generate_samples(length, seed, params.a, params.c, params.x1, params.x2)
    return SamplesResponse(seed=seed, params=params, length=length, samples=samples)


@router.get("/sequence", response_model=SequenceResponse)
def get_sequence(
    seed: int = Query(..., description="Generator seed"),
    offset: int = Query(0, ge=0, description="Values to skip"),
    count: int = Query(100, ge=0, description="Values to return"),
    params: ParamsSchema = Depends(_params),
    manager: EngineManager = Depends(get_engine_manager),
) -> SequenceResponse:
    _check_limit(count, manager)
    if offset > manager.config.max_offset:
        raise HTTPException(status_code=422, detail=f"Offset may not exceed {manager.config.max_offset}.")
    seq = sample_sequence(seed, params.a, params.c, params.x1, params.x2)
    samples = list(islice(seq, offset, offset + count))
    return SequenceResponse(seed=seed, params=params, offset=offset, count=count, samples=samples)
