"""/api/v1/engines: server-held generators drawn from across requests."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from xorshift_mwc.api.dependencies import get_engine_manager
from xorshift_mwc.api.engine_manager import EngineEntry, EngineManager
from xorshift_mwc.api.schemas import (
    DeleteResponse,
    DrawResponse,
    EngineCreateRequest,
    EngineListResponse,
    EngineSchema,
    ParamsSchema,
)
from xorshift_mwc.config import XorshiftParams

router = APIRouter()


def _to_schema(entry: EngineEntry) -> EngineSchema:
    return EngineSchema(
        engine_id=entry.engine_id,
        seed=entry.seed,
        params=ParamsSchema(**entry.params.as_dict()),
        drawn=entry.source.drawn,
    )


def _lookup(engine_id: int, manager: EngineManager) -> EngineEntry:
    entry = manager.get(engine_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Engine {engine_id} not found.")
    return entry


@router.post("/engines", response_model=EngineSchema, status_code=201)
def create_engine(
    body: EngineCreateRequest,
    manager: EngineManager = Depends(get_engine_manager),
) -> EngineSchema:
    p = body.params
    params = XorshiftParams(a=p.a, c=p.c, x1=p.x1, x2=p.x2)
    return _to_schema(manager.create(seed=body.seed, params=params))


@router.get("/engines", response_model=EngineListResponse)
def list_engines(manager: EngineManager = Depends(get_engine_manager)) -> EngineListResponse:
    return EngineListResponse(engines=[_to_schema(e) for e in manager.entries()])


@router.get("/engines/{engine_id}", response_model=EngineSchema)
def get_engine(
    engine_id: int,
    manager: EngineManager = Depends(get_engine_manager),
) -> EngineSchema:
    return _to_schema(_lookup(engine_id, manager))


@router.post("/engines/{engine_id}/next", response_model=DrawResponse)
def draw(
    engine_id: int,
    count: int = Query(1, description="Samples to draw"),
    manager: EngineManager = Depends(get_engine_manager),
) -> DrawResponse:
    entry = _lookup(engine_id, manager)
    limit = manager.config.max_samples
    if count > limit:
        raise HTTPException(status_code=422, detail=f"At most {limit} samples per request.")
    start, samples = entry.source.draw(count)
    return DrawResponse(engine_id=engine_id, start=start, samples=samples)


@router.delete("/engines/{engine_id}", response_model=DeleteResponse)
def delete_engine(
    engine_id: int,
    manager: EngineManager = Depends(get_engine_manager),
) -> DeleteResponse:
    if not manager.remove(engine_id):
        raise HTTPException(status_code=404, detail=f"Engine {engine_id} not found.")
    return DeleteResponse(engine_id=engine_id, status="deleted")
