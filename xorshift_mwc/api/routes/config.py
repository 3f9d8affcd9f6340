"""GET /api/v1/config: expose service configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from xorshift_mwc.api.dependencies import get_engine_manager
from xorshift_mwc.api.engine_manager import EngineManager
from xorshift_mwc.api.schemas import ParamsSchema, ServiceConfigResponse
from xorshift_mwc.config import DEFAULT_PARAMS

router = APIRouter()


@router.get("/config", response_model=ServiceConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> ServiceConfigResponse:
    cfg = manager.config
    return ServiceConfigResponse(
        master_seed=cfg.master_seed,
        max_samples=cfg.max_samples,
        max_engines=cfg.max_engines,
        max_offset=cfg.max_offset,
        default_params=ParamsSchema(**DEFAULT_PARAMS.as_dict()),
    )
