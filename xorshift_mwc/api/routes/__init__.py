"""Versioned API route modules."""

from fastapi import APIRouter

from xorshift_mwc.api.routes.config import router as config_router
from xorshift_mwc.api.routes.engines import router as engines_router
from xorshift_mwc.api.routes.samples import router as samples_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(samples_router, tags=["Samples"])
api_router.include_router(engines_router, tags=["Engines"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
