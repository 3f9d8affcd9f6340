"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from xorshift_mwc.api.dependencies import set_engine_manager
from xorshift_mwc.api.engine_manager import EngineManager
from xorshift_mwc.api.routes import api_router
from xorshift_mwc.config import ServiceConfig
from xorshift_mwc.errors import XorshiftError
from xorshift_mwc.utils.logging import setup_logging

logger = logging.getLogger(__name__)


async def _xorshift_error_handler(request: Request, exc: XorshiftError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = ServiceConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = EngineManager(_config)
        set_engine_manager(manager)
        logger.info("API server started (master_seed=%d).", _config.master_seed)
        yield
        manager.clear()
        set_engine_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Xorshift MWC Service",
        description=(
            "Multiply-with-carry Xorshift generator (Marsaglia 2003) over HTTP.\n\n"
            "## API Groups\n\n"
            "- **Samples**: Stateless bulk samples and lazy-sequence windows\n"
            "- **Engines**: Server-held generators drawn from across requests\n"
            "- **Config**: Read-only service configuration and default parameters\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Samples", "description": "Same seed and parameters always return the same values."},
            {"name": "Engines", "description": "Each engine is synchronized: concurrent draws get disjoint, in-order slices."},
            {"name": "Config", "description": "Service limits, master seed and default generator parameters."},
        ],
    )

    app.add_exception_handler(XorshiftError, _xorshift_error_handler)

    # CORS, allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
