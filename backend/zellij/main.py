"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from zellij.config import settings
from zellij.engine.pipeline import register_stages
from zellij.errors import ConfigurationError, DataIntegrityError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.zellij_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _data_integrity_error(request: Request, exc: DataIntegrityError) -> JSONResponse:
    logger.error("Data integrity failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Zellij",
        description="Procedural Islamic geometric patterns by the Polygons-in-Contact method",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConfigurationError, _configuration_error)
    app.add_exception_handler(DataIntegrityError, _data_integrity_error)

    # Import all stage modules to trigger registration
    register_stages()

    from zellij.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
