"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from zellij.api import generate, health, palettes

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(palettes.router)
api_router.include_router(generate.router)
