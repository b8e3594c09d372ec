"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from iconshade.api import colors, health, variants

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(variants.router)
api_router.include_router(colors.router)
