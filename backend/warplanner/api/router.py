"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from warplanner.api import base_sizes, health, rounds, spatial, zones

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(base_sizes.router)
api_router.include_router(spatial.router)
api_router.include_router(zones.router)
api_router.include_router(rounds.router)
