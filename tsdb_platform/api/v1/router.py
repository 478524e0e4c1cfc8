"""API v1 router aggregation."""

from fastapi import APIRouter

from tsdb_platform.api.v1.endpoints import health, setup

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(setup.router, prefix="/setup", tags=["setup"])
