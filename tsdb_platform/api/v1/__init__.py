"""API v1."""

from tsdb_platform.api.v1.router import api_router

__all__ = ["api_router"]
