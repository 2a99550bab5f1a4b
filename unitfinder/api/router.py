"""API router aggregation.

Paths match what the browser UI calls: /api/search/{collection},
/file/{collection}/{id}, plus /api/health for probes.
"""

from fastapi import APIRouter

from unitfinder.api.endpoints import files, health, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/api/health", tags=["health"])
api_router.include_router(search.router, prefix="/api", tags=["search"])
api_router.include_router(files.router, prefix="/file", tags=["files"])
