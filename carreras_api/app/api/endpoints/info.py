"""
Information and health endpoints.

``/info`` reports the service name and version from the settings the
application was built with; ``/health`` round-trips to the store.
"""

from typing import Dict

from fastapi import APIRouter, Depends, Request

from carreras_api.app.api.dependencies import get_repository
from carreras_api.app.core.store import KVRepository

router = APIRouter()


@router.get("/info", response_model=Dict[str, str])
async def get_info(request: Request) -> Dict[str, str]:
    settings = request.app.state.settings
    return {"name": settings.project_name, "version": settings.api_version}


@router.get("/health", response_model=Dict[str, str])
async def health(repository: KVRepository = Depends(get_repository)) -> Dict[str, str]:
    """Ping the key-value store.  Store failures map to HTTP 500."""
    await repository.ping()
    return {"status": "ok"}
