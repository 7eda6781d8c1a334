"""Health, metadata and store diagnostics."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from demoapp.routers.deps import get_status_service, get_user_service
from demoapp.services.status_service import StatusService
from demoapp.services.user_service import UserService

router = APIRouter(prefix="/api", tags=["system"])

# Exposes raw in-memory state; mounted only when debug_store_enabled.
debug_router = APIRouter(prefix="/api/debug", tags=["debug"])


@router.get("/health")
def health(status: StatusService = Depends(get_status_service)):
    return status.health()


@router.get("/info")
def info(status: StatusService = Depends(get_status_service)):
    return status.info()


@debug_router.get("/store")
async def debug_store(service: UserService = Depends(get_user_service)):
    return service.debug_snapshot()
