from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, Response

from demoapp.domain.users import parse_user_id
from demoapp.routers.deps import get_user_service
from demoapp.services.user_service import UserNotFoundError, UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(service: UserService = Depends(get_user_service)):
    users = await service.list_users()
    return [user.as_dict() for user in users]


@router.post("", status_code=201)
async def create_user(
    payload: Optional[dict] = Body(None),
    service: UserService = Depends(get_user_service),
):
    payload = payload or {}
    user = service.create_user(payload.get("name"), payload.get("role"))
    return user.as_dict()


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    try:
        service.delete_user(parse_user_id(user_id))
    except UserNotFoundError:
        return JSONResponse(status_code=404, content={"error": "User not found"})
    return Response(status_code=204)
