"""Request-scoped accessors for the services stored on ``app.state``."""
from __future__ import annotations

from fastapi import Request
from fastapi.templating import Jinja2Templates

from demoapp.services.status_service import StatusService
from demoapp.services.user_service import UserService


def _state_attr(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} not configured on app.state")
    return value


def get_user_service(request: Request) -> UserService:
    return _state_attr(request, "user_service")


def get_status_service(request: Request) -> StatusService:
    return _state_attr(request, "status_service")


def get_templates(request: Request) -> Jinja2Templates:
    return _state_attr(request, "templates")
