from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from demoapp.routers.deps import get_templates

router = APIRouter(prefix="", tags=["pages"])

SPA_TEMPLATE = "index.html"


@router.get("/", response_class=HTMLResponse)
@router.get("/{full_path:path}", response_class=HTMLResponse)
def spa_index(request: Request, full_path: str = ""):
    """Serve the single-page app shell; client-side routing handles the path."""
    templates = get_templates(request)
    settings = request.app.state.settings
    context = {
        "app_name": settings.app_name,
        "app_version": settings.app_version,
        "environment": settings.app_env,
        "api_base": "/api",
    }
    return templates.TemplateResponse(request, SPA_TEMPLATE, context)
