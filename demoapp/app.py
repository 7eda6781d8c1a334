from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from demoapp.core.config import Settings, get_settings
from demoapp.core.logging_config import setup_logging
from demoapp.core.security_headers import SecurityHeadersMiddleware
from demoapp.repositories.memory_store import UserStore
from demoapp.routers import pages as pages_router
from demoapp.routers import system as system_router
from demoapp.routers import users as users_router
from demoapp.services.status_service import StatusService
from demoapp.services.user_service import UserService

logger = logging.getLogger(__name__)

DEV_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
)


class CachedStaticFiles(StaticFiles):
    def file_response(self, *args, **kwargs):
        resp = super().file_response(*args, **kwargs)
        resp.headers["Cache-Control"] = "public, max-age=31536000, immutable"
        return resp


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": str(exc)},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Build the application.

    ``store`` defaults to one loaded from ``settings.store_path``; tests pass
    their own to start from a known record set.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = UserStore.from_file(settings.store_path)

    app = FastAPI(title=f"{settings.app_name} API", version=settings.app_version)
    app.state.settings = settings
    app.state.user_service = UserService(store, settings.store_path)
    app.state.status_service = StatusService(settings)
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    if not settings.is_production:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(DEV_ORIGINS),
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.is_production)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(system_router.router)
    if settings.debug_store_enabled:
        app.include_router(system_router.debug_router)
    app.include_router(users_router.router)

    if settings.frontend_dir.is_dir():
        app.mount("/static", CachedStaticFiles(directory=str(settings.frontend_dir)), name="static")
    else:
        logger.warning("Frontend directory %s missing, static assets disabled", settings.frontend_dir)

    # catch-all, must stay last
    app.include_router(pages_router.router)
    return app
