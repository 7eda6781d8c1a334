"""
FastAPI routers grouped by concern (users, system status, SPA pages).

Each module exposes an APIRouter included by ``demoapp.app.create_app``.
"""
