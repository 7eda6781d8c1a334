"""ASGI entry point, e.g. ``uvicorn demoapp.app_factory:app``."""
from demoapp.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
