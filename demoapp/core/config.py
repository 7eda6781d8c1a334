"""
Configuration helpers for the users demo backend.

Settings are read from the environment once and cached; tests build their own
``Settings`` instances (or call ``get_settings.cache_clear()``) instead of
patching module globals.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]

DEFAULT_PORT = 8080
DEFAULT_ENVIRONMENT = "development"
DEFAULT_DATABASE_URL = "local-db"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str = DEFAULT_ENVIRONMENT
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    database_url: str = DEFAULT_DATABASE_URL
    store_path: Path = ROOT_DIR / "database" / "db.json"
    frontend_dir: Path = ROOT_DIR / "web"
    templates_dir: Path = ROOT_DIR / "templates"
    log_level: str = "INFO"
    log_file: str | None = None
    debug_store_enabled: bool = True
    app_name: str = "TP05 CI/CD Pipeline"
    app_version: str = "1.0.0"
    app_author: str = "Kevin y Octavio"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _path(value: str | None, default: Path) -> Path:
        return Path(value).expanduser() if value else default

    defaults = Settings()
    return Settings(
        app_env=(os.getenv("APP_ENV") or os.getenv("NODE_ENV") or DEFAULT_ENVIRONMENT).lower(),
        host=os.getenv("HOST") or defaults.host,
        port=_int(os.getenv("PORT"), DEFAULT_PORT) or DEFAULT_PORT,
        # an empty DATABASE_URL falls back like an unset one
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        store_path=_path(os.getenv("STORE_PATH"), defaults.store_path),
        frontend_dir=_path(os.getenv("FRONTEND_DIR"), defaults.frontend_dir),
        templates_dir=_path(os.getenv("TEMPLATES_DIR"), defaults.templates_dir),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
        log_file=os.getenv("LOG_FILE") or None,
        debug_store_enabled=_bool(os.getenv("DEBUG_STORE_ENABLED"), True),
        app_name=os.getenv("APP_NAME", defaults.app_name),
        app_version=os.getenv("APP_VERSION", defaults.app_version),
        app_author=os.getenv("APP_AUTHOR", defaults.app_author),
    )
