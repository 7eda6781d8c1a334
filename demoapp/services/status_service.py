"""Health and metadata payloads."""
from __future__ import annotations

import time
from datetime import datetime, timezone

from demoapp.core.config import Settings


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class StatusService:
    def __init__(self, settings: Settings, started_at: float | None = None) -> None:
        self.settings = settings
        self.started_at = time.monotonic() if started_at is None else started_at

    def uptime(self) -> float:
        return max(0.0, time.monotonic() - self.started_at)

    def health(self) -> dict:
        # database only reflects whether a connection string is configured
        return {
            "status": "OK",
            "environment": self.settings.app_env,
            "timestamp": _iso_now(),
            "database": "Connected" if self.settings.database_url else "Disconnected",
            "uptime": self.uptime(),
        }

    def info(self) -> dict:
        return {
            "app": self.settings.app_name,
            "version": self.settings.app_version,
            "environment": self.settings.app_env,
            "author": self.settings.app_author,
        }
