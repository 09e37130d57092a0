"""
Service layer for health reporting.

Builds the bodies of the liveness and detailed health endpoints.  The
start time is taken when the service object is created, which the
application factory does once per app.
"""

import os
import platform
import threading
from datetime import datetime, timezone
from importlib import metadata
from typing import Dict

from doc_agent_api.app.schemas.health import HealthDetailsResponse, HealthResponse, SystemInfo


REPORTED_DISTRIBUTIONS = ("fastapi", "pydantic", "uvicorn")


def _format_uptime(seconds: float) -> str:
    seconds = int(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours}h{minutes}m{seconds}s"


class HealthService:
    """Reports liveness and runtime details for one application."""

    def __init__(self, version: str) -> None:
        self.version = version
        self.started_at = datetime.now(timezone.utc)

    def check(self) -> HealthResponse:
        return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc), version=self.version)

    def details(self) -> HealthDetailsResponse:
        now = datetime.now(timezone.utc)
        return HealthDetailsResponse(
            status="healthy",
            timestamp=now,
            version=self.version,
            uptime=_format_uptime((now - self.started_at).total_seconds()),
            system=SystemInfo(
                python_version=platform.python_version(),
                num_cpu=os.cpu_count() or 1,
                num_threads=threading.active_count(),
                os=platform.system().lower(),
                arch=platform.machine(),
            ),
            dependencies=self.dependencies(),
        )

    @staticmethod
    def dependencies() -> Dict[str, str]:
        """Return installed versions of the main libraries plus the interpreter."""
        versions = {}
        for name in REPORTED_DISTRIBUTIONS:
            try:
                versions[name] = metadata.version(name)
            except metadata.PackageNotFoundError:
                versions[name] = "unknown"
        versions["runtime"] = f"python{platform.python_version()}"
        return versions
