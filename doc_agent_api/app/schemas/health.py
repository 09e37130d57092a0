"""
Pydantic models for the health endpoints.

``HealthResponse`` is the cheap liveness answer.  ``HealthDetailsResponse``
adds uptime, a short description of the runtime and the versions of the
main libraries the service is running on.
"""

from datetime import datetime
from typing import Dict

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str


class SystemInfo(BaseModel):
    python_version: str
    num_cpu: int
    num_threads: int
    os: str
    arch: str


class HealthDetailsResponse(HealthResponse):
    uptime: str
    system: SystemInfo
    dependencies: Dict[str, str]
