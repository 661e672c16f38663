"""Health Schemas — liveness probe payload."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness payload. Field order is the wire order."""
    status: Literal["ok"] = "ok"
    message: str = "server is running"
