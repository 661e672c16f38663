"""Error Schema — the single-field error envelope shared by every failure."""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """{"error": "<human-readable message>"}. No codes, no stack traces."""
    model_config = ConfigDict(extra="forbid")

    error: str
