from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    urls: list[str] = Field(description="Endpoints checked on every sweep")
    max_retries: int = Field(ge=1)
    retry_delay_s: float = Field(ge=0)
    timeout_s: float = Field(gt=0)
    interval: int = Field(ge=0, description="In-process timer period, 0 when disabled")
    notifications_enabled: bool
