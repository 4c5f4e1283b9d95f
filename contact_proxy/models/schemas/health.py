from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field


class FreshdeskHealth(BaseModel):
    configured: bool
    domain: str | None = None


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    service: str = "contact-proxy"
    environment: str
    freshdesk: FreshdeskHealth
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
