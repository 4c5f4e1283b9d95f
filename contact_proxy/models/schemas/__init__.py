"""Pydantic schema definitions."""

from contact_proxy.models.schemas.contact import (
    ContactSubmissionRequest,
    SubmissionDataResponse,
    SubmissionErrorBody,
    SubmissionErrorResponse,
    SubmissionStatus,
)
from contact_proxy.models.schemas.health import FreshdeskHealth, HealthResponse

__all__ = [
    "ContactSubmissionRequest",
    "FreshdeskHealth",
    "HealthResponse",
    "SubmissionDataResponse",
    "SubmissionErrorBody",
    "SubmissionErrorResponse",
    "SubmissionStatus",
]
