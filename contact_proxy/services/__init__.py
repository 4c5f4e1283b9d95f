"""Business services."""

from contact_proxy.services.form_submitter import FormSubmitter
from contact_proxy.services.health_service import HealthService
from contact_proxy.services.payload import build_ticket_request

__all__ = ["FormSubmitter", "HealthService", "build_ticket_request"]
