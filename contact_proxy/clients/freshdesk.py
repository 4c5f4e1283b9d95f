from __future__ import annotations

import base64
import logging
import re
from typing import TYPE_CHECKING, Any

import httpx

from contact_proxy.models.ticket import TicketRequest

if TYPE_CHECKING:
    from contact_proxy.core.config import Settings

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"
SUBDOMAIN_PATTERN = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")


class FreshdeskError(RuntimeError):
    """Base error for failed Freshdesk calls."""


class TicketRejectedError(FreshdeskError):
    """Raised when Freshdesk answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Freshdesk rejected the ticket ({status_code}): {message}")


class FreshdeskTransportError(FreshdeskError):
    """Raised when no response was received from Freshdesk."""


def normalize_domain(domain: str) -> str:
    """Reduce ``https://acme.freshdesk.com/`` or ``acme.freshdesk.com`` to ``acme``."""
    value = domain.strip().lower()
    for prefix in ("https://", "http://"):
        if value.startswith(prefix):
            value = value[len(prefix):]
    value = value.split("/", 1)[0]
    if value.endswith(".freshdesk.com"):
        value = value[: -len(".freshdesk.com")]
    return value


def validate_domain(domain: str) -> str:
    """Normalize ``domain`` and check it is a usable Freshdesk subdomain."""
    value = normalize_domain(domain)
    if not SUBDOMAIN_PATTERN.match(value):
        raise ValueError(f"Invalid Freshdesk domain: {domain!r}")
    return value


def basic_auth_header(api_key: str) -> str:
    # API key is the username, "X" a placeholder password.
    token = base64.b64encode(f"{api_key}:X".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def extract_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return UNKNOWN_ERROR

    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return UNKNOWN_ERROR


class FreshdeskClient:
    def __init__(
        self,
        domain: str,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.domain = validate_domain(domain)
        self._api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> FreshdeskClient:
        return cls(
            domain=settings.freshdesk_domain,
            api_key=settings.freshdesk_api_key.get_secret_value(),
            timeout=settings.freshdesk_timeout_seconds,
            transport=transport,
        )

    @property
    def tickets_url(self) -> str:
        return f"https://{self.domain}.freshdesk.com/api/v2/tickets"

    def create_ticket(self, ticket: TicketRequest) -> dict[str, Any]:
        headers = {
            "Authorization": basic_auth_header(self._api_key),
            "Content-Type": "application/json",
        }
        logger.info("POST %s", self.tickets_url)

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(self.tickets_url, json=ticket.to_payload(), headers=headers)
        except httpx.RequestError as exc:
            logger.warning("Freshdesk unreachable at %s: %s", self.tickets_url, type(exc).__name__)
            raise FreshdeskTransportError(f"Could not reach {self.tickets_url}") from exc

        logger.info("Status %s for %s", response.status_code, self.tickets_url)
        if not response.is_success:
            message = extract_error_message(response)
            logger.warning("Freshdesk rejected ticket: %s %s", response.status_code, message)
            raise TicketRejectedError(response.status_code, message)

        try:
            created = response.json()
        except ValueError:
            return {}
        return created if isinstance(created, dict) else {}
