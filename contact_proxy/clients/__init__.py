"""Outbound API clients."""

from contact_proxy.clients.freshdesk import (
    FreshdeskClient,
    FreshdeskError,
    FreshdeskTransportError,
    TicketRejectedError,
)

__all__ = [
    "FreshdeskClient",
    "FreshdeskError",
    "FreshdeskTransportError",
    "TicketRejectedError",
]
