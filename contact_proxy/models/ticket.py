from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class TicketStatus(IntEnum):
    OPEN = 2
    PENDING = 3
    RESOLVED = 4
    CLOSED = 5


class TicketPriority(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4


@dataclass(slots=True)
class TicketRequest:
    """Body of a Freshdesk ``POST /api/v2/tickets`` call.

    ``tags`` and ``custom_fields`` are only sent when supplied.
    """

    name: str
    email: str
    description: str
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.LOW
    tags: list[str] | None = None
    custom_fields: dict[str, str] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "email": self.email,
            "description": self.description,
            "status": int(self.status),
            "priority": int(self.priority),
        }
        if self.tags is not None:
            payload["tags"] = self.tags
        if self.custom_fields is not None:
            payload["custom_fields"] = self.custom_fields
        return payload
