from collections.abc import Iterable, Mapping

from contact_proxy.models.form import ContactFields
from contact_proxy.models.ticket import TicketPriority, TicketRequest, TicketStatus


def build_ticket_request(
    fields: ContactFields,
    *,
    tags: Iterable[str] | None = None,
    custom_fields: Mapping[str, str] | None = None,
    status: TicketStatus = TicketStatus.OPEN,
    priority: TicketPriority = TicketPriority.LOW,
) -> TicketRequest:
    """Map form fields onto a ticket; ``message`` becomes the description.

    Field values are passed through as-is, presence is checked upstream.
    """
    return TicketRequest(
        name=fields.name,
        email=fields.email,
        description=fields.message,
        status=status,
        priority=priority,
        tags=list(tags) if tags is not None else None,
        custom_fields=dict(custom_fields) if custom_fields is not None else None,
    )
