"""Domain models and API schemas."""

from contact_proxy.models.form import ContactFields, ContactForm, SubmissionOutcome
from contact_proxy.models.ticket import TicketPriority, TicketRequest, TicketStatus

__all__ = [
    "ContactFields",
    "ContactForm",
    "SubmissionOutcome",
    "TicketPriority",
    "TicketRequest",
    "TicketStatus",
]
