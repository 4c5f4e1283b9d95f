import logging
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from contact_proxy.clients.freshdesk import FreshdeskTransportError, TicketRejectedError
from contact_proxy.models.form import BUSY_SUBMIT_LABEL, ContactForm, SubmissionOutcome
from contact_proxy.models.ticket import TicketPriority, TicketRequest, TicketStatus
from contact_proxy.services.payload import build_ticket_request

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you! Your ticket has been submitted."
NETWORK_ERROR_MESSAGE = "Network error. Please try again."
IN_PROGRESS_MESSAGE = "A submission is already in progress."


class TicketClient(Protocol):
    def create_ticket(self, ticket: TicketRequest) -> dict[str, Any]: ...


def rejected_message(detail: str) -> str:
    return f"Something went wrong: {detail}"


class FormSubmitter:
    def __init__(
        self,
        client: TicketClient,
        *,
        default_tags: Iterable[str] | None = None,
        status: TicketStatus = TicketStatus.OPEN,
        priority: TicketPriority = TicketPriority.LOW,
    ) -> None:
        self.client = client
        self.default_tags = list(default_tags) if default_tags else None
        self.status = status
        self.priority = priority

    def submit(
        self,
        form: ContactForm,
        *,
        tags: Iterable[str] | None = None,
        custom_fields: Mapping[str, str] | None = None,
    ) -> SubmissionOutcome:
        """Run one submit-and-report cycle against ``form``.

        The submit control is disabled for the duration of the call and a
        second submit on a busy form is refused without touching the API.
        Only a successful call clears the form fields.
        """
        if form.submit_disabled:
            logger.info("Ignoring submit while a previous one is in flight")
            form.status_text = IN_PROGRESS_MESSAGE
            return SubmissionOutcome(kind="busy", message=IN_PROGRESS_MESSAGE)

        ticket = build_ticket_request(
            form.fields(),
            tags=tags if tags is not None else self.default_tags,
            custom_fields=custom_fields,
            status=self.status,
            priority=self.priority,
        )

        previous_label = form.submit_label
        form.submit_disabled = True
        form.submit_label = BUSY_SUBMIT_LABEL
        try:
            outcome = self._send(ticket)
        finally:
            form.submit_disabled = False
            form.submit_label = previous_label

        if outcome.succeeded:
            form.clear()
        form.status_text = outcome.message
        return outcome

    def _send(self, ticket: TicketRequest) -> SubmissionOutcome:
        try:
            created = self.client.create_ticket(ticket)
        except TicketRejectedError as exc:
            return SubmissionOutcome(
                kind="rejected",
                message=rejected_message(exc.message),
                upstream_status=exc.status_code,
            )
        except FreshdeskTransportError:
            return SubmissionOutcome(kind="network", message=NETWORK_ERROR_MESSAGE)

        logger.info("Ticket created with id %s", created.get("id"))
        return SubmissionOutcome(kind="success", message=SUCCESS_MESSAGE)
