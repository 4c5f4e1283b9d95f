from typing import Annotated

from fastapi import APIRouter, Depends, status

from contact_proxy.clients.freshdesk import FreshdeskClient
from contact_proxy.core.config import Settings, get_settings
from contact_proxy.core.errors import AppError
from contact_proxy.models.form import ContactForm
from contact_proxy.models.schemas.contact import (
    ContactSubmissionRequest,
    SubmissionDataResponse,
    SubmissionErrorResponse,
    SubmissionStatus,
)
from contact_proxy.services.form_submitter import FormSubmitter

router = APIRouter(prefix="/contact")


def get_form_submitter(
    settings: Annotated[Settings, Depends(get_settings)],
) -> FormSubmitter:
    if not settings.freshdesk_configured:
        raise AppError(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            code="FRESHDESK_NOT_CONFIGURED",
            message="Ticket submission is not configured.",
        )
    return FormSubmitter(
        client=FreshdeskClient.from_settings(settings),
        default_tags=settings.ticket_default_tags_list,
    )


@router.post(
    "",
    response_model=SubmissionDataResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_409_CONFLICT: {"model": SubmissionErrorResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": SubmissionErrorResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": SubmissionErrorResponse},
    },
)
def submit_contact_form(
    payload: ContactSubmissionRequest,
    form_submitter: Annotated[FormSubmitter, Depends(get_form_submitter)],
) -> SubmissionDataResponse:
    form = ContactForm(name=payload.name, email=str(payload.email), message=payload.message)
    outcome = form_submitter.submit(
        form,
        tags=payload.tags,
        custom_fields=payload.custom_fields,
    )

    if outcome.kind == "network":
        raise AppError(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            code="FRESHDESK_UNREACHABLE",
            message=outcome.message,
        )
    if outcome.kind == "rejected":
        raise AppError(
            status_code=status.HTTP_502_BAD_GATEWAY,
            code="TICKET_REJECTED",
            message=outcome.message,
            details={"upstream_status": outcome.upstream_status},
        )
    if outcome.kind == "busy":
        raise AppError(
            status_code=status.HTTP_409_CONFLICT,
            code="SUBMISSION_IN_PROGRESS",
            message=outcome.message,
        )
    return SubmissionDataResponse(data=SubmissionStatus(message=outcome.message))
