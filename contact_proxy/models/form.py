from dataclasses import dataclass
from typing import Literal

OutcomeKind = Literal["success", "rejected", "network", "busy"]

DEFAULT_SUBMIT_LABEL = "Submit"
BUSY_SUBMIT_LABEL = "Submitting..."


@dataclass(slots=True)
class ContactFields:
    name: str
    email: str
    message: str


@dataclass(slots=True)
class ContactForm:
    """Form values plus the status display a submission writes to."""

    name: str = ""
    email: str = ""
    message: str = ""
    status_text: str = ""
    submit_disabled: bool = False
    submit_label: str = DEFAULT_SUBMIT_LABEL

    def fields(self) -> ContactFields:
        return ContactFields(name=self.name, email=self.email, message=self.message)

    def clear(self) -> None:
        self.name = ""
        self.email = ""
        self.message = ""


@dataclass(slots=True, frozen=True)
class SubmissionOutcome:
    kind: OutcomeKind
    message: str
    upstream_status: int | None = None

    @property
    def succeeded(self) -> bool:
        return self.kind == "success"
