from typing import Annotated, Literal

from pydantic import BaseModel, EmailStr, Field, StringConstraints

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ContactSubmissionRequest(BaseModel):
    name: RequiredText
    email: EmailStr
    message: RequiredText
    tags: list[str] | None = None
    custom_fields: dict[str, str] | None = None


class SubmissionStatus(BaseModel):
    status: Literal["success"] = "success"
    message: str


class SubmissionDataResponse(BaseModel):
    data: SubmissionStatus


class SubmissionErrorBody(BaseModel):
    code: str
    message: str
    details: dict[str, int | str | None] = Field(default_factory=dict)


class SubmissionErrorResponse(BaseModel):
    error: SubmissionErrorBody
