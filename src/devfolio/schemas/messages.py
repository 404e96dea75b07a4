"""Schemas for contact messages."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devfolio.schemas.common import FormModel, PartialUpdateModel, check_email

DEFAULT_SUBJECT = "Contact Form Submission"


class ContactSubmission(FormModel):
    """A visitor's message from the public contact form."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255)
    subject: str | None = Field(None, max_length=255, validate_default=True)
    message: str = Field(..., min_length=1, max_length=5000)

    validate_email = field_validator("email")(check_email)

    @field_validator("subject")
    @classmethod
    def default_subject(cls, value: str | None) -> str:
        return value or DEFAULT_SUBJECT


class MessageUpdate(PartialUpdateModel):
    """Admins only ever flip the read flag."""

    required_fields = ("read",)

    read: bool | None = None


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    subject: str
    message: str
    read: bool
    created_at: datetime
