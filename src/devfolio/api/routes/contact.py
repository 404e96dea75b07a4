"""Public contact form endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from devfolio.schemas.messages import ContactSubmission, MessageResponse
from devfolio.services.contact import submit_contact_message

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(data: ContactSubmission) -> MessageResponse:
    """Store a visitor's message. No sign-in required."""
    row = submit_contact_message(data.model_dump())
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="There was a problem sending your message. Please try again later.",
        )
    return MessageResponse(**row)
