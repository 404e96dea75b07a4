"""Admin routes for contact messages."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from devfolio.api.dependencies import get_current_user
from devfolio.schemas.messages import MessageResponse
from devfolio.services.auth import AuthUser
from devfolio.services.messages import mark_as_read, messages_service

router = APIRouter(prefix="/messages", tags=["messages"])


def _not_found(message_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"Message {message_id} not found"
    )


@router.get("", response_model=list[MessageResponse])
def list_messages(
    _user: Annotated[AuthUser, Depends(get_current_user)],
) -> list[MessageResponse]:
    """List all messages, newest first."""
    rows = messages_service.list_all()
    if rows is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not load messages"
        )
    return [MessageResponse(**row) for row in rows]


@router.get("/{message_id}", response_model=MessageResponse)
def get_message(
    message_id: Annotated[int, Path(description="Message id")],
    _user: Annotated[AuthUser, Depends(get_current_user)],
) -> MessageResponse:
    row = messages_service.get(message_id)
    if row is None:
        raise _not_found(message_id)
    return MessageResponse(**row)


@router.post("/{message_id}/read", response_model=MessageResponse)
def read_message(
    message_id: Annotated[int, Path(description="Message id")],
    _user: Annotated[AuthUser, Depends(get_current_user)],
) -> MessageResponse:
    """Mark a message as read. Already-read messages are returned without a write."""
    row = messages_service.get(message_id)
    if row is None:
        raise _not_found(message_id)
    if not row["read"]:
        if not mark_as_read(message_id):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Could not update message",
            )
        row = {**row, "read": True}
    return MessageResponse(**row)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(
    message_id: Annotated[int, Path(description="Message id")],
    _user: Annotated[AuthUser, Depends(get_current_user)],
) -> None:
    if not messages_service.delete(message_id):
        raise _not_found(message_id)
