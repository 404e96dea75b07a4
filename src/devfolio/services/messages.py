"""Contact message service for the admin inbox.

Messages are listed newest first. Admins only read and delete them; new
messages arrive through ``services.contact``.
"""

from __future__ import annotations

from devfolio.schemas.messages import ContactSubmission, MessageUpdate
from devfolio.services.crud import TableService

__all__ = ["messages_service", "mark_as_read"]

messages_service = TableService(
    table="contact_messages",
    create_schema=ContactSubmission,
    update_schema=MessageUpdate,
    order_by="created_at",
    descending=True,
)


def mark_as_read(message_id: int) -> bool:
    """Set the read flag on one message.

    Returns:
        True if the message exists and was updated, False otherwise.
    """
    return messages_service.update(message_id, {"read": True}) is not None
