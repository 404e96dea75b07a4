"""Message inbox screen.

Unlike the other admin screens, the inbox patches its local rows instead
of refetching: opening an unread message flips its read flag in place,
and deleting a message splices it out of the list.
"""

from __future__ import annotations

from typing import Any

from devfolio.screens.base import CrudScreen
from devfolio.services.messages import mark_as_read

__all__ = ["MessageInbox"]


class MessageInbox(CrudScreen):
    @property
    def unread_count(self) -> int:
        return sum(1 for row in self.rows if not row["read"])

    def open_message(self, message_id: int) -> dict[str, Any] | None:
        """Show one message, marking it read the first time it is opened."""
        message = self.find(message_id)
        if message is None:
            return None

        self.current = message
        self.dialog_open = True
        if not message["read"] and mark_as_read(message_id):
            self.current = {**message, "read": True}
            self.rows = [self.current if row["id"] == message_id else row for row in self.rows]
        return self.current

    def delete_message(self, message_id: int | None = None) -> bool:
        """Delete the open message (or ``message_id``) and drop it locally."""
        target_id = message_id if message_id is not None else (
            self.current["id"] if self.current else None
        )
        if target_id is None or self.submitting:
            return False

        self.submitting = True
        try:
            if not self.config.service.delete(target_id):
                self.notify("Error", "Could not delete message", "destructive")
                return False
            self.rows = [row for row in self.rows if row["id"] != target_id]
            self.notify("Success", "Message deleted successfully")
            self.close_dialog()
            return True
        finally:
            self.submitting = False
