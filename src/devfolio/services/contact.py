"""Public contact form submission."""

from __future__ import annotations

from typing import Any

from devfolio.services.messages import messages_service

__all__ = ["submit_contact_message"]


def submit_contact_message(fields: dict[str, Any]) -> dict[str, Any] | None:
    """Store one visitor message as unread.

    A blank or missing subject is replaced by the default subject. Visitors
    cannot set the read flag; new rows take the column default (unread).

    Returns:
        The stored message, or None if validation or the insert failed.
    """
    return messages_service.create(fields)
