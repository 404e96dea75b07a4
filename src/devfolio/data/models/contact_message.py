"""ContactMessage model for messages sent through the public contact form."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from devfolio.data.db import Base


class ContactMessage(Base):
    """A message left by a site visitor.

    Attributes:
        id: Auto-incrementing primary key.
        name: Sender's name.
        email: Sender's address.
        subject: Subject line (defaulted when left blank).
        message: Message body.
        read: Whether an admin has opened the message.
        created_at: UTC timestamp when the message was received.
    """

    __tablename__ = "contact_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        index=True,
    )
