"""Profile model for the portfolio owner's public details.

One row per admin user (1:1 with users), written with upsert semantics.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from devfolio.data.db import Base


class Profile(Base):
    """Portfolio owner profile.

    Attributes:
        id: Auto-incrementing primary key.
        user_id: Foreign key to users table (unique, 1:1 relationship).
        full_name: Display name.
        title: Headline, e.g. "Software Engineer".
        bio: Free-form biography.
        location: City / region.
        email: Public contact address.
        phone: Phone number.
        github_url: GitHub profile URL.
        linkedin_url: LinkedIn profile URL.
        website_url: Personal website URL.
        updated_at: UTC timestamp when the profile was last updated.
    """

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    github_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    linkedin_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(255), nullable=True)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
