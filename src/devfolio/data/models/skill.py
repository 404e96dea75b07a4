"""Skill model: a named skill in a category with a 1-5 proficiency."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from devfolio.data.db import Base


class Skill(Base):
    """A skill shown on the portfolio.

    Attributes:
        id: Auto-incrementing primary key.
        user_id: Foreign key to the admin who created the entry.
        name: Skill name (e.g., "Python").
        category: Grouping label (e.g., "Languages").
        proficiency_level: Self-assessed level from 1 to 5.
        created_at: UTC timestamp when the skill was added.
    """

    __tablename__ = "skills"
    __table_args__ = (
        CheckConstraint(
            "proficiency_level BETWEEN 1 AND 5", name="ck_skills_proficiency_range"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    category: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    proficiency_level: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    @validates("proficiency_level")
    def validate_proficiency_level(self, key: str, value: int) -> int:
        """Validate proficiency is between 1 and 5."""
        if value < 1 or value > 5:
            raise ValueError("Proficiency level must be between 1 and 5")
        return value
