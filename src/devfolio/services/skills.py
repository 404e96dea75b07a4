"""Skills service."""

from __future__ import annotations

from devfolio.schemas.skills import SkillCreate, SkillUpdate
from devfolio.services.crud import TableService

skills_service = TableService(
    table="skills",
    create_schema=SkillCreate,
    update_schema=SkillUpdate,
    order_by="category",
    owner_column="user_id",
)


def list_categories(skills: list[dict]) -> list[str]:
    """Return the distinct categories of ``skills`` in first-seen order."""
    return list(dict.fromkeys(skill["category"] for skill in skills))
