"""Schemas for skills."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from devfolio.schemas.common import FormModel, PartialUpdateModel


class SkillCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=128, description="Skill name")
    category: str = Field(..., min_length=1, max_length=128, description="Category")
    proficiency_level: int = Field(3, ge=1, le=5, description="Proficiency from 1 to 5")


class SkillUpdate(PartialUpdateModel):
    required_fields = ("name", "category", "proficiency_level")

    name: str | None = Field(None, max_length=128)
    category: str | None = Field(None, max_length=128)
    proficiency_level: int | None = Field(None, ge=1, le=5)


class SkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None = None
    name: str
    category: str
    proficiency_level: int
    created_at: datetime
