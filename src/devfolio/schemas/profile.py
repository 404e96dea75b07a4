"""Schemas for the portfolio owner's profile."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devfolio.schemas.common import FormModel, check_email, check_url


class ProfileUpdate(FormModel):
    """Profile form fields. Saved with upsert semantics."""

    full_name: str = Field(..., min_length=2, max_length=255, description="Display name")
    title: str | None = Field(None, max_length=255)
    bio: str | None = None
    location: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=32)
    github_url: str | None = Field(None, max_length=255)
    linkedin_url: str | None = Field(None, max_length=255)
    website_url: str | None = Field(None, max_length=255)

    validate_email = field_validator("email")(check_email)
    validate_urls = field_validator("github_url", "linkedin_url", "website_url")(check_url)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    full_name: str
    title: str | None = None
    bio: str | None = None
    location: str | None = None
    email: str | None = None
    phone: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    website_url: str | None = None
    updated_at: datetime
