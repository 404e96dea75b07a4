"""Schemas for the auth endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    email: str = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")


class SessionResponse(BaseModel):
    """A live session. ``token`` goes in the Authorization header as a bearer token."""

    token: str
    user_id: int
    email: str
    expires_at: datetime


class CurrentUserResponse(BaseModel):
    user_id: int | None = None
    email: str | None = None
    signed_in: bool = False
