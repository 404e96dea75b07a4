"""Profile service: one profile row per admin user, saved by upsert."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from devfolio.data.tables import TableError, select_rows, upsert_row
from devfolio.schemas.profile import ProfileUpdate

logger = logging.getLogger(__name__)

__all__ = ["get_profile", "save_profile"]


def get_profile(user_id: int) -> dict[str, Any] | None:
    """Return the profile belonging to ``user_id``, or None if there is none."""
    try:
        rows = select_rows("profiles", filters={"user_id": user_id})
    except TableError:
        logger.exception("Failed to load profile for user %d", user_id)
        return None
    return rows[0] if rows else None


def save_profile(user_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    """Create or replace the profile of ``user_id``.

    Returns:
        The saved profile, or None if validation or the write failed.
    """
    try:
        profile = ProfileUpdate.model_validate(fields)
    except ValidationError as exc:
        logger.warning("Validation failed for profile: %s", exc.errors())
        return None

    values = {**profile.model_dump(), "user_id": user_id, "updated_at": datetime.now(UTC)}
    try:
        return upsert_row("profiles", values, conflict_key="user_id")
    except TableError:
        logger.exception("Failed to save profile for user %d", user_id)
        return None
