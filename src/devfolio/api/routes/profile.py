"""Routes for the signed-in admin's profile."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from devfolio.api.dependencies import get_current_user
from devfolio.schemas.profile import ProfileResponse, ProfileUpdate
from devfolio.services.auth import AuthUser
from devfolio.services.profile import get_profile, save_profile

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
def read_profile(user: Annotated[AuthUser, Depends(get_current_user)]) -> ProfileResponse:
    """Get the current admin's profile.

    Raises:
        HTTPException: If no profile has been saved yet (404).
    """
    profile = get_profile(user.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return ProfileResponse(**profile)


@router.put("", response_model=ProfileResponse)
def write_profile(
    data: ProfileUpdate,
    user: Annotated[AuthUser, Depends(get_current_user)],
) -> ProfileResponse:
    """Create or replace the current admin's profile."""
    profile = save_profile(user.id, data.model_dump())
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to update profile"
        )
    return ProfileResponse(**profile)
