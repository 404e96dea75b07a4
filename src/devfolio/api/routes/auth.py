"""Auth routes: sign up, sign in, sign out, refresh and session lookup."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from devfolio.api.dependencies import get_session_gate
from devfolio.schemas.auth import Credentials, CurrentUserResponse, SessionResponse
from devfolio.services import auth
from devfolio.services.auth import SessionInfo
from devfolio.services.session import SessionGate

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_response(info: SessionInfo) -> SessionResponse:
    return SessionResponse(
        token=info.token,
        user_id=info.user.id,
        email=info.user.email,
        expires_at=info.expires_at,
    )


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def sign_up(credentials: Credentials) -> dict[str, str]:
    """Create an admin account."""
    ok, error = auth.sign_up(credentials.email, credentials.password)
    if not ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    return {"status": "created"}


@router.post("/login", response_model=SessionResponse)
def sign_in(credentials: Credentials) -> SessionResponse:
    """Sign in with email and password and receive a session token."""
    info, error = auth.sign_in(credentials.email, credentials.password)
    if info is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=error)
    return _session_response(info)


@router.post("/refresh", response_model=SessionResponse)
def refresh(gate: Annotated[SessionGate, Depends(get_session_gate)]) -> SessionResponse:
    """Extend the presented session."""
    info = auth.refresh_session(gate.token) if gate.token else None
    if info is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Session expired or invalid"
        )
    return _session_response(info)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(gate: Annotated[SessionGate, Depends(get_session_gate)]) -> None:
    """Revoke the presented session. Signing out twice is not an error."""
    gate.sign_out()


@router.get("/session", response_model=CurrentUserResponse)
def current_session(
    gate: Annotated[SessionGate, Depends(get_session_gate)],
) -> CurrentUserResponse:
    """Report who is signed in, if anyone."""
    if gate.user is None:
        return CurrentUserResponse()
    return CurrentUserResponse(user_id=gate.user.id, email=gate.user.email, signed_in=True)
