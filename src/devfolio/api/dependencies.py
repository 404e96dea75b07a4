"""Shared dependencies for API and page routes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from devfolio.services.auth import AuthUser
from devfolio.services.session import SessionGate

SESSION_COOKIE = "devfolio_session"


def get_request_token(request: Request) -> str | None:
    """Return the session token from the bearer header, falling back to the cookie."""
    header = request.headers.get("Authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return request.cookies.get(SESSION_COOKIE)


def get_session_gate(request: Request) -> Iterator[SessionGate]:
    """Provide a started SessionGate for the duration of one request."""
    gate = SessionGate(token=get_request_token(request)).start()
    try:
        yield gate
    finally:
        gate.close()


def get_current_user(
    gate: Annotated[SessionGate, Depends(get_session_gate)],
) -> AuthUser:
    """Get the signed-in user for an admin endpoint.

    Raises:
        HTTPException: If no live session was presented (401).
    """
    if gate.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required. Please sign in.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return gate.user
