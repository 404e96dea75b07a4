"""Template and form helpers shared by the page routes."""

from __future__ import annotations

import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from devfolio.api.dependencies import SESSION_COOKIE
from devfolio.services.auth import SessionInfo

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

LOGIN_PATH = "/auth"


async def get_form_fields(request: Request) -> dict[str, str]:
    """Parse a submitted HTML form into a plain dict (last value wins)."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def render(request: Request, template: str, status_code: int = 200, **context: Any):
    return templates.TemplateResponse(request, template, context, status_code=status_code)


def redirect(path: str) -> RedirectResponse:
    return RedirectResponse(path, status_code=303)


def _cookie_secure() -> bool:
    return os.getenv("DEVFOLIO_COOKIE_SECURE", "").lower() in {"1", "true", "yes"}


def set_session_cookie(response: RedirectResponse, info: SessionInfo) -> None:
    max_age = max(0, int((info.expires_at - datetime.now(UTC)).total_seconds()))
    response.set_cookie(
        SESSION_COOKIE,
        info.token,
        max_age=max_age,
        httponly=True,
        samesite="lax",
        secure=_cookie_secure(),
    )


def clear_session_cookie(response: RedirectResponse) -> None:
    response.delete_cookie(SESSION_COOKIE)
