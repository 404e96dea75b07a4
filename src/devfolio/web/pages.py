"""Public pages: the portfolio itself, the contact form and the login screen."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from devfolio import content
from devfolio.api.dependencies import get_session_gate
from devfolio.screens.base import Notification
from devfolio.screens.forms import ContactForm
from devfolio.services import auth
from devfolio.services.session import SessionGate
from devfolio.web.common import (
    clear_session_cookie,
    get_form_fields,
    redirect,
    render,
    set_session_cookie,
)

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)


def _render_index(request: Request, form: ContactForm):
    return render(
        request,
        "index.html",
        content=content,
        contact=form.form,
        notifications=form.notifications,
    )


@router.get("/")
def index(request: Request):
    return _render_index(request, ContactForm())


@router.post("/contact")
def contact(request: Request, fields: Annotated[dict[str, str], Depends(get_form_fields)]):
    form = ContactForm()
    form.submit(fields)
    return _render_index(request, form)


@router.get("/auth")
def auth_page(request: Request):
    return render(request, "auth.html", email="", notifications=[])


@router.post("/auth/login")
def login(
    request: Request,
    fields: Annotated[dict[str, str], Depends(get_form_fields)],
    gate: Annotated[SessionGate, Depends(get_session_gate)],
):
    email = fields.get("email", "")
    info, error = gate.sign_in(email, fields.get("password", ""))
    if info is None:
        return render(
            request,
            "auth.html",
            status_code=401,
            email=email,
            notifications=[Notification("Login failed", error or "", "destructive")],
        )

    response = redirect("/admin")
    set_session_cookie(response, info)
    return response


@router.post("/auth/signup")
def signup(request: Request, fields: Annotated[dict[str, str], Depends(get_form_fields)]):
    email = fields.get("email", "")
    ok, error = auth.sign_up(email, fields.get("password", ""))
    if not ok:
        notification = Notification("Sign up failed", error or "", "destructive")
    else:
        notification = Notification(
            "Sign up successful", "Your account has been created. You can now log in."
        )
    return render(
        request,
        "auth.html",
        status_code=200 if ok else 400,
        email=email,
        notifications=[notification],
    )


@router.post("/auth/logout")
def logout(gate: Annotated[SessionGate, Depends(get_session_gate)]):
    gate.sign_out()
    response = redirect("/")
    clear_session_cookie(response)
    return response
