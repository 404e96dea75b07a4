"""Admin pages.

Every page first consults the request's SessionGate; a signed-out client
is redirected to the login screen. The experience, education and skills
pages are one generic page driven by the screen registry.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request

from devfolio.api.dependencies import get_session_gate
from devfolio.screens.base import CrudScreen
from devfolio.screens.forms import ProfileForm
from devfolio.screens.inbox import MessageInbox
from devfolio.screens.registry import CRUD_SCREENS, build_inbox, build_screen
from devfolio.services.session import SessionGate
from devfolio.web.common import LOGIN_PATH, get_form_fields, redirect, render

router = APIRouter(prefix="/admin", include_in_schema=False)

Gate = Annotated[SessionGate, Depends(get_session_gate)]
FormFields = Annotated[dict[str, str], Depends(get_form_fields)]

DASHBOARD_CARDS = (
    ("Experience", "Manage your work experience", "/admin/experience", "Edit Experience"),
    ("Profile", "Edit your personal information", "/admin/profile", "Edit Profile"),
    ("Messages", "View contact form submissions", "/admin/messages", "View Messages"),
    ("Skills", "Manage your skills and categories", "/admin/skills", "Edit Skills"),
    ("Education", "Manage your education history", "/admin/education", "Edit Education"),
)


def _not_found(request: Request):
    return render(request, "not_found.html", status_code=404, path=request.url.path)


def _render_inbox(request: Request, gate: SessionGate, inbox: MessageInbox):
    return render(
        request,
        "admin/messages.html",
        user=gate.user,
        inbox=inbox,
        notifications=inbox.notifications,
    )


def _render_screen(
    request: Request, gate: SessionGate, screen: CrudScreen, status_code: int = 200
):
    return render(
        request,
        "admin/screen.html",
        status_code=status_code,
        user=gate.user,
        screen=screen,
        config=screen.config,
        notifications=screen.notifications,
    )


def _render_profile(
    request: Request, gate: SessionGate, form: ProfileForm, status_code: int = 200
):
    return render(
        request,
        "admin/profile.html",
        status_code=status_code,
        user=gate.user,
        form=form.form,
        notifications=form.notifications,
    )


@router.get("")
def dashboard(request: Request, gate: Gate):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    return render(request, "admin/dashboard.html", user=gate.user, cards=DASHBOARD_CARDS)


@router.get("/messages")
def messages_page(
    request: Request,
    gate: Gate,
    open_id: Annotated[int | None, Query(alias="open")] = None,
):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    inbox = build_inbox(gate.user)
    inbox.load()
    if open_id is not None:
        inbox.open_message(open_id)
    return _render_inbox(request, gate, inbox)


@router.post("/messages/{message_id}/delete")
def delete_message(request: Request, gate: Gate, message_id: int):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    inbox = build_inbox(gate.user)
    inbox.load()
    inbox.delete_message(message_id)
    return _render_inbox(request, gate, inbox)


@router.get("/profile")
def profile_page(request: Request, gate: Gate):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    form = ProfileForm(gate.user)
    form.load()
    return _render_profile(request, gate, form)


@router.post("/profile")
def save_profile(request: Request, gate: Gate, fields: FormFields):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    form = ProfileForm(gate.user)
    form.load()
    ok = form.submit(fields)
    return _render_profile(request, gate, form, status_code=200 if ok else 400)


def _load_screen(slug: str, gate: SessionGate) -> CrudScreen | None:
    config = CRUD_SCREENS.get(slug)
    if config is None:
        return None
    screen = build_screen(config, gate.user)
    screen.load()
    return screen


@router.get("/{slug}")
def screen_page(
    request: Request,
    gate: Gate,
    slug: str,
    edit: int | None = None,
    new: bool = False,
    delete: int | None = None,
):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    screen = _load_screen(slug, gate)
    if screen is None:
        return _not_found(request)

    if edit is not None:
        screen.open_edit(edit)
    elif new:
        screen.open_new()
    if delete is not None:
        screen.request_delete(delete)
    return _render_screen(request, gate, screen)


def _submit(
    request: Request,
    gate: SessionGate,
    slug: str,
    fields: dict[str, Any],
    row_id: int | None,
):
    screen = _load_screen(slug, gate)
    if screen is None:
        return _not_found(request)
    if row_id is None:
        screen.open_new()
    elif not screen.open_edit(row_id):
        return _not_found(request)
    ok = screen.submit(fields)
    return _render_screen(request, gate, screen, status_code=200 if ok else 400)


@router.post("/{slug}")
def create_entry(request: Request, gate: Gate, slug: str, fields: FormFields):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    return _submit(request, gate, slug, fields, None)


@router.post("/{slug}/{row_id}")
def update_entry(request: Request, gate: Gate, slug: str, row_id: int, fields: FormFields):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    return _submit(request, gate, slug, fields, row_id)


@router.post("/{slug}/{row_id}/delete")
def delete_entry(request: Request, gate: Gate, slug: str, row_id: int):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    screen = _load_screen(slug, gate)
    if screen is None or not screen.request_delete(row_id):
        return _not_found(request)
    screen.confirm_delete()
    return _render_screen(request, gate, screen)


@router.get("/{rest:path}")
def unknown_admin_page(request: Request, gate: Gate, rest: str):
    if gate.should_redirect:
        return redirect(LOGIN_PATH)
    return _not_found(request)
