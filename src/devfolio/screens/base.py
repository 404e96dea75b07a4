"""Generic admin CRUD screen.

A screen holds the local copy of one table's rows plus the state of its
edit dialog and delete confirmation. Every admin data category uses the
same state machine, parameterized by a ``ScreenConfig``:

    load() -> open_new() / open_edit(id) -> submit(fields) -> load()
    request_delete(id) -> confirm_delete() -> load()

The local rows are a discardable cache of the table; after a successful
create, update or delete the screen refetches. On failure a notification
is added and local state is left as it was.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from devfolio.services.auth import AuthUser
from devfolio.services.crud import TableService

__all__ = ["CrudScreen", "FormField", "Notification", "ScreenConfig", "form_values"]


@dataclass(frozen=True)
class Notification:
    """Toast-style message shown to the admin after an action."""

    title: str
    description: str
    variant: str = "default"

    @property
    def destructive(self) -> bool:
        return self.variant == "destructive"


@dataclass(frozen=True)
class FormField:
    """One input of an edit dialog.

    ``kind`` selects the widget: text, textarea, date, checkbox, number,
    email, url or list (comma-separated values).
    """

    name: str
    label: str
    kind: str = "text"
    required: bool = False
    placeholder: str = ""


@dataclass(frozen=True)
class ScreenConfig:
    """Everything that differs between two admin CRUD screens."""

    slug: str
    title: str
    noun: str
    service: TableService
    fields: tuple[FormField, ...]
    columns: tuple[str, ...]
    defaults: dict[str, Any] = field(default_factory=dict)


def form_values(row: dict[str, Any], fields: tuple[FormField, ...]) -> dict[str, Any]:
    """Turn a stored row into the values an edit form is pre-filled with."""
    values: dict[str, Any] = {}
    for form_field in fields:
        value = row.get(form_field.name)
        if value is None:
            value = False if form_field.kind == "checkbox" else ""
        elif isinstance(value, date):
            value = value.isoformat()
        elif isinstance(value, list):
            value = ", ".join(value)
        values[form_field.name] = value
    return values


class CrudScreen:
    """List / edit / delete state machine for one table."""

    def __init__(self, config: ScreenConfig, user: AuthUser | None = None) -> None:
        self.config = config
        self.user = user
        self.rows: list[dict[str, Any]] = []
        self.loaded = False
        self.current: dict[str, Any] | None = None
        self.form: dict[str, Any] = {}
        self.dialog_open = False
        self.pending_delete: dict[str, Any] | None = None
        self.submitting = False
        self.notifications: list[Notification] = []

    def notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notifications.append(Notification(title, description, variant))

    def find(self, row_id: int) -> dict[str, Any] | None:
        return next((row for row in self.rows if row["id"] == row_id), None)

    def load(self) -> bool:
        """Replace the local rows with a fresh copy of the table."""
        rows = self.config.service.list_all()
        if rows is None:
            self.notify(
                "Error", f"Could not load {self.config.title.lower()} data.", "destructive"
            )
            return False
        self.rows = rows
        self.loaded = True
        return True

    def blank_form(self) -> dict[str, Any]:
        values = form_values({}, self.config.fields)
        values.update(self.config.defaults)
        return values

    def open_new(self) -> None:
        self.current = None
        self.form = self.blank_form()
        self.dialog_open = True

    def open_edit(self, row_id: int) -> bool:
        """Open the edit dialog pre-filled from the row with ``row_id``."""
        row = self.find(row_id)
        if row is None:
            return False
        self.current = row
        self.form = form_values(row, self.config.fields)
        self.dialog_open = True
        return True

    def close_dialog(self) -> None:
        self.dialog_open = False
        self.current = None
        self.form = {}

    def submit(self, fields: dict[str, Any]) -> bool:
        """Save the dialog: update the selected row, or create a new one.

        A submit while another is in flight is ignored.
        """
        if self.submitting:
            return False
        self.submitting = True
        noun = self.config.noun
        try:
            if self.current is not None:
                result = self.config.service.update(self.current["id"], fields)
            else:
                user_id = self.user.id if self.user else None
                result = self.config.service.create(fields, user_id=user_id)

            if result is None:
                self.form = {**self.form, **fields}
                self.notify("Error", f"Failed to save {noun}.", "destructive")
                return False

            if self.current is not None:
                self.notify(
                    f"{noun.capitalize()} updated",
                    f"Your {noun} has been updated successfully.",
                )
            else:
                self.notify(
                    f"{noun.capitalize()} added",
                    f"Your {noun} has been added successfully.",
                )
            self.load()
            self.close_dialog()
            return True
        finally:
            self.submitting = False

    def request_delete(self, row_id: int) -> bool:
        """Ask for confirmation before deleting the row with ``row_id``."""
        row = self.find(row_id)
        if row is None:
            return False
        self.pending_delete = row
        return True

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        """Delete the row awaiting confirmation."""
        if self.pending_delete is None or self.submitting:
            return False
        self.submitting = True
        noun = self.config.noun
        try:
            if not self.config.service.delete(self.pending_delete["id"]):
                self.notify("Error", f"Failed to delete {noun}.", "destructive")
                return False
            self.notify(
                f"{noun.capitalize()} deleted", f"Your {noun} has been deleted successfully."
            )
            self.load()
            return True
        finally:
            self.pending_delete = None
            self.submitting = False
