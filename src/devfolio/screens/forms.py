"""Single-form screens: the admin profile form and the public contact form."""

from __future__ import annotations

from typing import Any

from devfolio.screens.base import Notification
from devfolio.services.auth import AuthUser
from devfolio.services.contact import submit_contact_message
from devfolio.services.profile import get_profile, save_profile

__all__ = ["ContactForm", "ProfileForm"]

PROFILE_FIELDS = (
    "full_name",
    "title",
    "bio",
    "location",
    "email",
    "phone",
    "github_url",
    "linkedin_url",
    "website_url",
)


class _SingleForm:
    empty: dict[str, Any] = {}

    def __init__(self) -> None:
        self.form: dict[str, Any] = dict(self.empty)
        self.submitting = False
        self.notifications: list[Notification] = []

    def notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notifications.append(Notification(title, description, variant))


class ProfileForm(_SingleForm):
    """Edit the signed-in admin's profile."""

    empty = {name: "" for name in PROFILE_FIELDS}

    def __init__(self, user: AuthUser) -> None:
        super().__init__()
        self.user = user

    def load(self) -> None:
        profile = get_profile(self.user.id)
        if profile:
            # Null columns keep the form's blank defaults.
            self.form.update(
                {k: v for k, v in profile.items() if k in PROFILE_FIELDS and v is not None}
            )

    def submit(self, fields: dict[str, Any]) -> bool:
        if self.submitting:
            return False
        self.submitting = True
        try:
            self.form = {**self.form, **{k: v for k, v in fields.items() if k in self.empty}}
            if save_profile(self.user.id, self.form) is None:
                self.notify("Error", "Failed to update profile.", "destructive")
                return False
            self.notify("Profile updated", "Your profile has been updated successfully.")
            return True
        finally:
            self.submitting = False


class ContactForm(_SingleForm):
    """Public contact form. A successful send clears the form."""

    empty = {"name": "", "email": "", "subject": "", "message": ""}

    def submit(self, fields: dict[str, Any]) -> bool:
        if self.submitting:
            return False
        self.submitting = True
        try:
            self.form = {**self.form, **{k: v for k, v in fields.items() if k in self.empty}}
            if submit_contact_message(self.form) is None:
                self.notify(
                    "Error sending message",
                    "There was a problem sending your message. Please try again later.",
                    "destructive",
                )
                return False
            self.form = dict(self.empty)
            self.notify(
                "Message sent!", "Thanks for reaching out. I'll get back to you soon."
            )
            return True
        finally:
            self.submitting = False
