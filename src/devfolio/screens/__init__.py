"""Admin screen state machines and the public contact form."""

from devfolio.screens.base import CrudScreen, FormField, Notification, ScreenConfig
from devfolio.screens.forms import ContactForm, ProfileForm
from devfolio.screens.inbox import MessageInbox
from devfolio.screens.skills import SkillsScreen

__all__ = [
    "ContactForm",
    "CrudScreen",
    "FormField",
    "MessageInbox",
    "Notification",
    "ProfileForm",
    "ScreenConfig",
    "SkillsScreen",
]
