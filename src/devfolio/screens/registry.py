"""Screen configurations for every admin data category."""

from __future__ import annotations

from devfolio.screens.base import CrudScreen, FormField, ScreenConfig
from devfolio.screens.inbox import MessageInbox
from devfolio.screens.skills import SkillsScreen
from devfolio.services.auth import AuthUser
from devfolio.services.education import education_service
from devfolio.services.experience import experience_service
from devfolio.services.messages import messages_service
from devfolio.services.skills import skills_service

EXPERIENCE_SCREEN = ScreenConfig(
    slug="experience",
    title="Experience",
    noun="experience",
    service=experience_service,
    fields=(
        FormField("company", "Company", required=True),
        FormField("position", "Position", required=True),
        FormField("location", "Location"),
        FormField("start_date", "Start date", kind="date", required=True),
        FormField("end_date", "End date", kind="date"),
        FormField("is_current", "I currently work here", kind="checkbox"),
        FormField("description", "Description", kind="textarea"),
        FormField(
            "technologies", "Technologies", kind="list", placeholder="React, Node.js, PostgreSQL"
        ),
    ),
    columns=("position", "company", "start_date", "end_date"),
)

EDUCATION_SCREEN = ScreenConfig(
    slug="education",
    title="Education",
    noun="education",
    service=education_service,
    fields=(
        FormField("institution", "Institution", required=True),
        FormField("degree", "Degree", required=True),
        FormField("field_of_study", "Field of study"),
        FormField("start_date", "Start date", kind="date"),
        FormField("end_date", "End date", kind="date"),
        FormField("is_current", "I currently study here", kind="checkbox"),
        FormField("description", "Description", kind="textarea"),
    ),
    columns=("degree", "institution", "start_date", "end_date"),
)

SKILLS_SCREEN = ScreenConfig(
    slug="skills",
    title="Skills",
    noun="skill",
    service=skills_service,
    fields=(
        FormField("name", "Skill name", required=True),
        FormField("category", "Category", required=True),
        FormField("proficiency_level", "Proficiency (1-5)", kind="number", required=True),
    ),
    columns=("name", "category", "proficiency_level"),
    defaults={"proficiency_level": 3},
)

MESSAGES_SCREEN = ScreenConfig(
    slug="messages",
    title="Messages",
    noun="message",
    service=messages_service,
    fields=(),
    columns=("name", "email", "subject", "created_at"),
)

CRUD_SCREENS: dict[str, ScreenConfig] = {
    config.slug: config for config in (EXPERIENCE_SCREEN, EDUCATION_SCREEN, SKILLS_SCREEN)
}

_SCREEN_CLASSES: dict[str, type[CrudScreen]] = {"skills": SkillsScreen}


def build_screen(config: ScreenConfig, user: AuthUser | None) -> CrudScreen:
    """Return the screen state machine for ``config``."""
    return _SCREEN_CLASSES.get(config.slug, CrudScreen)(config, user)


def build_inbox(user: AuthUser | None) -> MessageInbox:
    return MessageInbox(MESSAGES_SCREEN, user)
