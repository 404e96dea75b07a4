"""Skills screen: new skills default to the first known category."""

from __future__ import annotations

from typing import Any

from devfolio.screens.base import CrudScreen
from devfolio.services.skills import list_categories


class SkillsScreen(CrudScreen):
    @property
    def categories(self) -> list[str]:
        return list_categories(self.rows)

    def blank_form(self) -> dict[str, Any]:
        values = super().blank_form()
        if self.categories:
            values["category"] = self.categories[0]
        return values
