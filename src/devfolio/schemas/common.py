"""Shared validation helpers for form and request schemas."""

from __future__ import annotations

import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, HttpUrl, TypeAdapter, model_validator

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_HTTP_URL = TypeAdapter(HttpUrl)


def check_email(value: str | None) -> str | None:
    """Validate that ``value`` looks like an email address."""
    if value is not None and not _EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value


def check_url(value: str | None) -> str | None:
    """Validate that ``value`` is an http(s) URL, keeping the original text."""
    if value is not None:
        try:
            _HTTP_URL.validate_python(value)
        except ValueError:
            raise ValueError("Must be a valid URL") from None
    return value


def split_list(value: Any) -> Any:
    """Turn a comma-separated string into a list of trimmed, non-empty items."""
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class FormModel(BaseModel):
    """Base for write schemas.

    HTML forms submit empty inputs as blank strings; those are treated as
    "not filled in" and become None before field validation.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def blank_strings_to_none(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: None if isinstance(value, str) and not value.strip() else value
                for key, value in data.items()
            }
        return data


class PartialUpdateModel(FormModel):
    """Base for update schemas where every field is optional.

    Fields listed in ``required_fields`` may be omitted but not cleared.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def check_required_not_cleared(self) -> PartialUpdateModel:
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be empty")
        return self


def check_date_range(start: Any, end: Any) -> None:
    """Raise ValueError if ``end`` falls before ``start``."""
    if start is not None and end is not None and end < start:
        raise ValueError("end_date cannot be before start_date")


def check_row_dates(row: dict[str, Any]) -> dict[str, Any]:
    """Apply the date rules to a whole stored row after a partial update.

    A current entry has no end date, and an end date never precedes the
    start date.

    Returns:
        Extra column changes to write (``end_date`` cleared for a current entry).
    """
    changes: dict[str, Any] = {}
    if row.get("is_current") and row.get("end_date") is not None:
        changes["end_date"] = None
    check_date_range(row.get("start_date"), changes.get("end_date", row.get("end_date")))
    return changes
