"""Schemas for work experience entries."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from devfolio.schemas.common import FormModel, PartialUpdateModel, check_date_range, split_list


class ExperienceCreate(FormModel):
    """Fields accepted when adding an experience entry."""

    company: str = Field(..., min_length=1, max_length=255, description="Company name")
    position: str = Field(..., min_length=1, max_length=255, description="Job title")
    location: str | None = Field(None, max_length=255)
    start_date: date = Field(..., description="Start date (ISO format)")
    end_date: date | None = Field(None, description="End date, None if current")
    is_current: bool = False
    description: str | None = None
    technologies: list[str] = Field(
        default_factory=list, description="Technologies, list or comma-separated string"
    )

    split_technologies = field_validator("technologies", mode="before")(split_list)

    @model_validator(mode="after")
    def check_dates(self) -> ExperienceCreate:
        if self.is_current:
            self.end_date = None
        check_date_range(self.start_date, self.end_date)
        return self


class ExperienceUpdate(PartialUpdateModel):
    """Fields accepted when editing an experience entry; all optional."""

    required_fields = ("company", "position", "start_date")

    company: str | None = Field(None, max_length=255)
    position: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    is_current: bool | None = None
    description: str | None = None
    technologies: list[str] | None = None

    split_technologies = field_validator("technologies", mode="before")(split_list)

    @model_validator(mode="after")
    def check_dates(self) -> ExperienceUpdate:
        if self.is_current:
            self.end_date = None
        check_date_range(self.start_date, self.end_date)
        return self


class ExperienceResponse(BaseModel):
    """Response schema for an experience entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None = None
    company: str
    position: str
    location: str | None = None
    start_date: date
    end_date: date | None = None
    is_current: bool = False
    description: str | None = None
    technologies: list[str] = []
    created_at: datetime
    updated_at: datetime
