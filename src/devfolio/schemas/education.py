"""Schemas for education entries."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from devfolio.schemas.common import FormModel, PartialUpdateModel, check_date_range


class EducationCreate(FormModel):
    """Fields accepted when adding an education entry."""

    institution: str = Field(..., min_length=1, max_length=255, description="School name")
    degree: str = Field(..., min_length=1, max_length=255, description="Degree type")
    field_of_study: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    is_current: bool = False
    description: str | None = None

    @model_validator(mode="after")
    def check_dates(self) -> EducationCreate:
        if self.is_current:
            self.end_date = None
        check_date_range(self.start_date, self.end_date)
        return self


class EducationUpdate(PartialUpdateModel):
    """Fields accepted when editing an education entry; all optional."""

    required_fields = ("institution", "degree")

    institution: str | None = Field(None, max_length=255)
    degree: str | None = Field(None, max_length=255)
    field_of_study: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    is_current: bool | None = None
    description: str | None = None

    @model_validator(mode="after")
    def check_dates(self) -> EducationUpdate:
        if self.is_current:
            self.end_date = None
        check_date_range(self.start_date, self.end_date)
        return self


class EducationResponse(BaseModel):
    """Response schema for an education entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None = None
    institution: str
    degree: str
    field_of_study: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    is_current: bool = False
    description: str | None = None
    created_at: datetime
    updated_at: datetime
