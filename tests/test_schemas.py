"""Tests for form and request schemas."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from devfolio.schemas.education import EducationUpdate
from devfolio.schemas.experience import ExperienceCreate, ExperienceUpdate
from devfolio.schemas.messages import DEFAULT_SUBJECT, ContactSubmission
from devfolio.schemas.profile import ProfileUpdate
from devfolio.schemas.skills import SkillCreate, SkillUpdate


def test_blank_form_strings_become_none() -> None:
    exp = ExperienceCreate.model_validate(
        {"company": " Acme ", "position": "Dev", "start_date": "2020-05-01", "location": "   "}
    )
    assert exp.company == "Acme"
    assert exp.location is None
    assert exp.start_date == date(2020, 5, 1)


def test_unknown_form_fields_are_ignored() -> None:
    skill = SkillCreate.model_validate({"name": "Go", "category": "Lang", "csrf": "x"})
    assert skill.model_dump() == {"name": "Go", "category": "Lang", "proficiency_level": 3}


@pytest.mark.parametrize("level", [0, 6, "high"])
def test_proficiency_out_of_range(level) -> None:
    with pytest.raises(ValidationError):
        SkillCreate.model_validate({"name": "Go", "category": "Lang", "proficiency_level": level})


def test_is_current_clears_end_date() -> None:
    update = ExperienceUpdate.model_validate({"is_current": True, "end_date": "2023-01-01"})
    assert update.end_date is None
    assert update.model_dump(exclude_unset=True) == {"is_current": True, "end_date": None}


def test_end_date_before_start_date() -> None:
    with pytest.raises(ValidationError, match="end_date cannot be before start_date"):
        ExperienceCreate.model_validate(
            {"company": "A", "position": "B", "start_date": "2021-01-01", "end_date": "2020-01-01"}
        )


def test_partial_update_cannot_clear_required_fields() -> None:
    assert SkillUpdate.model_validate({}).model_dump(exclude_unset=True) == {}
    with pytest.raises(ValidationError, match="degree cannot be empty"):
        EducationUpdate.model_validate({"degree": ""})


def test_contact_subject_defaults() -> None:
    base = {"name": "Ann", "email": "ann@example.com", "message": "Hi"}
    assert ContactSubmission.model_validate(base).subject == DEFAULT_SUBJECT
    assert ContactSubmission.model_validate({**base, "subject": ""}).subject == DEFAULT_SUBJECT
    assert ContactSubmission.model_validate({**base, "subject": "Job"}).subject == "Job"


def test_contact_requires_valid_email() -> None:
    with pytest.raises(ValidationError, match="Invalid email address"):
        ContactSubmission.model_validate({"name": "Ann", "email": "ann", "message": "Hi"})


def test_profile_urls_keep_original_text() -> None:
    profile = ProfileUpdate.model_validate(
        {"full_name": "Jane", "github_url": "https://github.com/jane", "website_url": ""}
    )
    assert profile.github_url == "https://github.com/jane"
    assert profile.website_url is None

    with pytest.raises(ValidationError, match="Must be a valid URL"):
        ProfileUpdate.model_validate({"full_name": "Jane", "linkedin_url": "linkedin"})
