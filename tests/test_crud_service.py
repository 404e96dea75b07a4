"""Test suite for the generic CRUD service and the per-table services."""

from __future__ import annotations

from datetime import date

import pytest

from devfolio.services.crud import TableService, UpdateError
from devfolio.services.education import education_service
from devfolio.services.experience import experience_service
from devfolio.services.messages import messages_service
from devfolio.services.skills import list_categories, skills_service

pytestmark = pytest.mark.usefixtures("tmp_db")

CASES = [
    pytest.param(
        experience_service,
        {"company": "Acme", "position": "Engineer", "start_date": "2021-03-01"},
        {"position": "Senior Engineer"},
        id="experience",
    ),
    pytest.param(
        education_service,
        {"institution": "MIT", "degree": "BSc", "field_of_study": "CS"},
        {"degree": "MSc"},
        id="education",
    ),
    pytest.param(
        skills_service,
        {"name": "Python", "category": "Languages", "proficiency_level": 4},
        {"proficiency_level": 5},
        id="skills",
    ),
    pytest.param(
        messages_service,
        {"name": "Ann", "email": "ann@example.com", "subject": "Hi", "message": "Hello"},
        {"read": True},
        id="messages",
    ),
]


@pytest.mark.parametrize(("service", "fields", "changes"), CASES)
def test_create_then_list_includes_record(
    service: TableService, fields: dict, changes: dict
) -> None:
    created = service.create(fields)
    assert created is not None

    rows = service.list_all()
    assert [r["id"] for r in rows] == [created["id"]]
    listed = rows[0]
    for key, value in fields.items():
        if key == "start_date":
            assert listed[key] == date.fromisoformat(value)
        else:
            assert listed[key] == value


@pytest.mark.parametrize(("service", "fields", "changes"), CASES)
def test_update_changes_only_given_fields(
    service: TableService, fields: dict, changes: dict
) -> None:
    created = service.create(fields)
    updated = service.update(created["id"], changes)
    assert updated is not None

    listed = service.list_all()[0]
    for key, value in created.items():
        if key in changes:
            assert listed[key] == changes[key]
        elif key not in ("created_at", "updated_at"):
            assert listed[key] == value


@pytest.mark.parametrize(("service", "fields", "changes"), CASES)
def test_delete_then_list_excludes_record(
    service: TableService, fields: dict, changes: dict
) -> None:
    keep = service.create(fields)
    gone = service.create(fields)

    assert service.delete(gone["id"]) is True
    assert [r["id"] for r in service.list_all()] == [keep["id"]]
    assert service.get(gone["id"]) is None


@pytest.mark.parametrize(("service", "fields", "changes"), CASES)
def test_missing_rows(service: TableService, fields: dict, changes: dict) -> None:
    assert service.list_all() == []
    assert service.get(999) is None
    assert service.update(999, changes) is None
    assert service.delete(999) is False


def test_create_stamps_owner() -> None:
    from devfolio.data.db import get_session
    from devfolio.data.models import User

    with get_session() as session:
        user = User(email="owner@example.com", password_hash="hash")
        session.add(user)
        session.flush()
        user_id = user.id

    created = skills_service.create({"name": "Go", "category": "Languages"}, user_id=user_id)
    assert created["user_id"] == user_id
    assert created["proficiency_level"] == 3


def test_validation_failures_return_none() -> None:
    assert experience_service.create({"company": "Acme"}) is None
    assert education_service.create({"institution": "MIT", "degree": ""}) is None
    assert skills_service.create({"name": "Go", "category": "Lang", "proficiency_level": 6}) is None
    assert experience_service.list_all() == []

    created = skills_service.create({"name": "Go", "category": "Languages"})
    # Required fields cannot be cleared by an update
    assert skills_service.update(created["id"], {"name": ""}) is None
    assert skills_service.get(created["id"])["name"] == "Go"


def test_experience_is_current_clears_end_date_and_parses_technologies() -> None:
    created = experience_service.create(
        {
            "company": "Acme",
            "position": "Engineer",
            "start_date": "2020-01-01",
            "end_date": "2021-01-01",
            "is_current": "true",
            "technologies": "React, Node.js , ,PostgreSQL",
        }
    )
    assert created["end_date"] is None
    assert created["is_current"] is True
    assert created["technologies"] == ["React", "Node.js", "PostgreSQL"]

    updated = experience_service.update(created["id"], {"technologies": ["Go"]})
    assert updated["technologies"] == ["Go"]
    assert updated["company"] == "Acme"


def test_end_date_before_start_date_rejected() -> None:
    assert (
        education_service.create(
            {
                "institution": "MIT",
                "degree": "BSc",
                "start_date": "2022-09-01",
                "end_date": "2020-06-01",
            }
        )
        is None
    )


def test_list_ordering() -> None:
    experience_service.create({"company": "B", "position": "p", "start_date": "2019-01-01"})
    experience_service.create({"company": "A", "position": "p", "start_date": "2015-01-01"})
    assert [r["company"] for r in experience_service.list_all()] == ["A", "B"]

    skills_service.create({"name": "Docker", "category": "Tools"})
    skills_service.create({"name": "Python", "category": "Languages"})
    skills = skills_service.list_all()
    assert [r["name"] for r in skills] == ["Python", "Docker"]
    assert list_categories(skills) == ["Languages", "Tools"]

    first = messages_service.create(
        {"name": "A", "email": "a@example.com", "message": "first"}
    )
    second = messages_service.create(
        {"name": "B", "email": "b@example.com", "message": "second"}
    )
    assert [r["id"] for r in messages_service.list_all()] == [second["id"], first["id"]]


DATED_SERVICES = [
    pytest.param(experience_service, {"company": "Acme", "position": "Engineer"}, id="experience"),
    pytest.param(education_service, {"institution": "MIT", "degree": "BSc"}, id="education"),
]


@pytest.mark.parametrize(("service", "base"), DATED_SERVICES)
@pytest.mark.parametrize(
    ("stored", "changes"),
    [
        ({"start_date": "2022-01-01"}, {"end_date": "2020-01-01"}),
        ({"start_date": "2022-01-01", "end_date": "2023-01-01"}, {"start_date": "2024-01-01"}),
        ({"start_date": "2022-01-01", "end_date": "2023-01-01"}, {"end_date": "2021-12-31"}),
    ],
    ids=["end-before-stored-start", "start-after-stored-end", "end-moved-before-start"],
)
def test_partial_update_keeps_dates_ordered(
    service: TableService, base: dict, stored: dict, changes: dict
) -> None:
    created = service.create({**base, **stored})

    row, error = service.try_update(created["id"], changes)
    assert row is None
    assert error is UpdateError.INVALID

    kept = service.get(created["id"])
    assert kept["start_date"] == created["start_date"]
    assert kept["end_date"] == created["end_date"]


@pytest.mark.parametrize(("service", "base"), DATED_SERVICES)
def test_partial_update_of_current_entry_has_no_end_date(
    service: TableService, base: dict
) -> None:
    current = service.create({**base, "start_date": "2022-01-01", "is_current": True})
    updated = service.update(current["id"], {"end_date": "2023-01-01"})
    assert updated["is_current"] is True
    assert updated["end_date"] is None

    finished = service.create({**base, "start_date": "2020-01-01", "end_date": "2021-01-01"})
    updated = service.update(finished["id"], {"is_current": True})
    assert updated["end_date"] is None


@pytest.mark.parametrize(("service", "base"), DATED_SERVICES)
def test_partial_update_with_valid_dates(service: TableService, base: dict) -> None:
    current = service.create({**base, "start_date": "2022-01-01", "is_current": True})

    updated = service.update(current["id"], {"is_current": False, "end_date": "2023-06-30"})
    assert updated["is_current"] is False
    assert updated["end_date"] == date(2023, 6, 30)

    updated = service.update(current["id"], {"start_date": "2021-01-01"})
    assert updated["start_date"] == date(2021, 1, 1)
    assert updated["end_date"] == date(2023, 6, 30)


def test_try_update_reports_why() -> None:
    created = skills_service.create({"name": "Go", "category": "Languages"})

    assert skills_service.try_update(999, {"name": "Rust"}) == (None, UpdateError.NOT_FOUND)
    assert skills_service.try_update(created["id"], {"proficiency_level": 0}) == (
        None,
        UpdateError.INVALID,
    )
    row, error = skills_service.try_update(created["id"], {"name": "Rust"})
    assert error is None
    assert row["name"] == "Rust"


def test_mark_as_read_and_contact_go_through_messages_service(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from devfolio.services import messages as messages_module
    from devfolio.services.contact import submit_contact_message

    stored = submit_contact_message({"name": "Ann", "email": "ann@example.com", "message": "Hi"})
    assert stored["read"] is False

    writes: list[tuple[int, dict]] = []
    real_update = TableService.update

    def counting_update(self, row_id, fields):
        writes.append((row_id, fields))
        return real_update(self, row_id, fields)

    monkeypatch.setattr(TableService, "update", counting_update)

    assert messages_module.mark_as_read(stored["id"]) is True
    assert messages_module.mark_as_read(999) is False
    assert writes == [(stored["id"], {"read": True}), (999, {"read": True})]
    assert messages_service.get(stored["id"])["read"] is True
