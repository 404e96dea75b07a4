"""Tests for the JSON API: health, auth, CRUD tables, messages, profile and contact."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from devfolio import __version__
from devfolio.api.main import app
from devfolio.schemas.messages import DEFAULT_SUBJECT

EMAIL = "admin@example.com"
PASSWORD = "secret123"


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    """Sign up and sign in an admin, returning a bearer header."""
    signup = client.post("/api/auth/signup", json={"email": EMAIL, "password": PASSWORD})
    assert signup.status_code == 201
    response = client.post("/api/auth/login", json={"email": EMAIL, "password": PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestApp:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_metadata(self) -> None:
        assert app.title == "devfolio"
        assert app.version == __version__

    def test_cors_headers(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "http://localhost:3000"})
        assert "access-control-allow-origin" in response.headers

    def test_unknown_api_path_is_json_404(self, client: TestClient) -> None:
        response = client.get("/api/nonexistent")
        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}


class TestAuth:
    def test_signup_errors(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        duplicate = client.post("/api/auth/signup", json={"email": EMAIL, "password": PASSWORD})
        assert duplicate.status_code == 400

        short = client.post("/api/auth/signup", json={"email": "b@example.com", "password": "x"})
        assert short.status_code == 400

    def test_login_failure(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post("/api/auth/login", json={"email": EMAIL, "password": "wrong!!"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password."

    def test_session_and_logout(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        session = client.get("/api/auth/session", headers=auth_headers).json()
        assert session["signed_in"] is True
        assert session["email"] == EMAIL

        assert client.post("/api/auth/logout", headers=auth_headers).status_code == 204
        assert client.get("/api/auth/session", headers=auth_headers).json() == {
            "user_id": None,
            "email": None,
            "signed_in": False,
        }
        assert client.get("/api/skills", headers=auth_headers).status_code == 401

    def test_refresh(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post("/api/auth/refresh", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["email"] == EMAIL

        assert client.post("/api/auth/refresh").status_code == 401


@pytest.mark.parametrize(
    "path", ["/api/experience", "/api/education", "/api/skills", "/api/messages", "/api/profile"]
)
def test_admin_endpoints_require_session(client: TestClient, path: str) -> None:
    response = client.get(path)
    assert response.status_code == 401
    assert response.json()["detail"] == "Authentication required. Please sign in."

    bogus = client.get(path, headers={"Authorization": "Bearer not-a-token"})
    assert bogus.status_code == 401


class TestCrudEndpoints:
    def test_experience_lifecycle(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        created = client.post(
            "/api/experience",
            json={
                "company": "Acme",
                "position": "Engineer",
                "start_date": "2021-02-01",
                "technologies": ["Python", "FastAPI"],
            },
            headers=auth_headers,
        )
        assert created.status_code == 201
        body = created.json()
        assert body["technologies"] == ["Python", "FastAPI"]
        assert body["user_id"] is not None

        listed = client.get("/api/experience", headers=auth_headers).json()
        assert [row["id"] for row in listed] == [body["id"]]

        patched = client.patch(
            f"/api/experience/{body['id']}",
            json={"position": "Staff Engineer"},
            headers=auth_headers,
        )
        assert patched.status_code == 200
        assert patched.json()["position"] == "Staff Engineer"
        assert patched.json()["company"] == "Acme"

        deleted = client.delete(f"/api/experience/{body['id']}", headers=auth_headers)
        assert deleted.status_code == 204
        assert client.get("/api/experience", headers=auth_headers).json() == []
        assert client.get(f"/api/experience/{body['id']}", headers=auth_headers).status_code == 404

    def test_validation_errors(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        missing = client.post("/api/education", json={"institution": "MIT"}, headers=auth_headers)
        assert missing.status_code == 422

        bad_level = client.post(
            "/api/skills",
            json={"name": "Go", "category": "Languages", "proficiency_level": 9},
            headers=auth_headers,
        )
        assert bad_level.status_code == 422

    def test_patch_errors(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        assert (
            client.patch("/api/skills/999", json={"name": "Go"}, headers=auth_headers).status_code
            == 404
        )
        skill = client.post(
            "/api/skills", json={"name": "Go", "category": "Languages"}, headers=auth_headers
        ).json()
        assert skill["proficiency_level"] == 3

        cleared = client.patch(
            f"/api/skills/{skill['id']}", json={"name": ""}, headers=auth_headers
        )
        assert cleared.status_code == 422
        assert client.delete("/api/skills/999", headers=auth_headers).status_code == 404

    @pytest.mark.parametrize(
        ("path", "base"),
        [
            ("/api/experience", {"company": "Acme", "position": "Engineer"}),
            ("/api/education", {"institution": "MIT", "degree": "BSc"}),
        ],
        ids=["experience", "education"],
    )
    def test_patch_checks_dates_against_stored_row(
        self, client: TestClient, auth_headers: dict[str, str], path: str, base: dict
    ) -> None:
        started = client.post(
            path, json={**base, "start_date": "2022-01-01"}, headers=auth_headers
        ).json()
        backwards = client.patch(
            f"{path}/{started['id']}", json={"end_date": "2020-01-01"}, headers=auth_headers
        )
        assert backwards.status_code == 400
        stored = client.get(f"{path}/{started['id']}", headers=auth_headers).json()
        assert stored["end_date"] is None

        current = client.post(
            path,
            json={**base, "start_date": "2022-01-01", "is_current": True},
            headers=auth_headers,
        ).json()
        patched = client.patch(
            f"{path}/{current['id']}", json={"end_date": "2023-01-01"}, headers=auth_headers
        )
        assert patched.status_code == 200
        assert patched.json()["is_current"] is True
        assert patched.json()["end_date"] is None

    def test_skills_ordered_by_category(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        for name, category in [("Docker", "Tools"), ("Python", "Languages")]:
            client.post(
                "/api/skills", json={"name": name, "category": category}, headers=auth_headers
            )
        names = [row["name"] for row in client.get("/api/skills", headers=auth_headers).json()]
        assert names == ["Python", "Docker"]


class TestMessagesAndContact:
    def test_contact_is_public_and_defaults_subject(self, client: TestClient) -> None:
        response = client.post(
            "/api/contact", json={"name": "Ann", "email": "ann@example.com", "message": "Hi"}
        )
        assert response.status_code == 201
        assert response.json()["subject"] == DEFAULT_SUBJECT
        assert response.json()["read"] is False

    def test_contact_rejects_bad_email(self, client: TestClient) -> None:
        response = client.post(
            "/api/contact", json={"name": "Ann", "email": "ann", "message": "Hi"}
        )
        assert response.status_code == 422

    def test_read_and_delete(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        message_id = client.post(
            "/api/contact",
            json={"name": "Ann", "email": "ann@example.com", "subject": "Job", "message": "Hi"},
        ).json()["id"]

        listed = client.get("/api/messages", headers=auth_headers).json()
        assert [(m["id"], m["read"]) for m in listed] == [(message_id, False)]

        read = client.post(f"/api/messages/{message_id}/read", headers=auth_headers)
        assert read.status_code == 200
        assert read.json()["read"] is True
        again = client.post(f"/api/messages/{message_id}/read", headers=auth_headers)
        assert again.json()["read"] is True

        assert client.get(f"/api/messages/{message_id}", headers=auth_headers).json()["read"]
        assert client.delete(f"/api/messages/{message_id}", headers=auth_headers).status_code == 204
        assert client.get("/api/messages", headers=auth_headers).json() == []
        assert client.post("/api/messages/999/read", headers=auth_headers).status_code == 404

    def test_messages_newest_first(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        ids = [
            client.post(
                "/api/contact",
                json={"name": name, "email": "x@example.com", "message": "Hi"},
            ).json()["id"]
            for name in ("First", "Second")
        ]
        listed = client.get("/api/messages", headers=auth_headers).json()
        assert [m["id"] for m in listed] == list(reversed(ids))


class TestProfile:
    def test_profile_upsert(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        assert client.get("/api/profile", headers=auth_headers).status_code == 404

        saved = client.put(
            "/api/profile",
            json={"full_name": "Jane Doe", "title": "Engineer"},
            headers=auth_headers,
        )
        assert saved.status_code == 200
        first_id = saved.json()["id"]

        replaced = client.put(
            "/api/profile",
            json={"full_name": "Jane Q. Doe", "website_url": "https://jane.dev"},
            headers=auth_headers,
        )
        assert replaced.json()["id"] == first_id
        assert replaced.json()["website_url"] == "https://jane.dev"

        fetched = client.get("/api/profile", headers=auth_headers).json()
        assert fetched["full_name"] == "Jane Q. Doe"

    def test_profile_validation(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.put(
            "/api/profile", json={"full_name": "J", "email": "nope"}, headers=auth_headers
        )
        assert response.status_code == 422
