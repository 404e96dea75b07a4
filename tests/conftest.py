from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import devfolio.data.db as app_db
from devfolio.data.db import dispose_engine, init_db
from devfolio.data.models import Base
from devfolio.services import auth


@pytest.fixture
def tmp_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point the session factory at a fresh temporary SQLite database."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(app_db, "_engine", engine)
    monkeypatch.setattr(
        app_db, "_SessionLocal", sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    )
    yield
    engine.dispose()


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a temporary SQLite DB for API and page tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    dispose_engine()
    init_db()
    yield
    dispose_engine()


@pytest.fixture(autouse=True)
def _reset_auth_listeners() -> Iterator[None]:
    yield
    auth._listeners.clear()


@pytest.fixture(autouse=True)
def _api_db_for_api_and_page_tests(request: pytest.FixtureRequest) -> None:
    """Automatically add the api_db fixture to tests in API and page test files."""
    stem = Path(str(request.node.fspath)).stem.lower()
    if "api" in stem or "pages" in stem:
        request.getfixturevalue("api_db")
