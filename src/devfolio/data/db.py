"""Database engine and transaction scope for devfolio.

The site keeps its content (profile, experience, education, skills, the
contact inbox) and admin accounts in one SQLite file next to the project,
or wherever ``DB_URL`` points. The engine is created on first use and
creates any missing tables at that point, so a fresh checkout works with
no setup step. Every table operation runs inside one ``get_session()``
block, which is one transaction.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """Declarative base shared by every devfolio table."""


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_database_url() -> str:
    """Return ``DB_URL`` if set, else the SQLite file at the project root."""
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url

    db_path = Path(__file__).resolve().parents[3] / "database.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(get_database_url(), future=True)
        # Registers every model on Base.metadata.
        from devfolio.data import models  # noqa: F401

        Base.metadata.create_all(bind=_engine)
    return _engine


def _get_session_factory() -> sessionmaker[Session]:
    global _SessionLocal
    if _SessionLocal is None:
        # Rows are turned into dicts before the session closes; nothing
        # needs reloading after commit.
        _SessionLocal = sessionmaker(bind=_get_engine(), autoflush=False, expire_on_commit=False)
    return _SessionLocal


def init_db() -> None:
    """Create the engine and any missing tables now rather than on first query."""
    _get_engine()


def dispose_engine() -> None:
    """Close pooled connections and forget the engine.

    The next database access builds a new engine from the current ``DB_URL``.
    """
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Run the enclosed block as one transaction: commit on success, roll back on error."""
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
