"""Generic table operations addressed by table name.

Every admin screen talks to exactly one table through these helpers:
select with equality filters and ordering, insert, update, delete and
upsert. Each call is one transaction. Failures are raised as TableError so
callers can log them and report a plain failure value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query

from devfolio.data.db import Base, get_session
from devfolio.data.models import ContactMessage, Education, Experience, Profile, Skill

__all__ = [
    "TABLES",
    "RowCheck",
    "RowRejected",
    "TableError",
    "delete_rows",
    "insert_row",
    "row_to_dict",
    "select_rows",
    "update_rows",
    "upsert_row",
]

TABLES: dict[str, type[Base]] = {
    model.__tablename__: model
    for model in (Profile, Experience, Education, Skill, ContactMessage)
}


class TableError(Exception):
    """Raised when a table operation cannot be completed."""


class RowRejected(TableError):
    """Raised when an update would leave a row breaking its own rules."""


RowCheck = Callable[[dict[str, Any]], dict[str, Any]]


def _get_model(table: str) -> type[Base]:
    try:
        return TABLES[table]
    except KeyError:
        raise TableError(f"Unknown table '{table}'") from None


def _column_names(model: type[Base]) -> set[str]:
    return {column.key for column in model.__table__.columns}


def _check_columns(model: type[Base], names: Any) -> None:
    unknown = set(names) - _column_names(model)
    if unknown:
        raise TableError(
            f"Unknown column(s) for {model.__tablename__}: {', '.join(sorted(unknown))}"
        )


def _apply_filters(query: Query, model: type[Base], filters: dict[str, Any] | None) -> Query:
    for column, value in (filters or {}).items():
        query = query.filter(getattr(model, column) == value)
    return query


def row_to_dict(row: Base) -> dict[str, Any]:
    """Convert an ORM row to a plain dictionary of column values."""
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


def select_rows(
    table: str,
    filters: dict[str, Any] | None = None,
    order_by: str | None = None,
    descending: bool = False,
) -> list[dict[str, Any]]:
    """Return all rows matching ``filters``, ordered by ``order_by``.

    Rows with equal sort keys are ordered by id in the same direction.
    """
    model = _get_model(table)
    _check_columns(model, filters or {})
    if order_by is not None:
        _check_columns(model, [order_by])

    try:
        with get_session() as session:
            query = _apply_filters(session.query(model), model, filters)
            if order_by is not None:
                column = getattr(model, order_by)
                query = query.order_by(column.desc() if descending else column.asc())
            query = query.order_by(model.id.desc() if descending else model.id.asc())
            return [row_to_dict(row) for row in query.all()]
    except SQLAlchemyError as exc:
        raise TableError(f"select from {table} failed: {exc}") from exc


def insert_row(table: str, values: dict[str, Any]) -> dict[str, Any]:
    """Insert one row and return it, including its store-assigned id."""
    model = _get_model(table)
    _check_columns(model, values)

    try:
        with get_session() as session:
            row = model(**{k: v for k, v in values.items() if k != "id"})
            session.add(row)
            session.flush()
            return row_to_dict(row)
    except (SQLAlchemyError, ValueError) as exc:
        raise TableError(f"insert into {table} failed: {exc}") from exc


def update_rows(
    table: str,
    values: dict[str, Any],
    filters: dict[str, Any],
    check: RowCheck | None = None,
) -> list[dict[str, Any]]:
    """Set ``values`` on every row matching ``filters`` and return the updated rows.

    Only the given columns are written; all other columns keep their value.
    ``check`` is called with each stored row as it would look after the
    update and returns any further column changes. A ValueError from it, or
    from a model validator, rejects the whole update.
    """
    if not filters:
        raise TableError("update requires at least one filter")
    model = _get_model(table)
    _check_columns(model, values)
    _check_columns(model, filters)

    try:
        with get_session() as session:
            rows = _apply_filters(session.query(model), model, filters).all()
            for row in rows:
                changes = dict(values)
                if check is not None:
                    changes.update(check({**row_to_dict(row), **values}))
                for column, value in changes.items():
                    if column != "id":
                        setattr(row, column, value)
            session.flush()
            return [row_to_dict(row) for row in rows]
    except ValueError as exc:
        raise RowRejected(f"update of {table} rejected: {exc}") from exc
    except SQLAlchemyError as exc:
        raise TableError(f"update of {table} failed: {exc}") from exc


def delete_rows(table: str, filters: dict[str, Any]) -> int:
    """Delete every row matching ``filters`` and return how many were removed."""
    if not filters:
        raise TableError("delete requires at least one filter")
    model = _get_model(table)
    _check_columns(model, filters)

    try:
        with get_session() as session:
            rows = _apply_filters(session.query(model), model, filters).all()
            for row in rows:
                session.delete(row)
            return len(rows)
    except SQLAlchemyError as exc:
        raise TableError(f"delete from {table} failed: {exc}") from exc


def upsert_row(table: str, values: dict[str, Any], conflict_key: str) -> dict[str, Any]:
    """Update the row whose ``conflict_key`` matches, or insert a new one."""
    if conflict_key not in values:
        raise TableError(f"upsert into {table} requires '{conflict_key}'")
    model = _get_model(table)
    _check_columns(model, values)

    try:
        with get_session() as session:
            row = (
                session.query(model)
                .filter(getattr(model, conflict_key) == values[conflict_key])
                .first()
            )
            if row is None:
                row = model()
                session.add(row)
            for column, value in values.items():
                if column != "id":
                    setattr(row, column, value)
            session.flush()
            return row_to_dict(row)
    except (SQLAlchemyError, ValueError) as exc:
        raise TableError(f"upsert into {table} failed: {exc}") from exc
