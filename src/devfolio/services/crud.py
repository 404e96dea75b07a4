"""Generic CRUD service keyed by table schema.

Every admin data category (experience, education, skills, messages) is the
same list / create / update / delete binding against one table. Instead of
one hand-written module per table, each category builds a ``TableService``
from its table name, its write schemas and its list ordering.

Each operation performs exactly one round trip to the table layer with no
retry. Failures are logged and reported as ``None`` (or ``False`` for
delete); callers only distinguish success from failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ValidationError

from devfolio.data.tables import (
    RowCheck,
    RowRejected,
    TableError,
    delete_rows,
    insert_row,
    select_rows,
    update_rows,
)

logger = logging.getLogger(__name__)

__all__ = ["TableService", "UpdateError"]


class UpdateError(StrEnum):
    """Why an update did not happen."""

    NOT_FOUND = "not_found"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass(frozen=True)
class TableService:
    """CRUD operations for one table.

    Attributes:
        table: Table name as registered in ``data.tables.TABLES``.
        create_schema: Schema validating fields for a new row.
        update_schema: Schema validating a partial update.
        order_by: Column used to order ``list()``.
        descending: Whether ``list()`` is newest/largest first.
        owner_column: Column stamped with the acting user's id on create.
        row_check: Rule applied to the whole row on update, see ``data.tables.update_rows``.
    """

    table: str
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    order_by: str
    descending: bool = False
    owner_column: str | None = None
    row_check: RowCheck | None = None

    def _validate(
        self, schema: type[BaseModel], fields: dict[str, Any], partial: bool
    ) -> dict[str, Any] | None:
        try:
            return schema.model_validate(fields).model_dump(exclude_unset=partial)
        except ValidationError as exc:
            logger.warning("Validation failed for %s: %s", self.table, exc.errors())
            return None

    def list_all(self) -> list[dict[str, Any]] | None:
        """Return every row of the table in display order, or None on failure."""
        try:
            return select_rows(self.table, order_by=self.order_by, descending=self.descending)
        except TableError:
            logger.exception("Failed to list %s", self.table)
            return None

    def get(self, row_id: int) -> dict[str, Any] | None:
        """Return one row by id, or None if missing or on failure."""
        try:
            rows = select_rows(self.table, filters={"id": row_id})
        except TableError:
            logger.exception("Failed to get %s %d", self.table, row_id)
            return None
        return rows[0] if rows else None

    def create(self, fields: dict[str, Any], user_id: int | None = None) -> dict[str, Any] | None:
        """Validate ``fields`` and insert them as a new row.

        Returns:
            The created row including its assigned id, or None on failure.
        """
        values = self._validate(self.create_schema, fields, partial=False)
        if values is None:
            return None
        if self.owner_column is not None and user_id is not None:
            values[self.owner_column] = user_id

        try:
            return insert_row(self.table, values)
        except TableError:
            logger.exception("Failed to create %s", self.table)
            return None

    def try_update(
        self, row_id: int, fields: dict[str, Any]
    ) -> tuple[dict[str, Any] | None, UpdateError | None]:
        """Write only the provided ``fields`` to the row with ``row_id``.

        ``row_check``, when set, runs against the stored row with ``fields``
        applied, inside the same write.

        Returns:
            Tuple of (updated row, error). On success, error is None.
        """
        values = self._validate(self.update_schema, fields, partial=True)
        if values is None:
            return None, UpdateError.INVALID

        try:
            rows = update_rows(self.table, values, {"id": row_id}, check=self.row_check)
        except RowRejected as exc:
            logger.warning("Rejected update of %s %d: %s", self.table, row_id, exc)
            return None, UpdateError.INVALID
        except TableError:
            logger.exception("Failed to update %s %d", self.table, row_id)
            return None, UpdateError.FAILED
        if not rows:
            return None, UpdateError.NOT_FOUND
        return rows[0], None

    def update(self, row_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
        """Like ``try_update``, returning None if the row is missing or the update failed."""
        row, _ = self.try_update(row_id, fields)
        return row

    def delete(self, row_id: int) -> bool:
        """Delete the row with ``row_id``. Returns True if a row was removed."""
        try:
            return delete_rows(self.table, {"id": row_id}) > 0
        except TableError:
            logger.exception("Failed to delete %s %d", self.table, row_id)
            return False
