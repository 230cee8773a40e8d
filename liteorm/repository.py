"""Generic data access for Record types."""

import logging
from typing import Generic, TypeVar

from liteorm.database import Database
from liteorm.errors import OrmError, StatementPrepareError
from liteorm.models import Record

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class Repository(Generic[R]):
    """
    CRUD operations for one record type against one Database.

    Holds no state besides the handle and the record class; every call goes
    to storage. Engine failures are logged and stored on the handle's
    ``last_error``, and the call returns its failure value instead of raising.

    Build repositories with ``await Repository.create(db, User)``, which
    issues the CREATE TABLE IF NOT EXISTS statement as part of construction.
    The plain constructor only binds the handle and record class; a caller
    using it directly must await ``ensure_table()`` before other operations.
    """

    def __init__(self, db: Database, model: type[R]) -> None:
        self._db = db
        self._model = model

    @classmethod
    async def create(cls, db: Database, model: type[R]) -> "Repository[R]":
        """Build a repository and ensure its table exists."""
        repository = cls(db, model)
        await repository.ensure_table()
        return repository

    @property
    def model(self) -> type[R]:
        return self._model

    async def ensure_table(self) -> bool:
        """Issue the record type's CREATE TABLE IF NOT EXISTS statement."""
        ok = await self._db.execute(self._model.create_table_sql())
        if ok:
            logger.debug("Table ensured: %s", self._model.table_name())
        return ok

    async def save(self, record: R) -> bool:
        """
        Insert a record.

        On success the engine-assigned primary key is written onto the record.

        Returns:
            True if exactly one row was written
        """
        try:
            async with self._db.statement(
                self._model.insert_sql(), record.insert_values()
            ) as cursor:
                written = cursor.rowcount == 1
                row_id = cursor.lastrowid
            await self._db.commit()
        except OrmError as e:
            self._db.report(e)
            return False

        if written and row_id is not None:
            record.key = row_id
        return written

    async def load_all(self) -> list[R]:
        """Get every row of the table in engine order."""
        sql = f"SELECT * FROM {self._model.table_name()};"
        try:
            async with self._db.statement(sql) as cursor:
                rows = await cursor.fetchall()
        except OrmError as e:
            self._db.report(e)
            return []
        return [self._model.from_row(row) for row in rows]

    async def find_by_id(self, record_id: int, default: R | None = None) -> R | None:
        """
        Get a record by primary key.

        Args:
            record_id: Primary key value
            default: Returned when no row matches (or the lookup fails)

        Returns:
            The matching record, else ``default``
        """
        sql = (
            f"SELECT * FROM {self._model.table_name()} "
            f"WHERE {self._model.primary_key()}=?;"
        )
        try:
            async with self._db.statement(sql, (record_id,)) as cursor:
                row = await cursor.fetchone()
        except OrmError as e:
            self._db.report(e)
            return default
        return self._model.from_row(row) if row is not None else default

    async def update(self, record: R) -> bool:
        """
        Update an existing record matched by primary key.

        Success means the statement ran; an update matching no row still
        returns True.
        """
        sql = self._model.update_sql()
        try:
            if sql is None:
                raise StatementPrepareError(
                    f"{self._model.__name__} has no update statement"
                )
            async with self._db.statement(sql, record.update_values()):
                pass
            await self._db.commit()
        except OrmError as e:
            self._db.report(e)
            return False
        return True

    async def delete_by_id(self, record_id: int) -> bool:
        """Delete a record by primary key. Returns True if the statement completed."""
        sql = (
            f"DELETE FROM {self._model.table_name()} "
            f"WHERE {self._model.primary_key()}=?;"
        )
        try:
            async with self._db.statement(sql, (record_id,)):
                pass
            await self._db.commit()
        except OrmError as e:
            self._db.report(e)
            return False
        return True
