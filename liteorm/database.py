"""Async SQLite database handle."""

import logging
import sqlite3
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from liteorm.config import DatabaseConfig
from liteorm.errors import (
    BIND_ERRORS,
    DatabaseNotOpenError,
    DatabaseOpenError,
    OrmError,
    StatementExecuteError,
    classify_error,
)
from liteorm.logger import get_sql_logger

logger = logging.getLogger(__name__)
sql_logger = get_sql_logger()

MEMORY = ":memory:"


class Database:
    """
    Owns a single SQLite connection.

    A handle whose open failed is broken: every later operation is a no-op
    that reports failure. Errors are logged and kept in ``last_error``; the
    public operations never raise engine errors.
    """

    def __init__(self, path: Path | str, foreign_keys: bool = False) -> None:
        self._path = path
        self._foreign_keys = foreign_keys
        self._connection: aiosqlite.Connection | None = None
        self._last_error: OrmError | None = None

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "Database":
        """Build a handle from database settings."""
        return cls(config.path, foreign_keys=config.foreign_keys)

    @property
    def path(self) -> Path | str:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def last_error(self) -> OrmError | None:
        """Most recent error reported through this handle."""
        return self._last_error

    @property
    def connection(self) -> aiosqlite.Connection:
        """Get the active database connection."""
        if self._connection is None:
            raise DatabaseNotOpenError(f"Database not open: {self._path}")
        return self._connection

    async def connect(self) -> bool:
        """Open or create the database file. Returns False if the handle is broken."""
        if self._connection is not None:
            return True
        try:
            if str(self._path) != MEMORY:
                Path(self._path).parent.mkdir(parents=True, exist_ok=True)
            connection = await aiosqlite.connect(self._path)
        except (sqlite3.Error, OSError) as e:
            self.report(DatabaseOpenError(
                f"Error opening DB: {e}",
                getattr(e, "sqlite_errorname", None),
            ))
            return False

        connection.row_factory = aiosqlite.Row
        if self._foreign_keys:
            await connection.execute("PRAGMA foreign_keys=ON")
        self._connection = connection
        logger.info("Database connected: %s", self._path)
        return True

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
            logger.info("Database disconnected")

    async def __aenter__(self) -> "Database":
        await self.connect()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    def report(self, error: OrmError) -> None:
        """Record an error and write it to the diagnostic log."""
        self._last_error = error
        logger.error(
            "%s: %s",
            type(error).__name__,
            error,
            extra={"error_code": error.code} if error.code else None,
        )

    async def execute(self, sql: str) -> bool:
        """Run a parameterless statement script (schema DDL)."""
        if self._connection is None:
            self.report(DatabaseNotOpenError(f"Database not open: {self._path}", statement=sql))
            return False

        sql_logger.debug("execute", extra={"database": str(self._path), "statement": sql})
        try:
            await self._connection.executescript(sql)
        except sqlite3.Error as e:
            self.report(classify_error(e, sql))
            return False
        return True

    @asynccontextmanager
    async def statement(
        self, sql: str, parameters: Sequence = ()
    ) -> AsyncIterator[aiosqlite.Cursor]:
        """
        Prepare, bind and run a statement, yielding its cursor.

        The cursor is closed when the block exits, whichever way it exits.

        Raises:
            DatabaseNotOpenError: The handle is closed or broken
            StatementPrepareError: The statement or its bindings are invalid
            StatementExecuteError: The engine failed while running it
        """
        connection = self.connection
        sql_logger.debug(
            "statement",
            extra={
                "database": str(self._path),
                "statement": sql,
                "parameters": list(parameters),
            },
        )
        try:
            cursor = await connection.execute(sql, parameters)
        except (sqlite3.Error, *BIND_ERRORS) as e:
            raise classify_error(e, sql) from e

        try:
            yield cursor
        except sqlite3.Error as e:
            raise classify_error(e, sql) from e
        finally:
            await cursor.close()

    async def commit(self) -> None:
        """Commit the current transaction."""
        try:
            await self.connection.commit()
        except sqlite3.Error as e:
            raise StatementExecuteError(
                str(e), getattr(e, "sqlite_errorname", None), "COMMIT"
            ) from e
