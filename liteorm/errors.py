"""Normalized database error types."""

import sqlite3

# Substrings of engine messages raised while compiling or binding a statement.
_PREPARE_MARKERS = (
    "syntax error",
    "incomplete input",
    "no such table",
    "no such column",
    "has no column named",
    "unrecognized token",
)


class OrmError(Exception):
    """Base class for all persistence errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        statement: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.statement = statement


class DatabaseOpenError(OrmError):
    """The database file could not be opened."""

    pass


class DatabaseNotOpenError(OrmError):
    """Operation attempted on a handle that is closed or failed to open."""

    pass


class StatementPrepareError(OrmError):
    """Statement could not be compiled or its parameters could not be bound."""

    pass


class StatementExecuteError(OrmError):
    """Statement compiled but failed while running."""

    pass


# Raised by the sqlite3 module while converting Python values to SQLite values.
BIND_ERRORS = (OverflowError, UnicodeEncodeError)


def classify_error(exc: Exception, statement: str | None = None) -> OrmError:
    """Map a sqlite3 exception or a binding failure onto the error taxonomy."""
    message = str(exc)
    code = getattr(exc, "sqlite_errorname", None)

    if isinstance(exc, (sqlite3.ProgrammingError, sqlite3.InterfaceError, *BIND_ERRORS)):
        return StatementPrepareError(message, code, statement)
    if isinstance(exc, sqlite3.OperationalError):
        lowered = message.lower()
        if lowered.startswith("near ") or any(m in lowered for m in _PREPARE_MARKERS):
            return StatementPrepareError(message, code, statement)
    return StatementExecuteError(message, code, statement)
