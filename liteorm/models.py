"""Record contract and the mapped record types."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from liteorm.errors import StatementPrepareError


class Record(ABC):
    """
    Abstract base class for types stored by a Repository.

    A record's fields map 1:1 to its table's columns in a fixed order. The
    statement templates use positional placeholders, and the binders
    (``insert_values`` / ``update_values``) must return values in exactly the
    order the templates expect; a mismatch writes values into the wrong
    columns without any error from the engine.

    To map a new type:
    1. Inherit from Record (usually as a dataclass with an ``id`` field)
    2. Implement the table name, schema and insert template
    3. Implement ``insert_values`` and ``from_row``
    4. Optionally implement ``update_sql`` and ``update_values``
    """

    @classmethod
    @abstractmethod
    def table_name(cls) -> str:
        """Name of the backing table."""
        ...

    @classmethod
    def primary_key(cls) -> str:
        """Name of the primary key column."""
        return "id"

    @classmethod
    @abstractmethod
    def create_table_sql(cls) -> str:
        """Idempotent DDL for the backing table."""
        ...

    @classmethod
    @abstractmethod
    def insert_sql(cls) -> str:
        """Insert template; the primary key is left to the engine."""
        ...

    @classmethod
    def update_sql(cls) -> str | None:
        """Update template ending in ``WHERE <pk>=?``, or None if unsupported."""
        return None

    @abstractmethod
    def insert_values(self) -> tuple:
        """Values in insert-template order, primary key excluded."""
        ...

    def update_values(self) -> tuple:
        """Non-key values followed by the primary key."""
        raise StatementPrepareError(f"{type(self).__name__} has no update binder")

    @classmethod
    @abstractmethod
    def from_row(cls, row: Sequence[Any]) -> "Record":
        """Build a record from a row in table column order."""
        ...

    @property
    def key(self) -> int:
        return getattr(self, self.primary_key())

    @key.setter
    def key(self, value: int) -> None:
        setattr(self, self.primary_key(), value)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    return 0 if value is None else int(value)


@dataclass
class User(Record):
    """A person; id 0 means not yet saved."""

    name: str = ""
    age: int = 0
    id: int = 0

    @classmethod
    def table_name(cls) -> str:
        return "users"

    @classmethod
    def create_table_sql(cls) -> str:
        return (
            "CREATE TABLE IF NOT EXISTS users("
            "id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT, age INT);"
        )

    @classmethod
    def insert_sql(cls) -> str:
        return "INSERT INTO users(name, age) VALUES(?, ?);"

    @classmethod
    def update_sql(cls) -> str:
        return "UPDATE users SET name=?, age=? WHERE id=?;"

    def insert_values(self) -> tuple:
        return (self.name, self.age)

    def update_values(self) -> tuple:
        return (self.name, self.age, self.id)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "User":
        return cls(id=_int(row[0]), name=_text(row[1]), age=_int(row[2]))


@dataclass
class Book(Record):
    """A book owned by a user (one user, many books)."""

    title: str = ""
    user_id: int = 0
    id: int = 0

    @classmethod
    def table_name(cls) -> str:
        return "books"

    @classmethod
    def create_table_sql(cls) -> str:
        return (
            "CREATE TABLE IF NOT EXISTS books("
            "id INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT, user_id INT, "
            "FOREIGN KEY(user_id) REFERENCES users(id));"
        )

    @classmethod
    def insert_sql(cls) -> str:
        return "INSERT INTO books(title, user_id) VALUES(?, ?);"

    @classmethod
    def update_sql(cls) -> str:
        return "UPDATE books SET title=?, user_id=? WHERE id=?;"

    def insert_values(self) -> tuple:
        return (self.title, self.user_id)

    def update_values(self) -> tuple:
        return (self.title, self.user_id, self.id)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Book":
        return cls(id=_int(row[0]), title=_text(row[1]), user_id=_int(row[2]))
