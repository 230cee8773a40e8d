"""Minimal object-relational mapping over SQLite."""

from liteorm.app import open_database
from liteorm.database import Database
from liteorm.models import Book, Record, User
from liteorm.repository import Repository

__all__ = ["Book", "Database", "Record", "Repository", "User", "open_database"]
