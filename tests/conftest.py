"""Shared fixtures for liteorm tests."""

import logging

import pytest
import pytest_asyncio

from liteorm.database import Database
from liteorm.logger import get_sql_logger
from liteorm.models import Book, User
from liteorm.repository import Repository


@pytest_asyncio.fixture
async def db(tmp_path):
    database = Database(tmp_path / "test.db")
    await database.connect()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def users(db):
    return await Repository.create(db, User)


@pytest_asyncio.fixture
async def books(db, users):
    return await Repository.create(db, Book)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    sql_logger = get_sql_logger()
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for handler in sql_logger.handlers:
        handler.close()
    sql_logger.handlers.clear()
    sql_logger.propagate = True
    sql_logger.setLevel(logging.NOTSET)
