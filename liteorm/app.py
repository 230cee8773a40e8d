"""Startup wiring from settings to an open database handle."""

import logging

from liteorm.config import Settings, load_settings
from liteorm.database import Database
from liteorm.logger import setup_logging_from

logger = logging.getLogger(__name__)


async def open_database(
    settings: Settings | None = None,
    configure_logging: bool = True,
) -> Database:
    """
    Configure logging and open the database described by the settings.

    The handle is returned even when the open fails; it is then broken and
    every operation on it reports failure.

    Args:
        settings: Settings to use (default: loaded from the environment)
        configure_logging: Install the log handlers from ``settings.logging``

    Returns:
        The database handle
    """
    if settings is None:
        settings = load_settings()

    if configure_logging:
        setup_logging_from(settings.logging)

    db = Database.from_config(settings.database)
    if not await db.connect():
        logger.warning("Continuing with unopened database: %s", db.path)
    return db
