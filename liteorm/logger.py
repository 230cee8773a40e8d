"""Structured logging configuration."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from liteorm.config import LoggingConfig

SQL_LOGGER_NAME = "liteorm.sql"


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "error_code"):
            log_data["error_code"] = record.error_code

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, ensure_ascii=False)


class SqlFormatter(logging.Formatter):
    """Formatter for statement trace logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event": record.getMessage(),
        }

        for attr in ["database", "statement", "parameters"]:
            if hasattr(record, attr):
                log_data[attr] = getattr(record, attr)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(
    log_dir: Path,
    level: str = "INFO",
    json_format: bool = True,
) -> None:
    """
    Configure logging for the application.

    Creates three log files:
    - app.log: General application logs
    - errors.log: Error logs only
    - sql.log: Statement trace (DEBUG level on the liteorm.sql logger)

    Engine errors also go to stderr, the diagnostic stream.

    Args:
        log_dir: Directory for log files
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatting if True
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level))

    root_logger.handlers.clear()

    if json_format:
        app_formatter = JsonFormatter()
    else:
        app_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(app_formatter)
    root_logger.addHandler(console_handler)

    app_handler = logging.FileHandler(log_dir / "app.log")
    app_handler.setLevel(logging.DEBUG)
    app_handler.setFormatter(app_formatter)
    root_logger.addHandler(app_handler)

    error_handler = logging.FileHandler(log_dir / "errors.log")
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(app_formatter)
    root_logger.addHandler(error_handler)

    sql_logger = logging.getLogger(SQL_LOGGER_NAME)
    sql_logger.setLevel(logging.DEBUG if level == "DEBUG" else logging.INFO)
    sql_logger.propagate = False
    sql_logger.handlers.clear()

    sql_handler = logging.FileHandler(log_dir / "sql.log")
    sql_handler.setLevel(logging.DEBUG)
    if json_format:
        sql_handler.setFormatter(SqlFormatter())
    else:
        sql_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    sql_logger.addHandler(sql_handler)

    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_sql_logger() -> logging.Logger:
    """Get the statement trace logger."""
    return logging.getLogger(SQL_LOGGER_NAME)


def setup_logging_from(config: LoggingConfig) -> None:
    """Configure logging from the logging section of the settings."""
    setup_logging(config.log_dir, config.level, config.json_format)
