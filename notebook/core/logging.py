"""
Centralized Logging Configuration.

structlog on top of the standard logging module. Settings come from the
validated logging section of the application config (logging.yaml).

JSON records carry timestamp, level, logger, event, func_name and lineno,
plus whatever the caller passes through extra= or binds with structlog.

Usage:
    from notebook.core.logging import get_logger, setup_logging

    setup_logging()                      # once, at process start
    setup_logging(level="DEBUG")         # keyword arguments override YAML

    logger = get_logger(__name__)
    logger.info("Book deleted", extra={"path": "/journal", "rows": 3})
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.typing import Processor

from notebook.core.config import find_project_root, get_app_config
from notebook.core.config_schema import FileHandlerSchema

# Libraries that are too chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "alembic")


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _formatter(renderer: Processor, pre_chain: list[Processor]) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=pre_chain,
    )


def _file_handler(settings: FileHandlerSchema, formatter: logging.Formatter) -> logging.Handler:
    """Rotating JSONL file, path relative to the project root."""
    log_path = find_project_root() / settings.path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structured logging for the process.

    Replaces any handlers already on the root logger. Arguments left as
    None take their value from logging.yaml.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Console output format, 'json' or 'console'
        enable_console: Write records to stderr
        enable_file_logging: Write JSON records to the rotating log file
    """
    settings = get_app_config().logging
    handlers = settings.handlers

    level = level if level is not None else settings.level
    format_type = format_type if format_type is not None else settings.format
    if enable_console is None:
        enable_console = handlers.console.enabled
    if enable_file_logging is None:
        enable_file_logging = handlers.file.enabled

    pre_chain = _shared_processors()
    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = _formatter(structlog.processors.JSONRenderer(), pre_chain)
    if format_type == "console":
        console_formatter = _formatter(structlog.dev.ConsoleRenderer(colors=True), pre_chain)
    else:
        console_formatter = json_formatter

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if enable_file_logging:
        root_logger.addHandler(_file_handler(handlers.file, json_formatter))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a structlog logger, typically for __name__."""
    return structlog.get_logger(name)
