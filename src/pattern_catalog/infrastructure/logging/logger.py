"""Application logging built on stdlib logging and structlog."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from pattern_catalog.config.schemas.logging_schema import LoggingConfig

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds module, function and line number to every record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """Get a stdlib logger for a module."""
    return logging.getLogger(name)


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger that emits key/value records through stdlib logging."""
    return structlog.get_logger(name)


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up logging for the application.

    Configures the root logger handlers according to ``config.destination``
    and wires structlog to the stdlib logger factory.

    Args:
        config: Logging configuration. Defaults are used when None.

    Returns:
        Configured structlog logger for the package.
    """
    if config is None:
        from pattern_catalog.config.schemas.logging_schema import LoggingConfig

        config = LoggingConfig()

    level_name = config.level.value if hasattr(config.level, "value") else str(config.level)
    destination = config.destination.value if hasattr(config.destination, "value") else str(config.destination)
    formatter = DetailedFormatter(config.format or DEFAULT_LOG_FORMAT)

    handlers: List[logging.Handler] = []

    if destination in ("file", "both"):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if destination in ("stdout", "both"):
        handlers.append(logging.StreamHandler(sys.stdout))
    elif destination == "stderr":
        handlers.append(logging.StreamHandler(sys.stderr))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name.upper()))

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        if handler.formatter is None:
            handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event", "pattern"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = get_structured_logger("pattern_catalog")
    logger.debug(
        "logging_configured",
        log_level=level_name,
        log_destination=destination,
    )
    return logger
