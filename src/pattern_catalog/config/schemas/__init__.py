"""Configuration schemas package."""

from .app_schema import (
    AppConfig,
    EventsConfig,
    OutputConfig,
    OutputFormat,
    RunnerConfig,
    validate_config,
)
from .logging_schema import FileLoggingConfig, LogDestination, LoggingConfig, LogLevel

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Sections
    "OutputConfig",
    "OutputFormat",
    "RunnerConfig",
    "EventsConfig",
    # Logging configuration
    "LoggingConfig",
    "FileLoggingConfig",
    "LogLevel",
    "LogDestination",
]
