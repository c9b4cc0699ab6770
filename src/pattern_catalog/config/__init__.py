"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    EventsConfig,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    RunnerConfig,
    validate_config,
)
from .loader import ConfigurationLoader
from .manager import ConfigurationManager

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Specific configurations
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "RunnerConfig",
    "EventsConfig",
    # Configuration management
    "ConfigurationLoader",
    "ConfigurationManager",
]
