"""Main application configuration schema."""
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError, field_validator

from pattern_catalog.domain.exceptions import ConfigurationError

from .logging_schema import LoggingConfig


class OutputFormat(str, Enum):
    """CLI output formats."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: OutputFormat = Field(OutputFormat.TEXT, description="Default output format")
    width: int = Field(120, description="Console width used for table output")

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        if v < 40:
            raise ValueError("Console width must be at least 40")
        return v


class RunnerConfig(BaseModel):
    """Demo runner configuration."""

    fail_fast: bool = Field(False, description="Stop after the first failed demo")
    disabled: List[str] = Field(default_factory=list, description="Pattern names skipped by 'run all'")


class EventsConfig(BaseModel):
    """Demo lifecycle event configuration."""

    enabled: bool = Field(True, description="Publish demo lifecycle events")
    mode: str = Field("logging", description="Publishing mode: logging or sync")

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        valid_modes = ["logging", "sync"]
        if v not in valid_modes:
            raise ValueError(f"Invalid mode '{v}'. Must be one of: {valid_modes}")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)
    debug: bool = Field(False, description="Debug mode")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Build a validated configuration, wrapping pydantic errors."""
        return validate_config(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Raises:
        ConfigurationError: If any field is invalid
    """
    try:
        return AppConfig.model_validate(data or {})
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
