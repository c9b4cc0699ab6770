"""Unified configuration management for the application."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pattern_catalog.config.loader import ConfigurationLoader
from pattern_catalog.config.schemas import (
    AppConfig,
    EventsConfig,
    LoggingConfig,
    OutputConfig,
    RunnerConfig,
)
from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is loaded lazily on first access and validated into
    ``AppConfig``. Typed section lookups are cached.
    """

    _SECTION_TYPES: Dict[Type, str] = {
        LoggingConfig: "logging",
        OutputConfig: "output",
        RunnerConfig: "runner",
        EventsConfig: "events",
    }

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader
        self._config_cache: Dict[Type, Any] = {}

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = self.loader.load_configuration(self._config_file)
        config_data = self.loader.apply_environment_overrides(config_data)
        config = AppConfig.from_dict(config_data)
        logger.debug("Configuration loaded (version %s)", config.version)
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    if config_type is AppConfig:
                        value = self.app_config
                    elif config_type in self._SECTION_TYPES:
                        value = getattr(self.app_config, self._SECTION_TYPES[config_type])
                    else:
                        raise TypeError(f"Unknown configuration type: {config_type.__name__}")
                    self._config_cache[config_type] = value
        return self._config_cache[config_type]

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted path, e.g. ``logging.level``."""
        node: Any = self.app_config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> None:
        """Drop cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()
