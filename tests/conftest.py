import logging
from unittest.mock import Mock

import pytest
import structlog

from pattern_catalog.config.loader import ConfigurationLoader
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.domain.models import PatternCategory, PatternDescriptor
from pattern_catalog.registry.pattern_registry import PatternRegistry, create_pattern_registry


@pytest.fixture
def empty_registry():
    """A registry with nothing registered."""
    return PatternRegistry()


@pytest.fixture
def default_registry():
    """A fresh registry holding the built-in demos."""
    return create_pattern_registry()


@pytest.fixture
def sample_descriptor():
    return PatternDescriptor(
        name="sample",
        category=PatternCategory.BEHAVIORAL,
        description="Sample pattern used in tests",
    )


@pytest.fixture
def failing_demo():
    def demo(write):
        write("about to fail")
        raise RuntimeError("boom")

    return demo


@pytest.fixture
def mock_publisher():
    return Mock()


@pytest.fixture
def isolated_config_manager(tmp_path):
    """Configuration manager that ignores the real environment and working directory."""
    loader = ConfigurationLoader(environ={}, search_dir=str(tmp_path))
    return ConfigurationManager(loader=loader)


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
    root.setLevel(level)
    structlog.reset_defaults()
