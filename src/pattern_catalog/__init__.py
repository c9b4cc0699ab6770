"""Pattern Catalog - runnable demonstrations of classic design patterns."""

__version__ = "1.0.0"
VERSION = __version__

PACKAGE_NAME = "pattern-catalog"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
ENV_PREFIX = "PATTERN_CATALOG"

import logging as _logging

# Library default: stay silent until the application configures logging.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())
