"""Mosaic configuration.

Pydantic models for the options accepted by the directive factories and the
logging setup.

Example:
    >>> from mosaic.config import PartialConfig
    >>> config = PartialConfig.from_options({"base": "source/partials"})
    >>> config.partial_extension
    '.hbs'
"""

from mosaic.exceptions import ConfigurationError

from ._common import LogFormat, LogLevel
from ._defaults import (
    DEFAULT_DATA_EXTENSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PARTIAL_EXTENSION,
)
from ._logging import LoggingConfig
from ._partial import PartialConfig

__all__ = [
    "DEFAULT_DATA_EXTENSION",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PARTIAL_EXTENSION",
    "ConfigurationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PartialConfig",
]
