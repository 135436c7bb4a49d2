"""Default configuration values."""

DEFAULT_DATA_EXTENSION = ".json"
DEFAULT_PARTIAL_EXTENSION = ".hbs"
DEFAULT_LOG_LEVEL = "warning"
