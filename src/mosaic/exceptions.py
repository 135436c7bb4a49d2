"""Mosaic exceptions."""

from pathlib import Path

from jinja2 import TemplateRuntimeError


class MosaicError(Exception):
    """Base exception for Mosaic errors."""


class ConfigurationError(MosaicError):
    """Raised when a helper is created with invalid options.

    Raised at setup time, before any environment is touched.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        """Initialize with error message and the offending option key."""
        super().__init__(message)
        self.key: str | None = key


class DirectiveError(MosaicError, TemplateRuntimeError):
    """Base exception for errors raised while a directive renders.

    Subclasses Jinja2's TemplateRuntimeError so failures surface through
    ``Template.render`` like any other engine error. The message is prefixed
    with the directive name.
    """

    def __init__(self, directive: str, message: str) -> None:
        """Initialize with the directive name and the underlying message."""
        super().__init__(f"{directive}: {message}")
        self.directive: str = directive


class DirectiveUsageError(DirectiveError):
    """Raised when a directive is called with an invalid argument."""


class ResolutionError(DirectiveError):
    """Raised when a partial file cannot be read, parsed or compiled."""

    def __init__(self, directive: str, message: str, *, path: Path) -> None:
        """Initialize with the path of the partial that failed."""
        super().__init__(directive, message)
        self.path: Path = path


class DataLoadError(DirectiveError):
    """Raised when a partial's data file exists but cannot be loaded."""

    def __init__(self, directive: str, message: str, *, path: Path) -> None:
        """Initialize with the path of the data file that failed."""
        super().__init__(directive, message)
        self.path: Path = path
