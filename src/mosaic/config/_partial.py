"""Partial directive configuration model."""

from collections.abc import Mapping
from os import PathLike, fspath
from pathlib import Path
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from mosaic.exceptions import ConfigurationError

from ._defaults import DEFAULT_DATA_EXTENSION, DEFAULT_PARTIAL_EXTENSION


class PartialConfig(BaseModel):
    """Options for the partial directive, fixed at registration time.

    Keys may be given in snake_case or in camelCase (``dataExtension``,
    ``partialExtension``).

    Attributes:
        base: Partials directory, relative to ``cwd``.
        cwd: Working directory the base is joined to. Defaults to the process
            working directory and is always made absolute.
        data_extension: Extension of the optional sidecar data file.
        partial_extension: Extension of the partial template file.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    base: str = Field(min_length=1)
    cwd: Path = Field(default_factory=Path.cwd)
    data_extension: str = DEFAULT_DATA_EXTENSION
    partial_extension: str = DEFAULT_PARTIAL_EXTENSION

    @field_validator("base", mode="before")
    @classmethod
    def _coerce_base(cls, value: object) -> object:
        if isinstance(value, PathLike):
            return fspath(value)  # pyright: ignore[reportUnknownVariableType]
        return value

    @field_validator("cwd", mode="after")
    @classmethod
    def _absolute_cwd(cls, value: Path) -> Path:
        return value.absolute()

    @property
    def root(self) -> Path:
        """Directory partial names are resolved against.

        ``base`` always lands under ``cwd``, even when given with a leading
        separator.
        """
        return self.cwd / self.base.lstrip("/")

    @classmethod
    def from_options(cls, options: Mapping[str, object] | None = None) -> Self:
        """Build a config from an options mapping.

        Args:
            options: Option values keyed by field name or camelCase alias.

        Returns:
            The validated configuration.

        Raises:
            ConfigurationError: If ``base`` is missing or empty, or any other
                option has an invalid value.
        """
        try:
            return cls.model_validate(dict(options or {}))
        except ValidationError as e:
            error = e.errors()[0]
            fields_by_alias = {
                field.alias: name for name, field in cls.model_fields.items()
            }
            loc = str(error["loc"][0]) if error["loc"] else None
            key = fields_by_alias.get(loc, loc) if loc is not None else None
            if key == "base":
                msg = "options.base is required"
            else:
                msg = f"Invalid value for options.{key}: {error['msg']}"
            raise ConfigurationError(msg, key=key) from e
