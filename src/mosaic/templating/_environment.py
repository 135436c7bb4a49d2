"""Jinja2 Environment factory."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

type HelperRegistration = Callable[[Environment], object]


@dataclass(slots=True, frozen=True)
class EnvironmentConfig:
    """Configuration for Jinja2 Environment.

    Attributes:
        autoescape: Enable autoescaping (default: False for text templates).
        trim_blocks: Remove first newline after a block tag.
        lstrip_blocks: Strip leading whitespace before block tags.
        keep_trailing_newline: Preserve trailing newline in templates.
    """

    autoescape: bool = False
    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = True


def create_environment(
    search_paths: Iterable[Path] = (),
    *,
    config: EnvironmentConfig | None = None,
    helpers: Iterable[HelperRegistration] = (),
) -> Environment:
    """Create a Jinja2 Environment and register helpers on it.

    Args:
        search_paths: Directories for the FileSystemLoader, highest precedence
            first. No loader is configured when empty.
        config: Optional environment configuration. If None, uses defaults.
        helpers: Helper registration functions, applied in order.

    Returns:
        Configured Jinja2 Environment.

    Example:
        from mosaic.helpers import defining, partial
        from mosaic.templating import create_environment

        env = create_environment(
            helpers=[defining(), partial(base="source/partials")],
        )
        result = env.from_string('{% partial "card" %}').render()
    """
    paths = [str(p) for p in search_paths]

    if config is None:
        config = EnvironmentConfig()

    env = Environment(
        loader=FileSystemLoader(paths) if paths else None,
        autoescape=config.autoescape,  # noqa: S701
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        keep_trailing_newline=config.keep_trailing_newline,
    )

    for register in helpers:
        register(env)

    return env
