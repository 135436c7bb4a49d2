"""Shared test fixtures for Mosaic tests."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import orjson
import pytest
import structlog
from structlog.testing import CapturingLogger
from structlog.typing import FilteringBoundLogger


@dataclass(frozen=True, slots=True)
class PartialsProject:
    """Paths for a project with a partials directory."""

    cwd: Path
    base: str
    partials_dir: Path


WritePartialFunc = Callable[..., Path]


@pytest.fixture
def capturing_logger() -> CapturingLogger:
    """Return the raw logger that records every call made through `logger`."""
    return CapturingLogger()


@pytest.fixture
def logger(capturing_logger: CapturingLogger) -> FilteringBoundLogger:
    """Create a debug-level logger whose calls are recorded in memory."""
    return structlog.wrap_logger(
        capturing_logger,
        processors=[],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
    )


@pytest.fixture
def partials_project(tmp_path: Path) -> PartialsProject:
    """Create a project directory with an empty partials directory.

    Structure:
        tmp_path/
            source/
                partials/
    """
    partials_dir = tmp_path / "source" / "partials"
    partials_dir.mkdir(parents=True)
    return PartialsProject(cwd=tmp_path, base="source/partials", partials_dir=partials_dir)


@pytest.fixture
def write_partial(partials_project: PartialsProject) -> WritePartialFunc:
    """Return a function that writes a partial and its optional data file."""

    def _write(
        name: str,
        content: str,
        data: dict[str, object] | None = None,
        *,
        partial_extension: str = ".hbs",
        data_extension: str = ".json",
    ) -> Path:
        path = partials_project.partials_dir / f"{name}{partial_extension}"
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(content, encoding="utf-8")
        if data is not None:
            data_path = partials_project.partials_dir / f"{name}{data_extension}"
            _ = data_path.write_bytes(orjson.dumps(data))
        return path

    return _write
