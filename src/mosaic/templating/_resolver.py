"""Partial resolution, caching, and rendering."""

from collections.abc import Mapping, MutableMapping
from pathlib import Path

from jinja2 import Environment, TemplateSyntaxError
from markupsafe import Markup
from pydantic import BaseModel
from structlog.typing import FilteringBoundLogger

from mosaic.config import PartialConfig
from mosaic.exceptions import DataLoadError, DirectiveUsageError, ResolutionError

from ._cache import PartialCache, PartialRecord
from ._data import (
    DataFound,
    DataMapping,
    DataNotFound,
    DataReadFailure,
    load_data_file,
    merge_data,
)
from ._frontmatter import load_frontmatter_file
from ._scope import SCOPE_VARIABLE, create_frame

PARTIAL_DIRECTIVE = "partial"


class PartialResolver:
    """Resolves named partials to compiled templates and renders them.

    Each resolver owns its cache. Records are loaded on first use of a name
    and reused for the lifetime of the resolver without touching the
    filesystem again.

    Attributes:
        environment: Host environment partial bodies are compiled with.
        config: Partial directive options.
        cache: Compiled partials keyed by name.
    """

    def __init__(
        self,
        environment: Environment,
        config: PartialConfig,
        *,
        logger: FilteringBoundLogger,
        cache: PartialCache | None = None,
    ) -> None:
        self.environment: Environment = environment
        self.config: PartialConfig = config
        self.cache: PartialCache = cache if cache is not None else PartialCache()
        self._logger: FilteringBoundLogger = logger

    def _load_external_data(self, data_path: Path) -> DataMapping:
        result = load_data_file(data_path)
        if isinstance(result, DataFound):
            return result.data
        if isinstance(result, DataNotFound):
            self._logger.debug("partial_data_not_found", path=str(data_path))
            return {}

        message = str(result.error) if isinstance(result, DataReadFailure) else result.message
        self._logger.error("partial_data_load_failed", path=str(data_path), error=message)
        raise DataLoadError(PARTIAL_DIRECTIVE, message, path=data_path)

    def resolve(self, name: str) -> PartialRecord:
        """Load, parse, compile and cache a partial.

        Reads ``{cwd}/{base}/{name}{partial_extension}`` and the optional
        ``{cwd}/{base}/{name}{data_extension}``. Data file values override
        front matter values with the same key.

        Args:
            name: Partial name, may contain path separators.

        Returns:
            The cached record for ``name``.

        Raises:
            ResolutionError: If the partial file cannot be read, its front
                matter is malformed, or its body does not compile.
            DataLoadError: If the data file exists but cannot be loaded.
        """
        # An absolute name would replace the root in a pathlib join.
        filepath = self.config.root / name.lstrip("/")
        partial_path = Path(f"{filepath}{self.config.partial_extension}")
        data_path = Path(f"{filepath}{self.config.data_extension}")

        try:
            document = load_frontmatter_file(partial_path, strict=True)
        except (OSError, ValueError) as e:
            self._logger.error(
                "partial_resolution_failed", name=name, path=str(partial_path), error=str(e)
            )
            raise ResolutionError(PARTIAL_DIRECTIVE, str(e), path=partial_path) from e

        external_data = self._load_external_data(data_path)

        try:
            template = self.environment.from_string(document.body)
        except TemplateSyntaxError as e:
            self._logger.error(
                "partial_resolution_failed", name=name, path=str(partial_path), error=str(e)
            )
            raise ResolutionError(PARTIAL_DIRECTIVE, str(e), path=partial_path) from e

        record = PartialRecord(
            name=name,
            path=partial_path,
            raw_content=document.content,
            body=document.body,
            front_matter=document.data,
            external_data=external_data,
            data=merge_data(document.data, external_data),
            template=template,
        )
        self._logger.info(
            "partial_resolved",
            name=name,
            path=str(partial_path),
            data_keys=sorted(record.data),
        )
        return self.cache.add(record)

    def get(self, name: str) -> PartialRecord:
        """Return the cached record for ``name``, resolving it on a miss."""
        record = self.cache.get(name)
        if record is not None:
            self._logger.debug("partial_cache_hit", name=name)
            return record
        return self.resolve(name)

    def render(
        self,
        name: object,
        context: object = None,
        scope: object = None,
    ) -> Markup:
        """Render a partial with a caller-supplied context.

        The partial's data is written into ``context`` under ``file.data``,
        mutating the caller's mapping in place. Repeated calls sharing one
        mapping overwrite the same ``file`` key. ``None`` becomes a fresh dict
        and pydantic models are dumped to a fresh dict.

        If ``scope`` is a mapping, the partial renders with a child scope frame
        exposing ``base`` (the context as passed in), ``name`` and ``path``.

        Args:
            name: Partial name.
            context: Render context for the partial.
            scope: Active scope metadata of the caller.

        Returns:
            Rendered partial, marked safe so it is not escaped again.

        Raises:
            DirectiveUsageError: If ``name`` is not a string or ``context`` is
                not a mutable mapping. Read-only mappings are rejected because
                the partial's data is written into the context.
            ResolutionError: See resolve().
            DataLoadError: See resolve().
        """
        if not isinstance(name, str):
            raise DirectiveUsageError(PARTIAL_DIRECTIVE, "Name must be defined")

        if context is None:
            context = {}
        elif isinstance(context, BaseModel):
            context = context.model_dump()
        if not isinstance(context, MutableMapping):
            raise DirectiveUsageError(PARTIAL_DIRECTIVE, "Context must be a mutable mapping")

        record = self.get(name)

        frame = create_frame(
            scope,
            {"base": context, "name": record.name, "path": record.path},
        )

        # Mutate context with partial data
        context["file"] = {"data": dict(record.data)}

        variables: Mapping[str, object] = context
        if frame is not None:
            variables = {**context, SCOPE_VARIABLE: frame}

        return Markup(record.template.render(variables))  # noqa: S704
