r"""Mosaic templating internals.

Scope frames, front matter and data file loading, and the partial resolver
and cache behind the ``partial`` directive.

Basic usage:
    from mosaic.config import PartialConfig
    from mosaic.templating import PartialResolver, create_environment
    from mosaic.utils import create_logger

    env = create_environment()
    resolver = PartialResolver(
        env,
        PartialConfig(base="source/partials"),
        logger=create_logger(),
    )

    # Loads source/partials/card.hbs (and card.json, if present) once
    html = resolver.render("card", {"title": "Hello"})
"""

from ._cache import PartialCache, PartialRecord
from ._data import (
    DataFound,
    DataLoadResult,
    DataMapping,
    DataNotFound,
    DataParseFailure,
    DataReadFailure,
    DataValue,
    load_data_file,
    merge_data,
)
from ._environment import EnvironmentConfig, HelperRegistration, create_environment
from ._frontmatter import (
    FrontmatterDocument,
    FrontmatterError,
    load_frontmatter_file,
    parse_frontmatter,
)
from ._resolver import PARTIAL_DIRECTIVE, PartialResolver
from ._scope import SCOPE_VARIABLE, ScopeFrame, create_frame, install_root_frame

__all__ = [
    "PARTIAL_DIRECTIVE",
    "SCOPE_VARIABLE",
    "DataFound",
    "DataLoadResult",
    "DataMapping",
    "DataNotFound",
    "DataParseFailure",
    "DataReadFailure",
    "DataValue",
    "EnvironmentConfig",
    "FrontmatterDocument",
    "FrontmatterError",
    "HelperRegistration",
    "PartialCache",
    "PartialRecord",
    "PartialResolver",
    "ScopeFrame",
    "create_environment",
    "create_frame",
    "install_root_frame",
    "load_data_file",
    "load_frontmatter_file",
    "merge_data",
    "parse_frontmatter",
]
