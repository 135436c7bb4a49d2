"""The ``partial`` directive: context-aware partials with file-backed caching."""

from collections.abc import Callable, Mapping

from jinja2 import Environment, nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from jinja2.runtime import Context, Undefined
from markupsafe import Markup
from structlog.typing import FilteringBoundLogger

from mosaic.config import PartialConfig
from mosaic.exceptions import DirectiveUsageError
from mosaic.templating import (
    PARTIAL_DIRECTIVE,
    SCOPE_VARIABLE,
    PartialResolver,
    install_root_frame,
)
from mosaic.utils import create_logger


class PartialExtension(Extension):
    """Extension for ``{% partial name [, context] %}`` tags.

    Renders the named partial through the resolver bound to the environment
    by ``partial()``. Without an explicit context, the partial receives a
    copy of the variables visible at the call site.

    Example:
        {% partial "cards/summary", {"title": page.title} %}
    """

    tags = {"partial"}  # noqa: RUF012

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        environment.extend(partial_resolver=None)

    def parse(self, parser: Parser) -> nodes.Node:
        """Parse the partial name and optional context expressions."""
        lineno = next(parser.stream).lineno

        name = parser.parse_expression()
        if parser.stream.current.type != "block_end":
            _ = parser.stream.skip_if("comma")
            context: nodes.Expr = parser.parse_expression()
        else:
            context = nodes.DerivedContextReference()

        call = self.call_method(
            "_render_partial",
            [name, context, nodes.Name(SCOPE_VARIABLE, "load")],
        )
        return nodes.Output([call]).set_lineno(lineno)

    def _render_partial(self, name: object, context: object, scope: object) -> Markup:
        resolver: PartialResolver | None = getattr(
            self.environment, "partial_resolver", None
        )
        if resolver is None:
            raise DirectiveUsageError(PARTIAL_DIRECTIVE, "No partial resolver is registered")

        if isinstance(context, Context):
            context = {
                key: value
                for key, value in context.get_all().items()
                if key != SCOPE_VARIABLE
            }
        elif isinstance(context, Undefined):
            context = None

        return resolver.render(name, context, scope)


def partial(
    config: PartialConfig | Mapping[str, object] | None = None,
    /,
    *,
    logger: FilteringBoundLogger | None = None,
    **options: object,
) -> Callable[[Environment], PartialResolver]:
    """Create a tailored ``partial`` registration function.

    Options are validated here, before any environment exists. Every
    application of the returned function creates a resolver with its own
    cache.

    Args:
        config: A PartialConfig or an options mapping (snake_case or camelCase
            keys). Keyword options override its values.
        logger: Logger for resolver events. Defaults to a stderr logger whose
            level comes from MOSAIC_LOG_LEVEL.
        **options: ``base``, ``cwd``, ``data_extension``,
            ``partial_extension``.

    Returns:
        The registration function. It returns the resolver it bound to the
        environment.

    Raises:
        ConfigurationError: If ``base`` is missing or an option is invalid.

    Example:
        from mosaic.helpers import partial

        register = partial(base="source/partials")
        resolver = register(env)
    """
    if isinstance(config, PartialConfig):
        values: dict[str, object] = config.model_dump()
    else:
        values = dict(config or {})
    values.update(options)
    partial_config = PartialConfig.from_options(values)

    resolver_logger = (
        logger if logger is not None else create_logger(directive=PARTIAL_DIRECTIVE)
    )

    def register(environment: Environment) -> PartialResolver:
        resolver = PartialResolver(environment, partial_config, logger=resolver_logger)
        environment.add_extension(PartialExtension)
        environment.partial_resolver = resolver  # type: ignore[attr-defined]
        install_root_frame(environment)
        return resolver

    return register
