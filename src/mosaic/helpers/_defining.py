"""The ``defining`` directive: scoped variable injection."""

from collections.abc import Mapping

from jinja2 import Environment, nodes
from jinja2.ext import Extension
from jinja2.parser import Parser

from mosaic.templating import (
    SCOPE_VARIABLE,
    HelperRegistration,
    create_frame,
    install_root_frame,
)


class DefiningExtension(Extension):
    """Extension for ``{% defining %}...{% enddefining %}`` blocks.

    Binds ``scope`` to a child frame carrying the given values for the body
    of the block only. Siblings and the parent template keep the original
    frame.

    Example:
        {% defining title="Home", depth=2 %}
          {{ scope.title }} at depth {{ scope.depth }}
        {% enddefining %}
    """

    tags = {"defining"}  # noqa: RUF012

    def parse(self, parser: Parser) -> nodes.Node:
        """Parse the tag's key=value pairs and its body."""
        lineno = next(parser.stream).lineno

        pairs: list[nodes.Pair] = []
        while parser.stream.current.type != "block_end":
            if pairs:
                _ = parser.stream.skip_if("comma")
            key = parser.stream.expect("name")
            _ = parser.stream.expect("assign")
            value = parser.parse_expression()
            pairs.append(nodes.Pair(nodes.Const(key.value), value, lineno=key.lineno))

        body = parser.parse_statements(("name:enddefining",), drop_needle=True)

        frame = self.call_method(
            "_define",
            [nodes.Name(SCOPE_VARIABLE, "load"), nodes.Dict(pairs)],
        )
        return nodes.With(
            [nodes.Name(SCOPE_VARIABLE, "store")],
            [frame],
            body,
        ).set_lineno(lineno)

    def _define(self, scope: object, values: Mapping[str, object]) -> object:
        """Derive the frame the block body renders with.

        Returns the active scope unchanged when there is no scope metadata or
        no values to set.
        """
        if not values:
            return scope
        frame = create_frame(scope, values)
        return scope if frame is None else frame


def register_defining(environment: Environment) -> None:
    """Register the ``defining`` directive on an environment.

    Args:
        environment: The environment to register the directive on.
    """
    environment.add_extension(DefiningExtension)
    install_root_frame(environment)


def defining() -> HelperRegistration:
    """Return the ``defining`` registration function.

    Takes no options; provided for symmetry with ``partial()``.
    """
    return register_defining
