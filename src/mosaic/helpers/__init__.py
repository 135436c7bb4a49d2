r"""Mosaic directives for Jinja2.

Two directives, each created by a factory that returns a registration
function taking the environment:

* ``defining``: injects values into the ``scope`` frame for a block.
* ``partial``: renders named partials from a directory, with YAML front
  matter, an optional sidecar data file, and per-registration caching.

Basic usage:
    from mosaic.helpers import defining, partial
    from mosaic.templating import create_environment

    env = create_environment(
        helpers=[defining(), partial(base="source/partials")],
    )

    template = env.from_string(
        '{% defining section="docs" %}'
        '{% partial "nav/item", {"label": "Home"} %}'
        "{% enddefining %}"
    )
    html = template.render()

Inside ``source/partials/nav/item.hbs``:
    ---
    icon: house
    ---
    <a class="{{ scope.section }}">{{ file.data.icon }} {{ label }}</a>
"""

from ._defining import DefiningExtension, defining, register_defining
from ._partial import PartialExtension, partial

__all__ = [
    "DefiningExtension",
    "PartialExtension",
    "defining",
    "partial",
    "register_defining",
]
