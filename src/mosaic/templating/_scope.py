"""Scope frames for directive metadata.

A scope frame carries metadata that is not part of the render context, such
as the name of the partial being rendered. Templates reach the active frame
through the reserved ``scope`` variable (``{{ scope.name }}``).
"""

from collections import ChainMap
from collections.abc import Mapping
from typing import Self

from jinja2 import Environment

SCOPE_VARIABLE = "scope"


class ScopeFrame(ChainMap[str, object]):
    """Copy-on-write scope frame.

    Writes land in the frame's own mapping; lookups fall through to the
    parent frames. Deriving a child never alters its parent.
    """

    def derive(self, values: Mapping[str, object] | None = None) -> Self:
        """Create a child frame holding ``values``."""
        return self.new_child(dict(values or {}))


def create_frame(
    parent: object,
    values: Mapping[str, object] | None = None,
) -> ScopeFrame | None:
    """Derive a child frame from the active scope.

    Args:
        parent: The active scope metadata. Any mapping is accepted.
        values: Values to set on the child frame.

    Returns:
        The child frame, or None if ``parent`` is not a mapping (no scope
        metadata is active).
    """
    if isinstance(parent, ScopeFrame):
        return parent.derive(values)
    if isinstance(parent, Mapping):
        return ScopeFrame(dict(values or {}), parent)  # pyright: ignore[reportUnknownArgumentType]
    return None


def install_root_frame(environment: Environment) -> None:
    """Install an empty root frame as the ``scope`` global if none is set."""
    _ = environment.globals.setdefault(SCOPE_VARIABLE, ScopeFrame())
