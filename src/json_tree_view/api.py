"""Public one-shot helpers for json-tree-view.

Each call creates a fresh ``TreeView`` (and therefore a fresh expand store),
so nothing leaks between calls.  Use ``TreeView`` directly for interactive
expand/collapse across renders.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console

from json_tree_view.config import ViewConfig
from json_tree_view.render import print_node, to_plain
from json_tree_view.tree.nodes import ViewNode
from json_tree_view.view import TreeView

__all__ = ["print_tree", "render_text", "render_tree"]


def render_tree(value: Any, config: ViewConfig | None = None) -> ViewNode | None:
    """Return the render tree of ``value`` under the default expand policy.

    Args:
        value:  Any nested value.
        config: Rendering options.  Defaults to ``ViewConfig()`` when None.

    Returns:
        The root ViewNode, or None if ``value`` is a callable.
    """
    return TreeView(value, config).render()


def render_text(value: Any, config: ViewConfig | None = None) -> str:
    """Return ``value`` rendered as plain text."""
    return to_plain(render_tree(value, config))


def print_tree(
    value: Any,
    config: ViewConfig | None = None,
    console: Console | None = None,
) -> None:
    """Print ``value`` as a colored tree to ``console``."""
    print_node(render_tree(value, config), console)
