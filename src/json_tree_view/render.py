"""Text output for render trees: plain strings and ``rich`` Text.

Each ViewNode becomes one header line, followed (for expanded containers) by
its children and a footer line holding the closing brace.  Children are
indented by the parent's ``indent`` divided by ``cell_width``. The
configured indent width is expressed in pixels (15 by default), and one
terminal cell is taken to be 5 pixels wide, giving 3 spaces per level.
"""

from __future__ import annotations

from rich.console import Console
from rich.style import Style
from rich.text import Text

from json_tree_view.tree.nodes import Part, PartRole, ViewNode

__all__ = ["print_node", "to_lines", "to_plain", "to_rich"]

CELL_WIDTH = 5

_ROLE_STYLES: dict[PartRole, Style] = {
    PartRole.ARROW: Style(dim=True),
    PartRole.KEY: Style(bold=True),
    PartRole.TYPE: Style(italic=True, dim=True),
    PartRole.PREVIEW_KEY: Style(dim=True),
    PartRole.COUNT: Style(italic=True, dim=True),
    PartRole.COPY: Style(dim=True),
}


def _spaces(indent: int, cell_width: int) -> int:
    return max(indent // cell_width, 1) if indent > 0 else 0


def _part_style(part: Part) -> Style:
    style = _ROLE_STYLES.get(part.role, Style())
    # Colors with an alpha channel (#rrggbbaa) are dim labels, not hues.
    if part.color and len(part.color) == 7:
        style += Style(color=part.color)
    if part.role is PartRole.VALUE and part.data.get("type") == "null":
        style += Style(bold=True)
    return style


def to_lines(
    node: ViewNode, cell_width: int = CELL_WIDTH, depth_spaces: int = 0
) -> list[tuple[int, list[Part]]]:
    """Flatten a render tree into ``(indent_spaces, parts)`` lines."""
    lines: list[tuple[int, list[Part]]] = [(depth_spaces, node.header)]
    child_spaces = depth_spaces + _spaces(node.indent, cell_width)
    for child in node.children:
        lines.extend(to_lines(child, cell_width, child_spaces))
    if node.footer:
        lines.append((depth_spaces, node.footer))
    return lines


def to_plain(node: ViewNode | None, cell_width: int = CELL_WIDTH) -> str:
    """Render a tree as plain text, one line per visible element."""
    if node is None:
        return ""
    return "\n".join(
        " " * spaces + "".join(part.text for part in parts)
        for spaces, parts in to_lines(node, cell_width)
    )


def to_rich(node: ViewNode | None, cell_width: int = CELL_WIDTH) -> Text:
    """Render a tree as a styled ``rich.text.Text``."""
    text = Text()
    if node is None:
        return text
    for index, (spaces, parts) in enumerate(to_lines(node, cell_width)):
        if index:
            text.append("\n")
        text.append(" " * spaces)
        for part in parts:
            text.append(part.text, style=_part_style(part))
    return text


def print_node(
    node: ViewNode | None,
    console: Console | None = None,
    cell_width: int = CELL_WIDTH,
) -> None:
    """Print a render tree to ``console`` (a default ``Console`` if None)."""
    (console or Console()).print(to_rich(node, cell_width))
