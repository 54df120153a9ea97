"""Render-tree data types: ViewNode, Part, NodeKind and PartRole.

A render tree is what ``TreeBuilder`` emits: one ``ViewNode`` per visible
container or leaf.  Each node carries a ``header`` (the line that is always
visible), optional ``children`` and a ``footer`` (the closing brace of an
expanded container).  Lines are made of ``Part`` records so hosts and the text
renderers can style each element independently.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeKind(StrEnum):
    """Structural kind of a visible node.

    - CONTAINER -> "container" : non-empty sequence, mapping, set or map
    - LEAF      -> "leaf"      : primitive, date, or empty container
    """

    CONTAINER = auto()
    LEAF = auto()


class PartRole(StrEnum):
    """What a ``Part`` represents on a rendered line."""

    ARROW = auto()
    KEY = auto()
    COLON = auto()
    TYPE = auto()
    BRACE_OPEN = auto()
    BRACE_CLOSE = auto()
    ELLIPSIS = auto()
    PREVIEW_KEY = auto()
    PREVIEW_VALUE = auto()
    PREVIEW_SEP = auto()
    VALUE = auto()
    COUNT = auto()
    COUNT_EXTRA = auto()
    COPY = auto()


@dataclass(frozen=True, slots=True)
class Part:
    """A styled text fragment on a rendered line.

    Attributes:
        role:  Which visual element this fragment is.
        text:  The text to show.
        color: Color token (e.g. ``"#268bd2"``); empty for the default color.
        data:  Free-form extras for hosts (e.g. ``{"expanded": True}`` on arrows).
    """

    role: PartRole
    text: str
    color: str = ""
    data: dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(slots=True)
class ViewNode:
    """A visible node in the render tree.

    Attributes:
        kind:     CONTAINER or LEAF.
        path_id:  Stable id used for expand state and host hit-testing.
        key:      Key or index under the parent; None for the root.
        level:    Depth, 1 for the root.
        value:    The raw value shown by this node.
        expanded: Expand flag for containers; None for leaves.
        indent:   Indentation applied to this node's children.
        header:   Parts of the first (always visible) line.
        children: Child nodes; empty unless an expanded container.
        footer:   Parts of the closing line; empty unless an expanded container.
    """

    kind: NodeKind
    path_id: str
    key: str | int | None
    level: int
    value: Any = None
    expanded: bool | None = None
    indent: int = 0
    header: list[Part] = field(default_factory=list)
    children: list[ViewNode] = field(default_factory=list)
    footer: list[Part] = field(default_factory=list)

    @property
    def header_text(self) -> str:
        return parts_text(self.header)

    @property
    def footer_text(self) -> str:
        return parts_text(self.footer)

    def walk(self) -> list[ViewNode]:
        """Return this node and all visible descendants in display order."""
        nodes = [self]
        for child in self.children:
            nodes.extend(child.walk())
        return nodes


def parts_text(parts: list[Part]) -> str:
    """Concatenate the text of ``parts``."""
    return "".join(part.text for part in parts)
