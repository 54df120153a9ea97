"""ViewConfig and ExpandEvent for tree-view configuration.

ViewConfig is a frozen (immutable) dataclass holding every recognised
rendering option.  It is injected into ``TreeView`` / ``TreeBuilder``; nothing
reads configuration from module globals.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from json_tree_view.protocols import Components

__all__ = ["Comparator", "ExpandEvent", "ViewConfig"]

Comparator = Callable[[str, str], int]


@dataclass(frozen=True, slots=True)
class ExpandEvent:
    """Notification sent to ``ViewConfig.on_expand`` when a node is toggled.

    Attributes:
        expand:  The NEW state: True when the node is being expanded.
        path_id: Path-id of the toggled node.
        key:     Key of the node under its parent; None for the root.
        value:   The container value behind the node.
    """

    expand: bool
    path_id: str
    key: str | int | None
    value: Any


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """Immutable rendering options.

    Attributes:
        display_data_types: Show type badges next to leaf values.
        display_object_size: Show ``N items`` labels on containers.
        enable_clipboard: Emit the copy affordance.
        collapsed: Default expand policy for nodes without a stored state.
            ``None`` expands everything.  A bool is used as the expand flag
            itself (``True`` expands, ``False`` collapses).  An int ``N``
            expands nodes whose level is ``<= N`` (the root is level 1).
        indent_width: Per-level indentation of children.
        object_sort_keys: ``True`` sorts string keys alphabetically, a
            ``cmp(a, b) -> int`` callable sorts them with it.  Integer keys
            (sequence indices) are never reordered.
        quotes: Text wrapped around string content.
        shorten_text_after_length: Truncate string leaves longer than this;
            ``0`` or less disables truncation.
        on_expand: Called with an ``ExpandEvent`` before a toggle is applied.
        on_copied: Called with ``(text, value)`` after a copy.
        components: Override hooks.
    """

    display_data_types: bool = True
    display_object_size: bool = True
    enable_clipboard: bool = True
    collapsed: bool | int | None = None
    indent_width: int = 15
    object_sort_keys: bool | Comparator = False
    quotes: str = '"'
    shorten_text_after_length: int = 30
    on_expand: Callable[[ExpandEvent], None] | None = None
    on_copied: Callable[[str, Any], None] | None = None
    components: Components = field(default_factory=Components)

    def __post_init__(self) -> None:
        if self.collapsed is not None and not isinstance(self.collapsed, (bool, int)):
            msg = f"collapsed must be a bool, an int or None, got {self.collapsed!r}"
            raise TypeError(msg)
        if (
            isinstance(self.collapsed, int)
            and not isinstance(self.collapsed, bool)
            and self.collapsed < 0
        ):
            msg = f"collapsed depth must be >= 0, got {self.collapsed}"
            raise ValueError(msg)
        if self.indent_width < 0:
            msg = f"indent_width must be >= 0, got {self.indent_width}"
            raise ValueError(msg)
        if not isinstance(self.object_sort_keys, bool) and not callable(
            self.object_sort_keys
        ):
            msg = (
                "object_sort_keys must be a bool or a comparator, "
                f"got {self.object_sort_keys!r}"
            )
            raise TypeError(msg)
        if not isinstance(self.quotes, str):
            msg = f"quotes must be a string, got {self.quotes!r}"
            raise TypeError(msg)

    def default_expanded(self, level: int) -> bool:
        """Return the expand flag for a node at ``level`` with no stored state."""
        if isinstance(self.collapsed, bool):
            return self.collapsed
        if isinstance(self.collapsed, int):
            return level <= self.collapsed
        return True
