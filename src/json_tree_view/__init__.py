"""json-tree-view - collapsible, type-tagged tree views of nested values."""

from __future__ import annotations

from json_tree_view.api import print_tree, render_text, render_tree
from json_tree_view.classify import (
    UNDEFINED,
    BigInt,
    Classification,
    TypeTag,
    classify,
)
from json_tree_view.config import ExpandEvent, ViewConfig
from json_tree_view.protocols import Components
from json_tree_view.store import ExpandStateStore
from json_tree_view.tree.nodes import NodeKind, Part, PartRole, ViewNode
from json_tree_view.view import TreeView

__version__: str = "0.1.0"
__all__: list[str] = [
    "UNDEFINED",
    "BigInt",
    "Classification",
    "Components",
    "ExpandEvent",
    "ExpandStateStore",
    "NodeKind",
    "Part",
    "PartRole",
    "TreeView",
    "TypeTag",
    "ViewConfig",
    "ViewNode",
    "classify",
    "print_tree",
    "render_text",
    "render_tree",
]
