"""Tree subpackage: the materialization engine behind a tree view.

Re-exports the public API for the tree module:
- TreeBuilder: recursive traversal producing the visible ViewNode tree
- ViewNode / Part: render-tree records (NodeKind, PartRole enums)
- ContainerKind / ContainerSnapshot / take_snapshot: container materialization
- preview / preview_text: collapsed-container summaries
"""

from json_tree_view.tree.builder import ROOT_ID, TreeBuilder
from json_tree_view.tree.ellipsis import preview, preview_text
from json_tree_view.tree.nodes import NodeKind, Part, PartRole, ViewNode
from json_tree_view.tree.snapshot import ContainerKind, ContainerSnapshot, take_snapshot

__all__ = [
    "ROOT_ID",
    "ContainerKind",
    "ContainerSnapshot",
    "NodeKind",
    "Part",
    "PartRole",
    "TreeBuilder",
    "ViewNode",
    "preview",
    "preview_text",
    "take_snapshot",
]
