"""TreeBuilder: turns a raw value plus expand state into a ViewNode tree.

This is the only recursive component.  For every container it:

1. resolves the expand flag (stored state, else the ``collapsed`` policy);
2. snapshots the entries (Set/Map materialized, string keys sorted if asked);
3. collapsed: emits a one-line header with the summary and stops;
   expanded: emits the header, one child per entry and a closing line.

Children dispatch:
- non-empty container -> recurse with ``level + 1`` and an extended path-id;
- empty container     -> empty-container leaf, the store is never consulted;
- callable            -> omitted;
- anything else       -> ValueRenderer leaf.

Path-ids follow JSON Pointer escaping (RFC 6901) under the view's root id:
root is ``"root"``, ``{"a/b": [1]}`` gives ``"root/a~1b"`` and
``"root/a~1b/0"``.  Escaping keeps ids unique among siblings.

Cyclic values are not supported: there is no visited-set, so a cycle inside
an expanded path recurses until Python's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from json_tree_view.classify import TypeTag
from json_tree_view.config import ViewConfig
from json_tree_view.protocols import EllipsisProps
from json_tree_view.store import ExpandStateStore
from json_tree_view.tree import labels
from json_tree_view.tree.ellipsis import preview
from json_tree_view.tree.nodes import NodeKind, Part, ViewNode
from json_tree_view.tree.snapshot import ContainerSnapshot, container_kind, take_snapshot
from json_tree_view.tree.values import render_empty_container, render_value

__all__ = ["ROOT_ID", "TreeBuilder", "child_path_id", "escape_key"]

ROOT_ID = "root"


def escape_key(key: str | int) -> str:
    """Escape a key for use as a path-id segment (``~`` -> ``~0``, ``/`` -> ``~1``)."""
    return str(key).replace("~", "~0").replace("/", "~1")


def child_path_id(path_id: str, key: str | int) -> str:
    return f"{path_id}/{escape_key(key)}"


@dataclass
class TreeBuilder:
    """Builds the visible ViewNode tree for a value.

    The builder keeps no per-pass state, so ``build`` is re-entrant; the only
    mutable collaborator is the injected ``ExpandStateStore``, which the
    builder only reads.

    Example::

        builder = TreeBuilder(ViewConfig(collapsed=1))
        tree = builder.build({"user": {"name": "John"}})
        tree.children[0].header_text
        # '▸ "user": {name: "John"} 1 items ⧉'
    """

    config: ViewConfig = field(default_factory=ViewConfig)
    store: ExpandStateStore = field(default_factory=ExpandStateStore)

    def build(
        self,
        value: Any,
        path_id: str = ROOT_ID,
        level: int = 1,
        key: str | int | None = None,
        namespace: tuple[str | int, ...] = (),
        parent_value: Any = None,
    ) -> ViewNode | None:
        """Build the node for ``value`` and every visible descendant.

        Args:
            value:        Any raw value.
            path_id:      Path-id of this node.  Defaults to ``ROOT_ID``.
            level:        Depth of this node; the root is 1.
            key:          Key under the parent, None for the root.
            namespace:    Keys from the root down to this node.
            parent_value: The parent container, if any.

        Returns:
            The ViewNode, or None when ``value`` is a callable (callables are
            never rendered).
        """
        kind = container_kind(value)
        if kind is None:
            if callable(value):
                return None
            return render_value(
                value,
                path_id=path_id,
                key=key,
                level=level,
                config=self.config,
                namespace=namespace,
                parent_name=namespace[-2] if len(namespace) > 1 else None,
            )

        snapshot = take_snapshot(value, self.config.object_sort_keys)
        if snapshot.is_empty:
            return render_empty_container(
                value,
                snapshot,
                path_id=path_id,
                key=key,
                level=level,
                config=self.config,
                namespace=namespace,
                parent_name=namespace[-2] if len(namespace) > 1 else None,
            )
        return self._build_container(
            value, snapshot, path_id, level, key, namespace, parent_value
        )

    def is_expanded(self, path_id: str, level: int) -> bool:
        """Resolve the expand flag: stored state first, then the default policy."""
        stored = self.store.get(path_id)
        if stored is not None:
            return stored
        return self.config.default_expanded(level)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _build_container(
        self,
        value: Any,
        snapshot: ContainerSnapshot,
        path_id: str,
        level: int,
        key: str | int | None,
        namespace: tuple[str | int, ...],
        parent_value: Any,
    ) -> ViewNode:
        config = self.config
        expanded = self.is_expanded(path_id, level)

        node = ViewNode(
            kind=NodeKind.CONTAINER,
            path_id=path_id,
            key=key,
            level=level,
            value=value,
            expanded=expanded,
            indent=config.indent_width,
            header=self._header(
                value, snapshot, path_id, level, key, namespace, parent_value, expanded
            ),
        )
        if not expanded:
            return node

        for child_key, child in snapshot.entries:
            child_node = self.build(
                child,
                path_id=child_path_id(path_id, child_key),
                level=level + 1,
                key=child_key,
                namespace=(*namespace, child_key),
                parent_value=value,
            )
            if child_node is not None:
                node.children.append(child_node)
        node.footer = [labels.braces(config.components, snapshot.is_array, False, level)]
        return node

    def _header(
        self,
        value: Any,
        snapshot: ContainerSnapshot,
        path_id: str,
        level: int,
        key: str | int | None,
        namespace: tuple[str | int, ...],
        parent_value: Any,
        expanded: bool,
    ) -> list[Part]:
        config = self.config
        components = config.components
        header = [labels.arrow(components, expanded, level, path_id)]

        if key is not None:
            parent_name = namespace[-2] if len(namespace) > 1 else None
            header.append(
                labels.object_key(
                    components, key, value, namespace, parent_name, config.quotes
                )
            )
            header.append(labels.colon())

        if config.display_data_types and (snapshot.is_set or snapshot.is_map):
            badge = labels.type_badge(TypeTag.SET if snapshot.is_set else TypeTag.MAP)
            if badge is not None:
                header.append(badge)

        header.append(labels.braces(components, snapshot.is_array, True, level))
        if not expanded:
            header.extend(self._summary(value, snapshot, level))
            header.append(labels.braces(components, snapshot.is_array, False, level))

        if config.display_object_size:
            header.append(labels.count_info(components, snapshot.count, level, expanded))
        extra = labels.count_info_extra(
            components,
            snapshot.count,
            level,
            key,
            expanded,
            value,
            namespace,
            parent_value,
        )
        if extra is not None:
            header.append(extra)
        if config.enable_clipboard:
            header.append(labels.copied(components, value, path_id))
        return header

    def _summary(
        self, value: Any, snapshot: ContainerSnapshot, level: int
    ) -> list[Part]:
        parts = preview(snapshot.kind, snapshot.entries, self.config.quotes)
        hook = self.config.components.ellipsis
        if hook is not None:
            props = EllipsisProps(
                count=snapshot.count, level=level, value=value, preview=tuple(parts)
            )
            part = hook(props)
            if part is not None:
                return [part]
        return parts
