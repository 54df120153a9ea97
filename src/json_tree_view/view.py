"""TreeView: one interactive tree-view instance.

Wires ``ViewConfig``, an ``ExpandStateStore`` and ``TreeBuilder`` together and
keeps the path-id index of the last render so host actions (toggle, copy)
can be resolved to a node.

Architecture:
- ``render()`` runs one traversal and rebuilds the index.  A traversal is a
  pure function of (value, store contents, config).
- ``toggle(path_id)`` notifies ``on_expand`` with the NEW state, then flips
  only that path's store entry.  Any change to the store drops the index, so
  the next lookup re-renders and nodes hidden by a collapse are unreachable.
- The store lives exactly as long as the view (or is injected by the host)
  and survives ``update()`` so expand state follows stable path-ids.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping, Set
from datetime import date
from typing import Any

from json_tree_view.classify import UNDEFINED, BigInt, format_number
from json_tree_view.config import ExpandEvent, ViewConfig
from json_tree_view.store import ExpandStateStore
from json_tree_view.tree.builder import ROOT_ID, TreeBuilder
from json_tree_view.tree.nodes import NodeKind, ViewNode

__all__ = ["TreeView", "copy_text"]

logger = logging.getLogger(__name__)


class TreeView:
    """Interactive collapsible view over a nested value.

    Two separate ``TreeView`` instances never share expand state; each
    creates its own ``ExpandStateStore`` unless one is passed in.

    Example::

        view = TreeView({"user": {"name": "Alice"}}, ViewConfig(collapsed=1))
        tree = view.render()
        view.toggle("root/user")          # expand the collapsed "user" node
        tree = view.render()
        tree.children[0].expanded         # True
    """

    def __init__(
        self,
        value: Any,
        config: ViewConfig | None = None,
        *,
        root_id: str = ROOT_ID,
        store: ExpandStateStore | None = None,
    ) -> None:
        """Initialise the view.

        Args:
            value:   The value to display.
            config:  Rendering options.  Defaults to ``ViewConfig()``.
            root_id: Opaque token prefixing every path-id of this view.
            store:   Expand state to use.  Defaults to a fresh store.
        """
        self._value = value
        self._config: ViewConfig = config if config is not None else ViewConfig()
        self._store: ExpandStateStore = store if store is not None else ExpandStateStore()
        self._root_id = root_id
        self._builder = TreeBuilder(config=self._config, store=self._store)
        self._index: dict[str, ViewNode] = {}

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def value(self) -> Any:
        return self._value

    @property
    def config(self) -> ViewConfig:
        return self._config

    @property
    def store(self) -> ExpandStateStore:
        return self._store

    @property
    def root_id(self) -> str:
        return self._root_id

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> ViewNode | None:
        """Traverse the value and return the visible render tree.

        Returns:
            The root ViewNode, or None when the value itself is a callable.
        """
        root = self._builder.build(self._value, path_id=self._root_id)
        nodes = root.walk() if root is not None else []
        self._index = {node.path_id: node for node in nodes}
        logger.debug("Rendered %d visible nodes under %s", len(nodes), self._root_id)
        return root

    def update(self, value: Any) -> None:
        """Replace the displayed value; expand state is kept."""
        self._value = value
        self._index = {}

    def find(self, path_id: str) -> ViewNode | None:
        """Return the node with ``path_id`` from the last render, if visible."""
        if not self._index:
            self.render()
        return self._index.get(path_id)

    # ------------------------------------------------------------------
    # Expand state
    # ------------------------------------------------------------------

    def toggle(self, path_id: str) -> bool:
        """Flip the expand state of a visible container.

        Args:
            path_id: Path-id of a container node from the last render.

        Returns:
            The new expand flag.

        Raises:
            KeyError: If ``path_id`` is not a visible, non-empty container.
                Visibility reflects every earlier toggle, rendered or not.
        """
        node = self._require_container(path_id)
        # Read the store, not node.expanded: an injected store may have changed.
        expand = not self._builder.is_expanded(path_id, node.level)
        if self._config.on_expand is not None:
            self._config.on_expand(
                ExpandEvent(expand=expand, path_id=path_id, key=node.key, value=node.value)
            )
        self._store.set_expanded(path_id, expand)
        self._index = {}
        logger.debug("Toggled %s -> %s", path_id, "expanded" if expand else "collapsed")
        return expand

    def expand(self, path_id: str) -> None:
        """Mark ``path_id`` expanded without notifying ``on_expand``."""
        self._store.expand(path_id)
        self._index = {}

    def collapse(self, path_id: str) -> None:
        """Mark ``path_id`` collapsed without notifying ``on_expand``."""
        self._store.collapse(path_id)
        self._index = {}

    def is_expanded(self, path_id: str, level: int) -> bool:
        return self._builder.is_expanded(path_id, level)

    def reset(self) -> None:
        """Forget every toggle; all nodes return to the default policy."""
        logger.debug("Resetting %d expand entries under %s", len(self._store), self._root_id)
        self._store.clear()
        self._index = {}

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def copy(self, path_id: str | None = None) -> str:
        """Return the copy text of a node's value and notify ``on_copied``.

        Writing to an actual clipboard is left to the host.

        Args:
            path_id: Node to copy; defaults to the root.

        Raises:
            KeyError: If ``path_id`` is not visible in the last render.
        """
        target = path_id if path_id is not None else self._root_id
        node = self.find(target)
        if node is None:
            msg = f"no visible node with path-id {target!r}"
            raise KeyError(msg)
        text = copy_text(node.value)
        if self._config.on_copied is not None:
            self._config.on_copied(text, node.value)
        logger.debug("Copied %s (%d chars)", target, len(text))
        return text

    def _require_container(self, path_id: str) -> ViewNode:
        node = self.find(path_id)
        if node is None or node.kind is not NodeKind.CONTAINER:
            msg = f"no expandable node with path-id {path_id!r}"
            raise KeyError(msg)
        return node


def _jsonable(value: Any) -> Any:
    if value is UNDEFINED:
        return None
    if isinstance(value, BigInt):
        return str(int(value))
    if isinstance(value, float) and not math.isfinite(value):
        return format_number(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items() if not callable(v)}
    if isinstance(value, (list, tuple, Set)):
        return [_jsonable(v) for v in value if not callable(v)]
    return value


def copy_text(value: Any) -> str:
    """Text placed on the clipboard for ``value``.

    Strings are copied verbatim; ``undefined``, ``NaN`` and the infinities by
    their display names.  Everything else is two-space indented JSON (sets as
    arrays, map keys stringified, big integers as digit strings, dates in ISO
    format, nested non-finite floats as their display-name strings).
    """
    if isinstance(value, str):
        return value
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, float) and not math.isfinite(value):
        return format_number(value)
    return json.dumps(_jsonable(value), indent=2, ensure_ascii=False, default=str)
