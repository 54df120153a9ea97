"""ValueRenderer: builds the LEAF ViewNode for a terminal value.

Two forms:

- a classified leaf: ``key: [badge] content [copy]``;
- an empty container: ``key: {} 0 items [copy]`` (braces pair, count label,
  never a type badge).  Empty containers never consult the expand store.
"""

from __future__ import annotations

from typing import Any

from json_tree_view.classify import classify
from json_tree_view.config import ViewConfig
from json_tree_view.protocols import ValueProps
from json_tree_view.tree import labels
from json_tree_view.tree.nodes import NodeKind, Part, PartRole, ViewNode
from json_tree_view.tree.snapshot import ContainerSnapshot

__all__ = ["render_empty_container", "render_value", "shorten"]

ELLIPSIS_SUFFIX = "..."


def shorten(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters plus ``...``; ``limit <= 0`` disables."""
    if limit <= 0 or len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS_SUFFIX


def _key_parts(
    config: ViewConfig,
    key: str | int | None,
    value: Any,
    namespace: tuple[str | int, ...],
    parent_name: str | int | None,
) -> list[Part]:
    if key is None:
        return []
    return [
        labels.object_key(
            config.components, key, value, namespace, parent_name, config.quotes
        ),
        labels.colon(),
    ]


def render_value(
    value: Any,
    *,
    path_id: str,
    key: str | int | None,
    level: int,
    config: ViewConfig,
    namespace: tuple[str | int, ...] = (),
    parent_name: str | int | None = None,
) -> ViewNode:
    """Render one classified leaf value.

    Args:
        value:       A non-container, non-callable value.
        path_id:     Path-id of this leaf.
        key:         Key under the parent; None for a root leaf (no key label).
        level:       Depth of the leaf.
        config:      Rendering options.
        namespace:   Keys from the root down to and including ``key``.
        parent_name: Key of the parent container.

    Returns:
        A LEAF ViewNode.
    """
    classification = classify(value, config.quotes)
    header = _key_parts(config, key, value, namespace, parent_name)

    if config.display_data_types and classification.badge:
        badge = labels.type_badge(classification.tag)
        if badge is not None:
            header.append(badge)

    content = classification.content
    if isinstance(value, str):
        quotes = config.quotes
        inner = shorten(value, config.shorten_text_after_length)
        content = f"{quotes}{inner}{quotes}"
    default = Part(
        PartRole.VALUE,
        content,
        classification.color,
        data={"type": str(classification.tag)},
    )
    props = ValueProps(
        value=value,
        tag=str(classification.tag),
        content=content,
        color=classification.color,
    )
    header.append(labels.with_hook(config.components.value, props, default))

    if config.enable_clipboard:
        header.append(labels.copied(config.components, value, path_id))

    return ViewNode(
        kind=NodeKind.LEAF,
        path_id=path_id,
        key=key,
        level=level,
        value=value,
        header=header,
    )


def render_empty_container(
    value: Any,
    snapshot: ContainerSnapshot,
    *,
    path_id: str,
    key: str | int | None,
    level: int,
    config: ViewConfig,
    namespace: tuple[str | int, ...] = (),
    parent_name: str | int | None = None,
) -> ViewNode:
    """Render an empty (or unenumerable) container as a LEAF with its count."""
    components = config.components
    header = _key_parts(config, key, value, namespace, parent_name)
    header.append(labels.braces(components, snapshot.is_array, True, level))
    header.append(labels.braces(components, snapshot.is_array, False, level))
    if config.display_object_size:
        header.append(labels.count_info(components, snapshot.count, level, False))
    if config.enable_clipboard:
        header.append(labels.copied(components, value, path_id))
    return ViewNode(
        kind=NodeKind.LEAF,
        path_id=path_id,
        key=key,
        level=level,
        value=value,
        header=header,
    )
