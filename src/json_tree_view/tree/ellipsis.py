"""Summarizer: the one-line preview shown inside a collapsed container.

Object-like containers preview as ``key: shortValue`` pairs, sequence-like
ones as bare ``shortValue`` items, both joined by ``", "`` in the order the
entries arrive (the traversal has already sorted them if sorting is on).

``shortValue`` never recurses: nested sequences and sets show ``[...]``,
nested objects and maps show ``{...}``, everything else shows its classified
content without type badge or copy affordance.

Example::

    preview_text(ContainerKind.OBJECT, [("a", 1), ("b", [1, 2])])
    # 'a: 1, b: [...]'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from json_tree_view.classify import classify
from json_tree_view.tree.nodes import Part, PartRole, parts_text
from json_tree_view.tree.snapshot import ContainerKind, container_kind

__all__ = ["preview", "preview_text", "short_value"]

SEPARATOR = ", "
PREVIEW_KEY_COLOR = "#00000066"


def short_value(value: Any, quotes: str = '"') -> Part:
    """Return the preview part for one child value."""
    kind = container_kind(value)
    if kind is not None:
        return Part(PartRole.PREVIEW_VALUE, "[...]" if kind.is_array else "{...}")
    classification = classify(value, quotes)
    return Part(PartRole.PREVIEW_VALUE, classification.content, classification.color)


def preview(
    kind: ContainerKind,
    entries: Iterable[tuple[str | int, Any]],
    quotes: str = '"',
) -> list[Part]:
    """Build the summary parts for a collapsed container.

    Args:
        kind:    Display shape of the collapsed container.
        entries: Its ``(key, child)`` pairs in display order; callables must
                 already be removed.
        quotes:  Quote text for string leaves.

    Returns:
        Parts forming e.g. ``a: 1, b: [...]`` or ``1, 2, {...}``.
    """
    parts: list[Part] = []
    for index, (key, child) in enumerate(entries):
        if index:
            parts.append(Part(PartRole.PREVIEW_SEP, SEPARATOR))
        if not kind.is_array:
            parts.append(Part(PartRole.PREVIEW_KEY, f"{key}: ", PREVIEW_KEY_COLOR))
        parts.append(short_value(child, quotes))
    return parts


def preview_text(
    kind: ContainerKind,
    entries: Iterable[tuple[str | int, Any]],
    quotes: str = '"',
) -> str:
    """Plain-text form of ``preview``."""
    return parts_text(preview(kind, entries, quotes))
