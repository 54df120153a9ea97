"""Label and punctuation helpers shared by the traversal and the value renderer.

Each helper builds the built-in ``Part`` for one visual element and gives the
matching override hook (if any) the first chance to replace it.
"""

from __future__ import annotations

from typing import Any

from json_tree_view.classify import TYPE_MAP, TypeTag
from json_tree_view.protocols import (
    ArrowProps,
    BracesProps,
    Components,
    CopiedProps,
    CountInfoExtraProps,
    CountInfoProps,
    Hook,
    ObjectKeyProps,
)
from json_tree_view.tree.nodes import Part, PartRole

INFO_COLOR = "#0000004d"
KEY_COLOR = ""
ARROW_EXPANDED = "▾ "
ARROW_COLLAPSED = "▸ "
COPY_GLYPH = " ⧉"


def with_hook(hook: Hook[Any] | None, props: Any, default: Part) -> Part:
    if hook is None:
        return default
    part = hook(props)
    return part if part is not None else default


def arrow(components: Components, expanded: bool, level: int, path_id: str) -> Part:
    default = Part(
        PartRole.ARROW,
        ARROW_EXPANDED if expanded else ARROW_COLLAPSED,
        data={"expanded": expanded},
    )
    props = ArrowProps(expanded=expanded, level=level, path_id=path_id)
    return with_hook(components.arrow, props, default)


def object_key(
    components: Components,
    key: str | int,
    value: Any,
    namespace: tuple[str | int, ...],
    parent_name: str | int | None,
    quotes: str,
) -> Part:
    # Index keys are shown bare in the number color; string keys are quoted.
    if isinstance(key, int):
        color, text = TYPE_MAP[TypeTag.NUMBER].color, str(key)
    else:
        color, text = KEY_COLOR, f"{quotes}{key}{quotes}"
    default = Part(PartRole.KEY, text, color)
    props = ObjectKeyProps(
        key=key,
        value=value,
        namespace=namespace,
        parent_name=parent_name,
        quotes=quotes,
        color=color,
    )
    return with_hook(components.object_key, props, default)


def colon() -> Part:
    return Part(PartRole.COLON, ": ")


def type_badge(tag: TypeTag) -> Part | None:
    info = TYPE_MAP.get(tag)
    if info is None:
        return None
    return Part(PartRole.TYPE, f"{info.label} ", info.color, data={"type": str(tag)})


def braces(components: Components, is_array: bool, start: bool, level: int) -> Part:
    if is_array:
        text = "[" if start else "]"
    else:
        text = "{" if start else "}"
    role = PartRole.BRACE_OPEN if start else PartRole.BRACE_CLOSE
    props = BracesProps(is_array=is_array, start=start, level=level)
    return with_hook(components.braces, props, Part(role, text))


def count_info(
    components: Components, count: int, level: int, visible: bool
) -> Part:
    default = Part(PartRole.COUNT, f" {count} items", INFO_COLOR)
    props = CountInfoProps(count=count, level=level, visible=visible)
    return with_hook(components.count_info, props, default)


def count_info_extra(
    components: Components,
    count: int,
    level: int,
    key: str | int | None,
    visible: bool,
    value: Any,
    namespace: tuple[str | int, ...],
    parent_value: Any,
) -> Part | None:
    """Return the extra count decoration; there is no built-in default."""
    if components.count_info_extra is None:
        return None
    return components.count_info_extra(
        CountInfoExtraProps(
            count=count,
            level=level,
            key=key,
            visible=visible,
            value=value,
            namespace=namespace,
            parent_value=parent_value,
        )
    )


def copied(components: Components, value: Any, path_id: str) -> Part:
    default = Part(PartRole.COPY, COPY_GLYPH, INFO_COLOR, data={"path_id": path_id})
    props = CopiedProps(value=value, path_id=path_id)
    return with_hook(components.copied, props, default)
