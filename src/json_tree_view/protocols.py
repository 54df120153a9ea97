"""Override hooks for json-tree-view rendering.

Every visual element the traversal emits has a built-in default.  A host can
replace any of them by setting the matching field on ``Components``; fields are
independent and nullable.  A hook receives a small frozen props bag and returns
a ``Part``, or ``None`` to decline, in which case the built-in default is
used.

Example::

    from json_tree_view import Components, Part, PartRole, ViewConfig

    def count(props):
        return Part(PartRole.COUNT, f" ({props.count})")

    config = ViewConfig(components=Components(count_info=count))
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from json_tree_view.tree.nodes import Part

__all__ = [
    "ArrowProps",
    "BracesProps",
    "Components",
    "CopiedProps",
    "CountInfoExtraProps",
    "CountInfoProps",
    "EllipsisProps",
    "Hook",
    "ObjectKeyProps",
    "ValueProps",
]

P_contra = TypeVar("P_contra", contravariant=True)


@runtime_checkable
class Hook(Protocol[P_contra]):
    """Structural protocol for an override hook: ``props -> Part | None``."""

    def __call__(self, props: P_contra, /) -> Part | None: ...


@dataclass(frozen=True, slots=True)
class ArrowProps:
    expanded: bool
    level: int
    path_id: str


@dataclass(frozen=True, slots=True)
class BracesProps:
    is_array: bool
    start: bool
    level: int


@dataclass(frozen=True, slots=True)
class CountInfoProps:
    count: int
    level: int
    visible: bool


@dataclass(frozen=True, slots=True)
class CountInfoExtraProps:
    count: int
    level: int
    key: str | int | None
    visible: bool
    value: Any
    namespace: tuple[str | int, ...]
    parent_value: Any


@dataclass(frozen=True, slots=True)
class EllipsisProps:
    """Props for the collapsed-summary hook.

    ``preview`` holds the default summary parts so a hook can wrap or restyle
    them instead of rebuilding the summary.
    """

    count: int
    level: int
    value: Any
    preview: Sequence[Part]


@dataclass(frozen=True, slots=True)
class ObjectKeyProps:
    key: str | int
    value: Any
    namespace: tuple[str | int, ...]
    parent_name: str | int | None
    quotes: str
    color: str


@dataclass(frozen=True, slots=True)
class CopiedProps:
    value: Any
    path_id: str


@dataclass(frozen=True, slots=True)
class ValueProps:
    """Props for the leaf value hook; ``content`` is already truncated."""

    value: Any
    tag: str
    content: str
    color: str


@dataclass(frozen=True, slots=True)
class Components:
    """Independently nullable set of override hooks.

    Attributes:
        arrow:            Expand indicator of a container.
        braces:           Opening/closing punctuation of a container.
        count_info:       ``N items`` label.
        count_info_extra: Extra decoration after the count; no default.
        ellipsis:         Collapsed-container summary.
        object_key:       Key label.
        copied:           Copy-to-clipboard affordance.
        value:            Leaf value content.
    """

    arrow: Hook[ArrowProps] | None = None
    braces: Hook[BracesProps] | None = None
    count_info: Hook[CountInfoProps] | None = None
    count_info_extra: Hook[CountInfoExtraProps] | None = None
    ellipsis: Hook[EllipsisProps] | None = None
    object_key: Hook[ObjectKeyProps] | None = None
    copied: Hook[CopiedProps] | None = None
    value: Hook[ValueProps] | None = None
