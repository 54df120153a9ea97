"""ContainerSnapshot: ordered entries of a container, ready for display.

Sets and maps are materialized into the two display shapes the rest of the
engine understands:

- a ``set``/``frozenset`` becomes an index-keyed sequence (iteration order);
- a non-plain mapping (any ``Mapping`` that is not a ``dict`` with only
  ``str`` keys) becomes a ``str(key)``-keyed dict.

The map materialization is lossy on purpose: two keys with the same string
form collide and the later one wins, and non-primitive keys are shown by
their ``str()``.

Callable entries are dropped here, so they never reach the count, the
summary, or the traversal.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any

from json_tree_view.classify import ContainerKind, container_kind
from json_tree_view.config import Comparator

__all__ = [
    "ContainerKind",
    "ContainerSnapshot",
    "container_kind",
    "sort_entries",
    "take_snapshot",
]

logger = logging.getLogger(__name__)

Entry = tuple[str | int, Any]


@dataclass(frozen=True, slots=True)
class ContainerSnapshot:
    """Ordered, display-ready view of one container.

    Attributes:
        kind:    Display shape (see ContainerKind).
        entries: ``(key, child)`` pairs in display order; int keys for
                 sequences and sets, str keys for objects and maps.
        count:   Number of entries, or ``-1`` when the container could not be
                 enumerated.
    """

    kind: ContainerKind
    entries: tuple[Entry, ...]
    count: int

    @property
    def is_array(self) -> bool:
        return self.kind.is_array

    @property
    def is_set(self) -> bool:
        return self.kind is ContainerKind.SET

    @property
    def is_map(self) -> bool:
        return self.kind is ContainerKind.MAP

    @property
    def is_empty(self) -> bool:
        return not self.entries


def _materialize(value: Any, kind: ContainerKind) -> list[Entry]:
    """Return the non-callable entries of ``value``.

    Sequence and set entries keep their source index, so dropping a callable
    leaves a gap: ``[len, 1]`` yields ``[(1, 1)]``.
    """
    if kind is ContainerKind.SEQUENCE:
        items: list[Entry] = list(enumerate(value))
    elif kind is ContainerKind.SET:
        items = list(enumerate(value))
    elif kind is ContainerKind.OBJECT:
        items = list(value.items())
    else:
        # Later keys overwrite earlier ones with the same str() form.
        items = list({str(k): v for k, v in value.items()}.items())
    return [(key, child) for key, child in items if not _is_function(child)]


def _is_function(value: Any) -> bool:
    return callable(value) and container_kind(value) is None


def _locale_compare(a: str, b: str) -> int:
    left, right = (a.casefold(), a), (b.casefold(), b)
    return (left > right) - (left < right)


def sort_entries(entries: list[Entry], sort_keys: bool | Comparator) -> list[Entry]:
    """Sort entries by key when both keys of a pair are strings.

    Pairs involving an int key compare equal, so sequence order survives the
    (stable) sort.  A comparator that raises is not caught.

    Args:
        entries:   ``(key, child)`` pairs in original order.
        sort_keys: ``True`` for case-insensitive alphabetical order, a
                   ``cmp(a, b) -> int`` callable, or ``False`` to keep order.

    Returns:
        A new list; ``entries`` is not mutated.
    """
    if sort_keys is False:
        return list(entries)
    compare: Comparator = _locale_compare if sort_keys is True else sort_keys

    def _cmp(left: Entry, right: Entry) -> int:
        a, b = left[0], right[0]
        if isinstance(a, str) and isinstance(b, str):
            return compare(a, b)
        return 0

    return sorted(entries, key=functools.cmp_to_key(_cmp))


def take_snapshot(
    value: Any, sort_keys: bool | Comparator = False
) -> ContainerSnapshot:
    """Build the ContainerSnapshot of a container value.

    Args:
        value:     A value for which ``container_kind`` is not None.
        sort_keys: Sorting policy applied to string keys (see ``sort_entries``).

    Returns:
        The snapshot.  When enumerating ``value`` fails with TypeError or
        AttributeError the snapshot is empty with ``count == -1``.

    Raises:
        TypeError: If ``value`` is not a container.
    """
    kind = container_kind(value)
    if kind is None:
        msg = f"not a container: {type(value).__name__}"
        raise TypeError(msg)
    try:
        entries = _materialize(value, kind)
    except (TypeError, AttributeError) as exc:
        logger.warning("Could not enumerate %s: %s", type(value).__name__, exc)
        return ContainerSnapshot(kind=kind, entries=(), count=-1)
    entries = sort_entries(entries, sort_keys)
    return ContainerSnapshot(kind=kind, entries=tuple(entries), count=len(entries))

