"""ExpandStateStore: per-view mapping from node path-id to expanded flag.

Each ``ExpandStateStore`` instance owns its own dict; there is no class-level
shared state, so two tree views never see each other's expand/collapse
choices.  Entries are created lazily on the first toggle; an absent entry means
"use the configured default".

Toggling one path only writes that path's entry.  Descendant entries survive a
parent collapse, so re-expanding the parent restores each descendant exactly
as it was.

Mutations are serialized through a single coarse-grained lock so hosts that
deliver toggles from several threads stay consistent.  Toggles are
human-triggered, so contention is negligible.

Example::

    store = ExpandStateStore()
    store.get("root/user")                # None -> use default policy
    store.set_expanded("root/user", False)
    store.get("root/user")                # False
    store.clear()                         # back to defaults
"""

from __future__ import annotations

import threading

__all__ = ["ExpandStateStore"]


class ExpandStateStore:
    """Session-scoped store of expand flags keyed by path-id."""

    def __init__(self) -> None:
        self._expanded: dict[str, bool] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._expanded)

    def __contains__(self, path_id: object) -> bool:
        return path_id in self._expanded

    def __repr__(self) -> str:
        return f"ExpandStateStore({self._expanded!r})"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, path_id: str) -> bool | None:
        """Return the stored flag for ``path_id``, or None when never toggled."""
        return self._expanded.get(path_id)

    def snapshot(self) -> dict[str, bool]:
        """Return a copy of every stored entry."""
        with self._lock:
            return dict(self._expanded)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_expanded(self, path_id: str, expanded: bool) -> None:
        """Store ``expanded`` for ``path_id``; no other entry is touched."""
        with self._lock:
            self._expanded[path_id] = bool(expanded)

    def expand(self, path_id: str) -> None:
        self.set_expanded(path_id, True)

    def collapse(self, path_id: str) -> None:
        self.set_expanded(path_id, False)

    def clear(self) -> None:
        """Forget every entry so all nodes fall back to the default policy."""
        with self._lock:
            self._expanded.clear()
