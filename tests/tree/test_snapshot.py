"""Tests for container snapshots.

Covers container kind detection, Set/Map materialization (including the
lossy map-key stringification), callable filtering, key sorting, and the
-1 count sentinel for containers that cannot be enumerated.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

import pytest

from json_tree_view.tree.snapshot import (
    ContainerKind,
    container_kind,
    sort_entries,
    take_snapshot,
)


class _BrokenMapping(Mapping[str, Any]):
    """A mapping whose keys cannot be enumerated."""

    def __getitem__(self, key: str) -> Any:
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        raise TypeError("cannot enumerate")

    def __len__(self) -> int:
        return 0


# ---------------------------------------------------------------------------
# Kind detection
# ---------------------------------------------------------------------------


class TestContainerKind:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ([1], ContainerKind.SEQUENCE),
            ((1,), ContainerKind.SEQUENCE),
            ({"a": 1}, ContainerKind.OBJECT),
            (OrderedDict(a=1), ContainerKind.OBJECT),
            ({1, 2}, ContainerKind.SET),
            (frozenset(), ContainerKind.SET),
            ({1: "a"}, ContainerKind.MAP),
            (MappingProxyType({"a": 1}), ContainerKind.MAP),
        ],
    )
    def test_containers(self, value: Any, kind: ContainerKind) -> None:
        assert container_kind(value) is kind

    @pytest.mark.parametrize("value", ["abc", b"abc", 1, None, 1.5, len])
    def test_leaves(self, value: Any) -> None:
        assert container_kind(value) is None

    def test_is_array(self) -> None:
        assert ContainerKind.SEQUENCE.is_array
        assert ContainerKind.SET.is_array
        assert not ContainerKind.OBJECT.is_array
        assert not ContainerKind.MAP.is_array

    def test_non_container_snapshot_raises(self) -> None:
        with pytest.raises(TypeError):
            take_snapshot(42)


# ---------------------------------------------------------------------------
# Materialization
# ---------------------------------------------------------------------------


class TestMaterialization:
    def test_sequence_entries_are_index_keyed(self) -> None:
        snap = take_snapshot(["a", "b"])
        assert snap.entries == ((0, "a"), (1, "b"))
        assert snap.count == 2
        assert snap.is_array
        assert not snap.is_set

    def test_object_entries_keep_insertion_order(self) -> None:
        snap = take_snapshot({"z": 1, "a": 2})
        assert snap.entries == (("z", 1), ("a", 2))
        assert not snap.is_array

    def test_set_becomes_index_keyed_sequence(self) -> None:
        snap = take_snapshot({"only"})
        assert snap.entries == ((0, "only"),)
        assert snap.is_set
        assert snap.is_array

    def test_map_keys_are_stringified(self) -> None:
        snap = take_snapshot({1: "a", (2, 3): "b"})
        assert snap.entries == (("1", "a"), ("(2, 3)", "b"))
        assert snap.is_map

    def test_map_key_collision_keeps_last(self) -> None:
        # Lossy: 1 and "1" share a string form.
        snap = take_snapshot({1: "int", "1": "str"})
        assert snap.entries == (("1", "str"),)
        assert snap.count == 1

    def test_callables_are_dropped(self) -> None:
        snap = take_snapshot({"a": 1, "f": len, "g": lambda: 0})
        assert snap.entries == (("a", 1),)
        assert snap.count == 1

    def test_callables_dropped_from_sequences(self) -> None:
        assert take_snapshot([len, 1]).entries == ((1, 1),)

    def test_nested_containers_are_not_dropped(self) -> None:
        snap = take_snapshot({"a": [], "b": {}})
        assert snap.count == 2

    def test_unenumerable_container_counts_minus_one(self) -> None:
        snap = take_snapshot(_BrokenMapping())
        assert snap.count == -1
        assert snap.is_empty


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


class TestSorting:
    def test_alphabetical_is_case_insensitive(self) -> None:
        snap = take_snapshot({"b": 1, "A": 2, "a": 3}, sort_keys=True)
        assert [key for key, _ in snap.entries] == ["A", "a", "b"]

    def test_custom_comparator(self) -> None:
        def descending(a: str, b: str) -> int:
            return (a < b) - (a > b)

        snap = take_snapshot({"a": 1, "c": 2, "b": 3}, sort_keys=descending)
        assert [key for key, _ in snap.entries] == ["c", "b", "a"]

    def test_indices_keep_their_order(self) -> None:
        snap = take_snapshot([3, 1, 2], sort_keys=True)
        assert snap.entries == ((0, 3), (1, 1), (2, 2))

    def test_no_sorting_by_default(self) -> None:
        snap = take_snapshot({"b": 1, "a": 2})
        assert [key for key, _ in snap.entries] == ["b", "a"]

    def test_failing_comparator_propagates(self) -> None:
        def broken(a: str, b: str) -> int:
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            take_snapshot({"a": 1, "b": 2}, sort_keys=broken)

    def test_sort_entries_does_not_mutate(self) -> None:
        entries = [("b", 1), ("a", 2)]
        sort_entries(entries, True)
        assert entries == [("b", 1), ("a", 2)]

    def test_mixed_keys_leave_int_keys_in_place(self) -> None:
        entries = [(0, "x"), ("b", 1), ("a", 2)]
        assert sort_entries(entries, True)[0] == (0, "x")
