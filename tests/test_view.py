"""Tests for TreeView: toggling, state persistence, notifications and copy.

Tests cover:
- toggle() flips exactly one path and wins over the default policy
- Descendant state survives a parent collapse / re-expand
- on_expand receives the new state; on_copied receives text and value
- Empty containers and leaves cannot be toggled
- reset(), update(), injected stores and instance isolation
- copy_text() formats
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any

import pytest

from json_tree_view.classify import UNDEFINED, BigInt
from json_tree_view.config import ExpandEvent, ViewConfig
from json_tree_view.store import ExpandStateStore
from json_tree_view.tree.nodes import NodeKind, ViewNode
from json_tree_view.view import TreeView, copy_text

NESTED = {"a": {"b": {"c": 1}}, "d": [1, 2]}


def _render(view: TreeView) -> ViewNode:
    root = view.render()
    assert root is not None
    return root


# ---------------------------------------------------------------------------
# Toggling
# ---------------------------------------------------------------------------


class TestToggle:
    @pytest.mark.parametrize("collapsed", [None, True, False, 0, 1, 5])
    def test_toggle_overrides_any_default(self, collapsed: bool | int | None) -> None:
        view = TreeView(NESTED, ViewConfig(collapsed=collapsed))
        before = _render(view).expanded
        assert view.toggle("root") is (not before)
        assert _render(view).expanded is (not before)
        assert view.toggle("root") is before
        assert _render(view).expanded is before

    def test_toggle_expands_collapsed_node(self) -> None:
        view = TreeView(NESTED, ViewConfig(collapsed=1))
        _render(view)
        view.toggle("root/a")
        root = _render(view)
        assert root.children[0].expanded is True

    def test_toggle_only_touches_its_path(self) -> None:
        view = TreeView(NESTED)
        _render(view)
        view.toggle("root/a")
        assert view.store.snapshot() == {"root/a": False}
        root = _render(view)
        assert root.children[1].expanded is True

    def test_descendant_state_survives_parent_collapse(self) -> None:
        view = TreeView(NESTED)
        _render(view)
        view.toggle("root/a/b")  # collapse the grandchild
        _render(view)
        view.toggle("root/a")  # collapse the parent
        _render(view)
        assert view.find("root/a/b") is None
        view.toggle("root/a")  # re-expand the parent
        _render(view)
        node = view.find("root/a/b")
        assert node is not None
        assert node.expanded is False

    def test_double_toggle_without_render(self) -> None:
        view = TreeView(NESTED)
        _render(view)
        assert view.toggle("root/a") is False
        assert view.toggle("root/a") is True

    def test_hidden_descendant_cannot_be_toggled(self) -> None:
        view = TreeView(NESTED)
        _render(view)
        view.toggle("root")
        with pytest.raises(KeyError):
            view.toggle("root/a")
        assert view.store.snapshot() == {"root": False}

    def test_collapse_hides_descendants_from_find(self) -> None:
        view = TreeView(NESTED)
        _render(view)
        view.collapse("root/a")
        assert view.find("root/a/b") is None

    def test_unknown_path_raises(self) -> None:
        view = TreeView(NESTED)
        with pytest.raises(KeyError):
            view.toggle("root/nope")

    def test_leaf_cannot_be_toggled(self) -> None:
        view = TreeView(NESTED)
        with pytest.raises(KeyError):
            view.toggle("root/d/0")

    def test_empty_container_cannot_be_toggled(self) -> None:
        view = TreeView({"e": []})
        with pytest.raises(KeyError):
            view.toggle("root/e")
        assert len(view.store) == 0

    def test_empty_container_ignores_stored_state(self) -> None:
        view = TreeView({"e": {}})
        view.expand("root/e")
        node = view.find("root/e")
        assert node is not None
        assert node.kind == NodeKind.LEAF
        view.collapse("root/e")
        _render(view)
        node = view.find("root/e")
        assert node is not None
        assert node.kind == NodeKind.LEAF
        assert node.expanded is None

    def test_expand_and_collapse_do_not_notify(self) -> None:
        events: list[ExpandEvent] = []
        view = TreeView(NESTED, ViewConfig(on_expand=events.append))
        view.collapse("root/a")
        view.expand("root/a")
        assert events == []
        assert view.is_expanded("root/a", 2) is True


class TestOnExpand:
    def test_event_carries_new_state(self) -> None:
        events: list[ExpandEvent] = []
        view = TreeView(NESTED, ViewConfig(on_expand=events.append))
        _render(view)
        view.toggle("root/a")
        assert events == [
            ExpandEvent(
                expand=False, path_id="root/a", key="a", value=NESTED["a"]
            )
        ]

    def test_root_event_has_no_key(self) -> None:
        events: list[ExpandEvent] = []
        view = TreeView([1], ViewConfig(collapsed=False, on_expand=events.append))
        view.toggle("root")
        assert events[0].expand is True
        assert events[0].key is None

    def test_callback_error_propagates_and_state_unchanged(self) -> None:
        def boom(event: ExpandEvent) -> None:
            raise RuntimeError("listener failed")

        view = TreeView(NESTED, ViewConfig(on_expand=boom))
        with pytest.raises(RuntimeError):
            view.toggle("root")
        assert "root" not in view.store


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_reset_restores_defaults(self) -> None:
        view = TreeView(NESTED, ViewConfig(collapsed=1))
        _render(view)
        view.toggle("root/a")
        view.reset()
        assert len(view.store) == 0
        assert _render(view).children[0].expanded is False

    def test_update_keeps_state(self) -> None:
        view = TreeView(NESTED)
        _render(view)
        view.toggle("root/a")
        view.update({"a": {"x": 1}, "z": 0})
        root = _render(view)
        assert root.children[0].expanded is False

    def test_views_do_not_share_state(self) -> None:
        first = TreeView(NESTED)
        second = TreeView(NESTED)
        first.toggle("root")
        assert _render(second).expanded is True

    def test_injected_store_is_shared(self) -> None:
        store = ExpandStateStore()
        first = TreeView(NESTED, store=store)
        second = TreeView(NESTED, store=store)
        first.toggle("root")
        assert _render(second).expanded is False
        assert second.store is store

    def test_custom_root_id(self) -> None:
        view = TreeView(NESTED, root_id="left")
        root = _render(view)
        assert all(n.path_id.startswith("left") for n in root.walk())
        assert view.root_id == "left"

    def test_properties(self) -> None:
        config = ViewConfig(quotes="'")
        view = TreeView(NESTED, config)
        assert view.value is NESTED
        assert view.config is config

    def test_callable_root_renders_nothing(self) -> None:
        view = TreeView(len)
        assert view.render() is None
        assert view.find("root") is None


# ---------------------------------------------------------------------------
# Copy
# ---------------------------------------------------------------------------


class TestCopy:
    def test_copy_container(self) -> None:
        copied: list[tuple[str, Any]] = []
        view = TreeView(
            NESTED, ViewConfig(on_copied=lambda text, value: copied.append((text, value)))
        )
        text = view.copy("root/d")
        assert text == "[\n  1,\n  2\n]"
        assert copied == [(text, [1, 2])]

    def test_copy_defaults_to_root(self) -> None:
        view = TreeView({"a": 1})
        assert view.copy() == '{\n  "a": 1\n}'

    def test_copy_string_leaf_verbatim(self) -> None:
        view = TreeView({"s": "hello"})
        assert view.copy("root/s") == "hello"

    def test_copy_hidden_node_raises(self) -> None:
        view = TreeView(NESTED, ViewConfig(collapsed=False))
        with pytest.raises(KeyError):
            view.copy("root/a")


class TestCopyText:
    def test_special_leaves(self) -> None:
        assert copy_text(math.nan) == "NaN"
        assert copy_text(UNDEFINED) == "undefined"
        assert copy_text(None) == "null"
        assert copy_text(True) == "true"

    def test_nested_non_finite_floats_use_display_names(self) -> None:
        assert copy_text([math.nan, math.inf, -math.inf]) == (
            '[\n  "NaN",\n  "Infinity",\n  "-Infinity"\n]'
        )
        assert copy_text(math.inf) == "Infinity"

    def test_bigint_and_date(self) -> None:
        assert copy_text({"n": BigInt(10)}) == '{\n  "n": "10"\n}'
        assert copy_text(date(2026, 10, 19)) == '"2026-10-19"'

    def test_set_and_map(self) -> None:
        assert copy_text(frozenset({1})) == "[\n  1\n]"
        assert copy_text({1: "a"}) == '{\n  "1": "a"\n}'

    def test_functions_are_skipped(self) -> None:
        assert copy_text({"a": 1, "f": len}) == '{\n  "a": 1\n}'

    def test_non_ascii_preserved(self) -> None:
        assert copy_text(["ü"]) == '[\n  "ü"\n]'
