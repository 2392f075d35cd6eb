"""Catalog Store tests — pure operations over the flat entry list.

Tests cover:
    - add appends at the end
    - remove: single-level cascade (default) vs recursive cascade
    - update: shallow data merge with name fallback, unknown id no-op
    - restore: idempotent, never duplicates a live id
    - move: onto folder, after sibling, reparenting, no-op cases, count preserved
"""

import pytest

from catalog.core.catalog_entry import CatalogEntry
from catalog.core.catalog_store import (
    add_entry, find_entry, index_of, move_entry, partition_removal,
    remove_entry, restore_entry, update_entry,
)
from catalog.core.domain_types import DropPosition, EntryKind


def _entry(id, type=EntryKind.API_DETAIL, parent_id=None, name=None, data=None):
    return CatalogEntry(
        id=id, type=type, name=name or f"Entry {id}",
        parent_id=parent_id, data=data or {},
    )


def _folder(id, parent_id=None):
    return _entry(id, EntryKind.API_DETAIL_FOLDER, parent_id)


def _ids(entries):
    return [e.id for e in entries]


# --- Lookup / add --------------------------------------------------------------

def test_find_entry_and_index_of():
    entries = (_entry("a"), _entry("b"))
    assert index_of(entries, "b") == 1
    assert find_entry(entries, "a").id == "a"
    assert index_of(entries, "zzz") is None
    assert find_entry(entries, "zzz") is None


def test_add_entry_appends_at_end():
    entries = (_entry("a"),)
    result = add_entry(entries, _entry("b"))
    assert _ids(result) == ["a", "b"]
    assert _ids(entries) == ["a"]


# --- Remove ----------------------------------------------------------------------

def test_remove_leaf_entry():
    entries = (_entry("a"), _entry("b"))
    assert _ids(remove_entry(entries, "a")) == ["b"]


def test_remove_folder_removes_direct_children():
    entries = (_folder("1"), _entry("2", parent_id="1"), _entry("3"))
    assert _ids(remove_entry(entries, "1")) == ["3"]


def test_remove_leaves_no_entry_with_id_or_parent_id():
    entries = (
        _folder("f"), _entry("x", parent_id="f"), _entry("y", parent_id="f"),
        _entry("z"),
    )
    result = remove_entry(entries, "f")
    assert all(e.id != "f" and e.parent_id != "f" for e in result)


def test_remove_single_level_keeps_grandchildren_as_orphans():
    entries = (
        _folder("root"), _folder("sub", parent_id="root"),
        _entry("deep", parent_id="sub"),
    )
    result = remove_entry(entries, "root")
    assert _ids(result) == ["deep"]
    assert result[0].parent_id == "sub"


def test_remove_recursive_drops_all_descendants():
    entries = (
        _folder("root"), _folder("sub", parent_id="root"),
        _entry("deep", parent_id="sub"), _entry("other"),
    )
    assert _ids(remove_entry(entries, "root", recursive=True)) == ["other"]


def test_partition_removal_returns_removed_in_list_order():
    entries = (_entry("c", parent_id="f"), _folder("f"), _entry("d", parent_id="f"))
    kept, removed = partition_removal(entries, "f")
    assert kept == ()
    assert _ids(removed) == ["c", "f", "d"]


def test_remove_unknown_id_is_noop():
    entries = (_entry("a"),)
    kept, removed = partition_removal(entries, "missing")
    assert kept == entries
    assert removed == ()


def test_remove_missing_folder_still_clears_its_orphans():
    entries = (_entry("orphan", parent_id="gone"), _entry("a"))
    assert _ids(remove_entry(entries, "gone")) == ["a"]


# --- Update ----------------------------------------------------------------------

def test_update_merges_data_one_level():
    entries = (_entry("a", data={"method": "GET", "path": "/pets"}),)
    result = update_entry(entries, "a", {"data": {"path": "/users"}})
    assert result[0].data == {"method": "GET", "path": "/users", "name": "Entry a"}


def test_update_is_shallow_not_deep():
    entries = (_entry("a", data={"headers": {"x": "1", "y": "2"}}),)
    result = update_entry(entries, "a", {"data": {"headers": {"x": "9"}}})
    assert result[0].data["headers"] == {"x": "9"}


def test_update_name_sets_entry_and_data_name():
    entries = (_entry("a", name="Old"),)
    result = update_entry(entries, "a", {"name": "New"})
    assert result[0].name == "New"
    assert result[0].data["name"] == "New"


def test_update_without_name_falls_back_to_existing():
    entries = (_entry("a", name="Keep"),)
    result = update_entry(entries, "a", {"data": {"x": 1}})
    assert result[0].name == "Keep"
    assert result[0].data["name"] == "Keep"


def test_update_empty_name_falls_back_to_existing():
    entries = (_entry("a", name="Keep"),)
    assert update_entry(entries, "a", {"name": ""})[0].name == "Keep"


def test_update_can_reparent():
    entries = (_folder("f"), _entry("a"))
    result = update_entry(entries, "a", {"parent_id": "f"})
    assert result[1].parent_id == "f"


def test_update_ignores_id_field():
    entries = (_entry("a"),)
    result = update_entry(entries, "a", {"id": "b", "name": "Renamed"})
    assert result[0].id == "a"


def test_update_unknown_id_is_noop():
    entries = (_entry("a"),)
    assert update_entry(entries, "missing", {"name": "X"}) == entries


def test_update_does_not_touch_other_entries():
    entries = (_entry("a"), _entry("b"))
    result = update_entry(entries, "a", {"name": "X"})
    assert result[1] is entries[1]


# --- Restore ---------------------------------------------------------------------

def test_restore_appends_at_end():
    entries = (_entry("a"),)
    assert _ids(restore_entry(entries, _entry("b"))) == ["a", "b"]


def test_restore_is_idempotent():
    snapshot = _entry("b")
    once = restore_entry((_entry("a"),), snapshot)
    twice = restore_entry(once, snapshot)
    assert twice == once


def test_restore_existing_id_leaves_catalog_unchanged():
    entries = (_entry("a", name="Live"),)
    result = restore_entry(entries, _entry("a", name="Recycled"))
    assert result == entries


# --- Move ------------------------------------------------------------------------

def test_move_after_sibling_reorders():
    entries = (_entry("a"), _entry("b"), _entry("c"))
    result = move_entry(entries, "a", "c", DropPosition.AFTER)
    assert _ids(result) == ["b", "c", "a"]


def test_move_after_backwards():
    entries = (_entry("a"), _entry("b"), _entry("c"))
    result = move_entry(entries, "c", "a", DropPosition.AFTER)
    assert _ids(result) == ["a", "c", "b"]


def test_move_onto_folder_reparents_and_follows_folder():
    entries = (_entry("x"), _entry("y"), _folder("f"))
    result = move_entry(entries, "x", "f", DropPosition.ONTO)
    assert _ids(result) == ["y", "f", "x"]
    assert find_entry(result, "x").parent_id == "f"


def test_move_onto_non_folder_is_noop():
    entries = (_entry("x"), _entry("y"))
    assert move_entry(entries, "x", "y", DropPosition.ONTO) == entries


def test_move_after_adopts_drop_target_parent():
    entries = (_folder("f"), _entry("in", parent_id="f"), _entry("out"))
    result = move_entry(entries, "out", "in", DropPosition.AFTER)
    assert _ids(result) == ["f", "in", "out"]
    assert find_entry(result, "out").parent_id == "f"


def test_move_after_to_root_level_clears_parent():
    entries = (_folder("f"), _entry("in", parent_id="f"), _entry("top"))
    result = move_entry(entries, "in", "top", DropPosition.AFTER)
    assert find_entry(result, "in").parent_id is None
    assert _ids(result) == ["f", "top", "in"]


def test_move_after_same_parent_changes_position_only():
    entries = (_folder("f"), _entry("a", parent_id="f"), _entry("b", parent_id="f"))
    result = move_entry(entries, "a", "b", DropPosition.AFTER)
    assert _ids(result) == ["f", "b", "a"]
    assert result[2] is entries[1]


def test_move_before_is_noop():
    entries = (_entry("a"), _entry("b"))
    assert move_entry(entries, "b", "a", DropPosition.BEFORE) == entries


@pytest.mark.parametrize("drag,drop", [("missing", "a"), ("a", "missing")])
def test_move_unknown_id_is_noop(drag, drop):
    entries = (_entry("a"), _folder("f"))
    assert move_entry(entries, drag, drop, DropPosition.AFTER) == entries


def test_move_onto_itself_is_noop():
    entries = (_folder("f"),)
    assert move_entry(entries, "f", "f", DropPosition.ONTO) == entries


def test_move_folder_into_own_descendant_is_noop():
    entries = (_folder("f"), _folder("sub", parent_id="f"))
    assert move_entry(entries, "f", "sub", DropPosition.ONTO) == entries


def test_move_folder_after_own_child_is_noop():
    entries = (_folder("f"), _entry("child", parent_id="f"))
    assert move_entry(entries, "f", "child", DropPosition.AFTER) == entries


def test_move_sequence_preserves_entry_count():
    entries = (
        _folder("f1"), _entry("a", parent_id="f1"), _folder("f2"),
        _entry("b", parent_id="f2"), _entry("c"),
    )
    moves = [
        ("a", "f2", DropPosition.ONTO), ("c", "a", DropPosition.AFTER),
        ("f1", "b", DropPosition.AFTER), ("b", "c", DropPosition.ONTO),
        ("f2", "f1", DropPosition.ONTO), ("c", "f1", DropPosition.AFTER),
    ]
    for drag, drop, position in moves:
        entries = move_entry(entries, drag, drop, position)
        assert len(entries) == 5
        assert sorted(_ids(entries)) == ["a", "b", "c", "f1", "f2"]
