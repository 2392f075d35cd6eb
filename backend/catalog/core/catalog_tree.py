"""Catalog Tree — rebuilds the folder hierarchy from the flat entry list.

Invariants:
    - Every entry appears exactly once in the built tree
    - Children keep their relative order from the flat list
    - Entries with a null, dangling, or cyclic parent chain surface as roots

Design Decisions:
    - Tree is a derived read model only; the flat tuple stays the source of truth
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Sequence

from catalog.core.catalog_entry import CatalogEntry
from catalog.core.domain_types import EntryId


@dataclass(frozen=True)
class TreeNode:
    """An entry with its nested children."""
    entry: CatalogEntry
    children: tuple["TreeNode", ...] = ()


def _children_by_parent(
    entries: Sequence[CatalogEntry],
) -> dict[EntryId, list[CatalogEntry]]:
    children: dict[EntryId, list[CatalogEntry]] = defaultdict(list)
    for entry in entries:
        if entry.parent_id is not None:
            children[entry.parent_id].append(entry)
    return children


def build_tree(entries: Sequence[CatalogEntry]) -> tuple[TreeNode, ...]:
    """Build root nodes from the flat list. Pure, no IO."""
    ids = {e.id for e in entries}
    children = _children_by_parent(entries)
    visited: set[EntryId] = set()

    def build(entry: CatalogEntry) -> TreeNode:
        visited.add(entry.id)
        kids = tuple(
            build(child) for child in children.get(entry.id, [])
            if child.id not in visited
        )
        return TreeNode(entry=entry, children=kids)

    roots = [
        build(e) for e in entries
        if e.parent_id is None or e.parent_id not in ids
    ]
    # Anything left is trapped in a parent cycle
    for entry in entries:
        if entry.id not in visited:
            roots.append(build(entry))
    return tuple(roots)


def descendant_ids(
    entries: Sequence[CatalogEntry], entry_id: EntryId,
) -> set[EntryId]:
    """All transitive descendants of entry_id (excluding itself)."""
    children = _children_by_parent(entries)
    found: set[EntryId] = set()
    pending = [entry_id]
    while pending:
        for child in children.get(pending.pop(), []):
            if child.id not in found and child.id != entry_id:
                found.add(child.id)
                pending.append(child.id)
    return found
