"""Catalog Schemas — Pydantic models for the catalog and recycle bin API.

Invariants:
    - EntryCreate.id and EntryCreate.name are stripped and non-empty
    - EntryUpdate never carries an id (the path parameter is authoritative)
    - A blank parent_id is the root (None) on both create and update
    - Responses are built from core values via the from_* classmethods

Design Decisions:
    - Enum fields use core domain types: Pydantic validates membership natively
    - model_dump(exclude_unset=True) on EntryUpdate gives the partial-merge dict
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from catalog.core.catalog_entry import CatalogEntry
from catalog.core.catalog_tree import TreeNode
from catalog.core.domain_types import (
    DropPosition, EntryId, EntryKind, RecycleCategory,
)
from catalog.core.recycle_store import RecycleBin, RecycleRecord
from catalog.core.workspace_state import WorkspaceState


# --- Requests ------------------------------------------------------------------

def _root_if_blank(parent_id: str | None) -> str | None:
    """Blank parent_id means the catalog root, same as null."""
    if parent_id is None or not parent_id.strip():
        return None
    return parent_id


class EntryCreate(BaseModel):
    """New catalog entry. The id is supplied by the caller."""
    id: str = Field(min_length=1, max_length=128)
    parent_id: str | None = None
    type: EntryKind
    name: str = Field(min_length=1, max_length=500)
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", "name")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v

    @field_validator("parent_id")
    @classmethod
    def blank_parent_is_root(cls, v: str | None) -> str | None:
        return _root_if_blank(v)

    def to_entry(self) -> CatalogEntry:
        return CatalogEntry(
            id=EntryId(self.id),
            type=self.type,
            name=self.name,
            parent_id=EntryId(self.parent_id) if self.parent_id is not None else None,
            data=dict(self.data),
        )


class EntryUpdate(BaseModel):
    """Partial entry update. Omitted fields keep their current value."""
    parent_id: str | None = None
    type: EntryKind | None = None
    name: str | None = Field(None, max_length=500)
    data: dict[str, Any] | None = None

    @field_validator("parent_id")
    @classmethod
    def blank_parent_is_root(cls, v: str | None) -> str | None:
        return _root_if_blank(v)

    def to_fields(self) -> dict[str, Any]:
        fields = self.model_dump(exclude_unset=True)
        if fields.get("type") is None:
            fields.pop("type", None)
        return fields


class MoveRequest(BaseModel):
    """Drag-and-drop intent from the catalog tree."""
    drag_id: str = Field(min_length=1)
    drop_id: str = Field(min_length=1)
    drop_position: DropPosition


# --- Responses -----------------------------------------------------------------

class EntryResponse(BaseModel):
    id: str
    parent_id: str | None
    type: EntryKind
    name: str
    data: dict[str, Any]

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "EntryResponse":
        return cls(
            id=entry.id, parent_id=entry.parent_id, type=entry.type,
            name=entry.name, data=dict(entry.data),
        )


class TreeNodeResponse(EntryResponse):
    children: list["TreeNodeResponse"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: TreeNode) -> "TreeNodeResponse":
        entry = node.entry
        return cls(
            id=entry.id, parent_id=entry.parent_id, type=entry.type,
            name=entry.name, data=dict(entry.data),
            children=[cls.from_node(child) for child in node.children],
        )


class RecycleRecordResponse(BaseModel):
    id: str
    expired_at: str
    creator: str
    deleted_item: EntryResponse

    @classmethod
    def from_record(cls, record: RecycleRecord) -> "RecycleRecordResponse":
        return cls(
            id=record.id, expired_at=record.expired_at, creator=record.creator,
            deleted_item=EntryResponse.from_entry(record.deleted_item),
        )


class RecycleBinResponse(BaseModel):
    """Every recycle category, newest record first."""
    http: list[RecycleRecordResponse]
    schema_: list[RecycleRecordResponse] = Field(alias="schema")
    request: list[RecycleRecordResponse]

    model_config = {"populate_by_name": True}

    @classmethod
    def from_bin(cls, recycle_bin: RecycleBin) -> "RecycleBinResponse":
        def records(category: RecycleCategory) -> list[RecycleRecordResponse]:
            return [
                RecycleRecordResponse.from_record(r)
                for r in recycle_bin.records(category)
            ]
        return cls(
            http=records(RecycleCategory.HTTP),
            schema_=records(RecycleCategory.SCHEMA),
            request=records(RecycleCategory.REQUEST),
        )


class WorkspaceResponse(BaseModel):
    entries: list[EntryResponse]
    recycle_bin: RecycleBinResponse

    @classmethod
    def from_state(cls, state: WorkspaceState) -> "WorkspaceResponse":
        return cls(
            entries=[EntryResponse.from_entry(e) for e in state.entries],
            recycle_bin=RecycleBinResponse.from_bin(state.recycle_bin),
        )


class RemovalResponse(WorkspaceResponse):
    removed_ids: list[str]


class RestoreResponse(WorkspaceResponse):
    restored: EntryResponse | None = None
