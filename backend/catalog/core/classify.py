"""Classification — maps entry kinds to catalog sections and recycle buckets.

Invariants:
    - Folder kinds are never recycle-eligible
    - Markdown documents share the HTTP recycle bucket
    - recycle_category_of is consulted once per removed entry
"""

from catalog.core.domain_types import (
    CatalogType, EntryKind, RecycleCategory, FOLDER_KINDS,
)

_CATALOG_TYPES: dict[EntryKind, CatalogType] = {
    EntryKind.API_DETAIL: CatalogType.HTTP,
    EntryKind.API_DETAIL_FOLDER: CatalogType.HTTP,
    EntryKind.API_SCHEMA: CatalogType.SCHEMA,
    EntryKind.API_SCHEMA_FOLDER: CatalogType.SCHEMA,
    EntryKind.HTTP_REQUEST: CatalogType.REQUEST,
    EntryKind.REQUEST_FOLDER: CatalogType.REQUEST,
    EntryKind.DOC: CatalogType.MARKDOWN,
}

_RECYCLE_CATEGORIES: dict[CatalogType, RecycleCategory] = {
    CatalogType.HTTP: RecycleCategory.HTTP,
    CatalogType.SCHEMA: RecycleCategory.SCHEMA,
    CatalogType.REQUEST: RecycleCategory.REQUEST,
}


def is_folder(kind: EntryKind) -> bool:
    return kind in FOLDER_KINDS


def catalog_type_of(kind: EntryKind) -> CatalogType:
    """Catalog section the kind is listed under."""
    return _CATALOG_TYPES[kind]


def recycle_category_of(kind: EntryKind) -> RecycleCategory | None:
    """Recycle bucket for a removed entry, or None if it is not recoverable."""
    if is_folder(kind):
        return None
    catalog_type = catalog_type_of(kind)
    if catalog_type == CatalogType.MARKDOWN:
        catalog_type = CatalogType.HTTP
    return _RECYCLE_CATEGORIES.get(catalog_type)
