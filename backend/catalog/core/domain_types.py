"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntryId and RecordId are opaque strings, never parsed
    - EntryKind is a closed set; folder kinds are exactly the *Folder members
    - RecycleCategory has exactly 3 members (Markdown folds into HTTP)
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntryId = NewType("EntryId", str)       # supplied by the caller
RecordId = NewType("RecordId", str)     # generated short id


# ─── Enums ───────────────────────────────────────────────────────

class EntryKind(str, Enum):
    """Every kind of node that can live in the catalog."""
    API_DETAIL = "apiDetail"
    API_DETAIL_FOLDER = "apiDetailFolder"
    API_SCHEMA = "apiSchema"
    API_SCHEMA_FOLDER = "apiSchemaFolder"
    HTTP_REQUEST = "httpRequest"
    REQUEST_FOLDER = "requestFolder"
    DOC = "doc"


class CatalogType(str, Enum):
    """Top-level catalog section an entry kind belongs to."""
    HTTP = "http"
    SCHEMA = "schema"
    REQUEST = "request"
    MARKDOWN = "markdown"


class RecycleCategory(str, Enum):
    """Recycle bin buckets. Values match the CatalogType they collect."""
    HTTP = "http"
    SCHEMA = "schema"
    REQUEST = "request"


class DropPosition(str, Enum):
    """Where a dragged entry lands relative to the drop target."""
    ONTO = "onto"
    AFTER = "after"
    BEFORE = "before"  # emitted by tree widgets, never acted on


class Locale(str, Enum):
    """Locales with a translated recycle expiry label."""
    EN = "en"
    ZH = "zh"


# ─── Constants ───────────────────────────────────────────────────

FOLDER_KINDS: frozenset[EntryKind] = frozenset({
    EntryKind.API_DETAIL_FOLDER,
    EntryKind.API_SCHEMA_FOLDER,
    EntryKind.REQUEST_FOLDER,
})

RECYCLE_EXPIRY_LABELS: dict[Locale, str] = {
    Locale.EN: "30 days",
    Locale.ZH: "30天",
}

RECORD_ID_LENGTH = 6
