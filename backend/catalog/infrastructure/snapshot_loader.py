"""Snapshot Loader — reads the initial workspace snapshot from a JSON file.

Invariants:
    - Missing path (None) yields an empty WorkspaceState
    - Any read/parse failure is mapped to SnapshotFormatError
"""

import json
import logging
from pathlib import Path

from catalog.core.errors import SnapshotFormatError
from catalog.core.workspace_snapshot import workspace_from_snapshot
from catalog.core.workspace_state import WorkspaceState

logger = logging.getLogger(__name__)


def load_initial_state(path: str | None) -> WorkspaceState:
    """Load the startup snapshot, or start empty when no path is configured."""
    if not path:
        return WorkspaceState()
    source = Path(path)
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Cannot read workspace snapshot {source}: {e}")
        raise SnapshotFormatError(str(e), str(source)) from e
    except json.JSONDecodeError as e:
        logger.error(f"Workspace snapshot {source} is not JSON: {e}")
        raise SnapshotFormatError(f"invalid JSON: {e.msg}", str(source)) from e
    if not isinstance(raw, dict):
        raise SnapshotFormatError("top-level value must be an object", str(source))
    try:
        state = workspace_from_snapshot(raw)
    except (KeyError, ValueError, TypeError) as e:
        logger.error(f"Workspace snapshot {source} is malformed: {e}")
        raise SnapshotFormatError(f"malformed content: {e}", str(source)) from e
    logger.info(
        f"Loaded workspace snapshot from {source}: "
        f"{len(state.entries)} entries, {state.recycle_bin.total} recycled",
    )
    return state
