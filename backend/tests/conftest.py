"""Root conftest — shared test configuration."""

import os

# Tests never read a real snapshot file or emit JSON logs
os.environ.setdefault("CATALOG_INITIAL_SNAPSHOT_PATH", "")
os.environ.setdefault("CATALOG_LOG_FORMAT", "text")
os.environ.setdefault("CATALOG_CREATOR", "tester")
