"""
Key-Value Stores for persisted editor state

The editor core only needs two calls from its store:

    get(key) -> Optional[str]
    set(key, value: str) -> None

Implementations:
    - MemoryStore: dict-backed, for tests and throwaway sessions
    - JsonFileStore: one JSON object on disk, rewritten on every set

Store content is untrusted. Callers in the core go through safe_get / safe_set,
which log and swallow collaborator failures so a broken store never blocks
editing.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class MemoryStore:
    """In-memory store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value


class JsonFileStore:
    """
    Store backed by a single JSON file mapping key -> string.

    The file is read once on construction; every set rewrites it through a
    temporary file and an atomic replace. A missing or corrupt file starts
    the store empty.
    """

    def __init__(self, path):
        self.path = Path(path)
        self.data: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"Ignoring unreadable store {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring store {self.path}: not a JSON object")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=self.path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)


# =============================================================================
# Collaborator Boundary
# =============================================================================

def safe_get(store, key: str) -> Optional[str]:
    """Read a key, treating any store failure as an absent value."""
    try:
        value = store.get(key)
    except Exception as e:
        logger.warning(f"Store read failed for {key!r}: {e}")
        return None
    if value is not None and not isinstance(value, str):
        logger.warning(f"Store returned non-string for {key!r}, ignoring")
        return None
    return value


def safe_set(store, key: str, value: str) -> bool:
    """Write a key; failures are logged and swallowed."""
    try:
        store.set(key, value)
    except Exception as e:
        logger.warning(f"Store write failed for {key!r}: {e}")
        return False
    return True


def load_json(store, key: str):
    """Read and decode a JSON value; None when absent or malformed."""
    raw = safe_get(store, key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Malformed JSON under {key!r}: {e}")
        return None


def save_json(store, key: str, value) -> bool:
    return safe_set(store, key, json.dumps(value, ensure_ascii=False))
