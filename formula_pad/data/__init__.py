"""
Formula Pad Data

- SymbolCatalog: read-only palette of symbols grouped by category
- MemoryStore / JsonFileStore: key-value stores for persisted editor state
"""

from .symbol_catalog import (
    SymbolEntry,
    SymbolCatalog,
    CatalogError,
    default_categories,
    build_default_catalog,
    get_catalog_statistics,
)
from .storage import (
    MemoryStore,
    JsonFileStore,
    safe_get,
    safe_set,
    load_json,
    save_json,
)

__all__ = [
    'SymbolEntry',
    'SymbolCatalog',
    'CatalogError',
    'default_categories',
    'build_default_catalog',
    'get_catalog_statistics',
    'MemoryStore',
    'JsonFileStore',
    'safe_get',
    'safe_set',
    'load_json',
    'save_json',
]
