"""
Formula Pad

Free text with embedded $inline$ and $$block$$ math, a live preview, and a
symbol palette with numbered favorites.

Subpackages:
    - configs: EditorConfig and default paths
    - data: symbol catalog and key-value stores
    - editor: segmentation, insertion, favorites, sections, hotkeys
    - render: matplotlib mathtext renderer for math spans
"""

from .configs import EditorConfig
from .data import SymbolCatalog, build_default_catalog, MemoryStore, JsonFileStore
from .session import EditorSession
from .session_log import SessionLogger

__version__ = "0.1.0"

__all__ = [
    'EditorConfig',
    'SymbolCatalog',
    'build_default_catalog',
    'MemoryStore',
    'JsonFileStore',
    'EditorSession',
    'SessionLogger',
]
