"""
Configuration for Formula Pad.

- EditorConfig: slot capacity, storage keys, hotkey modifier, rendering options
- Default paths for the persisted store and session logs
"""

from .settings import (
    EditorConfig,
    PROJECT_ROOT,
    DEFAULT_STORE_PATH,
    LOG_DIR,
    DEFAULT_TEXT,
    HOTKEY_MODIFIERS,
    check_paths,
)

__all__ = [
    'EditorConfig',
    'PROJECT_ROOT',
    'DEFAULT_STORE_PATH',
    'LOG_DIR',
    'DEFAULT_TEXT',
    'HOTKEY_MODIFIERS',
    'check_paths',
]
