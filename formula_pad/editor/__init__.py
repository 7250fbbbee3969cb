"""
Editor core for Formula Pad.

Modules:
    - segmenter: text -> plain/inline/block math spans
    - insertion: caret-aware symbol insertion (UTF-16 carets)
    - favorites: fixed-slot favorites with persistence
    - sections: palette category expanded/collapsed state
    - hotkeys: modifier+digit -> favorite slot dispatch
    - events: drag-and-drop adapters onto the favorites API
    - clipboard: raw / plain copy variants
"""

from .segmenter import (
    SpanTag,
    Span,
    segment,
    reconstruct,
    has_math,
)
from .insertion import (
    insert,
    clamp_caret,
    utf16_len,
    utf16_to_index,
    index_to_utf16,
)
from .favorites import (
    FavoriteSlots,
    Direction,
    ToggleResult,
)
from .sections import SectionVisibility
from .hotkeys import KeyChord, HotkeyDispatcher
from .events import DragPayload, drop_on_slot, drop_outside
from .clipboard import to_plain_text, copy_variant, write_clipboard

__all__ = [
    # Segmenter
    'SpanTag',
    'Span',
    'segment',
    'reconstruct',
    'has_math',
    # Insertion
    'insert',
    'clamp_caret',
    'utf16_len',
    'utf16_to_index',
    'index_to_utf16',
    # Favorites
    'FavoriteSlots',
    'Direction',
    'ToggleResult',
    'SectionVisibility',
    # Events
    'KeyChord',
    'HotkeyDispatcher',
    'DragPayload',
    'drop_on_slot',
    'drop_outside',
    # Clipboard
    'to_plain_text',
    'copy_variant',
    'write_clipboard',
]
