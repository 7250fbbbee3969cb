"""
Editing Session

Owns the formula text and caret and wires the editor components together:

    text/caret edits  -> segment -> render preview
    palette click     -> insert at caret
    palette drag      -> insert at drop caret, or place into a favorite slot
    favorite drag     -> swap slots, or clear when dropped off the bar
    modifier + digit  -> insert favorite at caret

All collaborators (catalog, store, renderer, clipboard) are passed in.
"""

from typing import Dict, List, Optional, Tuple

from .configs import EditorConfig
from .editor.clipboard import copy_variant, write_clipboard
from .editor.events import DragPayload, drop_on_slot, drop_outside
from .editor.favorites import FavoriteSlots, ToggleResult
from .editor.hotkeys import HotkeyDispatcher, KeyChord
from .editor.insertion import clamp_caret, insert, utf16_len
from .editor.sections import SectionVisibility
from .editor.segmenter import Span, segment
from .render import MathtextRenderer, RenderedSpan, render_spans


class EditorSession:
    """
    One user's editing state.

    Args:
        catalog: SymbolCatalog for the palette
        store: Key-value store for favorites and section state
        config: EditorConfig (defaults if None)
        renderer: Math renderer collaborator (MathtextRenderer if None)
        clipboard: Optional clipboard collaborator with write_text(str)
        event_log: Optional SessionLogger receiving editing events
    """

    def __init__(self, catalog, store, config: Optional[EditorConfig] = None,
                 renderer=None, clipboard=None, event_log=None):
        self.config = config or EditorConfig()
        self.catalog = catalog
        self.store = store
        self.clipboard = clipboard
        self.event_log = event_log

        self.renderer = renderer or MathtextRenderer(
            fmt=self.config.render_format,
            dpi=self.config.render_dpi,
            fontsize=self.config.math_fontsize,
        )
        self.favorites = FavoriteSlots(
            catalog, store,
            capacity=self.config.slot_count,
            key=self.config.favorites_key,
            dense=self.config.dense_favorites,
        )
        self.sections = SectionVisibility(catalog, store, key=self.config.sections_key)
        self.hotkeys = HotkeyDispatcher(self.favorites, self.config.hotkey_modifier)

        self.text = self.config.initial_text
        self.caret = utf16_len(self.text)
        self.palette_visible = False

    def _log(self, event: str, **data):
        if self.event_log is not None:
            self.event_log.log_event(event, **data)

    # =========================================================================
    # Text and Caret
    # =========================================================================

    def set_text(self, text: str, caret=None) -> Tuple[str, int]:
        """Replace the text (direct user edit). Caret defaults to the end."""
        if not isinstance(text, str):
            raise ValueError("text must be a string")
        self.text = text
        self.caret = clamp_caret(text, utf16_len(text) if caret is None else caret)
        return self.text, self.caret

    def set_caret(self, caret) -> int:
        self.caret = clamp_caret(self.text, caret)
        return self.caret

    def insert_symbol(self, symbol: str, caret=None) -> Tuple[str, int]:
        """Insert symbol at caret (current caret if None)."""
        if not isinstance(symbol, str):
            raise ValueError("symbol must be a string")
        self.set_caret(self.caret if caret is None else caret)
        if not symbol:
            return self.text, self.caret

        self.text, self.caret = insert(self.text, self.caret, symbol)
        self._log("insert", symbol=symbol, caret=self.caret)
        return self.text, self.caret

    def handle_hotkey(self, chord: KeyChord, caret=None) -> bool:
        """
        Dispatch a key chord.

        Returns True when a favorite was inserted (the page should prevent
        the default action); text and caret are untouched otherwise.
        """
        current = self.caret if caret is None else clamp_caret(self.text, caret)
        result = self.hotkeys.dispatch(chord, self.text, current)
        if result is None:
            return False

        self.text, self.caret = result
        self._log("hotkey", digit=chord.digit, caret=self.caret)
        return True

    # =========================================================================
    # Favorites (thin wrappers so every change is logged in one place)
    # =========================================================================

    def place_favorite(self, symbol: str, slot: int) -> bool:
        changed = self.favorites.place(symbol, slot)
        if changed:
            self._log("favorite_place", symbol=symbol, slot=slot)
        return changed

    def swap_favorites(self, source: int, target: int) -> bool:
        changed = self.favorites.swap(source, target)
        if changed:
            self._log("favorite_swap", source=source, target=target)
        return changed

    def clear_favorite(self, slot: int) -> bool:
        changed = self.favorites.clear(slot)
        if changed:
            self._log("favorite_clear", slot=slot)
        return changed

    def toggle_favorite(self, symbol: str) -> ToggleResult:
        result = self.favorites.toggle(symbol)
        self._log("favorite_toggle", symbol=symbol, result=result.value)
        return result

    def reorder_favorite(self, symbol: str, direction) -> bool:
        changed = self.favorites.reorder(symbol, direction)
        if changed:
            self._log("favorite_reorder", symbol=symbol, direction=str(direction))
        return changed

    def drop_on_slot(self, payload: DragPayload, slot: int) -> bool:
        changed = drop_on_slot(self.favorites, payload, slot)
        if changed:
            self._log("favorite_drop", slot=slot, **payload.to_dict())
        return changed

    def drop_off_bar(self, payload: DragPayload) -> bool:
        changed = drop_outside(self.favorites, payload)
        if changed:
            self._log("favorite_remove", **payload.to_dict())
        return changed

    def drop_on_text(self, payload: DragPayload, caret=None) -> Tuple[str, int]:
        return self.insert_symbol(payload.symbol, caret)

    # =========================================================================
    # Palette
    # =========================================================================

    def toggle_section(self, category: str) -> bool:
        if category not in self.catalog.categories:
            raise KeyError(f"Unknown category {category!r}")
        return self.sections.toggle(category)

    def toggle_palette(self) -> bool:
        self.palette_visible = not self.palette_visible
        return self.palette_visible

    # =========================================================================
    # Output
    # =========================================================================

    def spans(self) -> List[Span]:
        return segment(self.text)

    def render(self) -> List[RenderedSpan]:
        return render_spans(self.spans(), self.renderer)

    def preview(self) -> Dict:
        rendered = self.render()
        return {
            'html': "".join(r.html for r in rendered),
            'spans': [r.to_dict() for r in rendered],
            'errors': sum(1 for r in rendered if not r.ok),
        }

    def copy(self, variant: str = "raw") -> str:
        """Clipboard text for variant; also handed to the clipboard collaborator."""
        value = copy_variant(self.text, variant)
        write_clipboard(self.clipboard, value)
        return value

    def to_dict(self, include_preview: bool = True) -> Dict:
        state = {
            'text': self.text,
            'caret': self.caret,
            'favorites': self.favorites.to_list(),
            'sections': self.sections.to_dict(),
            'palette_visible': self.palette_visible,
            'hotkey_modifier': self.hotkeys.modifier,
        }
        if include_preview:
            state['preview'] = self.preview()
        return state
