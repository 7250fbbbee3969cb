"""
Hotkey Dispatcher

modifier + digit d (1..9) inserts the favorite in slot d-1 at the caret.

A chord fires only when it carries exactly the configured modifier; chords
with extra or different modifiers, non-digit keys, and digits whose slot is
empty are left unhandled so the browser/OS shortcut still works.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .insertion import insert

MODIFIERS = ("ctrl", "alt", "meta", "shift")

# KeyboardEvent.code survives layouts where the modifier changes event.key
# (Option+1 on macOS gives "¡")
DIGIT_CODE = re.compile(r'^(?:Digit|Numpad)([0-9])$')


@dataclass(frozen=True)
class KeyChord:
    """A key press with its modifier state, as reported by the browser."""
    key: str
    code: str = ""
    ctrl: bool = False
    alt: bool = False
    meta: bool = False
    shift: bool = False

    @classmethod
    def from_dict(cls, data: Dict) -> "KeyChord":
        """Build from a KeyboardEvent-like dict (ctrlKey or ctrl, ...)."""
        def flag(name):
            return bool(data.get(f"{name}Key", data.get(name, False)))

        return cls(
            key=str(data.get("key", "")),
            code=str(data.get("code", "") or ""),
            ctrl=flag("ctrl"),
            alt=flag("alt"),
            meta=flag("meta"),
            shift=flag("shift"),
        )

    @property
    def active_modifiers(self) -> Tuple[str, ...]:
        return tuple(m for m in MODIFIERS if getattr(self, m))

    @property
    def digit(self) -> Optional[int]:
        m = DIGIT_CODE.match(self.code)
        if m:
            return int(m.group(1))
        if len(self.key) == 1 and self.key in "0123456789":
            return int(self.key)
        return None


class HotkeyDispatcher:
    """Maps modifier+digit chords onto favorite slots."""

    def __init__(self, favorites, modifier: str = "alt"):
        if modifier not in MODIFIERS:
            raise ValueError(f"modifier must be one of {MODIFIERS}, got {modifier!r}")
        self.favorites = favorites
        self.modifier = modifier

    def slot_for(self, chord: KeyChord) -> Optional[int]:
        """Slot index addressed by chord, or None if the chord is not ours."""
        if chord.active_modifiers != (self.modifier,):
            return None
        digit = chord.digit
        if digit is None or not 1 <= digit <= self.favorites.capacity:
            return None
        return digit - 1

    def resolve(self, chord: KeyChord) -> Optional[str]:
        slot = self.slot_for(chord)
        if slot is None:
            return None
        return self.favorites.symbol_at(slot)

    def dispatch(self, chord: KeyChord, text: str, caret: int) -> Optional[Tuple[str, int]]:
        """
        Insert the favorite addressed by chord.

        Returns:
            (new_text, new_caret) when handled (caller suppresses the default
            action), None when the event should be left alone
        """
        symbol = self.resolve(chord)
        if symbol is None:
            return None
        return insert(text, caret, symbol)
