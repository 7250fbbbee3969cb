"""
Caret-Aware Insertion

Carets are offsets in UTF-16 code units, the unit a browser text box reports
through selectionStart. Python strings index by code point, so astral
characters (one code point, two code units) need converting both ways.
"""

from typing import Tuple


def _units(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def utf16_len(text: str) -> int:
    """Length of text in UTF-16 code units."""
    return sum(_units(ch) for ch in text)


def utf16_to_index(text: str, offset: int) -> int:
    """
    Convert a UTF-16 offset to a string index.

    An offset that falls inside a surrogate pair resolves to the start of
    that character.
    """
    units = 0
    for i, ch in enumerate(text):
        width = _units(ch)
        if units + width > offset:
            return i
        units += width
    return len(text)


def index_to_utf16(text: str, index: int) -> int:
    """Convert a string index to a UTF-16 offset."""
    return utf16_len(text[:index])


def clamp_caret(text: str, caret) -> int:
    """
    Clamp a caret into [0, utf16_len(text)], snapping to a character boundary.

    Non-integer carets (None, garbage from the client) clamp to the end.
    """
    total = utf16_len(text)
    try:
        caret = int(caret)
    except (TypeError, ValueError, OverflowError):
        return total
    if caret <= 0:
        return 0
    if caret >= total:
        return total
    return index_to_utf16(text, utf16_to_index(text, caret))


def insert(text: str, caret: int, symbol: str) -> Tuple[str, int]:
    """
    Insert symbol at caret.

    Args:
        text: Current text
        caret: UTF-16 offset in [0, utf16_len(text)]
        symbol: Text to insert

    Returns:
        (new_text, new_caret) with new_caret just after the inserted symbol

    Raises:
        ValueError: caret outside the text (clamp with clamp_caret first)
    """
    if not 0 <= caret <= utf16_len(text):
        raise ValueError(f"Caret {caret} outside text of length {utf16_len(text)}")

    index = utf16_to_index(text, caret)
    new_text = text[:index] + symbol + text[index:]
    new_caret = index_to_utf16(text, index) + utf16_len(symbol)
    return new_text, new_caret
