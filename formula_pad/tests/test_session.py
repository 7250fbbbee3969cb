"""
Tests for EditorSession wiring (text, caret, favorites, hotkeys, preview, copy).

Uses an in-memory store and a fake renderer so no matplotlib call is made.
"""

import json

import pytest

from formula_pad.configs import EditorConfig
from formula_pad.data import MemoryStore, build_default_catalog
from formula_pad.editor import DragPayload, KeyChord, ToggleResult
from formula_pad.session import EditorSession


class FakeRenderer:
    """Renders math as <m>content</m>; fails on anything containing 'bad'."""

    def __init__(self):
        self.calls = []

    def render(self, content, display=False):
        self.calls.append((content, display))
        if "bad" in content:
            raise ValueError("cannot parse")
        return f"<m>{content}</m>"


class FakeClipboard:
    def __init__(self):
        self.value = None

    def write_text(self, value):
        self.value = value


class EventRecorder:
    def __init__(self):
        self.events = []

    def log_event(self, event, **data):
        self.events.append((event, data))


def make_session(text="", store=None, **config_overrides):
    config = EditorConfig(initial_text=text, **config_overrides)
    return EditorSession(
        build_default_catalog(),
        store if store is not None else MemoryStore(),
        config,
        renderer=FakeRenderer(),
        clipboard=FakeClipboard(),
        event_log=EventRecorder(),
    )


def test_initial_state():
    print("\n" + "=" * 60)
    print("TEST: Initial State")
    print("=" * 60)

    session = make_session("hello")
    assert session.text == "hello"
    assert session.caret == 5
    assert not session.palette_visible
    assert session.favorites.to_list() == [None] * 9

    state = session.to_dict()
    assert state['hotkey_modifier'] == "alt"
    assert state['preview']['errors'] == 0
    assert 'preview' not in session.to_dict(include_preview=False)

    print("  PASSED!")


def test_insert_symbol_at_caret():
    print("\n" + "=" * 60)
    print("TEST: Insert Symbol")
    print("=" * 60)

    session = make_session("ab")
    assert session.insert_symbol("→", caret=1) == ("a→b", 2)
    assert session.insert_symbol("∀") == ("a→∀b", 3)

    # Out-of-range carets are clamped
    assert session.insert_symbol("!", caret=99) == ("a→∀b!", 5)
    assert session.insert_symbol("¡", caret=-3) == ("¡a→∀b!", 1)

    # Empty symbol is a no-op
    assert session.insert_symbol("") == ("¡a→∀b!", 1)
    with pytest.raises(ValueError):
        session.insert_symbol(None)

    events = [e for e, _ in session.event_log.events]
    assert events.count("insert") == 4

    print("  PASSED!")


def test_set_text_and_caret():
    print("\n" + "=" * 60)
    print("TEST: Set Text / Caret")
    print("=" * 60)

    session = make_session()
    assert session.set_text("abc") == ("abc", 3)
    assert session.set_text("abc", 1) == ("abc", 1)
    assert session.set_caret(10) == 3
    with pytest.raises(ValueError):
        session.set_text(42)

    print("  PASSED!")


def test_hotkey_inserts_favorite():
    print("\n" + "=" * 60)
    print("TEST: Hotkey")
    print("=" * 60)

    session = make_session("x  y")
    session.place_favorite("∀", 0)

    assert session.handle_hotkey(KeyChord(key="1", code="Digit1", alt=True), caret=2)
    assert (session.text, session.caret) == ("x ∀ y", 3)

    # Empty slot: nothing changes
    assert not session.handle_hotkey(KeyChord(key="2", code="Digit2", alt=True), caret=0)
    assert (session.text, session.caret) == ("x ∀ y", 3)

    # Wrong modifier: nothing changes
    assert not session.handle_hotkey(KeyChord(key="1", code="Digit1", ctrl=True))
    assert (session.text, session.caret) == ("x ∀ y", 3)

    print("  PASSED!")


def test_configured_modifier_and_capacity():
    print("\n" + "=" * 60)
    print("TEST: Configured Modifier / Capacity")
    print("=" * 60)

    session = make_session("", hotkey_modifier="ctrl", slot_count=4)
    assert session.favorites.capacity == 4
    session.toggle_favorite("α")
    assert session.handle_hotkey(KeyChord(key="1", ctrl=True))
    assert session.text == "α"

    print("  PASSED!")


def test_favorite_operations_persist():
    print("\n" + "=" * 60)
    print("TEST: Favorite Operations Persist")
    print("=" * 60)

    store = MemoryStore()
    session = make_session(store=store)
    key = session.config.favorites_key

    assert session.toggle_favorite("α") is ToggleResult.ADDED
    assert session.place_favorite("β", 4)
    assert session.swap_favorites(0, 4)
    assert session.reorder_favorite("β", "later")
    assert json.loads(store.get(key)) == session.favorites.to_list()
    assert session.favorites.to_list()[:5] == ["α", None, None, None, "β"]

    assert session.clear_favorite(4)
    reloaded = make_session(store=store)
    assert reloaded.favorites.to_list() == session.favorites.to_list()

    print("  PASSED!")


def test_drag_and_drop():
    print("\n" + "=" * 60)
    print("TEST: Drag and Drop")
    print("=" * 60)

    session = make_session("ab")
    session.place_favorite("∧", 0)
    session.place_favorite("∨", 1)

    assert session.drop_on_slot(DragPayload("∧", 0), 1)
    assert session.favorites.to_list()[:2] == ["∨", "∧"]

    assert session.drop_off_bar(DragPayload("∨", 0))
    assert session.favorites.symbol_at(0) is None

    assert session.drop_on_text(DragPayload("≤"), caret=1) == ("a≤b", 2)

    print("  PASSED!")


def test_sections_and_palette():
    print("\n" + "=" * 60)
    print("TEST: Sections and Palette")
    print("=" * 60)

    session = make_session()
    assert session.toggle_section("Arrows") is False
    assert session.toggle_section("Arrows") is True
    with pytest.raises(KeyError):
        session.toggle_section("Nope")

    assert session.toggle_palette() is True
    assert session.toggle_palette() is False

    print("  PASSED!")


def test_preview():
    print("\n" + "=" * 60)
    print("TEST: Preview")
    print("=" * 60)

    session = make_session("a <b> $x$ and $$y$$ then $bad$")
    preview = session.preview()

    assert preview['errors'] == 1
    assert [s['tag'] for s in preview['spans']] == [
        "plain", "inline", "plain", "block", "plain", "inline",
    ]
    assert '<span class="plain">a &lt;b&gt; </span>' in preview['html']
    assert '<span class="math-inline"><m>x</m></span>' in preview['html']
    assert '<div class="math-block"><m>y</m></div>' in preview['html']
    assert 'class="math-error"' in preview['html']
    assert "$bad$" in preview['html']
    assert ("y", True) in session.renderer.calls

    print("  PASSED!")


def test_copy():
    print("\n" + "=" * 60)
    print("TEST: Copy")
    print("=" * 60)

    session = make_session(r"Area $\pi r^{2}$")
    assert session.copy() == r"Area $\pi r^{2}$"
    assert session.copy("plain") == "Area  r^2"
    assert session.clipboard.value == "Area  r^2"
    with pytest.raises(ValueError):
        session.copy("rtf")

    print("  PASSED!")


if __name__ == "__main__":
    import sys
    sys.exit(pytest.main([__file__, "-v"]))
