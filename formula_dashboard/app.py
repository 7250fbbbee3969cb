"""
Formula Pad Dashboard - Web app for composing text with embedded math.

Features:
- Live preview of $inline$ and $$block$$ math as you type
- Symbol palette with collapsible categories
- Nine numbered favorites: drag to assign/rearrange, modifier+digit to insert
- Copy as raw text or as plain text with math markup stripped
"""

import functools
import threading
from typing import Optional

from flask import Flask, render_template, jsonify, request
from flask_socketio import SocketIO, emit

from formula_pad.configs import EditorConfig
from formula_pad.data import JsonFileStore, build_default_catalog
from formula_pad.editor import DragPayload, KeyChord
from formula_pad.session import EditorSession
from formula_pad.session_log import SessionLogger


def api_errors(view):
    """Map precondition errors from the editor onto 400 responses."""
    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except (ValueError, IndexError, KeyError) as e:
            message = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
            return jsonify({'error': message}), 400
    return wrapper


def _payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _require(data: dict, name: str):
    if name not in data:
        raise ValueError(f"missing field {name!r}")
    return data[name]


def create_app(config: Optional[EditorConfig] = None, store=None, catalog=None,
               renderer=None, clipboard=None, event_log=None):
    """
    Build the Flask app and SocketIO server around one editing session.

    Args:
        config: EditorConfig (defaults if None)
        store: Key-value store (JsonFileStore at config.store_path if None)
        catalog: SymbolCatalog (built-in palette if None)
        renderer: Math renderer (MathtextRenderer from config if None)
        clipboard: Optional server-side clipboard collaborator
        event_log: Optional SessionLogger

    Returns:
        (app, socketio)
    """
    config = config or EditorConfig()
    catalog = catalog or build_default_catalog()
    store = store if store is not None else JsonFileStore(config.store_path)

    app = Flask(__name__)
    app.config['SECRET_KEY'] = 'formula-pad-secret'
    socketio = SocketIO(app, cors_allowed_origins="*")

    session = EditorSession(
        catalog, store, config,
        renderer=renderer, clipboard=clipboard, event_log=event_log,
    )
    session_lock = threading.Lock()

    app.extensions['formula_pad'] = session

    def state_response(**extra):
        state = session.to_dict()
        state.update(extra)
        return jsonify(state)

    @app.route('/')
    def index():
        return render_template('index.html')

    @app.route('/api/state')
    def get_state():
        """Get current editor state, with the palette."""
        with session_lock:
            return state_response(catalog=catalog.to_dict(),
                                  slot_count=config.slot_count)

    @app.route('/api/text', methods=['POST'])
    @api_errors
    def update_text():
        """Replace text after a direct edit in the text box."""
        data = _payload()
        with session_lock:
            session.set_text(_require(data, 'text'), data.get('caret'))
            return state_response()

    @app.route('/api/insert', methods=['POST'])
    @api_errors
    def insert_symbol():
        """Insert a symbol (palette click or drop on the text box)."""
        data = _payload()
        with session_lock:
            session.insert_symbol(_require(data, 'symbol'), data.get('caret'))
            return state_response()

    @app.route('/api/hotkey', methods=['POST'])
    @api_errors
    def hotkey():
        """Dispatch a modifier+digit chord; 'handled' tells the page to preventDefault."""
        data = _payload()
        chord = KeyChord.from_dict(data)
        with session_lock:
            handled = session.handle_hotkey(chord, data.get('caret'))
            return state_response(handled=handled)

    # =========================================================================
    # Favorites
    # =========================================================================

    @app.route('/api/favorites/place', methods=['POST'])
    @api_errors
    def place_favorite():
        data = _payload()
        with session_lock:
            changed = session.place_favorite(_require(data, 'symbol'), _require(data, 'slot'))
            return state_response(changed=changed)

    @app.route('/api/favorites/swap', methods=['POST'])
    @api_errors
    def swap_favorites():
        data = _payload()
        with session_lock:
            changed = session.swap_favorites(_require(data, 'source'), _require(data, 'target'))
            return state_response(changed=changed)

    @app.route('/api/favorites/clear', methods=['POST'])
    @api_errors
    def clear_favorite():
        data = _payload()
        with session_lock:
            changed = session.clear_favorite(_require(data, 'slot'))
            return state_response(changed=changed)

    @app.route('/api/favorites/toggle', methods=['POST'])
    @api_errors
    def toggle_favorite():
        data = _payload()
        with session_lock:
            result = session.toggle_favorite(_require(data, 'symbol'))
            return state_response(result=result.value)

    @app.route('/api/favorites/reorder', methods=['POST'])
    @api_errors
    def reorder_favorite():
        data = _payload()
        with session_lock:
            changed = session.reorder_favorite(_require(data, 'symbol'), _require(data, 'direction'))
            return state_response(changed=changed)

    @app.route('/api/favorites/drop', methods=['POST'])
    @api_errors
    def drop_favorite():
        """
        Drop a drag payload.

        slot = int -> onto that favorite slot
        slot = null -> off the favorites bar (removes a dragged favorite)
        """
        data = _payload()
        payload = DragPayload.from_dict(_require(data, 'payload'))
        slot = data.get('slot')
        with session_lock:
            if slot is None:
                changed = session.drop_off_bar(payload)
            else:
                changed = session.drop_on_slot(payload, slot)
            return state_response(changed=changed)

    # =========================================================================
    # Palette
    # =========================================================================

    @app.route('/api/sections/toggle', methods=['POST'])
    @api_errors
    def toggle_section():
        data = _payload()
        with session_lock:
            expanded = session.toggle_section(_require(data, 'category'))
            return state_response(expanded=expanded)

    @app.route('/api/sections/all', methods=['POST'])
    @api_errors
    def set_all_sections():
        data = _payload()
        with session_lock:
            expanded = _require(data, 'expanded')
            if not isinstance(expanded, bool):
                raise ValueError("'expanded' must be true or false")
            session.sections.set_all(expanded)
            return state_response()

    @app.route('/api/palette/toggle', methods=['POST'])
    def toggle_palette():
        with session_lock:
            visible = session.toggle_palette()
            return state_response(palette_visible=visible)

    @app.route('/api/copy')
    @api_errors
    def copy_text():
        """Text for the browser to put on the clipboard."""
        variant = request.args.get('variant', 'raw')
        with session_lock:
            return jsonify({'variant': variant, 'text': session.copy(variant)})

    # =========================================================================
    # WebSocket
    # =========================================================================

    @socketio.on('connect')
    def handle_connect():
        """Handle client connection."""
        with session_lock:
            emit('editor_state', session.to_dict())

    @socketio.on('text_changed')
    def handle_text_changed(data):
        """Re-render the preview on every keystroke."""
        if not isinstance(data, dict) or not isinstance(data.get('text'), str):
            emit('editor_error', {'error': "text_changed needs a 'text' string"})
            return
        with session_lock:
            session.set_text(data['text'], data.get('caret'))
            emit('preview', {
                'caret': session.caret,
                **session.preview(),
            })

    return app, socketio


if __name__ == '__main__':
    config = EditorConfig()
    log = SessionLogger(config.log_dir)
    app, socketio = create_app(config, event_log=log)
    print("=" * 60)
    print("Formula Pad")
    print("=" * 60)
    print("Open http://localhost:5000 in your browser")
    print("=" * 60)
    socketio.run(app, host='0.0.0.0', port=5000, debug=False, allow_unsafe_werkzeug=True)
