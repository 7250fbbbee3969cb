#!/usr/bin/env python
"""
Launch the Formula Pad editor.

Usage:
    python run_editor.py
    python run_editor.py --port 8000 --slots 9 --modifier ctrl
    python run_editor.py --config editor.json

Then open http://localhost:5000 in your browser.
"""

import argparse
import sys
from pathlib import Path


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Formula Pad: text with live math preview and a symbol palette",
    )
    parser.add_argument("--config", type=str, default=None,
                        help="JSON config file (EditorConfig fields)")
    parser.add_argument("--host", type=str, default="0.0.0.0")
    parser.add_argument("--port", "-p", type=int, default=5000)
    parser.add_argument("--store", type=str, default=None,
                        help="Path of the JSON file holding favorites and section state")
    parser.add_argument("--log-dir", type=str, default=None)
    parser.add_argument("--slots", type=int, default=None,
                        help="Number of favorite slots")
    parser.add_argument("--modifier", choices=["ctrl", "alt", "meta", "shift"], default=None,
                        help="Modifier for digit hotkeys")
    parser.add_argument("--dense", action="store_true",
                        help="Keep favorites packed as an ordered list")
    parser.add_argument("--format", choices=["svg", "png"], default=None,
                        help="Math render format")
    parser.add_argument("--check", action="store_true",
                        help="Print path configuration and exit")
    return parser.parse_args(argv)


def build_config(args):
    from formula_pad.configs import EditorConfig

    config = EditorConfig.load(args.config) if args.config else EditorConfig()
    overrides = {
        'store_path': args.store,
        'log_dir': args.log_dir,
        'slot_count': args.slots,
        'hotkey_modifier': args.modifier,
        'render_format': args.format,
    }
    data = config.to_dict()
    data.update({k: v for k, v in overrides.items() if v is not None})
    if args.dense:
        data['dense_favorites'] = True
    return EditorConfig.from_dict(data)


def main(argv=None):
    # Check dependencies
    try:
        import flask
        import flask_socketio
        import matplotlib
    except ImportError as e:
        print(f"Missing dependency: {e.name}")
        print("Install with: pip install -e .")
        return 1

    sys.path.insert(0, str(Path(__file__).parent))
    from formula_pad.configs import check_paths
    from formula_pad.session_log import SessionLogger
    from formula_dashboard.app import create_app

    args = parse_args(argv)
    config = build_config(args)

    if args.check:
        return 0 if check_paths(config) else 1

    log = SessionLogger(config.log_dir)
    log.log_config(config)
    app, socketio = create_app(config, event_log=log)
    log.info(f"Serving on http://{args.host}:{args.port} (store: {config.store_path})")

    print("=" * 60)
    print("Starting Formula Pad...")
    print("=" * 60)
    print()
    print(f"Open http://localhost:{args.port} in your browser")
    print()
    print("=" * 60)

    socketio.run(app, host=args.host, port=args.port, debug=False,
                 allow_unsafe_werkzeug=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
