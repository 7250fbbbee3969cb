"""
Editor configuration for Formula Pad.

Update the default paths to match your local setup, or pass a JSON config
file to the launcher (see run_editor.py).
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Persisted favorites / section state (JSON key-value file)
DEFAULT_STORE_PATH = PROJECT_ROOT / "data" / "editor_store.json"

# Session logs
LOG_DIR = PROJECT_ROOT / "logs"

HOTKEY_MODIFIERS = ("ctrl", "alt", "meta", "shift")
RENDER_FORMATS = ("svg", "png")

DEFAULT_TEXT = (
    "Truth is what we condition on: $p(x \\mid C) = p(x \\mid y, C)$ "
    "implies $y$ is irrelevant."
)


@dataclass
class EditorConfig:
    """Editor configuration."""

    # Favorites
    slot_count: int = 9
    dense_favorites: bool = False
    favorites_key: str = "formula_pad.favorite_slots"
    sections_key: str = "formula_pad.section_visibility"

    # Keyboard: modifier that must accompany a digit to fire a favorite
    hotkey_modifier: str = "alt"

    # Storage and logging
    store_path: str = str(DEFAULT_STORE_PATH)
    log_dir: str = str(LOG_DIR)

    # Rendering
    render_format: str = "svg"
    render_dpi: int = 120
    math_fontsize: float = 14.0

    initial_text: str = DEFAULT_TEXT

    def __post_init__(self):
        if self.slot_count < 1:
            raise ValueError(f"slot_count must be >= 1, got {self.slot_count}")
        if self.hotkey_modifier not in HOTKEY_MODIFIERS:
            raise ValueError(
                f"hotkey_modifier must be one of {HOTKEY_MODIFIERS}, "
                f"got {self.hotkey_modifier!r}"
            )
        if self.render_format not in RENDER_FORMATS:
            raise ValueError(
                f"render_format must be one of {RENDER_FORMATS}, "
                f"got {self.render_format!r}"
            )
        if self.favorites_key == self.sections_key:
            raise ValueError("favorites_key and sections_key must differ")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Build a config from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def save(self, path: str):
        """Save configuration to JSON file."""
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: str) -> "EditorConfig":
        """Load configuration from JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"config file {path} must contain a JSON object")
        return cls.from_dict(data)


# Verify paths exist
def check_paths(config: EditorConfig = None) -> bool:
    """Check if configured paths exist and print status."""
    config = config or EditorConfig()

    print("Editor Path Configuration:")
    print("=" * 50)

    paths = {
        "Store directory": Path(config.store_path).parent,
        "Store file": Path(config.store_path),
        "Log directory": Path(config.log_dir),
    }

    all_ok = True
    for name, path in paths.items():
        exists = path.exists()
        status = "✓" if exists else "✗ (missing, created on first write)"
        print(f"  {name}: {path}")
        print(f"    Status: {status}")
        if not exists:
            all_ok = False

    print("=" * 50)
    return all_ok


if __name__ == "__main__":
    check_paths()
