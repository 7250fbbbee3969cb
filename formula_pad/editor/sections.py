"""
Section Visibility State

Per-category expanded/collapsed flags for the palette, persisted as a JSON
object. Categories missing from the stored object (e.g. after the catalog
grew) start expanded; a corrupt stored value resets everything to expanded.
"""

import logging
from typing import Dict

from ..data.storage import load_json, save_json

logger = logging.getLogger(__name__)

DEFAULT_KEY = "formula_pad.section_visibility"


class SectionVisibility:
    """Expanded flags for every catalog category."""

    def __init__(self, catalog, store, key: str = DEFAULT_KEY):
        self.catalog = catalog
        self.store = store
        self.key = key
        self.expanded: Dict[str, bool] = self._load()

    def _load(self) -> Dict[str, bool]:
        expanded = {name: True for name in self.catalog.categories}

        data = load_json(self.store, self.key)
        if data is None:
            return expanded
        if not isinstance(data, dict):
            logger.warning(f"Stored sections under {self.key!r} is not an object; expanding all")
            return expanded

        for name, value in data.items():
            if name in expanded and isinstance(value, bool):
                expanded[name] = value
        return expanded

    def _save(self):
        save_json(self.store, self.key, self.expanded)

    def is_expanded(self, category: str) -> bool:
        return self.expanded.get(category, True)

    def toggle(self, category: str) -> bool:
        """Flip a category and return its new state; unknown categories are ignored."""
        if not isinstance(category, str) or category not in self.expanded:
            logger.debug(f"Ignoring toggle of unknown category {category!r}")
            return True
        self.expanded[category] = not self.expanded[category]
        self._save()
        return self.expanded[category]

    def set_all(self, expanded: bool):
        for name in self.catalog.categories:
            self.expanded[name] = bool(expanded)
        self._save()

    def to_dict(self) -> Dict[str, bool]:
        return dict(self.expanded)
