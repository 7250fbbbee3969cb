"""
Favorites Slot Manager

A fixed number of numbered slots (9 by default, one per digit hotkey), each
empty or holding one catalog symbol. The manager is the only place favorites
change, whatever the trigger (palette click, drag and drop, keyboard):

    place(symbol, slot)   symbol moves into slot; whatever was there is dropped
    swap(source, target)  two slots exchange contents (drags between slots)
    clear(slot)           slot becomes empty
    toggle(symbol)        remove if present, else first empty slot
    reorder(symbol, dir)  swap with the nearest occupied slot before/after

Invariant after every operation: a symbol occupies at most one slot.

Every change is written to the store as a JSON list of length K of nullable
symbol strings. Loading treats the stored value as untrusted: anything
malformed, unknown or duplicated becomes an empty slot, and the list is
padded or truncated to K.

In dense mode occupied slots are kept packed at the front, so favorites
behave as an ordered list and reorder moves between neighbours.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from ..data.storage import load_json, save_json

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 9
DEFAULT_KEY = "formula_pad.favorite_slots"


class Direction(Enum):
    EARLIER = "earlier"
    LATER = "later"


class ToggleResult(Enum):
    ADDED = "added"
    REMOVED = "removed"
    FULL = "full"          # no empty slot; nothing changed
    UNKNOWN = "unknown"    # symbol not in the catalog; nothing changed


class FavoriteSlots:
    """
    Fixed-capacity favorites with persistence.

    Args:
        catalog: SymbolCatalog used to validate symbols
        store: Key-value store (get/set)
        capacity: Number of slots K
        key: Store key for the serialized slots
        dense: Keep occupied slots packed at the front
    """

    def __init__(self, catalog, store, capacity: int = DEFAULT_CAPACITY,
                 key: str = DEFAULT_KEY, dense: bool = False):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.catalog = catalog
        self.store = store
        self.capacity = capacity
        self.key = key
        self.dense = dense
        self.slots: List[Optional[str]] = self.normalize(load_json(store, key))

    # =========================================================================
    # Loading / Persistence
    # =========================================================================

    def normalize(self, data) -> List[Optional[str]]:
        """Turn untrusted stored data into a valid slot list of length K."""
        slots: List[Optional[str]] = [None] * self.capacity
        if data is None:
            return slots
        if not isinstance(data, list):
            logger.warning(f"Stored favorites under {self.key!r} is not a list; starting empty")
            return slots

        if len(data) != self.capacity:
            logger.info(f"Stored favorites have {len(data)} entries, normalizing to {self.capacity}")

        seen = set()
        for i, item in enumerate(data[:self.capacity]):
            if isinstance(item, str) and item in self.catalog and item not in seen:
                slots[i] = item
                seen.add(item)
            elif item is not None:
                logger.warning(f"Dropping invalid favorite {item!r} in slot {i}")

        return self._compact(slots) if self.dense else slots

    def _compact(self, slots: List[Optional[str]]) -> List[Optional[str]]:
        occupied = [s for s in slots if s is not None]
        return occupied + [None] * (self.capacity - len(occupied))

    def _commit(self, new_slots: List[Optional[str]]) -> bool:
        if self.dense:
            new_slots = self._compact(new_slots)
        if new_slots == self.slots:
            return False
        self.slots = new_slots
        save_json(self.store, self.key, self.slots)
        return True

    def _check_slot(self, slot) -> int:
        if isinstance(slot, bool) or not isinstance(slot, int):
            raise IndexError(f"Slot index must be an integer, got {slot!r}")
        if not 0 <= slot < self.capacity:
            raise IndexError(f"Slot {slot} outside 0..{self.capacity - 1}")
        return slot

    # =========================================================================
    # Queries
    # =========================================================================

    def symbol_at(self, slot: int) -> Optional[str]:
        return self.slots[self._check_slot(slot)]

    def slot_of(self, symbol: str) -> Optional[int]:
        try:
            return self.slots.index(symbol)
        except ValueError:
            return None

    def occupied(self) -> List[Tuple[int, str]]:
        return [(i, s) for i, s in enumerate(self.slots) if s is not None]

    @property
    def is_full(self) -> bool:
        return None not in self.slots

    def to_list(self) -> List[Optional[str]]:
        return list(self.slots)

    def __contains__(self, symbol) -> bool:
        return symbol in self.slots

    # =========================================================================
    # Operations
    # =========================================================================

    def place(self, symbol: str, slot: int) -> bool:
        """
        Put symbol in slot.

        The symbol's previous slot (if any) is cleared in the same update.
        A different symbol already in the slot is dropped from favorites.
        Unknown symbols are ignored.
        """
        self._check_slot(slot)
        if not isinstance(symbol, str) or symbol not in self.catalog:
            logger.debug(f"Ignoring unknown symbol {symbol!r}")
            return False

        new_slots = [None if s == symbol else s for s in self.slots]
        new_slots[slot] = symbol
        return self._commit(new_slots)

    # Plain assignment is placement; slot-to-slot drags use swap.
    assign = place

    def swap(self, source: int, target: int) -> bool:
        """Exchange the contents of two slots (either may be empty)."""
        self._check_slot(source)
        self._check_slot(target)
        if source == target:
            return False

        new_slots = list(self.slots)
        new_slots[source], new_slots[target] = new_slots[target], new_slots[source]
        return self._commit(new_slots)

    def clear(self, slot: int) -> bool:
        self._check_slot(slot)
        if self.slots[slot] is None:
            return False

        new_slots = list(self.slots)
        new_slots[slot] = None
        return self._commit(new_slots)

    def toggle(self, symbol: str) -> ToggleResult:
        if not isinstance(symbol, str) or symbol not in self.catalog:
            return ToggleResult.UNKNOWN

        current = self.slot_of(symbol)
        if current is not None:
            self.clear(current)
            return ToggleResult.REMOVED

        if self.is_full:
            logger.debug(f"Favorites full, cannot add {symbol!r}")
            return ToggleResult.FULL

        self.place(symbol, self.slots.index(None))
        return ToggleResult.ADDED

    def reorder(self, symbol: str, direction) -> bool:
        """
        Move symbol one occupied position earlier or later.

        Moving past either end, or moving an absent symbol, is a no-op.
        """
        direction = Direction(direction)
        index = self.slot_of(symbol) if isinstance(symbol, str) else None
        if index is None:
            return False

        step = -1 if direction is Direction.EARLIER else 1
        neighbour = index + step
        while 0 <= neighbour < self.capacity and self.slots[neighbour] is None:
            neighbour += step
        if not 0 <= neighbour < self.capacity:
            return False

        return self.swap(index, neighbour)

    def reset(self) -> bool:
        return self._commit([None] * self.capacity)
