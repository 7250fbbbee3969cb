"""
Drag-and-drop adapters

Thin translations from drag payloads into FavoriteSlots calls. The policy
for a drop onto a favorite slot is decided by where the drag started:

    from a favorite slot  -> swap(source, target): displaced symbol moves back
                             to the source slot
    from the palette      -> place(symbol, target): displaced symbol is dropped

A favorite dragged out of the bar (onto the remove target) clears its slot.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class DragPayload:
    """What the page puts in dataTransfer when a drag starts."""
    symbol: str
    source_slot: Optional[int] = None

    @property
    def from_slot(self) -> bool:
        return self.source_slot is not None

    @classmethod
    def from_dict(cls, data: Dict) -> "DragPayload":
        if not isinstance(data, dict):
            raise ValueError("drag payload must be an object")
        symbol = data.get("symbol")
        if not isinstance(symbol, str) or not symbol:
            raise ValueError("drag payload needs a non-empty 'symbol'")

        source_slot = data.get("source_slot")
        if source_slot is not None:
            if isinstance(source_slot, bool) or not isinstance(source_slot, int):
                raise ValueError(f"invalid source_slot {source_slot!r}")
        return cls(symbol, source_slot)

    def to_dict(self) -> Dict:
        return {'symbol': self.symbol, 'source_slot': self.source_slot}


def drop_on_slot(favorites, payload: DragPayload, target: int) -> bool:
    """Apply a drop onto favorite slot target."""
    if payload.from_slot:
        # Stale payloads (slot changed since the drag began) fall back to place
        if favorites.symbol_at(payload.source_slot) == payload.symbol:
            return favorites.swap(payload.source_slot, target)
    return favorites.place(payload.symbol, target)


def drop_outside(favorites, payload: DragPayload) -> bool:
    """Remove a favorite dragged off the bar; palette drags are ignored."""
    if not payload.from_slot:
        return False
    if favorites.symbol_at(payload.source_slot) != payload.symbol:
        return False
    return favorites.clear(payload.source_slot)
