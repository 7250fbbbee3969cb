"""
Symbol Catalog for the Formula Pad palette

Design choices:
- Categories are declared once, in display order
- Each symbol string is unique across the whole catalog (duplicates are a
  configuration error raised at build time, never silently shadowed)
- Lookup by symbol is a dict access

Usage:
    catalog = build_default_catalog()
    entry = catalog.lookup("∀")
    for category in catalog.categories:
        for entry in catalog.entries(category):
            ...
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple


class CatalogError(ValueError):
    """Raised when a catalog definition is inconsistent."""


@dataclass(frozen=True)
class SymbolEntry:
    """A palette symbol with its description and category."""
    symbol: str
    description: str
    category: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'symbol': self.symbol,
            'description': self.description,
            'category': self.category,
        }


CategorySpec = Tuple[str, Sequence[Tuple[str, str]]]


# =============================================================================
# Catalog Definition
# =============================================================================

def default_categories() -> List[CategorySpec]:
    """Build the built-in palette, category by category."""

    categories = []

    # =========================================================================
    # Logic & Set Theory
    # =========================================================================
    categories.append(("Logic & Set Theory", [
        ("∈", "element of"),
        ("∉", "not an element of"),
        ("∧", "logical AND"),
        ("∨", "logical OR"),
        ("¬", "logical NOT"),
        ("→", "implies"),
        ("⇒", "strong implication"),
        ("↔", "if and only if"),
        ("∀", "for all"),
        ("∃", "there exists"),
        ("⊆", "subset"),
        ("⊇", "superset"),
        ("∩", "intersection"),
        ("∪", "union"),
        ("∅", "empty set"),
        ("⊢", "proves"),
        ("⊨", "models"),
    ]))

    # =========================================================================
    # Comparison
    # =========================================================================
    categories.append(("Comparison", [
        ("≠", "not equal"),
        ("≤", "less than or equal"),
        ("≥", "greater than or equal"),
        ("≡", "identical"),
        ("≈", "approximately equal"),
        ("∼", "similar to"),
        ("∝", "proportional to"),
    ]))

    # =========================================================================
    # Greek Letters
    # =========================================================================
    categories.append(("Greek Letters", [
        ("α", "alpha"),
        ("β", "beta"),
        ("γ", "gamma"),
        ("δ", "delta"),
        ("ε", "epsilon"),
        ("θ", "theta"),
        ("λ", "lambda"),
        ("μ", "mu"),
        ("π", "pi"),
        ("σ", "sigma"),
        ("φ", "phi"),
        ("ω", "omega"),
        ("Γ", "capital gamma"),
        ("Δ", "capital delta"),
        ("Σ", "capital sigma"),
        ("Ω", "capital omega"),
    ]))

    # =========================================================================
    # Arrows
    # =========================================================================
    categories.append(("Arrows", [
        ("←", "left arrow"),
        ("↑", "up arrow"),
        ("↓", "down arrow"),
        ("⇐", "implied by"),
        ("⇔", "equivalent to"),
        ("↦", "maps to"),
    ]))

    # =========================================================================
    # Calculus
    # =========================================================================
    categories.append(("Calculus", [
        ("∫", "integral"),
        ("∑", "summation"),
        ("∏", "product"),
        ("∂", "partial derivative"),
        ("∇", "nabla"),
        ("∞", "infinity"),
        ("√", "square root"),
        ("±", "plus or minus"),
        ("×", "times"),
        ("·", "dot product"),
    ]))

    # =========================================================================
    # Typography
    # =========================================================================
    categories.append(("Typography", [
        ("-", "hyphen"),
        ("–", "en dash (Option + -)"),
        ("—", "em dash (Shift + Option + -)"),
        ("…", "ellipsis"),
        ("°", "degree"),
    ]))

    return categories


# =============================================================================
# Catalog Class
# =============================================================================

class SymbolCatalog:
    """
    Read-only catalog of palette symbols.

    Features:
    - Categories kept in declaration order
    - O(1) lookup from symbol string to SymbolEntry
    - Duplicate symbols (or categories) rejected at construction
    """

    def __init__(self, categories: Sequence[CategorySpec]):
        self._categories: List[str] = []
        self._entries: Dict[str, Tuple[SymbolEntry, ...]] = {}
        self._by_symbol: Dict[str, SymbolEntry] = {}

        for name, symbols in categories:
            if name in self._entries:
                raise CatalogError(f"Duplicate category {name!r}")

            entries = []
            for symbol, description in symbols:
                if not symbol:
                    raise CatalogError(f"Empty symbol in category {name!r}")
                if symbol in self._by_symbol:
                    other = self._by_symbol[symbol].category
                    raise CatalogError(
                        f"Duplicate symbol {symbol!r} in {name!r} "
                        f"(already defined in {other!r})"
                    )
                entry = SymbolEntry(symbol, description, name)
                self._by_symbol[symbol] = entry
                entries.append(entry)

            self._categories.append(name)
            self._entries[name] = tuple(entries)

    @property
    def categories(self) -> Tuple[str, ...]:
        return tuple(self._categories)

    def entries(self, category: str) -> Tuple[SymbolEntry, ...]:
        """Entries of one category, in declaration order."""
        return self._entries[category]

    def lookup(self, symbol: str) -> Optional[SymbolEntry]:
        return self._by_symbol.get(symbol)

    def __contains__(self, symbol) -> bool:
        return symbol in self._by_symbol

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __iter__(self) -> Iterator[SymbolEntry]:
        for name in self._categories:
            yield from self._entries[name]

    def to_dict(self) -> List[Dict]:
        """Serialize for the palette view."""
        return [
            {
                'name': name,
                'symbols': [e.to_dict() for e in self._entries[name]],
            }
            for name in self._categories
        ]


def build_default_catalog() -> SymbolCatalog:
    return SymbolCatalog(default_categories())


# =============================================================================
# Utility Functions
# =============================================================================

def get_catalog_statistics(catalog: SymbolCatalog) -> Dict:
    """Get catalog statistics."""
    return {
        "total_symbols": len(catalog),
        "categories": {
            name: len(catalog.entries(name)) for name in catalog.categories
        },
    }


# =============================================================================
# CLI for Testing
# =============================================================================

def main():
    import sys
    if sys.platform == 'win32':
        sys.stdout.reconfigure(encoding='utf-8')

    catalog = build_default_catalog()
    stats = get_catalog_statistics(catalog)

    print("=" * 60)
    print("Formula Pad Symbol Catalog")
    print("=" * 60)
    print(f"\nSymbols: {stats['total_symbols']}")
    print("\nSymbols by Category:")
    for name, count in stats['categories'].items():
        print(f"  {name:20} {count:4} symbols")

    for name in catalog.categories:
        print(f"\n{name}")
        for entry in catalog.entries(name):
            print(f"  {entry.symbol} — {entry.description}")


if __name__ == "__main__":
    main()
