from typing import Dict, Iterator, Optional, Tuple

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class InvalidConfiguration(ValueError):
    """Raised when cipher settings are rejected before a transformation runs."""


def fold_symbol(symbol: str) -> str:
    """
    Lower-case a single symbol.

    Symbols whose lower-case form spans several code points (e.g. "İ") are
    kept as-is so that folding never changes the length of a text.
    """
    folded = symbol.lower()
    return folded if len(folded) == 1 else symbol


def fold_text(text: str) -> str:
    return "".join(fold_symbol(ch) for ch in text)


class Alphabet:
    """
    Ordered, deduplicated set of symbols used for both content and key lookup.

    When case-insensitive, the declared symbols are folded to lower case and
    every lookup folds the queried symbol the same way.
    """

    def __init__(self, symbols: str, case_sensitive: bool = False) -> None:
        if not symbols:
            raise InvalidConfiguration("Alphabet must contain at least one character.")
        self._case_sensitive = case_sensitive
        normalized = symbols if case_sensitive else fold_text(symbols)

        positions: Dict[str, int] = {}
        for idx, ch in enumerate(normalized):
            if ch in positions:
                raise InvalidConfiguration(f"Alphabet contains duplicate character '{ch}'.")
            positions[ch] = idx
        self._symbols: Tuple[str, ...] = tuple(normalized)
        self._positions = positions

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def symbols(self) -> str:
        return "".join(self._symbols)

    def normalize(self, symbol: str) -> str:
        return symbol if self._case_sensitive else fold_symbol(symbol)

    def index_of(self, symbol: str) -> Optional[int]:
        """Position of `symbol` in the alphabet, or None for foreign symbols."""
        return self._positions.get(self.normalize(symbol))

    def at(self, index: int) -> str:
        # Callers reduce the index first; negative indices are not wrapped.
        if index < 0:
            raise IndexError(f"Alphabet index {index} out of range.")
        return self._symbols[index]

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.index_of(symbol) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols and self._case_sensitive == other._case_sensitive

    def __hash__(self) -> int:
        return hash((self._symbols, self._case_sensitive))

    def __repr__(self) -> str:
        return f"Alphabet({self.symbols!r}, case_sensitive={self._case_sensitive})"
