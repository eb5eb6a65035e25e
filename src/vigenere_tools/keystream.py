from typing import Tuple

from .alphabet import Alphabet, InvalidConfiguration

MIN_KEY_LENGTH = 2


class KeyStream:
    """
    Cyclic view over the key symbols.

    The cursor is owned by the caller and counts only symbols that were
    actually substituted, so foreign characters never consume key material.
    """

    def __init__(self, key: str, alphabet: Alphabet) -> None:
        if len(key) < MIN_KEY_LENGTH:
            raise InvalidConfiguration(
                f"Key must be at least {MIN_KEY_LENGTH} characters long (got {len(key)})."
            )
        symbols = []
        for ch in key:
            if ch not in alphabet:
                raise InvalidConfiguration(f"Key character '{ch}' is not part of the alphabet.")
            symbols.append(alphabet.normalize(ch))
        self._symbols: Tuple[str, ...] = tuple(symbols)

    @property
    def key(self) -> str:
        return "".join(self._symbols)

    def symbol_at(self, participating_count: int) -> str:
        return self._symbols[participating_count % len(self._symbols)]

    def __len__(self) -> int:
        return len(self._symbols)
