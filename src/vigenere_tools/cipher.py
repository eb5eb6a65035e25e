from typing import Optional

from .config import DEFAULT_CONFIG, CipherConfig
from .engine import TransformationContext, transform


class VigenereCipher:
    """
    Vigenère family cipher bound to one validated configuration.

    Settings are checked when the cipher is built, so encode/decode never
    fail on their input; foreign characters are handled by policy.
    """

    def __init__(self, config: Optional[CipherConfig] = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._context: TransformationContext = self._config.build_context()

    @property
    def config(self) -> CipherConfig:
        return self._config

    @property
    def context(self) -> TransformationContext:
        return self._context

    def encode(self, content: str) -> str:
        return transform(content, self._context, is_encode=True)

    def decode(self, content: str) -> str:
        return transform(content, self._context, is_encode=False)

    def translate(self, content: str, is_encode: bool) -> str:
        return transform(content, self._context, is_encode)


def encode(content: str, config: Optional[CipherConfig] = None) -> str:
    """Encode with `config` (or the default settings)."""
    return VigenereCipher(config).encode(content)


def decode(content: str, config: Optional[CipherConfig] = None) -> str:
    """Decode with `config` (or the default settings)."""
    return VigenereCipher(config).decode(content)
