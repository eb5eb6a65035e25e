"""
Vigenère cipher toolkit: standard, Beaufort and variant Beaufort shift rules
over a configurable alphabet.
"""

from .alphabet import DEFAULT_ALPHABET, Alphabet, InvalidConfiguration, fold_symbol, fold_text
from .cipher import VigenereCipher, decode, encode
from .config import (
    CONFIG_PATH,
    DEFAULT_CONFIG,
    CipherConfig,
    load_config,
    reconfigure,
    save_config,
)
from .engine import TransformationContext, transform
from .history import log_event
from .keystream import MIN_KEY_LENGTH, KeyStream
from .shift import Variant, floor_mod, shift_index
from .utils import decode_bytes_best_effort

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ALPHABET",
    "Alphabet",
    "InvalidConfiguration",
    "fold_symbol",
    "fold_text",
    "VigenereCipher",
    "encode",
    "decode",
    "CONFIG_PATH",
    "DEFAULT_CONFIG",
    "CipherConfig",
    "load_config",
    "reconfigure",
    "save_config",
    "TransformationContext",
    "transform",
    "log_event",
    "MIN_KEY_LENGTH",
    "KeyStream",
    "Variant",
    "floor_mod",
    "shift_index",
    "decode_bytes_best_effort",
]
