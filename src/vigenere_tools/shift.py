from enum import Enum
from typing import Dict, Union

from .alphabet import InvalidConfiguration


class Variant(str, Enum):
    STANDARD = "standard"
    BEAUFORT = "beaufort-cipher"
    VARIANT_BEAUFORT = "variant-beaufort-cipher"

    @classmethod
    def parse(cls, value: Union["Variant", str]) -> "Variant":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(v.value for v in cls)
            raise InvalidConfiguration(f"Unknown variant '{value}'. Choose one of: {choices}.") from None


VARIANT_LABELS: Dict[Variant, str] = {
    Variant.STANDARD: "Standard",
    Variant.BEAUFORT: "Beaufort cipher",
    Variant.VARIANT_BEAUFORT: "Variant Beaufort cipher",
}

# Human readable formulas, used by the CLI `variants` listing.
VARIANT_FORMULAS: Dict[Variant, str] = {
    Variant.STANDARD: "encode: p + k, decode: p - k",
    Variant.BEAUFORT: "encode: k - p, decode: k - p (self-inverse)",
    Variant.VARIANT_BEAUFORT: "encode: p - k, decode: p + k",
}


def shift_index(variant: Variant, plain_index: int, key_index: int, is_encode: bool) -> int:
    """
    Combine a symbol index with a key index according to `variant`.

    The result is not reduced; use `floor_mod` with the alphabet length.
    """
    if variant is Variant.STANDARD:
        return plain_index + key_index if is_encode else plain_index - key_index
    if variant is Variant.BEAUFORT:
        return key_index - plain_index
    if variant is Variant.VARIANT_BEAUFORT:
        return plain_index - key_index if is_encode else plain_index + key_index
    raise ValueError(f"Unhandled variant: {variant!r}")


def floor_mod(value: int, modulus: int) -> int:
    """Reduce `value` into [0, modulus); Python's % already rounds toward -inf."""
    return value % modulus
