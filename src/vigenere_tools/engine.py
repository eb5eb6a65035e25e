from dataclasses import dataclass
from typing import List, Union

from .alphabet import Alphabet, fold_text
from .keystream import KeyStream
from .shift import Variant, floor_mod, shift_index


@dataclass(frozen=True)
class TransformationContext:
    """Everything besides the direction that determines a transformation."""

    alphabet: Alphabet
    key: KeyStream
    variant: Variant
    case_sensitive: bool
    include_foreign_chars: bool

    @classmethod
    def create(
        cls,
        alphabet: str,
        key: str,
        variant: Union[Variant, str] = Variant.STANDARD,
        case_sensitive: bool = False,
        include_foreign_chars: bool = True,
    ) -> "TransformationContext":
        """Validate raw settings and build a context; raises InvalidConfiguration."""
        parsed_variant = Variant.parse(variant)
        built_alphabet = Alphabet(alphabet, case_sensitive=case_sensitive)
        return cls(
            alphabet=built_alphabet,
            key=KeyStream(key, built_alphabet),
            variant=parsed_variant,
            case_sensitive=case_sensitive,
            include_foreign_chars=include_foreign_chars,
        )


def transform(content: str, context: TransformationContext, is_encode: bool) -> str:
    """
    Encode or decode `content` symbol by symbol.

    In-alphabet symbols are shifted by the key symbol at the current cursor;
    foreign symbols are copied or dropped depending on the context and never
    advance the cursor. Case is folded up front when case-insensitive and is
    not restored afterwards.
    """
    alphabet = context.alphabet
    size = len(alphabet)
    if not context.case_sensitive:
        content = fold_text(content)

    result: List[str] = []
    participating = 0
    for ch in content:
        char_index = alphabet.index_of(ch)
        if char_index is None:
            if context.include_foreign_chars:
                result.append(ch)
            continue
        key_index = alphabet.index_of(context.key.symbol_at(participating))
        # KeyStream only accepts alphabet members, so key_index is never None.
        shifted = shift_index(context.variant, char_index, key_index, is_encode)
        result.append(alphabet.at(floor_mod(shifted, size)))
        participating += 1
    return "".join(result)
