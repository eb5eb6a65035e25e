import json
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .alphabet import DEFAULT_ALPHABET, InvalidConfiguration
from .engine import TransformationContext
from .shift import Variant
from .utils import read_json_object

CONFIG_PATH = Path.home() / ".vigenere_tools.json"

ENV_MAPPING: Dict[str, str] = {
    "variant": "VIGENERE_VARIANT",
    "key": "VIGENERE_KEY",
    "alphabet": "VIGENERE_ALPHABET",
    "case_sensitive": "VIGENERE_CASE_SENSITIVE",
    "include_foreign_chars": "VIGENERE_INCLUDE_FOREIGN_CHARS",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CipherConfig:
    variant: str = Variant.STANDARD.value
    key: str = "cryptii"
    alphabet: str = DEFAULT_ALPHABET
    case_sensitive: bool = False
    include_foreign_chars: bool = True

    def build_context(self) -> TransformationContext:
        return TransformationContext.create(
            alphabet=self.alphabet,
            key=self.key,
            variant=self.variant,
            case_sensitive=self.case_sensitive,
            include_foreign_chars=self.include_foreign_chars,
        )

    def validate(self) -> "CipherConfig":
        self.build_context()
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CipherConfig":
        defaults = cls()
        return cls(
            variant=_text_field(data, "variant", defaults.variant),
            key=_text_field(data, "key", defaults.key),
            alphabet=_text_field(data, "alphabet", defaults.alphabet),
            case_sensitive=_parse_bool(data.get("case_sensitive", defaults.case_sensitive)),
            include_foreign_chars=_parse_bool(
                data.get("include_foreign_chars", defaults.include_foreign_chars)
            ),
        )


DEFAULT_CONFIG = CipherConfig()
SETTING_NAMES = tuple(f.name for f in fields(CipherConfig))


def _text_field(data: Dict[str, Any], name: str, default: str) -> str:
    # Missing or null falls back to the default; "" is kept and fails validation.
    value = data.get(name)
    return default if value is None else str(value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise InvalidConfiguration(f"Expected a boolean value, got '{value}'.")


def reconfigure(config: CipherConfig, **changes: Any) -> CipherConfig:
    """
    Apply setting changes and re-validate the whole configuration.

    This is the only place dependent constraints are re-derived: a new
    alphabet re-constrains the key's allowed characters, and toggling case
    sensitivity changes how both alphabet and key are compared. Values set to
    None are ignored so callers can pass optional overrides straight through.
    """
    unknown = sorted(set(changes) - set(SETTING_NAMES))
    if unknown:
        raise InvalidConfiguration(f"Unknown setting(s): {', '.join(unknown)}")
    updates = {name: value for name, value in changes.items() if value is not None}
    if "variant" in updates:
        updates["variant"] = Variant.parse(updates["variant"]).value
    for flag in ("case_sensitive", "include_foreign_chars"):
        if flag in updates:
            updates[flag] = _parse_bool(updates[flag])
    return replace(config, **updates).validate()


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field_name, env_var in ENV_MAPPING.items():
        env_val = os.getenv(env_var, "")
        if env_val:
            overrides[field_name] = env_val
    return overrides


def load_config(path: Optional[Path] = None, **overrides: Any) -> CipherConfig:
    """
    Load saved settings, then apply environment and caller overrides.

    Overrides are merged before validation, so passing a good value for a
    broken saved setting repairs it instead of failing. A missing or malformed
    file yields the defaults; settings that parse but are invalid raise
    InvalidConfiguration.
    """
    data = read_json_object(path or CONFIG_PATH)
    changes = {**_env_overrides(), **{k: v for k, v in overrides.items() if v is not None}}
    data.update(changes)
    return reconfigure(CipherConfig.from_dict(data), **changes)


def save_config(config: CipherConfig, path: Optional[Path] = None) -> None:
    target = path or CONFIG_PATH
    payload = config.validate().to_dict()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
