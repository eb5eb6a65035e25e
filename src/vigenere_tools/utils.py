import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

PREFERRED_ENCODINGS: List[str] = [
    "utf-8",
    "cp1252",
    "latin-1",
]


def decode_bytes_best_effort(data: bytes, preferred_encoding: Optional[str] = None, encodings: Optional[Iterable[str]] = None) -> str:
    """
    Turn the bytes of an `--in-file` into text for the cipher.

    The `--encoding` value is tried first, then utf-8, cp1252 and latin-1.
    Unknown codec names are skipped. If nothing decodes cleanly the bytes are
    read as utf-8 with replacement characters, which the cipher then passes
    through or drops like any other foreign symbol.
    """
    candidates: List[str] = []
    if preferred_encoding:
        candidates.append(preferred_encoding)
    candidates.extend(encodings if encodings is not None else PREFERRED_ENCODINGS)

    ordered: List[str] = []
    seen = set()
    for enc in candidates:
        if enc and enc.lower() not in seen:
            ordered.append(enc)
            seen.add(enc.lower())
    if not ordered:
        ordered = ["utf-8"]

    for enc in ordered:
        try:
            return data.decode(enc)
        except (UnicodeDecodeError, LookupError):
            continue
    return data.decode("utf-8", errors="replace")


def read_text_file(path: Path, encoding: Optional[str] = None) -> str:
    return decode_bytes_best_effort(path.read_bytes(), preferred_encoding=encoding)


def write_text_file(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def read_json_object(path: Path) -> Dict[str, Any]:
    """Settings stored at `path`, or {} when the file is missing, unreadable or not a JSON object."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}
