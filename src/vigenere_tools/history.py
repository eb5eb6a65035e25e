import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

HISTORY_PATH = Path.home() / ".vigenere_tools_history.jsonl"


def log_event(action: str, payload: Dict[str, Any]) -> None:
    """
    Append one JSON line describing an operation.

    Only metadata is recorded (settings, input source, lengths), never the
    text itself.
    """
    record = {
        "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "action": action,
        **payload,
    }
    try:
        with HISTORY_PATH.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        # History failures should not break encoding or decoding.
        pass
