import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from nutrisnap.config import settings


def _write_jsonl(path: Path, record: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")


def log_relay_call(
    history_len: int,
    forwarded_len: int,
    reply: Optional[str],
    error: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    record: Dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "type": "relay",
        "model": settings.model_name,
        "history_len": history_len,
        "forwarded_len": forwarded_len,
        "ok": error is None,
        "reply": reply,
    }
    if error is not None:
        record["error"] = error
    if extra:
        record["extra"] = extra
    _write_jsonl(Path(settings.log_dir) / "relay_logs.jsonl", record)
