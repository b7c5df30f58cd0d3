# promptline/utils/structured_logger.py

import json
from pathlib import Path
from datetime import datetime, timezone
import threading
import shutil

from promptline.core.config_schema import InputSettings

ARCHIVE_DIRNAME = "archived"

_lock = threading.Lock()


def _rotate_if_needed(log_file: Path, max_bytes: int):
    try:
        if log_file.exists() and log_file.stat().st_size >= max_bytes:
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
            archive_dir = log_file.parent / ARCHIVE_DIRNAME
            archive_dir.mkdir(parents=True, exist_ok=True)
            archived = archive_dir / f"{log_file.stem}_{timestamp}{log_file.suffix}"
            shutil.move(str(log_file), str(archived))
    except OSError:
        # rotation must not break logging
        pass


def log_event(call_id: str, step: str, input_data=None, output_data=None, outcome: str = "ok",
              extra: dict | None = None, settings: InputSettings | None = None):
    """
    Appends a structured event as a single line JSON (NDJSON). Thread-safe.
    No-op unless `settings` names a log file. Write failures are dropped:
    logging never changes what an acquisition returns.
    """
    if settings is None or not settings.logging_enabled:
        return

    entry = {
        "call_id": call_id,
        "step": step,
        "input": input_data,
        "output": output_data,
        "outcome": outcome,
        "extra": extra or {},
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    line = json.dumps(entry, ensure_ascii=False, default=str)
    log_file = Path(settings.log_file)
    with _lock:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            _rotate_if_needed(log_file, settings.log_max_bytes)
            with open(log_file, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            pass


def redact_text(text: str | None):
    # User input is never written verbatim
    if text is None:
        return None
    return {"length": len(text)}


def read_events(settings: InputSettings, call_id: str = None, limit: int = 100):
    """
    Reads the last `limit` events from the configured log, optionally filtered by call_id.
    """
    if not settings.logging_enabled or not Path(settings.log_file).exists():
        return []

    results = []
    with open(settings.log_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if call_id is None or obj.get("call_id") == call_id:
                results.append(obj)
    return results[-limit:]
