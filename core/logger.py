import json
import sys
from datetime import datetime, timezone
from pathlib import Path

LOG_FILE = Path("log.json")
ECHO_TYPES = {"WARNING", "ERROR"}


def set_log_file(path) -> Path:
    """
    Point build events at another JSON-lines file.
    """
    global LOG_FILE
    LOG_FILE = Path(path)
    return LOG_FILE


def log_event(event_type: str, message: str, extra: dict = None):
    """
    Append one build event to the JSON-lines log. Warnings and errors are echoed to stderr.
    """
    event_type = event_type.upper()
    entry = {
        "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "type": event_type,
        "message": message,
    }
    if extra:
        entry["extra"] = extra

    if event_type in ECHO_TYPES:
        print(f"[{event_type}] {message}", file=sys.stderr)

    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with LOG_FILE.open("a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError as e:
        print(f"Log write error: {e}")
