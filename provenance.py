# provenance.py
import json, os, sys, time, uuid
from datetime import datetime, timezone
import config

# one id per process, so the events of a single addproject run can be grouped
RUN_ID = uuid.uuid4().hex[:12]

def _log_path():
    date = datetime.now(timezone.utc).strftime("%Y%m%d")
    return os.path.join(config.LOG_DIR, f"provenance_{date}.jsonl")

def log_event(kind: str, payload: dict):
    rec = {
        "ts": time.time(),
        "run": RUN_ID,
        "kind": kind,
        **payload
    }
    os.makedirs(config.LOG_DIR, exist_ok=True)
    with open(_log_path(), "a", encoding="utf-8") as f:
        f.write(json.dumps(rec, ensure_ascii=False) + "\n")

def warn(message: str, **payload):
    """Degraded-but-not-fatal outcome: shown on stderr and kept in the log."""
    print(f"[WARN] {message}", file=sys.stderr)
    log_event("warning", {"message": message, **payload})
