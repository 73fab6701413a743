# store.py
import json, os
import config
from provenance import log_event

def get_config_dir() -> str:
    return config.CONFIG_DIR

def load_template(name: str) -> dict:
    """Fresh copy of a template file from the config root."""
    return read_json(os.path.join(get_config_dir(), name))

def record_path(product: str, collection: str, record_id: str) -> str:
    return os.path.join(get_config_dir(), product, collection, f"{record_id}.json")

def read_json(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def write_or_update_json(path: str, obj: dict) -> dict:
    """Write obj to path; if the file already exists, obj is merged over it (last write wins per key)."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    merged = {}
    existed = os.path.exists(path)
    if existed:
        merged.update(read_json(path))
    merged.update(obj)
    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(merged, indent=2, ensure_ascii=False) + "\n")
    log_event("record_written", {"path": path, "merged": existed, "keys": sorted(obj)})
    return merged
