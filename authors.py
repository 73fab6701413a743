# authors.py
"""
Author registry: one JSON file per author under <config>/authors/<id>.json.
Records are created from GitHub user data or a Medium profile page.
"""
import os
from typing import Callable, Optional
import config
from fetch import get_github_user
from medium import get_medium_profile, profile_url
from models import AuthorRecord
from provenance import log_event, warn
from store import get_config_dir, write_or_update_json

def normalize_author_id(raw: str) -> str:
    return (raw or "").strip().lstrip("@").lower()

def author_path(raw: str) -> str:
    return os.path.join(get_config_dir(), config.AUTHORS_DIR, f"{normalize_author_id(raw)}.json")

def author_exists(raw: str) -> bool:
    if not normalize_author_id(raw):
        return False
    return os.path.exists(author_path(raw))

def add_github_author(handle: str) -> Optional[str]:
    user = get_github_user(handle)
    if not user:
        warn(f"could not load GitHub user {handle}, skipping author", handle=handle)
        return None
    rec = AuthorRecord(
        name=user.get("name") or user.get("login") or handle,
        bio=user.get("bio"),
        photoURL=user.get("avatar_url"),
        githubURL=user.get("html_url") or f"https://github.com/{handle}",
        location=user.get("location"),
    )
    write_or_update_json(author_path(handle), rec.to_json())
    log_event("author_created", {"id": normalize_author_id(handle), "from": "github"})
    return normalize_author_id(handle)

def add_medium_author(handle: str) -> Optional[str]:
    og = get_medium_profile(handle)
    if not og.get("success"):
        warn(f"could not load Medium profile {handle}, skipping author", handle=handle)
        return None
    # profile titles look like "Jane Doe – Medium"
    name = og["ogTitle"].split(" – ")[0].split(" - ")[0].strip() or handle
    rec = AuthorRecord(
        name=name,
        bio=og.get("ogDescription"),
        photoURL=og.get("ogImage"),
        mediumURL=profile_url(handle),
    )
    write_or_update_json(author_path(handle), rec.to_json())
    log_event("author_created", {"id": normalize_author_id(handle), "from": "medium"})
    return normalize_author_id(handle)

def ensure_author(handle: str, create: Callable[[str], Optional[str]]) -> Optional[str]:
    """
    Check, create if missing, check again. The second check is what decides;
    it is advisory only, another writer may change the registry in between.
    """
    if not author_exists(handle):
        create(handle)
    if author_exists(handle):
        return normalize_author_id(handle)
    return None
