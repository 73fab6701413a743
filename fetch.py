# fetch.py
import os
import requests
from bs4 import BeautifulSoup
import trafilatura
import config
from provenance import log_event

HEADERS = {"User-Agent": config.USER_AGENT}

def http_get(url: str, headers: dict | None = None) -> requests.Response:
    h = dict(HEADERS)
    h.update(headers or {})
    r = requests.get(url, headers=h, timeout=config.HTTP_TIMEOUT)
    r.raise_for_status()
    return r

def _meta(soup: BeautifulSoup, key: str) -> str | None:
    tag = soup.find("meta", attrs={"property": key}) or soup.find("meta", attrs={"name": key})
    if tag and tag.get("content"):
        return tag["content"].strip()
    return None

def parse_open_graph(html: str) -> dict:
    """og:* fields from a page; title falls back to twitter:title, then trafilatura's metadata."""
    soup = BeautifulSoup(html, "html.parser")
    title = _meta(soup, "og:title") or _meta(soup, "twitter:title")
    if not title:
        md = trafilatura.extract_metadata(html)
        title = md.title if md and md.title else None
    return {
        "ogTitle": title,
        "ogDescription": _meta(soup, "og:description") or _meta(soup, "description"),
        "ogImage": _meta(soup, "og:image"),
        "ogUrl": _meta(soup, "og:url"),
    }

def scrape_open_graph(url: str) -> dict:
    try:
        r = http_get(url, headers={"Accept": "text/html,application/xhtml+xml"})
    except requests.RequestException as e:
        log_event("og_failed", {"url": url, "error": str(e)})
        return {"success": False, "error": str(e)}

    out = parse_open_graph(r.text)
    out["success"] = bool(out["ogTitle"])
    if not out["success"]:
        out["error"] = "no title found"
    log_event("og_scraped", {"url": url, "success": out["success"], "title": out["ogTitle"]})
    return out

# -------------------------------
# GitHub
# -------------------------------
def github_headers() -> dict:
    # If available, use a GitHub token from the environment
    headers = {"Content-Type": "application/json", "Accept": "application/vnd.github+json"}
    token = os.getenv(config.GITHUB_TOKEN_ENV)
    if token:
        headers["Authorization"] = f"token {token}"
    return headers

def _github_json(path: str) -> dict | None:
    url = f"{config.GITHUB_API.rstrip('/')}/{path.lstrip('/')}"
    try:
        r = http_get(url, headers=github_headers())
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        log_event("github_failed", {"url": url, "error": str(e)})
        return None
    log_event("github_ok", {"url": url})
    return data if isinstance(data, dict) else None

def get_repo_readme(owner: str, repo: str) -> str | None:
    data = _github_json(f"repos/{owner}/{repo}/readme")
    return (data or {}).get("path")

def get_github_user(handle: str) -> dict | None:
    return _github_json(f"users/{handle}")
