# medium.py
import re
from typing import NamedTuple, Optional
import requests
from bs4 import BeautifulSoup
import config
from fetch import http_get, scrape_open_graph
from provenance import log_event

# 1) https://medium.com/user/post-slug-12345abcde
# 2) https://user.medium.com/post-slug-12345abcde
MAIN_RX = re.compile(r"medium\.com/([\w\-@.]+)/([\w\-]+)")
SUBDOMAIN_RX = re.compile(r"([\w\-@.]+)\.medium\.com/([\w\-]+)")

HANDLE_RX = re.compile(r"/@([\w\-.]+)")


class MediumUrl(NamedTuple):
    author: Optional[str] = None
    slug: Optional[str] = None


def parse_medium_url(url: str) -> MediumUrl:
    for rx in (MAIN_RX, SUBDOMAIN_RX):
        m = rx.search(url or "")
        if m:
            return MediumUrl(author=m.group(1), slug=m.group(2))
    return MediumUrl()

def _handle_from_href(href: str | None) -> str | None:
    m = HANDLE_RX.search(href or "")
    return m.group(1) if m else None

def extract_post_author(html: str) -> str | None:
    """Writer handle from a post page: <link rel="author">, then article:author / author meta."""
    soup = BeautifulSoup(html, "html.parser")
    for link in soup.find_all("link", href=True):
        if "author" in (link.get("rel") or []):
            h = _handle_from_href(link["href"])
            if h:
                return h
    for attrs in ({"property": "article:author"}, {"name": "author"}):
        tag = soup.find("meta", attrs=attrs)
        h = _handle_from_href(tag.get("content") if tag else None)
        if h:
            return h
    return None

def get_medium_post_author(url: str) -> str | None:
    # NB: posts under publication domains (proandroiddev etc.) can report the
    # publication rather than the writer
    try:
        r = http_get(url, headers={"Accept": "text/html"})
    except requests.RequestException as e:
        log_event("medium_author_failed", {"url": url, "error": str(e)})
        return None
    author = extract_post_author(r.text)
    log_event("medium_author", {"url": url, "author": author})
    return author

def profile_url(handle: str) -> str:
    return f"{config.MEDIUM_BASE.rstrip('/')}/@{handle.lstrip('@')}"

def get_medium_profile(handle: str) -> dict:
    return scrape_open_graph(profile_url(handle))
