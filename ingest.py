# ingest.py
"""
Builds a project record (template -> computed fields -> overrides), makes sure
the author is in the registry and writes the record under
<config>/<product>/<blogs|repos>/<id>.json.
"""
from __future__ import annotations
import re
from typing import Optional
from urllib.parse import urlparse
import config
from authors import (
    add_github_author, add_medium_author, author_exists, ensure_author, normalize_author_id,
)
from classification import GITHUB, MEDIUM, OTHER, classify_project
from fetch import get_repo_readme, scrape_open_graph
from medium import get_medium_post_author, parse_medium_url
from models import ProjectRecord
from provenance import log_event, warn
from store import load_template, record_path, write_or_update_json

GITHUB_RX = re.compile(r"github\.com/([\w\-]+)/([\w\-]+)")


class IngestError(ValueError):
    pass


def apply_layers(*layers: Optional[dict]) -> dict:
    """Shallow merge left to right, later layers overwrite earlier keys."""
    out = {}
    for layer in layers:
        out.update(layer or {})
    return out

def slug_from_url(url: str) -> str:
    # https://example.com/2021/my-post.html -> 2021-my-post
    segments = [s.split(".")[0] for s in urlparse(url).path.split("/")]
    return "-".join(s for s in segments if s)

def _persist(product: str, collection: str, record_id: str, record: dict,
             overrides: dict | None = None) -> dict:
    # overrides go on last so fetched fields never beat them
    rec = ProjectRecord.model_validate(apply_layers(record, overrides)).to_json()
    return write_or_update_json(record_path(product, collection, record_id), rec)


def add_repo(product: str, project_url: str, project_id: str | None = None,
             overrides: dict | None = None) -> str:
    m = GITHUB_RX.search(project_url or "")
    if not m:
        raise IngestError(f"Invalid GitHub URL: {project_url}")
    owner, repo = m.group(1), m.group(2)

    record = apply_layers(
        load_template(config.TEMPLATE_REPO),
        {"owner": owner, "repo": repo},
        overrides,
    )

    author_id = ensure_author(owner, add_github_author)
    record["authorIds"] = [author_id] if author_id else []

    # no README (404 or lookup failure): content stays unset
    readme = get_repo_readme(owner, repo)
    if readme:
        record["content"] = readme
    else:
        warn(f"no README found for {owner}/{repo}", owner=owner, repo=repo)

    repo_id = project_id or f"{owner}-{repo}"
    _persist(product, config.COLLECTION_REPOS, repo_id, record, overrides)
    log_event("repo_added", {"product": product, "id": repo_id, "owner": owner, "repo": repo})
    return repo_id


def add_medium_blog(product: str, project_url: str, project_id: str | None = None,
                    overrides: dict | None = None) -> str:
    parsed = parse_medium_url(project_url)
    blog_id = project_id or parsed.slug
    if not blog_id:
        raise IngestError(f"Could not parse Medium URL: {project_url}")

    record = apply_layers(
        load_template(config.TEMPLATE_BLOG),
        {"link": project_url},
        overrides,
    )

    # the URL's author segment is not reliable (publications), ask the page
    post_author = get_medium_post_author(project_url)
    if post_author and not author_exists(post_author):
        add_medium_author(post_author)
    record["authorIds"] = [normalize_author_id(post_author)] if post_author else []

    _persist(product, config.COLLECTION_BLOGS, blog_id, record, overrides)
    log_event("blog_added", {"product": product, "id": blog_id, "source": MEDIUM})
    return blog_id


def add_other_blog(product: str, project_url: str, project_id: str | None = None,
                   overrides: dict | None = None) -> str:
    """
    Any non-GitHub, non-Medium page. The title comes from Open Graph when the
    scrape works, else the template's. Without an explicit id the id is the URL
    path slug; a URL with no path segments (https://example.com/) raises
    IngestError instead of writing an unnamed record.
    """
    record = apply_layers(
        load_template(config.TEMPLATE_BLOG),
        {"source": OTHER, "link": project_url},
        overrides,
    )

    og = scrape_open_graph(project_url)
    if og.get("success"):
        record["title"] = og["ogTitle"]
    else:
        warn(f"no title for {project_url}: {og.get('error')}", url=project_url)

    blog_id = project_id or slug_from_url(project_url)
    if not blog_id:
        raise IngestError(f"Could not derive an id from URL: {project_url}")

    _persist(product, config.COLLECTION_BLOGS, blog_id, record, overrides)
    log_event("blog_added", {"product": product, "id": blog_id, "source": OTHER})
    return blog_id


HANDLERS = {
    GITHUB: add_repo,
    MEDIUM: add_medium_blog,
    OTHER: add_other_blog,
}

def add_project(product: str, project_url: str, project_id: str | None = None,
                overrides: dict | None = None) -> str:
    kind = classify_project(project_url)
    return HANDLERS[kind](product, project_url, project_id, overrides)
