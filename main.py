#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
addproject: add a blog post or a GitHub repo to a product's config
- classifies the URL (github.com / medium.com / anything else)
- fetches title, author and README reference
- writes <config>/<product>/<blogs|repos>/<id>.json, merging with an existing file

Usage: addproject <product> <url> [id] [--set key=value ...] [--config-dir DIR]
"""

from __future__ import annotations
import sys, json, argparse
from typing import Dict, List, Optional
import config
from ingest import add_project
from models import STRING_FIELDS
from provenance import log_event

USAGE = "Missing required arguments:\naddproject <product> <url> [id]"


def parse_overrides(pairs: List[str]) -> Dict[str, object]:
    """
    key=value pairs. Values are read as JSON when they parse (tags=["a"], featured=true),
    except for the record's text fields, which always keep the raw string (title=2021).
    """
    out: Dict[str, object] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"--set expects key=value, got {pair!r}")
        key = key.strip()
        if key in STRING_FIELDS:
            out[key] = raw
            continue
        try:
            out[key] = json.loads(raw)
        except json.JSONDecodeError:
            out[key] = raw
    return out


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="addproject", description="Add a blog or repo to a product config")
    ap.add_argument("product", nargs="?", help="product directory under the config root")
    ap.add_argument("url", nargs="?", help="GitHub, Medium or any blog URL")
    ap.add_argument("id", nargs="?", default=None, help="record id (default: derived from the URL)")
    # anything after the id is ignored
    ap.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    ap.add_argument("--set", dest="overrides", action="append", default=[], metavar="KEY=VALUE",
                    help="override a field of the record (repeatable)")
    ap.add_argument("--config-dir", default=None, help=f"config root (default: {config.CONFIG_DIR})")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    # options may sit between the positionals: addproject web --set title=X <url>
    args = build_parser().parse_intermixed_args(argv)
    if not args.product or not args.url:
        print(USAGE, file=sys.stderr)
        return 0

    if args.config_dir:
        config.CONFIG_DIR = args.config_dir

    overrides = parse_overrides(args.overrides)

    print(f"Product: {args.product}")
    print(f"Project: {args.url}")
    log_event("run", {"product": args.product, "url": args.url, "id": args.id,
                      "overrides": sorted(overrides)})

    project_id = add_project(args.product, args.url, args.id, overrides or None)
    print(f"Added: {project_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
