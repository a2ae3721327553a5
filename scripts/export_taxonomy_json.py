#!/usr/bin/env python3
"""
Export the categories and tags of a WordPress WXR export as JSON.

Usage:
  python scripts/export_taxonomy_json.py \
    --input docs/site.WordPress.2024-01-01.xml \
    --output data/taxonomy.json

Output (simplified example):
{
  "generated_at": "2025-08-20T15:04:05Z",
  "source_file": "docs/site.WordPress.2024-01-01.xml",
  "site_language": "en-US",
  "count": 2,
  "categories": [{"id": "3", "name": "News", "slug": "news"}],
  "tags": [{"id": "7", "name": "Python", "slug": "python"}]
}

Notes:
- IDs are the WordPress term IDs, kept as strings.
- "count" is the number of categories plus tags.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

# Allows importing wpexport when run as a script
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wpexport.models.website import WebsiteInfo  # noqa: E402
from wpexport.parser import WordPressParser  # noqa: E402
from wpexport.utils.errors import WXRParseError  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export categories and tags from a WordPress WXR file as JSON.",
    )
    parser.add_argument("--input", required=True, help="Path to the WXR export")
    parser.add_argument("--output", default="data/taxonomy.json", help="Path of the JSON output")
    return parser.parse_args()


def build_taxonomy_document(website: WebsiteInfo, source_file: str) -> Dict[str, Any]:
    categories = [{"id": c.id, "name": c.name, "slug": c.nice_name} for c in website.categories]
    tags = [{"id": t.id, "name": t.name, "slug": t.slug} for t in website.tags]
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "source_file": source_file,
        "site_language": website.language,
        "count": len(categories) + len(tags),
        "categories": categories,
        "tags": tags,
    }


def main() -> None:
    args = parse_args()
    in_path = Path(args.input)
    out_path = Path(args.output)

    if not in_path.exists():
        raise SystemExit(f"Input file not found: {in_path}")

    try:
        website = WordPressParser().parse_file(str(in_path))
    except WXRParseError as e:
        raise SystemExit(f"Could not parse {in_path}: {e}")

    doc = build_taxonomy_document(website, str(in_path))
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(doc, f, ensure_ascii=False, indent=2)

    print(f"Categories: {len(doc['categories'])}")
    print(f"Tags: {len(doc['tags'])}")
    print(f"File written: {out_path}")


if __name__ == "__main__":
    main()
