"""
Typed intermediate representation of a decoded WXR feed.

The decoder fills these models once, at the XML boundary.  Every WordPress
extension the extractors consume is an explicit optional field, so a missing
element shows up as ``None`` rather than as a failed lookup deep inside
extraction code.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryRecord(BaseModel):
    """Children of a channel level ``<wp:category>``."""

    model_config = ConfigDict(frozen=True)

    term_id: Optional[str] = None
    cat_name: Optional[str] = None
    category_nicename: Optional[str] = None


class TagRecord(BaseModel):
    """Children of a channel level ``<wp:tag>``."""

    model_config = ConfigDict(frozen=True)

    term_id: Optional[str] = None
    tag_name: Optional[str] = None
    tag_slug: Optional[str] = None


class FeedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str = ""
    published: Optional[str] = None
    published_parsed: Optional[datetime] = None
    content: str = ""

    # wp: namespace
    post_type: Optional[str] = None
    post_id: Optional[str] = None
    status: Optional[str] = None
    post_modified_gmt: Optional[str] = None

    # excerpt:encoded
    excerpt: Optional[str] = None


class Feed(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str = ""
    description: str = ""
    published: Optional[str] = None
    published_parsed: Optional[datetime] = None
    language: str = ""

    items: List[FeedItem] = Field(default_factory=list)
    categories: List[CategoryRecord] = Field(default_factory=list)
    tags: List[TagRecord] = Field(default_factory=list)
