"""
Top-level package for the WordPress export (WXR) reader.

This package turns a WordPress eXtended RSS export into a typed model of
the site: metadata, categories, tags, pages, posts and attachments.
Modules are split into subpackages:

* :mod:`wpexport.parsers` – control character filtering and XML decoding
* :mod:`wpexport.extractors` – item classification, field and taxonomy extraction
* :mod:`wpexport.models` – the decoded feed and the website model
* :mod:`wpexport.utils` – errors, dates and event reporting

Orchestration is handled in :mod:`wpexport.parser`.
"""

from .parser import WordPressParser
from .models.website import (
    AttachmentInfo,
    CategoryInfo,
    PageInfo,
    PostInfo,
    PublishStatus,
    TagInfo,
    WebsiteInfo,
)
from .utils.errors import WXRParseError

__all__ = [
    "AttachmentInfo",
    "CategoryInfo",
    "PageInfo",
    "PostInfo",
    "PublishStatus",
    "TagInfo",
    "WebsiteInfo",
    "WordPressParser",
    "WXRParseError",
]
