"""
Data models.

:mod:`wpexport.models.feed` holds the typed view of the decoded XML and
:mod:`wpexport.models.website` the aggregate handed back to callers.
"""

from .feed import CategoryRecord, Feed, FeedItem, TagRecord
from .website import (
    AttachmentInfo,
    CategoryInfo,
    CommonFields,
    PageInfo,
    PostInfo,
    PublishStatus,
    TagInfo,
    WebsiteInfo,
)

__all__ = [
    "AttachmentInfo",
    "CategoryInfo",
    "CategoryRecord",
    "CommonFields",
    "Feed",
    "FeedItem",
    "PageInfo",
    "PostInfo",
    "PublishStatus",
    "TagInfo",
    "TagRecord",
    "WebsiteInfo",
]
