from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PublishStatus(str, Enum):
    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    INHERIT = "inherit"
    FUTURE = "future"


class CategoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    # term IDs are usually numeric but are kept as strings
    id: str
    name: str
    nice_name: str


class TagInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    slug: str


class CommonFields(BaseModel):
    """Fields shared by every WordPress item kind.

    Not instantiated directly; see :class:`PostInfo`, :class:`PageInfo` and
    :class:`AttachmentInfo`.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    post_id: str
    title: str
    # absolute link, e.g. https://example.com/about
    link: str
    # None when the item was never published
    publish_date: Optional[datetime] = None
    last_modified_date: datetime
    publish_status: PublishStatus
    content: str = ""
    excerpt: str = ""


class PostInfo(CommonFields):
    kind: Literal["post"] = "post"


class PageInfo(CommonFields):
    kind: Literal["page"] = "page"


class AttachmentInfo(CommonFields):
    kind: Literal["attachment"] = "attachment"


class WebsiteInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str = ""
    description: str = ""
    pub_date: Optional[datetime] = None
    language: str = ""

    categories: List[CategoryInfo] = Field(default_factory=list)
    tags: List[TagInfo] = Field(default_factory=list)

    # Mostly collected for completeness; only the ones referenced by
    # posts/pages are usually of interest.
    attachments: List[AttachmentInfo] = Field(default_factory=list)
    pages: List[PageInfo] = Field(default_factory=list)
    posts: List[PostInfo] = Field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "attachments": len(self.attachments),
            "pages": len(self.pages),
            "posts": len(self.posts),
            "categories": len(self.categories),
            "tags": len(self.tags),
        }
