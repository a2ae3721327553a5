"""RSS 2.0 / WXR feed decoder.

Turns a (filtered) byte stream into a :class:`~wpexport.models.feed.Feed`
without making any network requests.  The document is read with
``defusedxml``'s ``iterparse`` so entity-expansion tricks are refused and
``<item>`` elements are released as soon as they have been converted.

Supports:
  - RSS 2.0 ``<rss>/<channel>/<item>`` structure
  - WordPress ``wp:`` and ``excerpt:`` extensions, any WXR version
  - ``content:encoded`` bodies and Dublin Core ``dc:date``
"""

from __future__ import annotations

import logging
import re
from typing import BinaryIO, Dict, Optional, Tuple

import defusedxml
import defusedxml.ElementTree as defused_ET
from defusedxml.ElementTree import ParseError

from ..models.feed import CategoryRecord, Feed, FeedItem, TagRecord
from ..utils.dates import parse_rss_date
from ..utils.errors import FeedDecodeError, UnsupportedFeedError

logger = logging.getLogger(__name__)

_CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
_DC_NS = "http://purl.org/dc/elements/1.1/"
_WP_NS_RE = re.compile(r"^https?://wordpress\.org/export/\d+(?:\.\d+)*/$")
_EXCERPT_NS_RE = re.compile(r"^https?://wordpress\.org/export/\d+(?:\.\d+)*/excerpt/$")

# wp:<name> item extensions copied onto FeedItem
_WP_ITEM_FIELDS = ("post_type", "post_id", "status", "post_modified_gmt")
_CATEGORY_FIELDS = ("term_id", "cat_name", "category_nicename")
_TAG_FIELDS = ("term_id", "tag_name", "tag_slug")


def _split_tag(tag: str) -> Tuple[str, str]:
    """Split ``{uri}local`` into ``(uri, local)``; no namespace gives ``""``."""
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return "", tag


def _namespace_kind(uri: str) -> Optional[str]:
    if not uri:
        return "rss"
    if uri == _CONTENT_NS:
        return "content"
    if uri == _DC_NS:
        return "dc"
    if _WP_NS_RE.match(uri):
        return "wp"
    if _EXCERPT_NS_RE.match(uri):
        return "excerpt"
    return None


def _text(el) -> str:
    return (el.text or "").strip()


def _children(el, kind: str, names) -> Dict[str, str]:
    """First value of each wanted child in namespace ``kind``."""
    values: Dict[str, str] = {}
    for child in el:
        uri, local = _split_tag(child.tag)
        if local in names and _namespace_kind(uri) == kind:
            values.setdefault(local, _text(child))
    return values


def _item_from_element(el) -> FeedItem:
    fields: Dict[str, Optional[str]] = {}
    description: Optional[str] = None
    encoded: Optional[str] = None
    dc_date: Optional[str] = None

    for child in el:
        uri, local = _split_tag(child.tag)
        kind = _namespace_kind(uri)
        if kind == "rss":
            if local in ("title", "link") and local not in fields:
                fields[local] = _text(child)
            elif local == "pubDate" and "published" not in fields:
                fields["published"] = _text(child)
            elif local == "description" and description is None:
                description = child.text or ""
        elif kind == "content" and local == "encoded" and encoded is None:
            # Body is kept verbatim
            encoded = child.text or ""
        elif kind == "dc" and local == "date" and dc_date is None:
            dc_date = _text(child)
        elif kind == "wp" and local in _WP_ITEM_FIELDS:
            fields.setdefault(local, _text(child))
        elif kind == "excerpt" and local == "encoded":
            fields.setdefault("excerpt", _text(child))

    published = fields.pop("published", None) or dc_date
    return FeedItem(
        **fields,
        published=published,
        published_parsed=parse_rss_date(published),
        content=encoded if encoded is not None else (description or ""),
    )


def _channel_to_feed(channel, items) -> Feed:
    meta: Dict[str, str] = {}
    categories = []
    tags = []
    for child in channel:
        uri, local = _split_tag(child.tag)
        kind = _namespace_kind(uri)
        if kind == "rss" and local in ("title", "link", "description", "pubDate", "language"):
            meta.setdefault(local, _text(child))
        elif kind == "wp" and local == "category":
            categories.append(CategoryRecord(**_children(child, "wp", _CATEGORY_FIELDS)))
        elif kind == "wp" and local == "tag":
            tags.append(TagRecord(**_children(child, "wp", _TAG_FIELDS)))

    published = meta.get("pubDate") or None
    return Feed(
        title=meta.get("title", ""),
        link=meta.get("link", ""),
        description=meta.get("description", ""),
        published=published,
        published_parsed=parse_rss_date(published),
        language=meta.get("language", ""),
        items=items,
        categories=categories,
        tags=tags,
    )


def decode_feed(stream: BinaryIO) -> Feed:
    """Decode an RSS 2.0 / WXR document read from ``stream``.

    Raises:
        UnsupportedFeedError: the root element is not ``<rss>`` or has no
            ``<channel>``.
        FeedDecodeError: the document is not well-formed XML.
    """
    stack = []
    channel = None
    items = []
    try:
        for event, el in defused_ET.iterparse(stream, events=("start", "end")):
            if event == "start":
                if not stack and _split_tag(el.tag) != ("", "rss"):
                    raise UnsupportedFeedError(f"unsupported feed type: <{el.tag}>")
                if len(stack) == 1 and el.tag == "channel" and channel is None:
                    channel = el
                stack.append(el)
                continue

            stack.pop()
            if el.tag == "item" and channel is not None and stack and stack[-1] is channel:
                items.append(_item_from_element(el))
                el.clear()
                channel.remove(el)
    except ParseError as e:
        raise FeedDecodeError(f"error parsing XML: {e}") from e
    except defusedxml.DefusedXmlException as e:
        raise FeedDecodeError(f"refusing to parse XML: {e}") from e

    if channel is None:
        raise UnsupportedFeedError("unsupported feed type: <rss> without <channel>")

    logger.debug("Decoded %d feed items", len(items))
    return _channel_to_feed(channel, items)
