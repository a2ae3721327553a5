import os
import sys
from typing import Any, Dict, List, Tuple

import pytest

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wpexport.utils.reporting import Reporter  # noqa: E402

WXR_HEADER = """<?xml version="1.0" encoding="UTF-8" ?>
<rss version="2.0"
\txmlns:excerpt="http://wordpress.org/export/{version}/excerpt/"
\txmlns:content="http://purl.org/rss/1.0/modules/content/"
\txmlns:wfw="http://wellformedweb.org/CommentAPI/"
\txmlns:dc="http://purl.org/dc/elements/1.1/"
\txmlns:wp="http://wordpress.org/export/{version}/">
<channel>
"""


def _element(tag: str, value, cdata: bool = False) -> str:
    if value is None:
        return ""
    if cdata:
        return f"\t\t<{tag}><![CDATA[{value}]]></{tag}>\n"
    return f"\t\t<{tag}>{value}</{tag}>\n"


def build_item(
    post_type="post",
    post_id="1",
    title="Hello world",
    link="https://example.com/hello-world/",
    pub_date="Wed, 10 May 2023 12:00:00 +0000",
    modified="2023-05-10 12:00:00",
    status="publish",
    content="<p>Welcome to WordPress.</p>",
    excerpt="A short summary",
    extra="",
) -> str:
    """Render one ``<item>``.  Passing ``None`` leaves the element out."""
    return (
        "\t<item>\n"
        + _element("title", title)
        + _element("link", link)
        + _element("pubDate", pub_date)
        + _element("dc:creator", "admin", cdata=True)
        + _element("content:encoded", content, cdata=True)
        + _element("excerpt:encoded", excerpt, cdata=True)
        + _element("wp:post_id", post_id)
        + _element("wp:post_modified_gmt", modified, cdata=True)
        + _element("wp:status", status, cdata=True)
        + _element("wp:post_type", post_type, cdata=True)
        + extra
        + "\t</item>\n"
    )


def build_category(term_id="3", name="News", nicename="news", parent="") -> str:
    return (
        "\t<wp:category>"
        f"<wp:term_id>{term_id}</wp:term_id>"
        f"<wp:category_nicename><![CDATA[{nicename}]]></wp:category_nicename>"
        f"<wp:category_parent><![CDATA[{parent}]]></wp:category_parent>"
        f"<wp:cat_name><![CDATA[{name}]]></wp:cat_name>"
        "</wp:category>\n"
    )


def build_tag(term_id="7", name="Python", slug="python") -> str:
    return (
        "\t<wp:tag>"
        f"<wp:term_id>{term_id}</wp:term_id>"
        f"<wp:tag_slug><![CDATA[{slug}]]></wp:tag_slug>"
        f"<wp:tag_name><![CDATA[{name}]]></wp:tag_name>"
        "</wp:tag>\n"
    )


def build_wxr(
    items=(),
    categories=(),
    tags=(),
    title="Example Site",
    link="https://example.com",
    description="Just another WordPress site",
    pub_date="Wed, 10 May 2023 12:00:00 +0000",
    language="en-US",
    version="1.2",
) -> bytes:
    channel = (
        _element("title", title)
        + _element("link", link)
        + _element("description", description)
        + _element("pubDate", pub_date)
        + _element("language", language)
        + "\t<wp:wxr_version>1.2</wp:wxr_version>\n"
        + "".join(categories)
        + "".join(tags)
        + "".join(items)
    )
    doc = WXR_HEADER.format(version=version) + channel + "</channel>\n</rss>\n"
    return doc.encode("utf-8")


class RecordingReporter(Reporter):
    def __init__(self) -> None:
        self.events: List[Tuple[str, str, Dict[str, Any]]] = []

    def report(self, code: str, level: str = "INFO", **data: Any) -> None:
        self.events.append((code, level, data))

    def codes(self) -> List[str]:
        return [code for code, _, _ in self.events]

    def find(self, code: str) -> List[Dict[str, Any]]:
        return [data for c, _, data in self.events if c == code]


@pytest.fixture
def make_item():
    return build_item


@pytest.fixture
def make_category():
    return build_category


@pytest.fixture
def make_tag():
    return build_tag


@pytest.fixture
def make_wxr():
    return build_wxr


@pytest.fixture
def reporter():
    return RecordingReporter()
