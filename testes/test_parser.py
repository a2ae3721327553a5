import io
import json
from datetime import datetime, timezone

import pytest

from wpexport import WordPressParser, WXRParseError
from wpexport.config import ParserConfig, load_config
from wpexport.models.website import PublishStatus
from wpexport.utils.errors import (
    ConfigError,
    FeedDecodeError,
    FieldParseError,
    UnexpectedEnumValueError,
)
from wpexport.utils.reporting import NullReporter

UTC = timezone.utc


def parse(data: bytes, reporter=None, config=None):
    return WordPressParser(config, reporter=reporter or NullReporter()).parse(io.BytesIO(data))


@pytest.fixture
def minimal_export(make_wxr, make_item, make_category, make_tag):
    return make_wxr(
        categories=[make_category("3", "News", "news")],
        tags=[make_tag("7", "Python", "python")],
        items=[
            make_item(post_type="attachment", post_id="10", title="logo",
                      link="https://example.com/logo/", status="inherit",
                      content="", excerpt=""),
            make_item(post_type="page", post_id="2", title="About",
                      link="https://example.com/about/", content="<p>About us</p>",
                      excerpt="", modified="2022-01-02 03:04:05"),
            make_item(post_type="post", post_id="1", title="Hello world",
                      link="https://example.com/hello-world/", status="publish",
                      content="<p>Welcome</p>", excerpt="Welcome post"),
            make_item(post_type="nav_menu_item", post_id="99", title="Menu"),
        ],
    )


def test_minimal_export_has_one_of_each(minimal_export):
    website = parse(minimal_export)

    assert website.title == "Example Site"
    assert website.link == "https://example.com"
    assert website.description == "Just another WordPress site"
    assert website.language == "en-US"
    assert website.pub_date == datetime(2023, 5, 10, 12, 0, tzinfo=UTC)

    (category,) = website.categories
    assert (category.id, category.name, category.nice_name) == ("3", "News", "news")
    (tag,) = website.tags
    assert (tag.id, tag.name, tag.slug) == ("7", "Python", "python")

    (attachment,) = website.attachments
    assert attachment.post_id == "10"
    assert attachment.publish_status is PublishStatus.INHERIT

    (page,) = website.pages
    assert page.title == "About"
    assert page.link == "https://example.com/about/"
    assert page.content == "<p>About us</p>"
    assert page.excerpt == ""
    assert page.last_modified_date == datetime(2022, 1, 2, 3, 4, 5, tzinfo=UTC)

    (post,) = website.posts
    assert post.post_id == "1"
    assert post.title == "Hello world"
    assert post.link == "https://example.com/hello-world/"
    assert post.publish_date == datetime(2023, 5, 10, 12, 0, tzinfo=UTC)
    assert post.last_modified_date == datetime(2023, 5, 10, 12, 0, tzinfo=UTC)
    assert post.publish_status is PublishStatus.PUBLISH
    assert post.content == "<p>Welcome</p>"
    assert post.excerpt == "Welcome post"


def test_parsing_is_deterministic(minimal_export):
    assert parse(minimal_export) == parse(minimal_export)


def test_control_characters_are_stripped(make_wxr, make_item, reporter):
    data = make_wxr(items=[make_item(title="Hel\x01lo", content="<p>a\x01b</p>")])
    website = parse(data, reporter=reporter)
    assert website.posts[0].title == "Hello"
    assert website.posts[0].content == "<p>ab</p>"
    assert reporter.find("CONTROL_CHARS_REMOVED") == [{"count": 2}]


def test_bad_modified_date_returns_no_model(make_wxr, make_item):
    data = make_wxr(items=[make_item(), make_item(post_type="page", modified="not-a-date")])
    with pytest.raises(FieldParseError):
        parse(data)


def test_unknown_status_is_a_parse_error(make_wxr, make_item):
    data = make_wxr(items=[make_item(status="scheduled")])
    with pytest.raises(UnexpectedEnumValueError):
        parse(data)
    with pytest.raises(WXRParseError):
        parse(data)


def test_malformed_document(make_wxr):
    with pytest.raises(FeedDecodeError):
        parse(make_wxr()[:-20])


def test_item_without_pubdate(make_wxr, make_item):
    website = parse(make_wxr(items=[make_item(pub_date=None)]))
    assert website.posts[0].publish_date is None
    assert website.posts[0].post_id == "1"


def test_never_published_draft_date(make_wxr, make_item):
    item = make_item(status="draft", pub_date="Mon, 30 Nov -0001 00:00:00 +0000")
    website = parse(make_wxr(items=[item]))
    assert website.posts[0].publish_status is PublishStatus.DRAFT
    assert website.posts[0].publish_date is None


def test_unpadded_modified_date_is_rejected(make_wxr, make_item):
    with pytest.raises(FieldParseError):
        parse(make_wxr(items=[make_item(modified="2023-5-1 1:2:3")]))


def test_channel_without_categories(make_wxr):
    website = parse(make_wxr())
    assert website.categories == []
    assert website.tags == []


def test_config_dict_is_applied(make_wxr, make_item, reporter):
    data = make_wxr(items=[make_item(post_type="product")])
    parse(data, reporter=reporter, config={"ignored_post_types": ["product"]})
    assert reporter.find("ITEM_IGNORED") == []


def test_parse_file(tmp_path, minimal_export):
    path = tmp_path / "export.xml"
    path.write_bytes(minimal_export)
    website = WordPressParser(reporter=NullReporter()).parse_file(str(path))
    assert len(website.posts) == 1


def test_json_export_round_trips_values(minimal_export):
    data = json.loads(parse(minimal_export).model_dump_json())
    assert data["posts"][0]["publish_status"] == "publish"
    assert data["categories"][0]["nice_name"] == "news"


def test_load_config_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"ignored_post_types": ["x"], "chunk_size": 128}), encoding="utf-8")
    config = load_config(config_file=str(path))
    assert config.ignored_post_types == ["x"]
    assert config.chunk_size == 128


def test_load_config_missing_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("WPEXPORT_CHUNK_SIZE", raising=False)
    monkeypatch.delenv("WPEXPORT_LOG_LEVEL", raising=False)
    config = load_config(config_file=str(tmp_path / "nope.json"))
    assert config == ParserConfig()
    assert "nav_menu_item" in config.ignored_post_types


def test_load_config_environment(monkeypatch):
    monkeypatch.setenv("WPEXPORT_CHUNK_SIZE", "2048")
    monkeypatch.setenv("WPEXPORT_LOG_LEVEL", "debug")
    config = load_config()
    assert config.chunk_size == 2048
    assert config.log_level == "DEBUG"


def test_load_config_errors(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file=str(bad))
    with pytest.raises(ConfigError):
        load_config({"chunk_size": 0})
