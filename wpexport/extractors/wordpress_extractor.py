"""
Classification of WXR items and assembly of the website model.

Each decoded item is dispatched on its ``wp:post_type``:

* ``attachment``, ``page`` and ``post`` are extracted into typed records;
* the post types listed in the configuration (menus, custom CSS, global
  styles...) are dropped silently;
* anything else is dropped and reported as ``ITEM_IGNORED``.

Any error raised while extracting an item aborts the whole parse; there is
no partial :class:`WebsiteInfo`.
"""

from __future__ import annotations

from typing import Iterable, Optional, Type, TypeVar

from ..config import DEFAULT_IGNORED_POST_TYPES, ParserConfig
from ..models.feed import Feed, FeedItem
from ..models.website import (
    AttachmentInfo,
    CommonFields,
    PageInfo,
    PostInfo,
    PublishStatus,
    WebsiteInfo,
)
from ..utils.dates import WXR_DATE_FORMAT, parse_wxr_time
from ..utils.errors import MissingFieldError, UnexpectedEnumValueError
from ..utils.reporting import NullReporter, Reporter
from .taxonomy import extract_categories, extract_tags

ATTACHMENT = "attachment"
PAGE = "page"
POST = "post"
IGNORED = "ignored"
UNKNOWN = "unknown"

_PUBLISH_STATUSES = tuple(s.value for s in PublishStatus)

_T = TypeVar("_T", bound=CommonFields)


def classify_item(item: FeedItem,
                  ignored_post_types: Iterable[str] = DEFAULT_IGNORED_POST_TYPES) -> str:
    """Classifica um item pelo valor de ``wp:post_type``.

    Args:
        item (FeedItem): O item decodificado do feed.
        ignored_post_types (Iterable[str]): Tipos descartados sem aviso.

    Returns:
        str: ``attachment``, ``page``, ``post``, ``ignored`` ou ``unknown``.

    Raises:
        MissingFieldError: Se o item não tiver ``wp:post_type``.
    """
    post_type = item.post_type
    if post_type is None:
        raise MissingFieldError("wp:post_type", item.title)
    if post_type in (ATTACHMENT, PAGE, POST):
        return post_type
    if post_type in ignored_post_types:
        return IGNORED
    return UNKNOWN


def _parse_publish_status(item: FeedItem) -> PublishStatus:
    if item.status is None:
        raise MissingFieldError("wp:status", item.title)
    if item.status not in _PUBLISH_STATUSES:
        raise UnexpectedEnumValueError("publish status", item.status, _PUBLISH_STATUSES)
    return PublishStatus(item.status)


def extract_common_fields(item: FeedItem, *, date_format: str = WXR_DATE_FORMAT) -> dict:
    """Extrai os campos comuns a posts, páginas e anexos.

    Args:
        item (FeedItem): O item decodificado do feed.
        date_format (str): Formato de ``wp:post_modified_gmt`` (UTC).

    Returns:
        dict: Argumentos para construir um :class:`CommonFields`.

    Raises:
        MissingFieldError: Se ``wp:post_modified_gmt``, ``wp:status`` ou
            ``wp:post_id`` estiverem ausentes.
        FieldParseError: Se a data de modificação não seguir o formato.
        UnexpectedEnumValueError: Se o status não for um dos valores conhecidos.
    """
    if item.post_modified_gmt is None:
        raise MissingFieldError("wp:post_modified_gmt", item.title)
    last_modified = parse_wxr_time(item.post_modified_gmt, "wp:post_modified_gmt", date_format)
    publish_status = _parse_publish_status(item)
    if item.post_id is None:
        raise MissingFieldError("wp:post_id", item.title)

    return {
        "post_id": item.post_id,
        "title": item.title,
        "link": item.link,
        "publish_date": item.published_parsed,
        "last_modified_date": last_modified,
        "publish_status": publish_status,
        "content": item.content,
        "excerpt": item.excerpt or "",
    }


def _extract(model: Type[_T], item: FeedItem, date_format: str) -> _T:
    return model(**extract_common_fields(item, date_format=date_format))


def extract_attachment(item: FeedItem, *, date_format: str = WXR_DATE_FORMAT) -> AttachmentInfo:
    return _extract(AttachmentInfo, item, date_format)


def extract_page(item: FeedItem, *, date_format: str = WXR_DATE_FORMAT) -> PageInfo:
    return _extract(PageInfo, item, date_format)


def extract_post(item: FeedItem, *, date_format: str = WXR_DATE_FORMAT) -> PostInfo:
    return _extract(PostInfo, item, date_format)


def build_website_info(feed: Feed, reporter: Optional[Reporter] = None,
                       config: Optional[ParserConfig] = None) -> WebsiteInfo:
    """Monta o :class:`WebsiteInfo` a partir de um feed decodificado.

    Args:
        feed (Feed): O feed decodificado.
        reporter (Reporter): Destino dos eventos (avisos, itens ignorados, resumo).
        config (ParserConfig): Tipos ignorados e formato de data.

    Returns:
        WebsiteInfo: O modelo completo do site.

    Raises:
        WXRParseError: Qualquer erro em um item aborta a análise inteira.
    """
    reporter = reporter or NullReporter()
    config = config or ParserConfig()

    if feed.published_parsed is None:
        reporter.report("FEED_DATE_MISSING", "WARNING", published=feed.published)

    attachments = []
    pages = []
    posts = []
    for item in feed.items:
        kind = classify_item(item, config.ignored_post_types)
        if kind == ATTACHMENT:
            attachments.append(extract_attachment(item, date_format=config.modified_date_format))
        elif kind == PAGE:
            pages.append(extract_page(item, date_format=config.modified_date_format))
        elif kind == POST:
            posts.append(extract_post(item, date_format=config.modified_date_format))
        elif kind == UNKNOWN:
            reporter.report("ITEM_IGNORED", title=item.title, type=item.post_type)
            continue
        else:
            continue
        reporter.report("ITEM_EXTRACTED", "DEBUG", kind=kind, post_id=item.post_id,
                        title=item.title)

    website = WebsiteInfo(
        title=feed.title,
        link=feed.link,
        description=feed.description,
        pub_date=feed.published_parsed,
        language=feed.language,
        categories=extract_categories(feed.categories, reporter),
        tags=extract_tags(feed.tags, reporter),
        attachments=attachments,
        pages=pages,
        posts=posts,
    )
    reporter.report("SUMMARY", website=website.title, **website.counts())
    return website
