from __future__ import annotations

from typing import Iterable, List, Optional

from ..models.feed import CategoryRecord, TagRecord
from ..models.website import CategoryInfo, TagInfo
from ..utils.errors import MissingFieldError
from ..utils.reporting import NullReporter, Reporter


def _required(value: Optional[str], field: str, context: Optional[str] = None) -> str:
    if value is None:
        raise MissingFieldError(field, context)
    return value


def extract_categories(records: Iterable[CategoryRecord],
                       reporter: Optional[Reporter] = None) -> List[CategoryInfo]:
    """Build one :class:`CategoryInfo` per ``<wp:category>``, in document order.

    ``category_parent`` is not modelled.
    """
    reporter = reporter or NullReporter()
    categories: List[CategoryInfo] = []
    for record in records:
        context = record.cat_name or record.term_id
        category = CategoryInfo(
            id=_required(record.term_id, "wp:term_id", context),
            name=_required(record.cat_name, "wp:cat_name", context),
            nice_name=_required(record.category_nicename, "wp:category_nicename", context),
        )
        reporter.report("TERM_EXTRACTED", "DEBUG", taxonomy="category", id=category.id,
                        name=category.name)
        categories.append(category)
    return categories


def extract_tags(records: Iterable[TagRecord],
                 reporter: Optional[Reporter] = None) -> List[TagInfo]:
    """Build one :class:`TagInfo` per ``<wp:tag>``, in document order."""
    reporter = reporter or NullReporter()
    tags: List[TagInfo] = []
    for record in records:
        context = record.tag_name or record.term_id
        tag = TagInfo(
            id=_required(record.term_id, "wp:term_id", context),
            name=_required(record.tag_name, "wp:tag_name", context),
            slug=_required(record.tag_slug, "wp:tag_slug", context),
        )
        reporter.report("TERM_EXTRACTED", "DEBUG", taxonomy="tag", id=tag.id, name=tag.name)
        tags.append(tag)
    return tags
