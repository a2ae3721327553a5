"""
High-level entry point for reading a WordPress export.

This module defines a :class:`WordPressParser` class that ties together
the sanitizer, the feed decoder and the extractors into a complete
pipeline::

    raw bytes -> ControlCharacterFilter -> decode_feed -> build_website_info

The whole parse is synchronous and all-or-nothing: it either returns a
:class:`~wpexport.models.website.WebsiteInfo` or raises a
:class:`~wpexport.utils.errors.WXRParseError`.  Nothing is shared between
calls, so one parser instance can be reused.

Configuration is supplied via a JSON file path or directly as a
dictionary (see :mod:`wpexport.config`).
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional, Union

from .config import ParserConfig, load_config
from .extractors.wordpress_extractor import build_website_info
from .models.website import WebsiteInfo
from .parsers.feed_decoder import decode_feed
from .parsers.sanitizer import ControlCharacterFilter
from .utils.reporting import LoggingReporter, Reporter


class WordPressParser:
    """
    Reads WXR documents into :class:`WebsiteInfo` models.  Events
    (unparseable channel date, skipped items, summary counts) are sent to
    ``reporter``, which defaults to a :class:`LoggingReporter`.
    """

    def __init__(self, config: Optional[Union[Dict[str, Any], ParserConfig]] = None, *,
                 config_file: Optional[str] = None,
                 reporter: Optional[Reporter] = None) -> None:
        if isinstance(config, ParserConfig):
            self.config = config
        else:
            self.config = load_config(config, config_file=config_file)
        self.reporter = reporter or LoggingReporter()

    def parse(self, stream: BinaryIO) -> WebsiteInfo:
        """Parse a WXR document read from a binary ``stream``.

        :param stream: Any object with a ``read(n)`` method returning bytes.
        :return: The website model.
        :raises WXRParseError: on any fatal decode or extraction error.
        """
        filtered = ControlCharacterFilter(stream, chunk_size=self.config.chunk_size)
        feed = decode_feed(filtered)
        if filtered.removed:
            self.reporter.report("CONTROL_CHARS_REMOVED", count=filtered.removed)
        return build_website_info(feed, self.reporter, self.config)

    def parse_file(self, path: str) -> WebsiteInfo:
        with open(path, "rb") as f:
            return self.parse(f)
