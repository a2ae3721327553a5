"""
Exception hierarchy raised while reading a WordPress export.

Every failure that aborts a parse derives from :class:`WXRParseError`, so a
caller only needs a single ``except`` clause to keep control of the process.
Recoverable conditions (an unparseable channel date, an unknown post type)
never raise; they are sent to the reporter instead.
"""

from __future__ import annotations

from typing import Iterable, Optional


class WXRParseError(Exception):
    """Base class for all fatal parse errors."""
    pass


class ConfigError(WXRParseError):
    """The parser configuration file could not be loaded."""
    pass


class FeedDecodeError(WXRParseError):
    """The document is not well-formed XML, even after filtering."""
    pass


class UnsupportedFeedError(FeedDecodeError):
    """The document is XML but not an RSS 2.0 / WXR feed."""
    pass


class FieldParseError(WXRParseError):
    """A required field is present but its value has the wrong format."""

    def __init__(self, field: str, value: str, reason: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        message = f"error parsing {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingFieldError(WXRParseError):
    """A field that every WXR item or term must carry is absent."""

    def __init__(self, field: str, item_title: Optional[str] = None) -> None:
        self.field = field
        self.item_title = item_title
        message = f"missing required field {field}"
        if item_title:
            message = f"{message} in {item_title!r}"
        super().__init__(message)


class UnexpectedEnumValueError(WXRParseError):
    """A closed-set field holds a value outside of that set.

    Unknown publish statuses used to terminate the whole process; raising
    keeps the decision with the caller.
    """

    def __init__(self, field: str, value: str, allowed: Iterable[str]) -> None:
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"unknown {field}: {value!r} (expected one of {', '.join(self.allowed)})"
        )
