"""
Utility helpers used by the parser.

This subpackage exposes the error hierarchy and the event reporters.
"""

from .errors import (
    ConfigError,
    FeedDecodeError,
    FieldParseError,
    MissingFieldError,
    UnexpectedEnumValueError,
    UnsupportedFeedError,
    WXRParseError,
)
from .reporting import EVENTS, JsonlReporter, LoggingReporter, NullReporter, Reporter

__all__ = [
    "EVENTS",
    "ConfigError",
    "FeedDecodeError",
    "FieldParseError",
    "JsonlReporter",
    "LoggingReporter",
    "MissingFieldError",
    "NullReporter",
    "Reporter",
    "UnexpectedEnumValueError",
    "UnsupportedFeedError",
    "WXRParseError",
]
