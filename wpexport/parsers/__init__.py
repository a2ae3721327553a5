"""
Byte-level filtering and XML decoding of WXR exports.

This subpackage exposes ``ControlCharacterFilter`` from
:mod:`wpexport.parsers.sanitizer` and ``decode_feed`` from
:mod:`wpexport.parsers.feed_decoder`.
"""

from .feed_decoder import decode_feed
from .sanitizer import ControlCharacterFilter, strip_control_characters

__all__ = ["ControlCharacterFilter", "decode_feed", "strip_control_characters"]
