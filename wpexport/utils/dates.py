"""Date helpers shared by the decoder and the extractors."""

from __future__ import annotations

import re
from datetime import datetime, timezone, timedelta
from typing import Optional

from dateutil.parser import ParserError, parse as parse_date

from .errors import FieldParseError

WXR_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_WXR_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")

# Year token of an RFC 822 date ("Mon, 30 Nov -0001 ...") or an ISO date
# ("0000-00-00 00:00:00").
_YEAR_RE = re.compile(
    r"^(?:[A-Za-z]{3},\s*)?\d{1,2}\s+[A-Za-z]{3,}\.?\s+(?P<rfc>[-+]?\d+)\b"
    r"|^(?P<iso>-?\d{1,4})-\d{1,2}-\d{1,2}"
)

# Two defaults that differ in every date part but share midnight: a string
# missing its year, month or day parses differently against each one.
_DEFAULT_A = datetime(1970, 1, 1)
_DEFAULT_B = datetime(1971, 2, 2)

# Timezone abbreviations seen in RSS dates
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "UT": timezone.utc,
}


def _has_placeholder_year(value: str) -> bool:
    match = _YEAR_RE.match(value)
    if match is None:
        return False
    year = match.group("rfc") or match.group("iso")
    return int(year) <= 0


def parse_rss_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an RSS date string leniently, returning ``None`` on failure.

    WordPress writes ``Mon, 30 Nov -0001 00:00:00 +0000`` for items that were
    never published; that and anything else unparseable yields ``None``.
    So does a partial date (no year, month or day), which would otherwise be
    completed from the current date.  Naive results are taken as UTC.
    """
    if not value or not value.strip():
        return None
    value = value.strip()
    if _has_placeholder_year(value):
        return None
    try:
        dt = parse_date(value, default=_DEFAULT_A, tzinfos=TZINFOS)
        other = parse_date(value, default=_DEFAULT_B, tzinfos=TZINFOS)
        if dt.replace(tzinfo=None) != other.replace(tzinfo=None):
            return None
    except (ParserError, ValueError, OverflowError, TypeError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_wxr_time(value: str, field: str, date_format: str = WXR_DATE_FORMAT) -> datetime:
    """Parse a ``wp:*_gmt`` timestamp (``YYYY-MM-DD HH:MM:SS``) as UTC.

    With the default format every component must be zero padded.
    """
    text = value.strip()
    if date_format == WXR_DATE_FORMAT and not _WXR_DATE_RE.fullmatch(text):
        raise FieldParseError(field, value, "expected YYYY-MM-DD HH:MM:SS")
    try:
        dt = datetime.strptime(text, date_format)
    except ValueError as e:
        raise FieldParseError(field, value, str(e)) from e
    return dt.replace(tzinfo=timezone.utc)
