"""Parsing of ISO-8601 dates into Unix epoch seconds."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_OFFSET = r"(?P<tz>Z|[+-]\d{2}:\d{2})"
_DATETIME_RE = re.compile(
    r"(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})T(?P<H>\d{2}):(?P<M>\d{2}):(?P<S>\d{2})"
    r"(?:\.\d+)?" + _OFFSET
)
_DATE_RE = re.compile(r"(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})")
_DATE_TZ_RE = re.compile(r"(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})" + _OFFSET)

_ERROR_MESSAGE = (
    "invalid date format: expected ISO-8601 datetime (2006-01-02T15:04:05Z) "
    "or date (2006-01-02)"
)


class DateParseError(ValueError):
    """Raised when a date string is not in a supported ISO-8601 form."""


def _offset(text: str) -> timezone:
    if text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    hours, minutes = int(text[1:3]), int(text[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError("offset out of range")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _build(match: re.Match[str]) -> datetime:
    groups = match.groupdict()
    tz = _offset(groups["tz"]) if groups.get("tz") else timezone.utc
    if groups.get("H") is None:
        day = date(int(groups["y"]), int(groups["m"]), int(groups["d"]))
        return datetime(day.year, day.month, day.day, tzinfo=tz)
    return datetime(
        int(groups["y"]),
        int(groups["m"]),
        int(groups["d"]),
        int(groups["H"]),
        int(groups["M"]),
        int(groups["S"]),
        tzinfo=tz,
    )


def parse_to_epoch(date_str: str) -> int:
    """Convert an ISO-8601 datetime or date string to Unix epoch seconds.

    Accepted forms are a full RFC 3339 timestamp, a bare date (taken as
    UTC midnight) and a date followed by a zone designator.
    """
    for pattern in (_DATETIME_RE, _DATE_RE, _DATE_TZ_RE):
        match = pattern.fullmatch(date_str)
        if match is None:
            continue
        try:
            moment = _build(match)
        except ValueError:
            continue
        return (moment - _EPOCH) // timedelta(seconds=1)
    raise DateParseError(_ERROR_MESSAGE)


def epoch_to_local(epoch: int, tz: tzinfo) -> datetime:
    """Return the moment of ``epoch`` as an aware datetime in ``tz``."""
    return datetime.fromtimestamp(epoch, tz)