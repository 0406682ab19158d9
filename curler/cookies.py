"""Set-Cookie parsing and HTTP date handling."""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from enum import IntEnum

from curler.utils import split_string

NEVER_EXPIRES = 2**63 - 1
"""Returned by parse_http_date when no known format matches."""

_INT64_MIN = -(2**63)

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

_TIME = r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"

# Each pattern matches a prefix of the text; anything after it (e.g. " GMT") is ignored.
_DATE_FORMATS = (
    # RFC 822
    re.compile(
        r"\s*(?P<wday>[A-Za-z]+),\s*(?P<day>\d{1,2})\s+(?P<month>[A-Za-z]+)\s+"
        r"(?P<year>\d{1,4})\s+" + _TIME
    ),
    # RFC 850
    re.compile(
        r"\s*(?P<wday>[A-Za-z]+),\s*(?P<day>\d{1,2})-(?P<month>[A-Za-z]+)-"
        r"(?P<year2>\d{1,2})\s+" + _TIME
    ),
    # asctime
    re.compile(
        r"\s*(?P<wday>[A-Za-z]+)\s+(?P<month>[A-Za-z]+)\s+(?P<day>\d{1,2})\s+"
        + _TIME
        + r"\s+(?P<year>\d{1,4})"
    ),
    # RFC 850 with a four-digit year
    re.compile(
        r"\s*(?P<wday>[A-Za-z]+),\s*(?P<day>\d{1,2})-(?P<month>[A-Za-z]+)-"
        r"(?P<year>\d{1,4})\s+" + _TIME
    ),
)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class SameSitePolicy(IntEnum):
    """SameSite attribute of a cookie."""

    NONE = 0
    LAX = 1
    STRICT = 2


@dataclass
class Cookie:
    """A cookie as sent by a server in Set-Cookie."""

    key: str = ""
    value: str = ""
    expires: int = -1
    max_age: int = -1
    path: str = ""
    domain: str = ""
    http_only: bool = False
    secure: bool = False
    same_site: SameSitePolicy = SameSitePolicy.NONE


def _name_index(name: str, names: tuple[str, ...]) -> int | None:
    lowered = name.lower()
    for index, full in enumerate(names):
        if lowered in (full, full[:3]):
            return index
    return None


def _timestamp(match: re.Match[str]) -> int | None:
    fields = match.groupdict()
    if _name_index(fields["wday"], _WEEKDAYS) is None:
        return None
    month = _name_index(fields["month"], _MONTHS)
    if month is None:
        return None
    day = int(fields["day"])
    hour = int(fields["hour"])
    minute = int(fields["minute"])
    second = int(fields["second"])
    if not (1 <= day <= 31 and hour <= 23 and minute <= 59 and second <= 61):
        return None
    if fields.get("year2") is not None:
        short = int(fields["year2"])
        year = 2000 + short if short < 69 else 1900 + short
    else:
        year = int(fields["year"])
    try:
        return calendar.timegm((year, month + 1, day, hour, minute, second))
    except ValueError:
        return None


def parse_http_date(text: str) -> int:
    """Seconds since the epoch for an HTTP date, or NEVER_EXPIRES if it cannot be read."""
    for pattern in _DATE_FORMATS:
        match = pattern.match(text)
        if match is None:
            continue
        stamp = _timestamp(match)
        if stamp is not None:
            return stamp
    return NEVER_EXPIRES


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    number = int(match.group())
    if not _INT64_MIN <= number <= NEVER_EXPIRES:
        raise ValueError(f"integer out of range: {text!r}")
    return number


def _split_pair(part: str) -> tuple[str, str]:
    name, sep, value = part.partition("=")
    if not sep:
        return part.lstrip(), ""
    return name.lstrip(), value.lstrip()


_SAME_SITE = {
    "lax": SameSitePolicy.LAX,
    "strict": SameSitePolicy.STRICT,
    "none": SameSitePolicy.NONE,
}


def parse_cookie(text: str) -> Cookie:
    """Parse a Set-Cookie value into a Cookie.

    Raises ValueError when Max-Age does not start with an integer.
    """
    cookie = Cookie()
    parts = split_string(text, ";")
    if not parts:
        return cookie

    cookie.key, cookie.value = _split_pair(parts[0])

    for part in parts[1:]:
        name, value = _split_pair(part)
        name = name.lower()
        if name == "path":
            cookie.path = value
        elif name == "domain":
            cookie.domain = value
        elif name == "expires":
            cookie.expires = parse_http_date(value)
        elif name == "secure":
            cookie.secure = True
        elif name == "httponly":
            cookie.http_only = True
        elif name == "samesite":
            policy = _SAME_SITE.get(value.lower())
            if policy is not None:
                cookie.same_site = policy
        elif name == "max-age":
            cookie.max_age = _parse_int(value)

    return cookie