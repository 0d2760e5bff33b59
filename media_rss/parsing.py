"""
Attribute parsing and formatting.

Parsers are best-effort: each returns None when the value cannot be read,
so a malformed attribute leaves its field unset instead of failing the load.
Formatters produce locale-independent text ("." decimal separator, no
grouping) so written documents reload identically everywhere.
"""

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from urllib.parse import urlsplit

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")

# [-][d.]hh:mm[:ss[.fffffff]] or a bare day count
_TIMESPAN_PATTERN = re.compile(
    r"^\s*(?P<sign>-)?(?:(?P<days>[0-9]+)\.)?(?P<hours>[0-9]{1,2}):(?P<minutes>[0-9]{1,2})"
    r"(?::(?P<seconds>[0-9]{1,2})(?:\.(?P<fraction>[0-9]{1,7}))?)?\s*$"
)
_TIMESPAN_DAYS_PATTERN = re.compile(r"^\s*(?P<sign>-)?(?P<days>[0-9]+)\s*$")

# RFC 3066 language tag: primary subtag plus optional subtags
_LANGUAGE_PATTERN = re.compile(r"^[A-Za-z]{1,8}(?:-[A-Za-z0-9]{1,8})*$")


def parse_int(value: str, minimum: int = INT32_MIN, maximum: int = INT32_MAX) -> int | None:
    """
    Parse an integer attribute.

    Args:
        value: Attribute text. Surrounding whitespace and a leading sign are allowed.
        minimum: Smallest accepted value.
        maximum: Largest accepted value.

    Returns:
        Parsed integer, or None if malformed or out of range.
    """
    if not value or not _INTEGER_PATTERN.match(value):
        return None
    number = int(value.strip())
    if number < minimum or number > maximum:
        return None
    return number


def parse_long(value: str) -> int | None:
    """Parse a 64-bit integer attribute."""
    return parse_int(value, INT64_MIN, INT64_MAX)


def parse_decimal(value: str) -> Decimal | None:
    """Parse a decimal attribute such as a sampling rate. Infinity and NaN are rejected."""
    if not value:
        return None
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def parse_timespan(value: str) -> timedelta | None:
    """
    Parse a time-span literal.

    Accepts "[-][d.]hh:mm[:ss[.fffffff]]" and a bare whole number of days.
    Hours must be below 24 and minutes/seconds below 60.

    Args:
        value: Attribute text.

    Returns:
        Parsed interval, or None if the literal is malformed or out of range.
    """
    if not value:
        return None

    days_match = _TIMESPAN_DAYS_PATTERN.match(value)
    if days_match:
        try:
            span = timedelta(days=int(days_match.group("days")))
        except OverflowError:
            return None
        return -span if days_match.group("sign") else span

    match = _TIMESPAN_PATTERN.match(value)
    if not match:
        return None

    hours = int(match.group("hours"))
    minutes = int(match.group("minutes"))
    seconds = int(match.group("seconds") or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        return None

    # fraction is in ticks (100ns); timedelta keeps microseconds
    fraction = (match.group("fraction") or "").ljust(7, "0")
    microseconds = int(fraction) // 10

    try:
        span = timedelta(
            days=int(match.group("days") or 0),
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            microseconds=microseconds,
        )
    except OverflowError:
        return None
    return -span if match.group("sign") else span


def parse_duration(value: str) -> timedelta | None:
    """
    Parse a media:content duration.

    A whole number is read as seconds before anything else is tried, so "5"
    is five seconds. Otherwise the value is read as a time-span literal, then
    as a decimal number of seconds.
    """
    seconds = parse_int(value)
    if seconds is not None:
        return timedelta(seconds=seconds)

    span = parse_timespan(value)
    if span is not None:
        return span

    fractional = parse_decimal(value)
    if fractional is not None:
        try:
            return timedelta(seconds=float(fractional))
        except OverflowError:
            return None
    return None


def parse_uri(value: str) -> str | None:
    """Parse a relative or absolute URI attribute."""
    if not value or not value.strip():
        return None
    candidate = value.strip()
    try:
        urlsplit(candidate)
    except ValueError:
        return None
    return candidate


def parse_language(value: str) -> str | None:
    """
    Parse a language tag and normalise its casing.

    The primary subtag is lowercased, two-letter region subtags uppercased
    and four-letter script subtags title-cased (en-us -> en-US).

    Returns:
        Normalised tag, or None if the value is not a language tag.
    """
    if not value or not _LANGUAGE_PATTERN.match(value.strip()):
        return None

    primary, *subtags = value.strip().split("-")
    parts = [primary.lower()]
    for subtag in subtags:
        if len(subtag) == 2 and subtag.isalpha():
            parts.append(subtag.upper())
        elif len(subtag) == 4 and subtag.isalpha():
            parts.append(subtag.title())
        else:
            parts.append(subtag.lower())
    return "-".join(parts)


def parse_boolean(value: str) -> bool | None:
    """Parse "true"/"false" in any case."""
    if not value:
        return None
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def format_decimal(value: Decimal) -> str:
    """Format a decimal without exponent or grouping."""
    return format(value, "f")


def format_timespan(value: timedelta) -> str:
    """
    Format an interval as "[-][d.]hh:mm:ss[.fffffff]".

    This is the inverse of parse_timespan.
    """
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)

    hours, remainder = divmod(value.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.days:
        text = f"{value.days}.{text}"
    if value.microseconds:
        text = f"{text}.{value.microseconds * 10:07d}"
    return sign + text


def format_duration(value: timedelta) -> str:
    """Format a duration as its total number of seconds."""
    microseconds = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    seconds = Decimal(microseconds) / Decimal(1_000_000)
    if seconds == seconds.to_integral_value():
        return str(int(seconds))
    return format_decimal(seconds.normalize())
