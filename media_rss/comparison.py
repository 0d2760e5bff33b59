"""
Comparison helpers for Media RSS entities.

All comparers return a negative number, zero or a positive number. None
sorts before any value, standing in for "not specified". Entity
comparisons combine their field results with combine(), which keeps the
first non-zero result: the outcome is zero exactly when every field
compares equal.
"""

import re
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar
from urllib.parse import urlsplit, urlunsplit

T = TypeVar("T")

_ESCAPE_PATTERN = re.compile(r"%([0-9A-Fa-f]{2})")
_UNRESERVED = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~")


def compare(source: Any, target: Any) -> int:
    """Three-way comparison of two scalars; None is lowest."""
    if source is None and target is None:
        return 0
    if source is None:
        return -1
    if target is None:
        return 1
    return (source > target) - (source < target)


def normalize_text(value: str | None, ignore_case: bool = True) -> str | None:
    """Normalise a string the way compare_text sees it."""
    if value is None or not ignore_case:
        return value
    return value.casefold()


def compare_text(source: str | None, target: str | None, ignore_case: bool = True) -> int:
    """Compare two strings ordinally, optionally ignoring case."""
    return compare(normalize_text(source, ignore_case), normalize_text(target, ignore_case))


def _unescape_safe(match: re.Match[str]) -> str:
    character = chr(int(match.group(1), 16))
    if character in _UNRESERVED:
        return character
    return match.group(0).upper()


def normalize_uri(value: str | None, ignore_case: bool = False) -> str | None:
    """
    Normalise a URI for comparison.

    Escapes of unreserved characters are decoded and the remaining escapes
    uppercased; scheme and host are lowercased. With ignore_case the whole
    URI is case-folded.
    """
    if value is None:
        return None

    text = _ESCAPE_PATTERN.sub(_unescape_safe, value.strip())
    try:
        parts = urlsplit(text)
    except ValueError:
        parts = None
    if parts is not None and parts.scheme:
        text = urlunsplit(
            (parts.scheme.lower(), parts.netloc.lower(), parts.path, parts.query, parts.fragment)
        )
    return text.casefold() if ignore_case else text


def compare_uri(source: str | None, target: str | None, ignore_case: bool = False) -> int:
    """Compare two URIs after normalisation."""
    return compare(normalize_uri(source, ignore_case), normalize_uri(target, ignore_case))


def compare_sequence(
    source: Sequence[T],
    target: Sequence[T],
    comparer: Callable[[T, T], int] | None = None,
) -> int:
    """
    Compare two sequences.

    Length decides first: the longer sequence is greater whatever its
    elements. Equal-length sequences are compared pairwise in order.

    Args:
        source: First sequence.
        target: Second sequence.
        comparer: Element comparer, compare() when omitted. Entities pass
            their compare_to.

    Returns:
        -1 or 1 on a length difference, otherwise the combined element result.

    Raises:
        ValueError: If either sequence is None.
    """
    if source is None or target is None:
        raise ValueError("source and target sequences are required")

    if len(source) > len(target):
        return 1
    if len(source) < len(target):
        return -1

    element_comparer = comparer or compare
    return combine(element_comparer(left, right) for left, right in zip(source, target))


def compare_optional(source: Any, target: Any) -> int:
    """
    Compare two optional entities.

    The side that is set is greater; two set entities use compare_to.
    """
    if source is None and target is None:
        return 0
    if source is None:
        return -1
    if target is None:
        return 1
    return source.compare_to(target)


def combine(results: Iterable[int]) -> int:
    """Return the first non-zero comparison result, or zero."""
    for result in results:
        if result:
            return result
    return 0
