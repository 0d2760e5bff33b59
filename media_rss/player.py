"""
Visual elements: media:player and media:thumbnail.
"""

from datetime import timedelta
from typing import Any
from xml.etree import ElementTree as ET

from pydantic import Field, field_validator

from .base import MediaEntity
from .comparison import combine, compare, compare_uri, normalize_uri
from .parsing import INT32_MAX, INT32_MIN, format_timespan, parse_int, parse_timespan, parse_uri


def _load_dimensions(entity: "MediaPlayer | MediaThumbnail", element: ET.Element) -> bool:
    """Read the url, height and width attributes shared by player and thumbnail."""
    was_loaded = False

    url = parse_uri(element.get("url", ""))
    if url is not None:
        entity.url = url
        was_loaded = True

    height = parse_int(element.get("height", ""))
    if height is not None:
        entity.height = height
        was_loaded = True

    width = parse_int(element.get("width", ""))
    if width is not None:
        entity.width = width
        was_loaded = True

    return was_loaded


def _validate_url(v: str | None) -> str | None:
    if v is None:
        return v
    if not v.strip():
        raise ValueError("url must be a non-empty string")
    return v.strip()


class MediaPlayer(MediaEntity):
    """Web player that renders the media object, with optional window size."""

    ELEMENT_NAME = "player"

    url: str | None = None
    height: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    width: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        return _validate_url(v)

    def load(self, element: ET.Element) -> bool:
        return _load_dimensions(self, element)

    def _write_attributes(self, element: ET.Element) -> None:
        element.set("url", self.url or "")
        if self.height is not None:
            element.set("height", str(self.height))
        if self.width is not None:
            element.set("width", str(self.width))

    def _compare(self, other: "MediaPlayer") -> int:
        return combine(
            (
                compare(self.height, other.height),
                compare_uri(self.url, other.url, ignore_case=True),
                compare(self.width, other.width),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (self.height, normalize_uri(self.url, ignore_case=True), self.width)


class MediaThumbnail(MediaEntity):
    """
    Representative image for a media object.

    Several thumbnails may be listed; time gives the offset in the media the
    image was taken from, written as a time-span literal.
    """

    ELEMENT_NAME = "thumbnail"

    url: str | None = None
    height: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    width: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    time: timedelta | None = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        return _validate_url(v)

    def load(self, element: ET.Element) -> bool:
        was_loaded = _load_dimensions(self, element)

        time = parse_timespan(element.get("time", ""))
        if time is not None:
            self.time = time
            was_loaded = True

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        element.set("url", self.url or "")
        if self.height is not None:
            element.set("height", str(self.height))
        if self.width is not None:
            element.set("width", str(self.width))
        if self.time is not None:
            element.set("time", format_timespan(self.time))

    def _compare(self, other: "MediaThumbnail") -> int:
        return combine(
            (
                compare(self.height, other.height),
                compare(self.time, other.time),
                compare_uri(self.url, other.url, ignore_case=True),
                compare(self.width, other.width),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (self.height, self.time, normalize_uri(self.url, ignore_case=True), self.width)
