"""
Text elements: media:title, media:description, media:text and media:copyright.
"""

from datetime import timedelta
from typing import Any
from xml.etree import ElementTree as ET

from pydantic import field_validator

from media_rss import get_logger

from .base import MediaEntity, element_text, require_language, require_text
from .comparison import combine, compare, compare_text, compare_uri, normalize_text, normalize_uri
from .parsing import format_timespan, parse_language, parse_timespan, parse_uri
from .vocabulary import MediaTextConstructType, as_string, by_name

logger = get_logger(__name__)


def _load_typed_text(entity: "MediaTextConstruct | MediaText", element: ET.Element) -> bool:
    """Read the type attribute and text content shared by title, description and text."""
    was_loaded = False

    type_attribute = element.get("type", "")
    if type_attribute:
        text_type = by_name(MediaTextConstructType, type_attribute)
        if text_type != MediaTextConstructType.NONE:
            entity.text_type = text_type
            was_loaded = True

    value = element_text(element)
    if value.strip():
        entity.content = value
        was_loaded = True

    return was_loaded


class MediaTextConstruct(MediaEntity):
    """
    Human readable text with an encoding hint.

    Used for media:title and media:description. The same type serves both,
    so write_to(), to_element() and to_xml() default to media:title and take
    the element name for a description: to_xml("description").
    """

    ELEMENT_NAME = "title"

    content: str = ""
    text_type: MediaTextConstructType = MediaTextConstructType.NONE

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return require_text(v, "content")

    def load(self, element: ET.Element) -> bool:
        return _load_typed_text(self, element)

    def _write_attributes(self, element: ET.Element) -> None:
        if self.text_type != MediaTextConstructType.NONE:
            element.set("type", as_string(self.text_type))
        if self.content:
            element.text = self.content

    def _compare(self, other: "MediaTextConstruct") -> int:
        return combine(
            (
                compare_text(self.content, other.content),
                compare(self.text_type, other.text_type),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (normalize_text(self.content), int(self.text_type))


class MediaText(MediaEntity):
    """
    Transcript or closed-caption text, optionally time-coded.

    Written as media:text with type, lang, start and end attributes.
    """

    ELEMENT_NAME = "text"

    content: str = ""
    text_type: MediaTextConstructType = MediaTextConstructType.NONE
    language: str | None = None
    start: timedelta | None = None
    end: timedelta | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return require_text(v, "content")

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str | None) -> str | None:
        return require_language(v)

    def load(self, element: ET.Element) -> bool:
        was_loaded = _load_typed_text(self, element)

        language_attribute = element.get("lang", "")
        if language_attribute:
            language = parse_language(language_attribute)
            if language is not None:
                self.language = language
                was_loaded = True
            else:
                logger.warning(
                    "Unable to determine language for media:text",
                    extra={"lang": language_attribute},
                )

        start = parse_timespan(element.get("start", ""))
        if start is not None:
            self.start = start
            was_loaded = True

        end = parse_timespan(element.get("end", ""))
        if end is not None:
            self.end = end
            was_loaded = True

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        if self.text_type != MediaTextConstructType.NONE:
            element.set("type", as_string(self.text_type))
        if self.language is not None:
            element.set("lang", self.language)
        if self.start is not None:
            element.set("start", format_timespan(self.start))
        if self.end is not None:
            element.set("end", format_timespan(self.end))
        if self.content:
            element.text = self.content

    def _compare(self, other: "MediaText") -> int:
        return combine(
            (
                compare_text(self.content, other.content),
                compare(self.end, other.end),
                compare_text(self.language or "", other.language or ""),
                compare(self.start, other.start),
                compare(self.text_type, other.text_type),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (
            normalize_text(self.content),
            self.end,
            normalize_text(self.language or ""),
            self.start,
            int(self.text_type),
        )


class MediaCopyright(MediaEntity):
    """Copyright notice with an optional URL to terms of use."""

    ELEMENT_NAME = "copyright"

    text: str = ""
    url: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def validate_text(cls, v: str | None) -> str:
        return v.strip() if v else ""

    def load(self, element: ET.Element) -> bool:
        was_loaded = False

        url = parse_uri(element.get("url", ""))
        if url is not None:
            self.url = url
            was_loaded = True

        value = element_text(element)
        if value.strip():
            self.text = value
            was_loaded = True

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        if self.url is not None:
            element.set("url", self.url)
        if self.text:
            element.text = self.text

    def _compare(self, other: "MediaCopyright") -> int:
        return combine(
            (
                compare_text(self.text, other.text),
                compare_uri(self.url, other.url, ignore_case=True),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (normalize_text(self.text), normalize_uri(self.url, ignore_case=True))
