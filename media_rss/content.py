"""
media:content element.
"""

from datetime import timedelta
from decimal import Decimal
from typing import Any
from xml.etree import ElementTree as ET

from pydantic import Field, field_validator

from media_rss import get_logger

from .base import MediaEntity, require_language
from .common import (
    CommonEntitiesFields,
    common_identity,
    compare_common_object_entities,
    fill_common_object_entities,
    write_common_object_entities,
)
from .comparison import combine, compare, compare_text, compare_uri, normalize_text, normalize_uri
from .namespace import create_namespace_manager
from .parsing import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    format_decimal,
    format_duration,
    parse_boolean,
    parse_decimal,
    parse_duration,
    parse_int,
    parse_language,
    parse_long,
    parse_uri,
)
from .vocabulary import MediaExpression, MediaMedium, as_string, by_name

logger = get_logger(__name__)


class MediaContent(MediaEntity, CommonEntitiesFields):
    """
    A single media object.

    Carries the file-level attributes (url, size, MIME type, medium, codec
    figures, language) plus the shared title/description/credit/... fields.
    Unset attributes are None and are not written.
    """

    ELEMENT_NAME = "content"

    url: str | None = None
    file_size: int | None = Field(default=None, ge=INT64_MIN, le=INT64_MAX)
    content_type: str = ""
    medium: MediaMedium = MediaMedium.NONE
    is_default: bool = False
    expression: MediaExpression = MediaExpression.NONE
    bitrate: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    frame_rate: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    sampling_rate: Decimal | None = None
    channels: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    duration: timedelta | None = None
    height: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    width: int | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    language: str | None = None

    @field_validator("content_type", mode="before")
    @classmethod
    def validate_content_type(cls, v: str | None) -> str:
        return v.strip() if v else ""

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str | None) -> str | None:
        return require_language(v)

    def load(self, element: ET.Element, manager: dict[str, str] | None = None) -> bool:
        """
        Populate this content from a media:content element.

        Args:
            element: The media:content element.
            manager: Prefix map for child selection; resolved from element if omitted.

        Returns:
            True if any attribute or child was loaded.
        """
        if manager is None:
            manager = create_namespace_manager(element)

        was_loaded = self._load_primary(element)
        was_loaded = self._load_secondary(element) or was_loaded
        was_loaded = fill_common_object_entities(self, element, manager) or was_loaded
        return was_loaded

    def _load_primary(self, element: ET.Element) -> bool:
        was_loaded = False

        url = parse_uri(element.get("url", ""))
        if url is not None:
            self.url = url
            was_loaded = True

        file_size = parse_long(element.get("fileSize", ""))
        if file_size is not None:
            self.file_size = file_size
            was_loaded = True

        content_type = element.get("type", "")
        if content_type.strip():
            self.content_type = content_type
            was_loaded = True

        medium_attribute = element.get("medium", "")
        if medium_attribute:
            medium = by_name(MediaMedium, medium_attribute)
            if medium != MediaMedium.NONE:
                self.medium = medium
                was_loaded = True

        is_default = parse_boolean(element.get("isDefault", ""))
        if is_default is not None:
            self.is_default = is_default
            was_loaded = True

        expression_attribute = element.get("expression", "")
        if expression_attribute:
            expression = by_name(MediaExpression, expression_attribute)
            if expression != MediaExpression.NONE:
                self.expression = expression
                was_loaded = True

        bitrate = parse_int(element.get("bitrate", ""))
        if bitrate is not None:
            self.bitrate = bitrate
            was_loaded = True

        return was_loaded

    def _load_secondary(self, element: ET.Element) -> bool:
        was_loaded = False

        frame_rate = parse_int(element.get("framerate", ""))
        if frame_rate is not None:
            self.frame_rate = frame_rate
            was_loaded = True

        sampling_rate = parse_decimal(element.get("samplingrate", ""))
        if sampling_rate is not None:
            self.sampling_rate = sampling_rate
            was_loaded = True

        channels = parse_int(element.get("channels", ""))
        if channels is not None:
            self.channels = channels
            was_loaded = True

        duration = parse_duration(element.get("duration", ""))
        if duration is not None:
            self.duration = duration
            was_loaded = True

        height = parse_int(element.get("height", ""))
        if height is not None:
            self.height = height
            was_loaded = True

        width = parse_int(element.get("width", ""))
        if width is not None:
            self.width = width
            was_loaded = True

        language_attribute = element.get("lang", "")
        if language_attribute:
            language = parse_language(language_attribute)
            if language is not None:
                self.language = language
                was_loaded = True
            else:
                logger.warning(
                    "Unable to determine language for media:content",
                    extra={"lang": language_attribute},
                )

        return was_loaded

    def _write_attributes(self, element: ET.Element) -> None:
        if self.url is not None:
            element.set("url", self.url)
        if self.file_size is not None:
            element.set("fileSize", str(self.file_size))
        if self.content_type:
            element.set("type", self.content_type)
        if self.medium != MediaMedium.NONE:
            element.set("medium", as_string(self.medium))
        if self.is_default:
            element.set("isDefault", "true")
        if self.expression != MediaExpression.NONE:
            element.set("expression", as_string(self.expression))
        if self.bitrate is not None:
            element.set("bitrate", str(self.bitrate))
        if self.frame_rate is not None:
            element.set("framerate", str(self.frame_rate))
        if self.sampling_rate is not None:
            element.set("samplingrate", format_decimal(self.sampling_rate))
        if self.channels is not None:
            element.set("channels", str(self.channels))
        if self.duration is not None:
            element.set("duration", format_duration(self.duration))
        if self.height is not None:
            element.set("height", str(self.height))
        if self.width is not None:
            element.set("width", str(self.width))
        if self.language is not None:
            element.set("lang", self.language)

        write_common_object_entities(self, element)

    def _compare(self, other: "MediaContent") -> int:
        return combine(
            (
                compare(self.bitrate, other.bitrate),
                compare(self.channels, other.channels),
                compare_text(self.content_type, other.content_type),
                compare(self.duration, other.duration),
                compare(self.expression, other.expression),
                compare(self.file_size, other.file_size),
                compare(self.frame_rate, other.frame_rate),
                compare(self.height, other.height),
                compare(self.is_default, other.is_default),
                compare_text(self.language, other.language),
                compare(self.medium, other.medium),
                compare(self.sampling_rate, other.sampling_rate),
                compare_uri(self.url, other.url, ignore_case=True),
                compare(self.width, other.width),
                compare_common_object_entities(self, other),
            )
        )

    def _identity(self) -> tuple[Any, ...]:
        return (
            self.bitrate,
            self.channels,
            normalize_text(self.content_type),
            self.duration,
            int(self.expression),
            self.file_size,
            self.frame_rate,
            self.height,
            self.is_default,
            normalize_text(self.language),
            int(self.medium),
            self.sampling_rate,
            normalize_uri(self.url, ignore_case=True),
            self.width,
            common_identity(self),
        )
